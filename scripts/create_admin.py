#!/usr/bin/env python3
"""
Create an admin account, or reset the password of an existing one.

Usage:
    python scripts/create_admin.py --email admin@example.com --password 's3cret'

Environment Variables:
    DATABASE_URL (or MYSQLHOST, MYSQLUSER, MYSQLPASSWORD, MYSQL_DATABASE)
"""
import argparse
import getpass
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.database import get_db_session
from app.db.admin import create_or_update_admin


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create or update an admin account")
    parser.add_argument("--email", required=True, help="Admin email")
    parser.add_argument("--password", help="Admin password (prompted if omitted)")
    args = parser.parse_args(argv)

    password = args.password or getpass.getpass("Password: ")
    if not password:
        print("Error: password must not be empty")
        return 1

    with get_db_session() as db:
        admin = create_or_update_admin(db, args.email, password)
    print(f"Admin {admin.email} saved (id={admin.id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
