from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool
from alembic import context

from app.core.config import settings
from app.database import Base

# Import the model classes so Alembic detects them
from app.models.user import User
from app.models.admin import Admin
from app.models.contact import Contact
from app.models.subscriber import Subscriber
from app.models.review import Review
from app.models.bank_profile import BankProfile
from app.models.lead import Lead

# Alembic Config object
config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Override DB URL
config.set_main_option("sqlalchemy.url", settings.DATABASE_URL.replace("%", "%%"))

# Target metadata for autogenerate
target_metadata = Base.metadata

def run_migrations_offline():
    context.configure(url=settings.DATABASE_URL, target_metadata=target_metadata, literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()

def run_migrations_online():
    connectable = engine_from_config(
        config.get_section(config.config_ini_section),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
