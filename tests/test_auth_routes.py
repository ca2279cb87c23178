from sqlalchemy.exc import OperationalError

from app.database import get_db
from app.main import app


SIGNUP = {
    "firstName": "Jane",
    "lastName": "Doe",
    "email": "a@x.com",
    "phone": "9999999999",
    "address": "1 Main St",
    "password": "secret1",
}


def signup(client, **overrides):
    return client.post("/api/signup", json={**SIGNUP, **overrides})


def test_signup_login_scenario(client):
    resp = signup(client)
    assert resp.status_code == 200
    assert resp.json() == {"message": "User registered successfully"}

    resp = signup(client, firstName="Other")
    assert resp.status_code == 400
    assert resp.json()["message"] == "Email already registered"

    resp = client.post("/api/login", json={"email": "a@x.com", "password": "secret1"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Login successful"
    assert body["user"]["name"] == "Jane Doe"
    assert body["user"]["email"] == "a@x.com"
    assert isinstance(body["user"]["id"], int)
    assert "password" not in body["user"]

    resp = client.post("/api/login", json={"email": "a@x.com", "password": "wrong"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid email or password"


def test_login_unknown_email_is_401(client):
    resp = client.post("/api/login", json={"email": "nobody@x.com", "password": "secret1"})
    assert resp.status_code == 401


def test_signup_missing_fields_is_400(client):
    resp = client.post("/api/signup", json={"email": "a@x.com"})
    assert resp.status_code == 400


def test_user_id_login_contract(client):
    signup(client)

    resp = client.post("/api/login/user-id", json={"email": "a@x.com", "password": "secret1"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "Login successful"
    assert isinstance(body["userId"], int)

    resp = client.post("/api/login/user-id", json={"email": "a@x.com", "password": "wrong"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid password"

    resp = client.post("/api/login/user-id", json={"email": "nobody@x.com", "password": "secret1"})
    assert resp.status_code == 404
    assert resp.json()["message"] == "User not found"


def test_change_password_by_email(client):
    signup(client)

    resp = client.post("/api/change-password", json={"id": "a@x.com", "password": "newpass"})
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Password changed successfully"}

    assert client.post("/api/login", json={"email": "a@x.com", "password": "newpass"}).status_code == 200
    assert client.post("/api/login", json={"email": "a@x.com", "password": "secret1"}).status_code == 401


def test_change_password_errors(client):
    resp = client.post("/api/change-password", json={"id": "a@x.com"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Missing id or password"

    resp = client.post("/api/change-password", json={"id": "nobody@x.com", "password": "x"})
    assert resp.status_code == 404


def test_get_user_by_credentials(client):
    signup(client)

    resp = client.get("/api/user/a@x.com/secret1")
    assert resp.status_code == 200
    body = resp.json()
    assert body["first_name"] == "Jane"
    assert body["address"] == "1 Main St"
    assert "password" not in body

    assert client.get("/api/user/a@x.com/wrong").status_code == 404


def test_list_and_delete_users(client):
    signup(client)
    signup(client, email="b@x.com")

    users = client.get("/api/users").json()
    assert [u["email"] for u in users] == ["a@x.com", "b@x.com"]
    assert all("password" not in u for u in users)

    resp = client.delete(f"/api/users/{users[0]['id']}")
    assert resp.status_code == 200
    assert [u["email"] for u in client.get("/api/users").json()] == ["b@x.com"]

    assert client.delete(f"/api/users/{users[0]['id']}").status_code == 404


def test_mixed_case_email_login_and_change_password(client):
    assert signup(client, email="Jane@Example.COM").status_code == 200

    resp = client.post("/api/login", json={"email": "Jane@Example.COM", "password": "secret1"})
    assert resp.status_code == 200
    assert resp.json()["user"]["email"] == "Jane@example.com"

    resp = client.post("/api/change-password", json={"id": "Jane@Example.COM", "password": "newpass"})
    assert resp.status_code == 200
    resp = client.post("/api/login/user-id", json={"email": "Jane@Example.COM", "password": "newpass"})
    assert resp.status_code == 200


def test_store_failure_returns_generic_database_error(client):
    class FailingSession:
        def query(self, *args, **kwargs):
            raise OperationalError("SELECT * FROM users", {}, Exception("secret driver detail"))

        def close(self):
            pass

    def failing_db():
        yield FailingSession()

    app.dependency_overrides[get_db] = failing_db

    resp = client.get("/api/users")
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "message": "Database error"}
    assert "secret driver detail" not in resp.text
