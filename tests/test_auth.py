"""
Unit tests for authentication endpoints and the admin gate.

Tests:
- Token issue
- Registration
- Token validation on admin routes
"""

from datetime import timedelta

from jobboard.core.security import create_access_token, decode_token, verify_password
from jobboard.models import User


class TestToken:

    def test_token_for_valid_credentials(self, client, db_session, make_user):
        make_user("alice", is_admin=True, password="secret99")

        response = client.post("/auth/token", json={"username": "alice", "password": "secret99"})

        assert response.status_code == 200
        claims = decode_token(response.json()["token"])
        assert claims["sub"] == "alice"
        assert claims["is_admin"] is True

    def test_token_wrong_password(self, client, db_session, make_user):
        make_user("alice", password="secret99")

        response = client.post("/auth/token", json={"username": "alice", "password": "wrong"})

        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Invalid username/password"

    def test_token_unknown_user(self, client, db_session):
        response = client.post("/auth/token", json={"username": "ghost", "password": "whatever"})

        assert response.status_code == 401

    def test_token_missing_field(self, client, db_session):
        response = client.post("/auth/token", json={"username": "alice"})

        assert response.status_code == 400


class TestRegistration:

    def test_register(self, client, db_session):
        response = client.post("/auth/register", json={
            "username": "newuser",
            "password": "password1",
            "firstName": "New",
            "lastName": "User",
            "email": "new@example.com",
        })

        assert response.status_code == 201
        claims = decode_token(response.json()["token"])
        assert claims["sub"] == "newuser"
        assert claims["is_admin"] is False

        user = db_session.query(User).filter(User.username == "newuser").first()
        assert user.hashed_password != "password1"
        assert verify_password("password1", user.hashed_password)

    def test_register_cannot_claim_admin(self, client, db_session):
        response = client.post("/auth/register", json={
            "username": "sneaky",
            "password": "password1",
            "firstName": "S",
            "lastName": "N",
            "email": "s@example.com",
            "isAdmin": True,
        })

        assert response.status_code == 400

    def test_register_duplicate(self, client, db_session, make_user):
        make_user("taken")

        response = client.post("/auth/register", json={
            "username": "taken",
            "password": "password1",
            "firstName": "T",
            "lastName": "K",
            "email": "t@example.com",
        })

        assert response.status_code == 400


class TestAdminGate:

    def test_garbage_token(self, client, seed_jobs):
        response = client.delete(
            f"/jobs/{seed_jobs['j1']}",
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401

    def test_expired_token(self, client, seed_jobs, make_user):
        make_user("admin2", is_admin=True)
        token = create_access_token({"sub": "admin2", "is_admin": True}, expires_delta=timedelta(minutes=-1))

        response = client.delete(f"/jobs/{seed_jobs['j1']}", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_token_for_deleted_user(self, client, seed_jobs):
        token = create_access_token({"sub": "nobody", "is_admin": True})

        response = client.delete(f"/jobs/{seed_jobs['j1']}", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_admin_flag_comes_from_database(self, client, seed_jobs, make_user):
        make_user("plain", is_admin=False)
        token = create_access_token({"sub": "plain", "is_admin": True})

        response = client.delete(f"/jobs/{seed_jobs['j1']}", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 403

    def test_gate_runs_before_validation(self, client, seed_jobs):
        response = client.post("/jobs", json={})

        assert response.status_code == 401
