"""
HTTP contract tests for /api/v1/user
"""

from unittest.mock import patch

from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError

from jobportal.core.config import Settings, get_settings

BASE = "/api/v1/user"

ADA_FORM = {
    "fullname": "Ada",
    "email": "ada@x.com",
    "phoneNumber": "555-0100",
    "password": "pw123",
    "role": "seeker",
}


def register(client, form=None, files=None):
    return client.post(f"{BASE}/register", data=form or ADA_FORM, files=files)


def login(client, email="ada@x.com", password="pw123", role="seeker"):
    return client.post(f"{BASE}/login", json={"email": email, "password": password, "role": role})


def test_register_login_scenario(client):
    response = register(client)
    assert response.status_code == 201
    assert response.json() == {"message": "Account created successfully.", "success": True}

    response = register(client)
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "User already exists with this email."}

    response = login(client)
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["user"]["email"] == "ada@x.com"
    assert "token=" in response.headers["set-cookie"]

    response = login(client, password="wrong")
    assert response.status_code == 400
    assert response.json()["message"] == "Incorrect email or password."

    response = login(client, role="recruiter")
    assert response.status_code == 400
    assert response.json()["message"] == "Account doesn't exist with the selected role."


class TestRegisterRoute:
    def test_missing_field(self, client):
        form = dict(ADA_FORM, phoneNumber="")
        response = register(client, form)
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Please fill all required fields."}

    def test_malformed_email(self, client):
        response = register(client, dict(ADA_FORM, email="not-an-email"))
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid email."

    def test_unknown_role(self, client):
        response = register(client, dict(ADA_FORM, role="admin"))
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid role."

    def test_with_photo(self, client, user_store):
        response = register(client, files={"file": ("me.png", b"png-bytes", "image/png")})
        assert response.status_code == 201
        doc = user_store.find_by_email("ada@x.com")
        assert doc["profile"]["profilePhoto"].startswith("https://cdn.example.com/profile_photos/")

    def test_oversize_file(self, client):
        client.app.dependency_overrides[get_settings] = lambda: Settings(max_upload_mb=0)
        response = register(client, files={"file": ("me.png", b"png-bytes", "image/png")})
        assert response.status_code == 413
        assert response.json()["success"] is False


class TestLoginRoute:
    def test_cookie_flags(self, client):
        register(client)
        cookie = login(client).headers["set-cookie"]
        assert "HttpOnly" in cookie
        assert "Max-Age=86400" in cookie
        assert "SameSite=strict" in cookie
        assert "Secure" in cookie

    def test_response_hides_password(self, client):
        register(client)
        user = login(client).json()["user"]
        assert "password" not in user
        assert set(user) == {"_id", "fullname", "email", "phoneNumber", "role", "profile"}

    def test_unknown_email(self, client):
        response = login(client, email="nobody@x.com")
        assert response.status_code == 400
        assert response.json()["message"] == "Incorrect email or password."

    def test_missing_password(self, client):
        response = client.post(f"{BASE}/login", json={"email": "ada@x.com", "role": "seeker"})
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Please fill all required fields."}

    def test_form_encoded_login(self, client):
        register(client)
        response = client.post(
            f"{BASE}/login", data={"email": "ada@x.com", "password": "pw123", "role": "seeker"}
        )
        assert response.status_code == 200
        assert response.json()["user"]["email"] == "ada@x.com"
        assert "token=" in response.headers["set-cookie"]

    def test_form_encoded_missing_role(self, client):
        register(client)
        response = client.post(f"{BASE}/login", data={"email": "ada@x.com", "password": "pw123"})
        assert response.status_code == 400
        assert response.json()["message"] == "Please fill all required fields."

    def test_unparseable_json(self, client):
        response = client.post(
            f"{BASE}/login", content=b"{\"email\": ", headers={"content-type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Invalid request body."}

    def test_json_that_is_not_an_object(self, client):
        response = client.post(f"{BASE}/login", json=["ada@x.com", "pw123", "seeker"])
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request body."


class TestLogoutRoute:
    def test_expires_cookie_without_session(self, client):
        for method in ("get", "post"):
            response = getattr(client, method)(f"{BASE}/logout")
            assert response.status_code == 200
            assert response.json() == {"message": "Logged out successfully.", "success": True}
            assert "Max-Age=0" in response.headers["set-cookie"]

    def test_expires_cookie_after_login(self, client):
        register(client)
        assert "Max-Age=86400" in login(client).headers["set-cookie"]

        response = client.get(f"{BASE}/logout")

        assert response.status_code == 200
        cookie = response.headers["set-cookie"]
        assert cookie.startswith("token=\"\"")
        assert "Max-Age=0" in cookie
        assert "HttpOnly" in cookie


class TestUpdateProfileRoute:
    def authenticate(self, client, user_store, token_issuer):
        register(client)
        user_id = str(user_store.find_by_email("ada@x.com")["_id"])
        client.cookies.set("token", token_issuer.issue(user_id))
        return user_id

    def test_requires_session(self, client):
        response = client.put(f"{BASE}/profile/update", data={"bio": "hi"})
        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Unauthorized"}

    def test_rejects_tampered_cookie(self, client):
        client.cookies.set("token", "forged.token.value")
        response = client.put(f"{BASE}/profile/update", data={"bio": "hi"})
        assert response.status_code == 401

    def test_unknown_user(self, client, token_issuer):
        client.cookies.set("token", token_issuer.issue("65f0c0ffee0000000000abcd"))
        response = client.put(f"{BASE}/profile/update", data={"bio": "hi"})
        assert response.status_code == 404
        assert response.json()["message"] == "User not found"

    def test_partial_update(self, client, user_store, token_issuer):
        user_id = self.authenticate(client, user_store, token_issuer)

        response = client.put(f"{BASE}/profile/update", data={"bio": "Analyst", "skills": "go,rust, c++"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["user"]["_id"] == user_id
        assert body["user"]["fullname"] == "Ada"
        assert body["user"]["profile"]["bio"] == "Analyst"
        assert body["user"]["profile"]["skills"] == ["go", "rust", "c++"]

    def test_post_is_accepted(self, client, user_store, token_issuer):
        self.authenticate(client, user_store, token_issuer)
        response = client.post(f"{BASE}/profile/update", data={"phoneNumber": "555-0199"})
        assert response.status_code == 200
        assert response.json()["user"]["phoneNumber"] == "555-0199"

    def test_upload_failure_is_isolated(self, client, user_store, token_issuer, uploader):
        self.authenticate(client, user_store, token_issuer)
        uploader.fail = True

        response = client.put(
            f"{BASE}/profile/update",
            data={"bio": "Analyst"},
            files={"file": ("cv.pdf", b"%PDF-1.4", "application/pdf")},
        )

        assert response.status_code == 200
        profile = response.json()["user"]["profile"]
        assert profile["bio"] == "Analyst"
        assert profile["resume"] is None

    def test_resume_upload(self, client, user_store, token_issuer):
        self.authenticate(client, user_store, token_issuer)

        response = client.put(
            f"{BASE}/profile/update",
            files={"file": ("cv.pdf", b"%PDF-1.4", "application/pdf")},
        )

        profile = response.json()["user"]["profile"]
        assert profile["resume"].startswith("https://cdn.example.com/resumes/")
        assert profile["resumeOriginalName"] == "cv.pdf"

    def test_malformed_email(self, client, user_store, token_issuer):
        self.authenticate(client, user_store, token_issuer)
        response = client.put(f"{BASE}/profile/update", data={"email": "nope"})
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid email."

    def test_email_taken_by_another_user(self, client, user_store, token_issuer):
        register(client)
        register(client, dict(ADA_FORM, fullname="Bob", email="bob@x.com"))
        bob_id = str(user_store.find_by_email("bob@x.com")["_id"])
        client.cookies.set("token", token_issuer.issue(bob_id))

        response = client.put(f"{BASE}/profile/update", data={"email": "ada@x.com", "bio": "Bob"})

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "User already exists with this email."}
        assert user_store.find_by_id(bob_id)["email"] == "bob@x.com"


def test_store_failure_is_generic_500(client, user_service):
    from jobportal.main import app

    with patch.object(user_service.users, "find_by_email", side_effect=PyMongoError("db host 10.0.0.5 down")):
        response = TestClient(app, raise_server_exceptions=False).post(
            f"{BASE}/login", json={"email": "ada@x.com", "password": "pw123", "role": "seeker"}
        )

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Internal server error."}


def test_health(client):
    with patch("jobportal.main.test_mongo_connection", return_value=True):
        response = client.get("/health")
    assert response.json() == {"status": "healthy", "mongodb": "connected"}
