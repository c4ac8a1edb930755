"""Tests for login and registration."""

from app.core.exceptions import BadRequestError, UnauthorizedError
from app.core.security import decode_token
from app.schemas.common import ErrorResponse

USER = {
    "username": "u1",
    "firstName": "U1F",
    "lastName": "U1L",
    "email": "u1@email.com",
    "isAdmin": False,
}

REGISTRATION = {
    "username": "u1",
    "firstName": "U1F",
    "lastName": "U1L",
    "password": "password1",
    "email": "u1@email.com",
}


class TestLogin:
    def test_valid_credentials(self, client, repos):
        repos.users.authenticate.return_value = USER

        response = client.post(
            "/api/v1/auth/token", json={"username": "u1", "password": "password1"}
        )

        assert response.status_code == 200
        assert decode_token(response.json()["token"])["sub"] == "u1"
        repos.users.authenticate.assert_called_once_with("u1", "password1")

    def test_invalid_credentials(self, client, repos):
        repos.users.authenticate.side_effect = UnauthorizedError("Invalid username/password")

        response = client.post(
            "/api/v1/auth/token", json={"username": "u1", "password": "nope"}
        )

        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Invalid username/password"

    def test_missing_password(self, client, repos):
        response = client.post("/api/v1/auth/token", json={"username": "u1"})

        assert response.status_code == 400
        repos.users.authenticate.assert_not_called()


class TestRegister:
    def test_registers_non_admin(self, client, repos):
        repos.users.register.return_value = USER

        response = client.post("/api/v1/auth/register", json=REGISTRATION)

        assert response.status_code == 201
        payload = decode_token(response.json()["token"])
        assert payload["sub"] == "u1"
        assert payload["isAdmin"] is False
        repos.users.register.assert_called_once_with({**REGISTRATION, "isAdmin": False})

    def test_cannot_register_as_admin(self, client, repos):
        response = client.post("/api/v1/auth/register", json={**REGISTRATION, "isAdmin": True})

        assert response.status_code == 400
        repos.users.register.assert_not_called()

    def test_duplicate(self, client, repos):
        repos.users.register.side_effect = BadRequestError("Duplicate username: u1")

        response = client.post("/api/v1/auth/register", json=REGISTRATION)

        assert response.status_code == 400


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestErrorEnvelope:
    def test_error_body_matches_schema(self, client, repos):
        repos.users.authenticate.side_effect = UnauthorizedError("Invalid username/password")

        response = client.post(
            "/api/v1/auth/token", json={"username": "u1", "password": "nope"}
        )

        body = ErrorResponse.model_validate(response.json())
        assert body.error.status == 401
        assert body.error.message == "Invalid username/password"

    def test_error_schema_is_documented(self, client):
        schema = client.get("/openapi.json").json()

        assert "ErrorResponse" in schema["components"]["schemas"]
        responses = schema["paths"]["/api/v1/jobs/{job_id}"]["get"]["responses"]
        assert responses["404"]["content"]["application/json"]["schema"] == {
            "$ref": "#/components/schemas/ErrorResponse"
        }
