"""End-to-end tests for the invite request and redemption flow."""

import pytest
from fastapi.testclient import TestClient

from gate.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client(monkeypatch):
    """Test client over a fresh container, echoing issued codes."""
    monkeypatch.setenv("INVITES__EXPOSE_CODE_IN_RESPONSE", "true")
    return TestClient(create_app(build_test_container()))


def request_code(client: TestClient, email: str, **extra) -> str:
    response = client.post("/invite/request", json={"email": email, **extra})
    assert response.status_code == 200
    return response.json()["invite_code"]


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "invite-gate"
        assert "timestamp" in data


class TestRequestInvite:
    """End-to-end tests for POST /invite/request."""

    def test_request_succeeds(self, client):
        # Act
        response = client.post(
            "/invite/request", json={"email": "alice@example.com", "name": "Alice"}
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert "Check your email" in data["message"]
        assert data["invite_code"].startswith("C2C")
        assert len(data["invite_code"]) == 12
        assert "error" not in data

    def test_missing_email_is_bad_request(self, client):
        response = client.post("/invite/request", json={"name": "Alice"})

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "Email address is required",
        }

    def test_blank_email_is_bad_request(self, client):
        response = client.post("/invite/request", json={"email": "   "})

        assert response.status_code == 400
        assert response.json()["error"] == "Email address is required"

    def test_invalid_email_is_bad_request(self, client):
        response = client.post("/invite/request", json={"email": "not-an-email"})

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "Invalid email address format",
        }

    def test_second_request_is_rate_limited(self, client):
        request_code(client, "bob@example.com")

        response = client.post("/invite/request", json={"email": "bob@example.com"})

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert "Please wait 5 minutes" in data["error"]

    def test_accepts_user_name_alias(self, client):
        code = request_code(client, "carol@example.com", userName="Carol")

        response = client.post("/invite/redeem", json={"code": code})

        assert response.json()["name"] == "Carol"


class TestRedeemInvite:
    """End-to-end tests for POST /invite/redeem."""

    def test_full_flow(self, client):
        """Request a code, redeem it, then fail to redeem it again."""
        code = request_code(client, "dave@example.com", name="Dave")

        # First redemption succeeds
        response = client.post("/invite/redeem", json={"code": code})
        assert response.status_code == 200
        assert response.json() == {
            "valid": True,
            "email": "dave@example.com",
            "name": "Dave",
        }

        # Second redemption is rejected
        response = client.post("/invite/redeem", json={"code": code})
        assert response.status_code == 200
        assert response.json() == {
            "valid": False,
            "error": "This invite code has already been used",
        }

    def test_unknown_code(self, client):
        response = client.post("/invite/redeem", json={"code": "C2CNOPE00000"})

        assert response.status_code == 200
        assert response.json() == {"valid": False, "error": "Invalid invite code"}

    def test_missing_code_is_bad_request(self, client):
        response = client.post("/invite/redeem", json={})

        assert response.status_code == 400
        assert response.json() == {"valid": False, "error": "Invite code is required"}

    def test_surrounding_whitespace_is_ignored(self, client):
        code = request_code(client, "erin@example.com")

        response = client.post("/invite/redeem", json={"code": f"  {code} "})

        assert response.json()["valid"] is True

    def test_validate_path_redeems(self, client):
        code = request_code(client, "frank@example.com")

        response = client.post("/invite/validate", json={"code": code})
        assert response.json()["valid"] is True

        response = client.post("/invite/redeem", json={"code": code})
        assert response.json()["valid"] is False


class TestAdminStats:
    """End-to-end tests for GET /admin/stats."""

    def test_empty(self, client):
        response = client.get("/admin/stats")

        assert response.status_code == 200
        assert response.json() == {"total": 0, "used": 0, "expired": 0, "active": 0}

    def test_counts_follow_redemptions(self, client):
        code = request_code(client, "gina@example.com")
        request_code(client, "hank@example.com")
        client.post("/invite/redeem", json={"code": code})

        response = client.get("/admin/stats")

        assert response.json() == {"total": 2, "used": 1, "expired": 0, "active": 1}


class TestUnknownRoutes:
    """Tests for unknown endpoints."""

    def test_not_found(self, client):
        response = client.get("/nowhere")

        assert response.status_code == 404
        assert response.json() == {"error": "Endpoint not found"}
