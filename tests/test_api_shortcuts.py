"""
Tests for the shortcut API endpoints.

Each test gets a fresh application backed by in-memory SQLite.
Validates authentication, request validation, response schemas,
error mapping and security headers.
"""

import base64
import hashlib
import hmac
import json

import pytest
from fastapi.testclient import TestClient

from slash.core.config import DEFAULT_AUTH_SECRET, settings
from slash.domain.shortcuts.entities import Role, User
from slash.infrastructure.shortcuts.sql_store import SqlShortcutStore
from slash.main import create_app
from slash.shared.security.auth import issue_access_token

from tests.conftest import ADMIN_ID, OTHER_ID, OWNER_ID

BASE = "/api/v2/shortcuts"


def _auth(user_id: int) -> dict[str, str]:
    return {"Authorization": f"Bearer {issue_access_token(user_id)}"}


def _b64url_json(data: dict) -> str:
    raw = json.dumps(data, separators=(",", ":")).encode()
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


def _signed_token(claims: dict) -> str:
    """Sign arbitrary claims with the configured secret."""
    signing_input = _b64url_json({"alg": "HS256", "typ": "JWT"}) + "." + _b64url_json(claims)
    digest = hmac.new(
        settings.auth_secret.encode(), signing_input.encode(), hashlib.sha256
    ).digest()
    return signing_input + "." + base64.urlsafe_b64encode(digest).rstrip(b"=").decode()


@pytest.fixture
def app():
    return create_app(database_url="sqlite://", rate_limit_enabled=False)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        sql_store = SqlShortcutStore(app.state.engine)
        sql_store.create_user(User(id=OWNER_ID, role=Role.USER, nickname="owner"))
        sql_store.create_user(User(id=OTHER_ID, role=Role.USER, nickname="other"))
        sql_store.create_user(User(id=ADMIN_ID, role=Role.ADMIN, nickname="admin"))
        yield test_client


def _create(client, user_id: int, name: str, visibility: str = "PRIVATE", **fields):
    body = {"name": name, "link": fields.pop("link", f"https://{name}.example"), "visibility": visibility}
    body.update(fields)
    return client.post(BASE, json=body, headers=_auth(user_id))


class TestAuthentication:
    """Requests without a valid bearer token are rejected."""

    def test_missing_token_is_401(self, client) -> None:
        assert client.get(BASE).status_code == 401

    def test_forged_token_is_401(self, client) -> None:
        token = issue_access_token(OWNER_ID, secret="not-the-secret")
        response = client.get(BASE, headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_expired_token_is_401(self, client) -> None:
        token = issue_access_token(OWNER_ID, expires_in=-10)
        response = client.get(BASE, headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_null_exp_claim_is_401(self, client) -> None:
        token = _signed_token({"sub": str(OWNER_ID), "exp": None})
        response = client.get(BASE, headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_non_scalar_sub_claim_is_401(self, client) -> None:
        token = _signed_token({"sub": [OWNER_ID], "exp": 4_000_000_000})
        response = client.get(BASE, headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_well_formed_claims_are_accepted(self, client) -> None:
        token = _signed_token({"sub": str(OWNER_ID), "exp": 4_000_000_000})
        response = client.get(BASE, headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200

    def test_health_needs_no_token(self, client) -> None:
        response = client.get("/api/v2/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": settings.version}


class TestCreateEndpoint:
    """Tests for POST /api/v2/shortcuts."""

    def test_create_returns_full_representation(self, client) -> None:
        response = _create(client, OWNER_ID, "go", "WORKSPACE", link="https://go.dev", tags=["lang"])

        assert response.status_code == 201
        data = response.json()
        assert data["id"] > 0
        assert data["creator_id"] == OWNER_ID
        assert data["name"] == "go"
        assert data["tags"] == ["lang"]
        assert data["visibility"] == "WORKSPACE"
        assert data["row_status"] == "NORMAL"
        assert data["og_metadata"] == {"title": "", "description": "", "image": ""}

    def test_create_records_activity(self, client, app) -> None:
        created = _create(client, OWNER_ID, "go").json()

        activities = SqlShortcutStore(app.state.engine).list_activities()
        assert len(activities) == 1
        assert activities[0].type.value == "shortcut.create"
        assert json.loads(activities[0].payload) == {"shortcutId": created["id"]}

    def test_duplicate_name_is_409(self, client) -> None:
        _create(client, OWNER_ID, "go")
        response = _create(client, OTHER_ID, "go")
        assert response.status_code == 409
        assert response.json()["error"] == "Shortcut already exists"

    def test_invalid_visibility_is_422(self, client) -> None:
        assert _create(client, OWNER_ID, "go", "SECRET").status_code == 422

    def test_name_with_whitespace_is_422(self, client) -> None:
        assert _create(client, OWNER_ID, "go home").status_code == 422

    def test_validation_error_uses_error_schema(self, client) -> None:
        response = client.post(BASE, json={"name": "go"}, headers=_auth(OWNER_ID))

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "Validation error"
        assert "link" in body["detail"]


class TestReadEndpoints:
    """Tests for GET /api/v2/shortcuts and GET /api/v2/shortcuts/{name}."""

    def test_list_respects_visibility(self, client) -> None:
        _create(client, OWNER_ID, "mine", "PRIVATE")
        _create(client, OTHER_ID, "theirs", "PRIVATE")
        _create(client, OTHER_ID, "team", "WORKSPACE")

        response = client.get(BASE, headers=_auth(OWNER_ID))

        assert response.status_code == 200
        names = [s["name"] for s in response.json()["shortcuts"]]
        assert names[0] == "mine"
        assert sorted(names) == ["mine", "team"]

    def test_get_private_of_other_is_403(self, client) -> None:
        _create(client, OWNER_ID, "go")
        response = client.get(f"{BASE}/go", headers=_auth(OTHER_ID))
        assert response.status_code == 403
        assert "link" not in response.json()

    def test_get_unknown_is_404(self, client) -> None:
        response = client.get(f"{BASE}/nope", headers=_auth(OWNER_ID))
        assert response.status_code == 404
        assert response.json() == {"error": "Shortcut not found"}


class TestUpdateEndpoint:
    """Tests for PATCH /api/v2/shortcuts/{name}."""

    def test_missing_mask_is_400(self, client) -> None:
        _create(client, OWNER_ID, "go")
        response = client.patch(f"{BASE}/go", json={"title": "x"}, headers=_auth(OWNER_ID))
        assert response.status_code == 400

    def test_owner_updates_masked_field_only(self, client) -> None:
        _create(client, OWNER_ID, "go", link="https://go.dev", title="Old")
        response = client.patch(
            f"{BASE}/go",
            json={"title": "New", "link": "https://ignored.example", "update_mask": ["title"]},
            headers=_auth(OWNER_ID),
        )
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "New"
        assert data["link"] == "https://go.dev"

    def test_visibility_mask_without_value_keeps_visibility(self, client) -> None:
        _create(client, OWNER_ID, "go", "PUBLIC")
        response = client.patch(
            f"{BASE}/go", json={"update_mask": ["visibility"]}, headers=_auth(OWNER_ID)
        )
        assert response.status_code == 200
        assert response.json()["visibility"] == "PUBLIC"

    def test_non_owner_is_403(self, client) -> None:
        _create(client, OWNER_ID, "go", "PUBLIC")
        response = client.patch(
            f"{BASE}/go",
            json={"link": "https://evil.example", "update_mask": ["link"]},
            headers=_auth(OTHER_ID),
        )
        assert response.status_code == 403

    def test_unknown_is_404(self, client) -> None:
        response = client.patch(
            f"{BASE}/nope", json={"update_mask": ["title"]}, headers=_auth(OWNER_ID)
        )
        assert response.status_code == 404


class TestDeleteEndpoint:
    """Tests for DELETE /api/v2/shortcuts/{name}."""

    def test_owner_deletes(self, client) -> None:
        _create(client, OWNER_ID, "go")
        response = client.delete(f"{BASE}/go", headers=_auth(OWNER_ID))
        assert response.status_code == 200
        assert response.json() == {}
        assert client.get(f"{BASE}/go", headers=_auth(OWNER_ID)).status_code == 404

    def test_non_owner_is_403(self, client) -> None:
        _create(client, OWNER_ID, "go", "PUBLIC")
        assert client.delete(f"{BASE}/go", headers=_auth(OTHER_ID)).status_code == 403

    def test_admin_deletes_any(self, client) -> None:
        _create(client, OWNER_ID, "go")
        assert client.delete(f"{BASE}/go", headers=_auth(ADMIN_ID)).status_code == 200


class TestWorkedExample:
    """Private shortcut of user 7, seen through user 9 and an admin."""

    def test_scenario(self, client) -> None:
        assert _create(client, OWNER_ID, "go", "PRIVATE", link="https://go.dev").status_code == 201

        def names(user_id: int) -> list[str]:
            return [s["name"] for s in client.get(BASE, headers=_auth(user_id)).json()["shortcuts"]]

        assert "go" in names(OWNER_ID)
        assert "go" not in names(OTHER_ID)
        assert client.get(f"{BASE}/go", headers=_auth(OTHER_ID)).status_code == 403

        denied = client.patch(
            f"{BASE}/go", json={"link": "https://x.example", "update_mask": ["link"]}, headers=_auth(OTHER_ID)
        )
        assert denied.status_code == 403

        published = client.patch(
            f"{BASE}/go", json={"visibility": "PUBLIC", "update_mask": ["visibility"]}, headers=_auth(ADMIN_ID)
        )
        assert published.status_code == 200
        assert published.json()["visibility"] == "PUBLIC"
        assert "go" in names(OTHER_ID)


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self, client) -> None:
        response = client.get("/api/v2/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["Cache-Control"] == "no-store"


class TestRateLimiting:
    """Tests for rate limiting behavior."""

    def test_rate_limit_returns_429(self, monkeypatch) -> None:
        monkeypatch.setattr(settings, "rate_limit_default", "2/minute")
        limited_app = create_app(database_url="sqlite://")
        with TestClient(limited_app) as limited:
            statuses = [limited.get("/api/v2/health").status_code for _ in range(3)]
        assert statuses == [200, 200, 429]

    def test_shortcut_routes_are_limited(self, monkeypatch) -> None:
        monkeypatch.setattr(settings, "rate_limit_default", "1/minute")
        limited_app = create_app(database_url="sqlite://")
        with TestClient(limited_app) as limited:
            first = limited.get(BASE, headers=_auth(OWNER_ID))
            second = limited.get(BASE, headers=_auth(OWNER_ID))
        assert first.status_code == 200
        assert second.status_code == 429
        assert second.json()["error"] == "Rate limit exceeded"


class TestStartupChecks:
    """Tests for configuration checks in create_app."""

    def test_default_secret_refused_outside_debug(self, monkeypatch) -> None:
        monkeypatch.setattr(settings, "auth_secret", DEFAULT_AUTH_SECRET)
        monkeypatch.setattr(settings, "debug", False)
        with pytest.raises(RuntimeError, match="SLASH_AUTH_SECRET"):
            create_app(database_url="sqlite://", rate_limit_enabled=False)

    def test_default_secret_allowed_in_debug(self, monkeypatch) -> None:
        monkeypatch.setattr(settings, "auth_secret", DEFAULT_AUTH_SECRET)
        monkeypatch.setattr(settings, "debug", True)
        debug_app = create_app(database_url="sqlite://", rate_limit_enabled=False)
        assert debug_app.docs_url == "/docs"
