"""HTTP Gateway 테스트.

FastAPI TestClient + dependency_overrides로 상태 저장소와 업스트림(httpx)을 교체합니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable
from urllib.parse import parse_qs, urlsplit

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from apps.oauth_broker.infrastructure.oauth import OAuthClientImpl
from apps.oauth_broker.infrastructure.persistence_memory import InMemoryStateStore, StateSweeper
from apps.oauth_broker.main import create_app
from apps.oauth_broker.setup.dependencies import get_provider_gateway, get_state_store

if TYPE_CHECKING:
    from apps.oauth_broker.tests.conftest import RecordingTransport

GITLAB_TOKENS = {
    "access_token": "a1",
    "refresh_token": "r1",
    "expires_in": 500,
    "created_at": 1000,
}


def _upstream(request: httpx.Request) -> httpx.Response:
    """기본 업스트림: GitLab 토큰 발급 성공, GitHub revoke 성공."""
    if request.url.host == "gitlab.com" and request.url.path == "/oauth/token":
        return httpx.Response(200, json=GITLAB_TOKENS)
    if request.url.host == "api.github.com":
        return httpx.Response(204)
    return httpx.Response(404, text="not found")


@pytest.fixture
def upstream_handler() -> dict[str, Callable[[httpx.Request], httpx.Response]]:
    """테스트에서 교체 가능한 업스트림 handler."""
    return {"handler": _upstream}


@pytest.fixture
def upstream(make_gateway, upstream_handler) -> tuple[OAuthClientImpl, RecordingTransport]:
    """upstream_handler로 응답하는 게이트웨이와 요청 기록용 transport."""
    return make_gateway(lambda request: upstream_handler["handler"](request))


@pytest.fixture
def upstream_transport(upstream) -> RecordingTransport:
    return upstream[1]


@pytest.fixture
def app(state_store: InMemoryStateStore, upstream) -> FastAPI:
    application = create_app()
    gateway, _ = upstream
    application.dependency_overrides[get_state_store] = lambda: state_store
    application.dependency_overrides[get_provider_gateway] = lambda: gateway
    return application


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, follow_redirects=False)


def _start_flow(client: TestClient, provider: str, redirect: str = "http://x/done") -> str:
    response = client.get(f"/{provider}", params={"redirect": redirect})
    assert response.status_code == 302
    return parse_qs(urlsplit(response.headers["location"]).query)["state"][0]


class TestHealth:
    """GET /health."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "service": "oauth-broker"}

    def test_openapi_is_served_under_prefix(self, client: TestClient) -> None:
        response = client.get("/api/v1/oauth/openapi.json")

        assert response.status_code == 200
        assert "/{provider}/refresh" in response.json()["paths"]


class TestUnknownProvider:
    """미지원 프로바이더는 모든 엔드포인트에서 404."""

    @pytest.mark.parametrize(
        "method,path",
        [
            ("GET", "/acme?redirect=http://x/done"),
            ("GET", "/acme/callback?code=c1&state=s1"),
            ("POST", "/acme/refresh"),
            ("POST", "/acme/revoke"),
        ],
    )
    def test_returns_404(
        self,
        client: TestClient,
        state_store: InMemoryStateStore,
        upstream_transport: RecordingTransport,
        method: str,
        path: str,
    ) -> None:
        response = client.request(method, path, json={})

        assert response.status_code == 404
        assert response.json() == {"error": "unknown provider: acme", "code": "PROVIDER_NOT_FOUND"}
        assert len(state_store) == 0
        assert upstream_transport.requests == []

    @pytest.mark.parametrize("name", ["docs", "redoc", "openapi.json"])
    def test_framework_paths_are_not_shadowing_providers(self, client: TestClient, name: str) -> None:
        response = client.get(f"/{name}", params={"redirect": "http://x/done"})

        assert response.status_code == 404
        assert response.json() == {"error": f"unknown provider: {name}", "code": "PROVIDER_NOT_FOUND"}

    @pytest.mark.parametrize(
        "path,body",
        [
            ("/acme/refresh", {"refreshToken": 5}),
            ("/acme/refresh", {"refreshToken": ["r1"]}),
            ("/acme/revoke", {"accessToken": {"value": "a1"}}),
        ],
    )
    def test_checked_before_body_validation(
        self, client: TestClient, path: str, body: dict
    ) -> None:
        response = client.post(path, json=body)

        assert response.status_code == 404
        assert response.json()["code"] == "PROVIDER_NOT_FOUND"

    @pytest.mark.parametrize("path", ["/acme/refresh", "/acme/revoke"])
    def test_checked_before_json_parsing(self, client: TestClient, path: str) -> None:
        response = client.post(
            path, content="{not json", headers={"content-type": "application/json"}
        )

        assert response.status_code == 404
        assert response.json()["code"] == "PROVIDER_NOT_FOUND"


class TestAuthorize:
    """GET /{provider}."""

    def test_missing_redirect_is_checked_before_configuration(self, client: TestClient) -> None:
        response = client.get("/github")

        assert response.status_code == 400
        assert response.json()["error"] == "redirect query parameter is required"

    def test_unconfigured_provider(
        self, client: TestClient, state_store: InMemoryStateStore
    ) -> None:
        response = client.get("/github", params={"redirect": "http://x/done"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "github not configured",
            "code": "PROVIDER_NOT_CONFIGURED",
        }
        assert len(state_store) == 0

    def test_redirects_to_provider(
        self, client: TestClient, configure_provider, state_store: InMemoryStateStore
    ) -> None:
        configure_provider("github")

        response = client.get("/github", params={"redirect": "http://x/done"})

        assert response.status_code == 302
        location = response.headers["location"]
        assert location.startswith("https://github.com/login/oauth/authorize?")
        query = parse_qs(urlsplit(location).query)
        assert query["client_id"] == ["id1"]
        assert query["redirect_uri"] == ["https://oauth.example.test/github/callback"]
        assert query["scope"] == ["repo,user:email,admin:repo_hook"]
        assert query["response_type"] == ["code"]
        assert len(query["state"][0]) == 48
        assert len(state_store) == 1


class TestCallback:
    """GET /{provider}/callback."""

    def test_success_redirects_with_tokens(
        self, client: TestClient, configure_provider, state_store: InMemoryStateStore
    ) -> None:
        configure_provider("gitlab")
        state = _start_flow(client, "gitlab", redirect="http://x/done?keep=1")

        response = client.get("/gitlab/callback", params={"code": "c1", "state": state})

        assert response.status_code == 302
        location = urlsplit(response.headers["location"])
        assert f"{location.scheme}://{location.netloc}{location.path}" == "http://x/done"
        assert parse_qs(location.query) == {
            "keep": ["1"],
            "access_token": ["a1"],
            "refresh_token": ["r1"],
            "expires_at": ["1500"],
            "provider": ["gitlab"],
        }
        assert len(state_store) == 0

    def test_replayed_state(self, client: TestClient, configure_provider) -> None:
        configure_provider("gitlab")
        state = _start_flow(client, "gitlab")
        client.get("/gitlab/callback", params={"code": "c1", "state": state})

        response = client.get("/gitlab/callback", params={"code": "c1", "state": state})

        assert response.status_code == 400
        assert response.json() == {"error": "invalid or expired state", "code": "INVALID_STATE"}

    def test_unknown_state(self, client: TestClient) -> None:
        response = client.get("/github/callback", params={"code": "c1", "state": "nope"})

        assert response.status_code == 400
        assert response.json()["error"] == "invalid or expired state"

    def test_expired_state(self, client: TestClient, configure_provider, clock) -> None:
        configure_provider("gitlab")
        state = _start_flow(client, "gitlab")
        clock.advance(601)

        response = client.get("/gitlab/callback", params={"code": "c1", "state": state})

        assert response.status_code == 400
        assert response.json()["error"] == "invalid or expired state"

    def test_provider_mismatch(
        self,
        client: TestClient,
        configure_provider,
        state_store: InMemoryStateStore,
    ) -> None:
        configure_provider("gitlab")
        state = _start_flow(client, "gitlab")

        response = client.get("/github/callback", params={"code": "c1", "state": state})

        assert response.status_code == 400
        assert response.json()["error"] == "state provider mismatch"
        assert len(state_store) == 1

    def test_provider_denied(self, client: TestClient) -> None:
        response = client.get("/github/callback", params={"error": "access_denied"})

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "PROVIDER_DENIED"
        assert "access_denied" in body["error"]

    def test_missing_code(self, client: TestClient) -> None:
        response = client.get("/github/callback", params={"state": "s1"})

        assert response.status_code == 400
        assert response.json()["error"] == "missing code or state parameter"

    def test_exchange_failure(
        self,
        client: TestClient,
        configure_provider,
        upstream_handler,
    ) -> None:
        configure_provider("gitlab")
        state = _start_flow(client, "gitlab")
        upstream_handler["handler"] = lambda request: httpx.Response(500, text="boom")

        response = client.get("/gitlab/callback", params={"code": "c1", "state": state})

        assert response.status_code == 502
        assert response.json() == {
            "error": "token exchange failed",
            "code": "OAUTH_PROVIDER_ERROR",
            "detail": "500 boom",
        }


class TestRefresh:
    """POST /{provider}/refresh."""

    def test_missing_refresh_token(
        self, client: TestClient, configure_provider, upstream_transport: RecordingTransport
    ) -> None:
        configure_provider("gitlab")

        response = client.post("/gitlab/refresh", json={})

        assert response.status_code == 400
        assert response.json()["error"] == "refreshToken is required"
        assert upstream_transport.requests == []

    def test_missing_body(self, client: TestClient, upstream_transport: RecordingTransport) -> None:
        response = client.post("/gitlab/refresh")

        assert response.status_code == 400
        assert response.json()["error"] == "refreshToken is required"
        assert upstream_transport.requests == []

    def test_malformed_body(self, client: TestClient, upstream_transport: RecordingTransport) -> None:
        response = client.post("/gitlab/refresh", json={"refreshToken": 5})

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_REQUEST"
        assert upstream_transport.requests == []

    def test_success_uses_camel_case(self, client: TestClient, configure_provider) -> None:
        configure_provider("gitlab")

        response = client.post("/gitlab/refresh", json={"refreshToken": "r0"})

        assert response.status_code == 200
        assert response.json() == {"accessToken": "a1", "refreshToken": "r1", "expiresAt": 1500}

    def test_upstream_failure(
        self, client: TestClient, configure_provider, upstream_handler
    ) -> None:
        configure_provider("gitlab")
        upstream_handler["handler"] = lambda request: httpx.Response(
            400, json={"error": "invalid_grant"}
        )

        response = client.post("/gitlab/refresh", json={"refreshToken": "r0"})

        assert response.status_code == 502
        body = response.json()
        assert body["error"] == "token refresh failed"
        assert body["detail"].startswith("400")

    @pytest.mark.parametrize(
        "upstream_response",
        [
            httpx.Response(
                200,
                text="access_token=a&expires_in=1e400",
                headers={"content-type": "application/x-www-form-urlencoded"},
            ),
            httpx.Response(200, json={"access_token": 12345}),
        ],
    )
    def test_malformed_upstream_payload(
        self,
        client: TestClient,
        configure_provider,
        upstream_handler,
        upstream_response: httpx.Response,
    ) -> None:
        configure_provider("gitlab")
        upstream_handler["handler"] = lambda request: upstream_response

        response = client.post("/gitlab/refresh", json={"refreshToken": "r0"})

        assert response.status_code == 502
        assert response.json()["error"] == "token refresh failed"
        assert response.json()["code"] == "OAUTH_PROVIDER_ERROR"


class TestRevoke:
    """POST /{provider}/revoke."""

    def test_missing_access_token(
        self, client: TestClient, configure_provider, upstream_transport: RecordingTransport
    ) -> None:
        configure_provider("github")

        response = client.post("/github/revoke", json={"refreshToken": "r1"})

        assert response.status_code == 400
        assert response.json()["error"] == "accessToken is required"
        assert upstream_transport.requests == []

    def test_success(self, client: TestClient, configure_provider) -> None:
        configure_provider("github")

        response = client.post("/github/revoke", json={"accessToken": "a1"})

        assert response.status_code == 200
        assert response.json() == {"status": "revoked"}

    def test_upstream_failure(
        self, client: TestClient, configure_provider, upstream_handler
    ) -> None:
        configure_provider("github")
        upstream_handler["handler"] = lambda request: httpx.Response(404, text="Not Found")

        response = client.post("/github/revoke", json={"accessToken": "a1"})

        assert response.status_code == 502
        assert response.json()["error"] == "token revocation failed"


class TestLifespan:
    """애플리케이션 생명주기."""

    def test_sweeper_runs_during_lifespan(self) -> None:
        app = create_app()

        with TestClient(app) as client:
            sweeper = app.state.state_sweeper
            assert isinstance(sweeper, StateSweeper)
            assert sweeper.running
            assert client.get("/health").status_code == 200

        assert not sweeper.running
