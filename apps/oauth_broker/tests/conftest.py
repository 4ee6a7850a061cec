"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
"""

from __future__ import annotations

from typing import Callable, Generator

import httpx
import pytest

from apps.oauth_broker.infrastructure.oauth import OAuthClientImpl, ProviderRegistry
from apps.oauth_broker.infrastructure.persistence_memory import InMemoryStateStore
from apps.oauth_broker.setup.config import get_settings
from apps.oauth_broker.setup.dependencies import get_provider_registry, get_state_store

CALLBACK_BASE_URL = "https://oauth.example.test"

CREDENTIAL_ENV_VARS = (
    "GITHUB_CLIENT_ID",
    "GITHUB_CLIENT_SECRET",
    "GITLAB_CLIENT_ID",
    "GITLAB_CLIENT_SECRET",
    "BITBUCKET_CLIENT_ID",
    "BITBUCKET_CLIENT_SECRET",
)


# ============================================================
# Environment
# ============================================================


@pytest.fixture(autouse=True)
def _test_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """테스트 환경변수 설정 (프로바이더 자격 증명은 비움)."""
    for name in CREDENTIAL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CALLBACK_BASE_URL", CALLBACK_BASE_URL)
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("OTEL_ENABLED", "false")
    get_settings.cache_clear()
    get_state_store.cache_clear()
    get_provider_registry.cache_clear()
    yield
    get_settings.cache_clear()
    get_state_store.cache_clear()


@pytest.fixture
def configure_provider(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    """프로바이더 client id/secret 환경변수 설정 헬퍼."""

    def _configure(provider: str, client_id: str = "id1", client_secret: str = "secret1") -> None:
        prefix = provider.upper()
        monkeypatch.setenv(f"{prefix}_CLIENT_ID", client_id)
        monkeypatch.setenv(f"{prefix}_CLIENT_SECRET", client_secret)

    return _configure


# ============================================================
# State Store Fixtures
# ============================================================


class FakeClock:
    """수동으로 진행시키는 monotonic 시계."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def state_store(clock: FakeClock) -> InMemoryStateStore:
    """TTL 600초, 가짜 시계를 쓰는 상태 저장소."""
    return InMemoryStateStore(ttl_seconds=600, clock=clock)


# ============================================================
# Upstream (httpx) Fixtures
# ============================================================


class RecordingTransport(httpx.MockTransport):
    """요청을 기록하며 handler로 응답하는 MockTransport."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_handler)


@pytest.fixture
def make_gateway() -> Callable[..., tuple[OAuthClientImpl, RecordingTransport]]:
    """MockTransport 기반 OAuthClientImpl 생성 헬퍼."""

    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
    ) -> tuple[OAuthClientImpl, RecordingTransport]:
        transport = RecordingTransport(handler)
        gateway = OAuthClientImpl(ProviderRegistry.default(), timeout_seconds=5.0, transport=transport)
        return gateway, transport

    return _make
