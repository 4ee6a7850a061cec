"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from apps.oauth_broker.application.oauth.commands import (
    OAuthAuthorizeInteractor,
    OAuthCallbackInteractor,
)
from apps.oauth_broker.application.oauth.exceptions import ProviderNotFoundError
from apps.oauth_broker.application.oauth.ports import (
    OAuthProviderGateway,
    PendingAuthorizationStore,
)
from apps.oauth_broker.application.oauth.services import OAuthFlowService
from apps.oauth_broker.application.token.commands import (
    RefreshTokenInteractor,
    RevokeTokenInteractor,
)
from apps.oauth_broker.infrastructure.oauth import OAuthClientImpl, ProviderRegistry
from apps.oauth_broker.infrastructure.persistence_memory import InMemoryStateStore
from apps.oauth_broker.setup.config import Settings, get_settings


# ============================================================
# Infrastructure Dependencies
# ============================================================


@lru_cache
def get_provider_registry() -> ProviderRegistry:
    """OAuth 프로바이더 레지스트리 제공자 (프로세스 단일 인스턴스)."""
    return ProviderRegistry.default()


@lru_cache
def get_state_store() -> InMemoryStateStore:
    """OAuth 상태 저장소 제공자 (프로세스 단일 인스턴스)."""
    settings = get_settings()
    return InMemoryStateStore(ttl_seconds=settings.state_ttl_seconds)


def get_provider_gateway(
    settings: Settings = Depends(get_settings),
    registry: ProviderRegistry = Depends(get_provider_registry),
) -> OAuthProviderGateway:
    """OAuthProviderGateway 제공자."""
    return OAuthClientImpl(registry, timeout_seconds=settings.upstream_timeout_seconds)


def get_supported_provider(
    provider: str,
    provider_gateway: OAuthProviderGateway = Depends(get_provider_gateway),
) -> str:
    """경로의 provider 검증.

    의존성은 body 검증보다 먼저 실행되므로 미지원 프로바이더는
    body 형태와 무관하게 404가 됩니다.
    """
    if not provider_gateway.supports(provider):
        raise ProviderNotFoundError(provider)
    return provider


# ============================================================
# Service Dependencies
# ============================================================


def get_oauth_flow_service(
    state_store: PendingAuthorizationStore = Depends(get_state_store),
    provider_gateway: OAuthProviderGateway = Depends(get_provider_gateway),
    settings: Settings = Depends(get_settings),
) -> OAuthFlowService:
    """OAuthFlowService 제공자."""
    return OAuthFlowService(
        state_store,
        provider_gateway,
        callback_base_url=settings.callback_base_url,
    )


# ============================================================
# Use Case Dependencies
# ============================================================


def get_oauth_authorize_interactor(
    oauth_service: OAuthFlowService = Depends(get_oauth_flow_service),
    provider_gateway: OAuthProviderGateway = Depends(get_provider_gateway),
) -> OAuthAuthorizeInteractor:
    """OAuthAuthorizeInteractor 제공자."""
    return OAuthAuthorizeInteractor(oauth_service, provider_gateway)


def get_oauth_callback_interactor(
    oauth_service: OAuthFlowService = Depends(get_oauth_flow_service),
    provider_gateway: OAuthProviderGateway = Depends(get_provider_gateway),
) -> OAuthCallbackInteractor:
    """OAuthCallbackInteractor 제공자."""
    return OAuthCallbackInteractor(oauth_service, provider_gateway)


def get_refresh_token_interactor(
    provider_gateway: OAuthProviderGateway = Depends(get_provider_gateway),
) -> RefreshTokenInteractor:
    """RefreshTokenInteractor 제공자."""
    return RefreshTokenInteractor(provider_gateway)


def get_revoke_token_interactor(
    provider_gateway: OAuthProviderGateway = Depends(get_provider_gateway),
) -> RevokeTokenInteractor:
    """RevokeTokenInteractor 제공자."""
    return RevokeTokenInteractor(provider_gateway)
