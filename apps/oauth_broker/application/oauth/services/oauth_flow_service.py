"""OAuthFlowService - OAuth 인증 플로우 서비스.

"연주자" 역할: state 발급/검증 및 토큰 교환을 담당합니다.
UseCase(지휘자)가 이 서비스를 호출하여 OAuth 관련 작업을 위임합니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from apps.oauth_broker.application.oauth.exceptions import InvalidStateError
from apps.oauth_broker.application.oauth.ports import PendingAuthorization

if TYPE_CHECKING:
    from apps.oauth_broker.application.oauth.dto import TokenBundle
    from apps.oauth_broker.application.oauth.ports import (
        OAuthProviderGateway,
        PendingAuthorizationStore,
    )

logger = logging.getLogger(__name__)


@dataclass
class OAuthFlowResult:
    """OAuth 플로우 결과."""

    pending: PendingAuthorization
    tokens: "TokenBundle"


class OAuthFlowService:
    """OAuth 인증 플로우 서비스.

    Responsibilities:
        - state 발급 및 저장 (CSRF 방지)
        - state 검증 및 소비 (일회용)
        - 콜백 URL 결정 (인증 시작과 토큰 교환에서 동일해야 함)
        - OAuth 프로바이더와 통신하여 토큰 교환

    Collaborators:
        - PendingAuthorizationStore: state 저장/조회
        - OAuthProviderGateway: OAuth 프로바이더 통신
    """

    def __init__(
        self,
        state_store: "PendingAuthorizationStore",
        provider_gateway: "OAuthProviderGateway",
        *,
        callback_base_url: str,
    ) -> None:
        self._state_store = state_store
        self._provider_gateway = provider_gateway
        self._callback_base_url = callback_base_url.rstrip("/")

    def callback_url(self, provider: str) -> str:
        """프로바이더 콜백 URL (redirect_uri)."""
        return f"{self._callback_base_url}/{provider}/callback"

    def begin(self, provider: str, *, redirect: str) -> tuple[str, str]:
        """state를 발급/저장하고 인증 URL을 생성합니다.

        Returns:
            (authorization_url, state)

        Raises:
            ProviderNotConfiguredError: client id 미설정 (state는 저장되지 않음)
        """
        state = self._state_store.generate()
        authorization_url = self._provider_gateway.get_authorization_url(
            provider,
            redirect_uri=self.callback_url(provider),
            state=state,
        )
        self._state_store.put(
            state,
            PendingAuthorization(redirect=redirect, provider=provider),
        )
        return authorization_url, state

    async def validate_and_exchange(
        self,
        *,
        provider: str,
        code: str,
        state: str,
    ) -> OAuthFlowResult:
        """State 검증 후 인가 코드를 토큰으로 교환합니다.

        Raises:
            InvalidStateError: state 검증 실패
            TokenExchangeError: OAuth 프로바이더 오류
        """
        # 1. State 검증 및 소비 (일회용)
        try:
            pending = self._state_store.take(state, provider=provider)
        except InvalidStateError:
            logger.warning(
                "State provider mismatch",
                extra={"provider": provider, "state": state[:8]},
            )
            raise
        if pending is None:
            logger.warning("Invalid or expired OAuth state", extra={"state": state[:8]})
            raise InvalidStateError("invalid or expired state")

        # 2. 토큰 교환 (redirect_uri는 인증 시작 때와 동일)
        tokens = await self._provider_gateway.exchange_code(
            provider,
            code=code,
            redirect_uri=self.callback_url(provider),
        )

        logger.info("OAuth token exchange succeeded", extra={"provider": provider})
        return OAuthFlowResult(pending=pending, tokens=tokens)
