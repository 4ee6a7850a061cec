"""RefreshToken Command.

프로바이더 리프레시 토큰으로 새 토큰을 발급받는 Use Case입니다.
브라우저 플로우가 아닌 API 호출이므로 redirect 없이 TokenBundle을 반환합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.oauth_broker.application.oauth.exceptions import (
    InvalidRequestError,
    ProviderNotFoundError,
)

if TYPE_CHECKING:
    from apps.oauth_broker.application.oauth.dto import TokenBundle
    from apps.oauth_broker.application.oauth.ports import OAuthProviderGateway
    from apps.oauth_broker.application.token.dto import RefreshTokenRequest

logger = logging.getLogger(__name__)


class RefreshTokenInteractor:
    """토큰 갱신 Interactor.

    업스트림 실패는 재시도하지 않고 그대로 호출자에게 전달합니다.
    """

    def __init__(self, provider_gateway: "OAuthProviderGateway") -> None:
        self._provider_gateway = provider_gateway

    async def execute(self, request: "RefreshTokenRequest") -> "TokenBundle":
        """토큰을 갱신합니다.

        Raises:
            ProviderNotFoundError: 미지원 프로바이더
            InvalidRequestError: refreshToken 누락
            TokenRefreshError: 프로바이더 오류
        """
        if not self._provider_gateway.supports(request.provider):
            raise ProviderNotFoundError(request.provider)

        if not request.refresh_token:
            raise InvalidRequestError("refreshToken is required")

        tokens = await self._provider_gateway.refresh(
            request.provider,
            refresh_token=request.refresh_token,
        )
        logger.info("Provider token refreshed", extra={"provider": request.provider})
        return tokens
