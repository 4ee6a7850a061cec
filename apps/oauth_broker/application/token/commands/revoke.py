"""RevokeToken Command.

프로바이더 토큰 폐기 Use Case입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.oauth_broker.application.oauth.exceptions import (
    InvalidRequestError,
    ProviderNotFoundError,
)

if TYPE_CHECKING:
    from apps.oauth_broker.application.oauth.ports import OAuthProviderGateway
    from apps.oauth_broker.application.token.dto import RevokeTokenRequest

logger = logging.getLogger(__name__)


class RevokeTokenInteractor:
    """토큰 폐기 Interactor.

    폐기 프로토콜(HTTP 메서드, 인증 방식, 페이로드)은 프로바이더가 캡슐화합니다.
    이미 폐기된 토큰을 다시 폐기할 때의 결과는 프로바이더마다 다릅니다.
    """

    def __init__(self, provider_gateway: "OAuthProviderGateway") -> None:
        self._provider_gateway = provider_gateway

    async def execute(self, request: "RevokeTokenRequest") -> None:
        """토큰을 폐기합니다.

        Raises:
            ProviderNotFoundError: 미지원 프로바이더
            InvalidRequestError: accessToken 누락
            TokenRevocationError: 프로바이더 오류
        """
        if not self._provider_gateway.supports(request.provider):
            raise ProviderNotFoundError(request.provider)

        if not request.access_token:
            raise InvalidRequestError("accessToken is required")

        await self._provider_gateway.revoke(
            request.provider,
            access_token=request.access_token,
            refresh_token=request.refresh_token,
        )
        logger.info("Provider token revoked", extra={"provider": request.provider})
