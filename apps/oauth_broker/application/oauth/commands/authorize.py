"""OAuthAuthorize Command.

OAuth 인증 시작 Use Case입니다.

Architecture:
    - UseCase(지휘자): OAuthAuthorizeInteractor
    - Services(연주자): OAuthFlowService
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.oauth_broker.application.oauth.dto import (
    OAuthAuthorizeRequest,
    OAuthAuthorizeResponse,
)
from apps.oauth_broker.application.oauth.exceptions import (
    InvalidRequestError,
    ProviderNotFoundError,
)

if TYPE_CHECKING:
    from apps.oauth_broker.application.oauth.ports import OAuthProviderGateway
    from apps.oauth_broker.application.oauth.services import OAuthFlowService

logger = logging.getLogger(__name__)


class OAuthAuthorizeInteractor:
    """OAuth 인증 시작 Interactor (지휘자).

    Workflow:
        1. 프로바이더 확인 (미지원 → 404)
        2. redirect 파라미터 확인 (누락 → 400, 설정 여부와 무관)
        3. state 발급/저장 및 인증 URL 생성 (client id 미설정 → 500)
    """

    def __init__(
        self,
        oauth_service: "OAuthFlowService",
        provider_gateway: "OAuthProviderGateway",
    ) -> None:
        self._oauth_service = oauth_service
        self._provider_gateway = provider_gateway

    async def execute(self, request: OAuthAuthorizeRequest) -> OAuthAuthorizeResponse:
        """OAuth 인증 URL을 생성합니다.

        Raises:
            ProviderNotFoundError: 미지원 프로바이더
            InvalidRequestError: redirect 누락
            ProviderNotConfiguredError: client id 미설정
        """
        if not self._provider_gateway.supports(request.provider):
            raise ProviderNotFoundError(request.provider)

        if not request.redirect:
            raise InvalidRequestError("redirect query parameter is required")

        authorization_url, state = self._oauth_service.begin(
            request.provider,
            redirect=request.redirect,
        )

        logger.info(
            "OAuth flow initiated",
            extra={"provider": request.provider, "state": state[:8]},
        )
        return OAuthAuthorizeResponse(authorization_url=authorization_url, state=state)
