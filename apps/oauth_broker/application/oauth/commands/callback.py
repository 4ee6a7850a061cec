"""OAuthCallback Command.

OAuth 콜백 처리 Use Case입니다.

Architecture:
    - UseCase(지휘자): OAuthCallbackInteractor
    - Services(연주자): OAuthFlowService
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.oauth_broker.application.oauth.dto import (
    OAuthCallbackRequest,
    OAuthCallbackResponse,
)
from apps.oauth_broker.application.oauth.exceptions import (
    InvalidRequestError,
    ProviderDeniedError,
    ProviderNotFoundError,
)

if TYPE_CHECKING:
    from apps.oauth_broker.application.oauth.ports import OAuthProviderGateway
    from apps.oauth_broker.application.oauth.services import OAuthFlowService


class OAuthCallbackInteractor:
    """OAuth 콜백 Interactor (지휘자).

    Workflow:
        1. 프로바이더 확인
        2. 프로바이더가 보낸 error 처리 (state 조회 전에 중단)
        3. code/state 확인
        4. state 검증 및 토큰 교환 (OAuthFlowService)

    토큰은 서버에 저장하지 않고, 호출자 redirect URL로만 전달됩니다.
    """

    def __init__(
        self,
        oauth_service: "OAuthFlowService",
        provider_gateway: "OAuthProviderGateway",
    ) -> None:
        self._oauth_service = oauth_service
        self._provider_gateway = provider_gateway

    async def execute(self, request: OAuthCallbackRequest) -> OAuthCallbackResponse:
        """OAuth 콜백을 처리합니다.

        Raises:
            ProviderNotFoundError: 미지원 프로바이더
            ProviderDeniedError: 프로바이더가 인가를 거부함
            InvalidRequestError: code/state 누락
            InvalidStateError: state 검증 실패
            TokenExchangeError: 토큰 교환 실패
        """
        if not self._provider_gateway.supports(request.provider):
            raise ProviderNotFoundError(request.provider)

        if request.error:
            raise ProviderDeniedError(request.provider, request.error)

        if not request.code or not request.state:
            raise InvalidRequestError("missing code or state parameter")

        result = await self._oauth_service.validate_and_exchange(
            provider=request.provider,
            code=request.code,
            state=request.state,
        )

        return OAuthCallbackResponse(
            redirect=result.pending.redirect,
            provider=request.provider,
            tokens=result.tokens,
        )
