"""Authorize Controller.

OAuth 인증 시작 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse

from apps.oauth_broker.application.oauth.commands import OAuthAuthorizeInteractor
from apps.oauth_broker.application.oauth.dto import OAuthAuthorizeRequest
from apps.oauth_broker.setup.dependencies import get_oauth_authorize_interactor

router = APIRouter()


@router.get(
    "/{provider}",
    status_code=302,
    response_class=RedirectResponse,
    summary="OAuth 인증 시작",
)
async def authorize(
    provider: str,
    redirect: str | None = Query(None, description="인증 완료 후 돌아갈 호출자 URL"),
    interactor: OAuthAuthorizeInteractor = Depends(get_oauth_authorize_interactor),
) -> RedirectResponse:
    """프로바이더 인증 페이지로 리다이렉트합니다.

    state는 서버에 저장되며 콜백에서 한 번만 사용할 수 있습니다.
    """
    result = await interactor.execute(OAuthAuthorizeRequest(provider=provider, redirect=redirect))
    return RedirectResponse(url=result.authorization_url, status_code=302)
