"""Callback Controller.

OAuth 콜백 처리 엔드포인트입니다.
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse

from apps.oauth_broker.application.oauth.commands import OAuthCallbackInteractor
from apps.oauth_broker.application.oauth.dto import OAuthCallbackRequest
from apps.oauth_broker.presentation.http.utils import build_token_redirect_url
from apps.oauth_broker.setup.dependencies import get_oauth_callback_interactor

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/{provider}/callback",
    status_code=302,
    response_class=RedirectResponse,
    summary="OAuth 콜백 처리",
)
async def callback(
    provider: str,
    code: str | None = Query(None, description="OAuth 인증 코드"),
    state: str | None = Query(None, description="상태 값"),
    error: str | None = Query(None, description="프로바이더 에러 코드"),
    interactor: OAuthCallbackInteractor = Depends(get_oauth_callback_interactor),
) -> RedirectResponse:
    """OAuth 콜백을 처리합니다.

    1. state 검증 및 소비
    2. 인증 코드로 토큰 교환
    3. 저장된 redirect URL에 토큰을 쿼리로 붙여 리다이렉트

    토큰 교환 실패는 리다이렉트가 아닌 502 JSON 응답입니다.
    """
    result = await interactor.execute(
        OAuthCallbackRequest(provider=provider, code=code, state=state, error=error)
    )
    redirect_url = build_token_redirect_url(
        result.redirect,
        provider=result.provider,
        tokens=result.tokens,
    )
    logger.info(f"OAuth callback success: provider={provider}")
    return RedirectResponse(url=redirect_url, status_code=302)
