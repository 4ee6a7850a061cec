"""Refresh Controller.

프로바이더 토큰 갱신 엔드포인트입니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from apps.oauth_broker.application.token.commands import RefreshTokenInteractor
from apps.oauth_broker.application.token.dto import RefreshTokenRequest
from apps.oauth_broker.presentation.http.schemas import RefreshTokenBody, TokenBundleResponse
from apps.oauth_broker.setup.dependencies import (
    get_refresh_token_interactor,
    get_supported_provider,
)

router = APIRouter()


@router.post(
    "/{provider}/refresh",
    response_model=TokenBundleResponse,
    summary="프로바이더 토큰 갱신",
)
async def refresh(
    provider: str = Depends(get_supported_provider),
    body: Optional[RefreshTokenBody] = None,
    interactor: RefreshTokenInteractor = Depends(get_refresh_token_interactor),
) -> TokenBundleResponse:
    """리프레시 토큰으로 새 토큰을 발급받아 JSON으로 반환합니다."""
    tokens = await interactor.execute(
        RefreshTokenRequest(
            provider=provider,
            refresh_token=body.refresh_token if body else None,
        )
    )
    return TokenBundleResponse(
        access_token=tokens.access_token,
        refresh_token=tokens.refresh_token,
        expires_at=tokens.expires_at,
    )
