"""Revoke Controller.

프로바이더 토큰 폐기 엔드포인트입니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from apps.oauth_broker.application.token.commands import RevokeTokenInteractor
from apps.oauth_broker.application.token.dto import RevokeTokenRequest
from apps.oauth_broker.presentation.http.schemas import RevokeResponse, RevokeTokenBody
from apps.oauth_broker.setup.dependencies import (
    get_revoke_token_interactor,
    get_supported_provider,
)

router = APIRouter()


@router.post(
    "/{provider}/revoke",
    response_model=RevokeResponse,
    summary="프로바이더 토큰 폐기",
)
async def revoke(
    provider: str = Depends(get_supported_provider),
    body: Optional[RevokeTokenBody] = None,
    interactor: RevokeTokenInteractor = Depends(get_revoke_token_interactor),
) -> RevokeResponse:
    """액세스 토큰을 폐기합니다. 두 번째 폐기 요청은 프로바이더에 따라 실패할 수 있습니다."""
    await interactor.execute(
        RevokeTokenRequest(
            provider=provider,
            access_token=body.access_token if body else None,
            refresh_token=body.refresh_token if body else None,
        )
    )
    return RevokeResponse(status="revoked")
