"""Health Controller."""

from fastapi import APIRouter, Depends

from apps.oauth_broker.presentation.http.schemas import HealthResponse
from apps.oauth_broker.setup.config import Settings, get_settings

router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="헬스체크")
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="ok", service=settings.service_name)
