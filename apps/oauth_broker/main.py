"""OAuth Broker Application Entry Point.

Clean Architecture 기반 OAuth 중계 서비스입니다.

분산 트레이싱 통합 (OTEL_ENABLED=true):
- FastAPI 자동 계측 (HTTP 요청/응답)
- HTTPX 자동 계측 (OAuth provider 호출)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.oauth_broker.infrastructure.persistence_memory import StateSweeper
from apps.oauth_broker.presentation.http.controllers import root_router
from apps.oauth_broker.presentation.http.errors import register_exception_handlers
from apps.oauth_broker.setup.config import get_settings
from apps.oauth_broker.setup.dependencies import get_state_store
from apps.oauth_broker.setup.logging import setup_logging
from apps.oauth_broker.setup.tracing import (
    configure_tracing,
    instrument_fastapi,
    instrument_httpx,
    shutdown_tracing,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리."""
    settings = get_settings()

    # Startup
    logger.info(f"Starting {settings.app_name} ({settings.environment})")
    sweeper = StateSweeper(
        get_state_store(),
        interval_seconds=settings.state_sweep_interval_seconds,
    )
    sweeper.start()
    app.state.state_sweeper = sweeper

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")
    await sweeper.stop()
    shutdown_tracing()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = get_settings()

    # 로깅 설정
    setup_logging(
        settings.resolved_log_level,
        log_format=settings.log_format,
        service_name=settings.service_name,
        environment=settings.environment,
    )

    # OpenTelemetry 분산 트레이싱 설정
    configure_tracing()
    instrument_httpx()

    app = FastAPI(
        title=settings.app_name,
        description="GitHub/GitLab/Bitbucket OAuth 중계 서비스",
        version="1.0.0",
        # /{provider} 와 겹치지 않도록 문서 경로는 3단계 prefix 아래에 둠
        docs_url="/api/v1/oauth/docs",
        openapi_url="/api/v1/oauth/openapi.json",
        redoc_url="/api/v1/oauth/redoc",
        lifespan=lifespan,
    )

    # CORS 설정 (refresh/revoke는 웹 클라이언트가 직접 호출)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # OpenTelemetry FastAPI instrumentation
    instrument_fastapi(app)

    # 라우터 등록
    app.include_router(root_router)

    return app


# 애플리케이션 인스턴스
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.oauth_broker.main:app",
        host="0.0.0.0",
        port=get_settings().port,
    )
