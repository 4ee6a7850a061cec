"""Exception Handlers.

애플리케이션 예외를 HTTP 응답으로 변환합니다.
모든 실패는 요청 경계에서 JSON으로 변환되며 프로세스를 중단시키지 않습니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from apps.oauth_broker.application.oauth.exceptions import (
    InvalidRequestError,
    InvalidStateError,
    OAuthProviderError,
    ProviderDeniedError,
    ProviderNotConfiguredError,
    ProviderNotFoundError,
)
from apps.oauth_broker.presentation.http.schemas import ErrorResponse
from apps.oauth_broker.setup.dependencies import get_provider_registry

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str, code: str, detail: str | None = None):
    content = ErrorResponse(error=message, code=code, detail=detail).model_dump(
        exclude_none=True
    )
    return JSONResponse(status_code=status_code, content=content)


def _log_extra(request: Request, code: str) -> dict:
    return {
        "provider": request.path_params.get("provider"),
        "url.path": request.url.path,
        "error.code": code,
    }


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(ProviderNotFoundError)
    async def provider_not_found_handler(request: Request, exc: ProviderNotFoundError):
        return _error_response(404, exc.message, "PROVIDER_NOT_FOUND")

    @app.exception_handler(ProviderNotConfiguredError)
    async def provider_not_configured_handler(
        request: Request, exc: ProviderNotConfiguredError
    ):
        logger.error(exc.message, extra=_log_extra(request, "PROVIDER_NOT_CONFIGURED"))
        return _error_response(500, exc.message, "PROVIDER_NOT_CONFIGURED")

    @app.exception_handler(InvalidStateError)
    async def invalid_state_handler(request: Request, exc: InvalidStateError):
        logger.warning(exc.message, extra=_log_extra(request, "INVALID_STATE"))
        return _error_response(400, exc.message, "INVALID_STATE")

    @app.exception_handler(ProviderDeniedError)
    async def provider_denied_handler(request: Request, exc: ProviderDeniedError):
        logger.warning(exc.message, extra=_log_extra(request, "PROVIDER_DENIED"))
        return _error_response(400, exc.message, "PROVIDER_DENIED")

    @app.exception_handler(InvalidRequestError)
    async def invalid_request_handler(request: Request, exc: InvalidRequestError):
        logger.warning(exc.message, extra=_log_extra(request, "INVALID_REQUEST"))
        return _error_response(400, exc.message, "INVALID_REQUEST")

    @app.exception_handler(OAuthProviderError)
    async def oauth_provider_handler(request: Request, exc: OAuthProviderError):
        logger.error(
            f"{exc.summary} ({exc.provider}): {exc.reason}",
            extra=_log_extra(request, "OAUTH_PROVIDER_ERROR"),
        )
        return _error_response(502, exc.summary, "OAUTH_PROVIDER_ERROR", detail=exc.reason)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # JSON 파싱 실패는 의존성보다 먼저 발생하므로 provider를 여기서 다시 확인
        provider = request.path_params.get("provider")
        if provider is not None and get_provider_registry().get(provider) is None:
            return _error_response(
                404, ProviderNotFoundError(provider).message, "PROVIDER_NOT_FOUND"
            )

        errors = exc.errors()
        message = errors[0].get("msg", "invalid request") if errors else "invalid request"
        logger.warning(message, extra=_log_extra(request, "INVALID_REQUEST"))
        return _error_response(400, message, "INVALID_REQUEST")
