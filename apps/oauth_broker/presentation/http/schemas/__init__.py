"""HTTP Schemas."""

from apps.oauth_broker.presentation.http.schemas.common import ErrorResponse, HealthResponse
from apps.oauth_broker.presentation.http.schemas.token import (
    RefreshTokenBody,
    RevokeResponse,
    RevokeTokenBody,
    TokenBundleResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "RefreshTokenBody",
    "RevokeResponse",
    "RevokeTokenBody",
    "TokenBundleResponse",
]
