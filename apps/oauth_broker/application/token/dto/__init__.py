"""Provider Token DTOs."""

from apps.oauth_broker.application.token.dto.token import (
    RefreshTokenRequest,
    RevokeTokenRequest,
)

__all__ = ["RefreshTokenRequest", "RevokeTokenRequest"]
