"""OAuth DTOs."""

from apps.oauth_broker.application.oauth.dto.oauth import (
    OAuthAuthorizeRequest,
    OAuthAuthorizeResponse,
    OAuthCallbackRequest,
    OAuthCallbackResponse,
    TokenBundle,
)

__all__ = [
    "OAuthAuthorizeRequest",
    "OAuthAuthorizeResponse",
    "OAuthCallbackRequest",
    "OAuthCallbackResponse",
    "TokenBundle",
]
