"""OAuth domain exceptions."""

from apps.oauth_broker.application.oauth.exceptions.oauth import (
    InvalidRequestError,
    InvalidStateError,
    OAuthProviderError,
    ProviderDeniedError,
    ProviderNotConfiguredError,
    ProviderNotFoundError,
    TokenExchangeError,
    TokenRefreshError,
    TokenRevocationError,
)

__all__ = [
    "InvalidRequestError",
    "InvalidStateError",
    "OAuthProviderError",
    "ProviderDeniedError",
    "ProviderNotConfiguredError",
    "ProviderNotFoundError",
    "TokenExchangeError",
    "TokenRefreshError",
    "TokenRevocationError",
]
