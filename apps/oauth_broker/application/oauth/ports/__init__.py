"""OAuth domain ports.

OAuth 인증 관련 포트입니다.
"""

from apps.oauth_broker.application.oauth.ports.provider_gateway import OAuthProviderGateway
from apps.oauth_broker.application.oauth.ports.state_store import (
    PendingAuthorization,
    PendingAuthorizationStore,
)

__all__ = [
    "OAuthProviderGateway",
    "PendingAuthorization",
    "PendingAuthorizationStore",
]
