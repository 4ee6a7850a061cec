"""OAuth Services."""

from apps.oauth_broker.application.oauth.services.oauth_flow_service import (
    OAuthFlowResult,
    OAuthFlowService,
)

__all__ = ["OAuthFlowResult", "OAuthFlowService"]
