"""Provider Token Commands."""

from apps.oauth_broker.application.token.commands.refresh import RefreshTokenInteractor
from apps.oauth_broker.application.token.commands.revoke import RevokeTokenInteractor

__all__ = ["RefreshTokenInteractor", "RevokeTokenInteractor"]
