"""OAuth Provider Implementations."""

from apps.oauth_broker.infrastructure.oauth.client import OAuthClientImpl
from apps.oauth_broker.infrastructure.oauth.providers import (
    BitbucketOAuthProvider,
    GitHubOAuthProvider,
    GitLabOAuthProvider,
    OAuthProvider,
)
from apps.oauth_broker.infrastructure.oauth.registry import ProviderRegistry

__all__ = [
    "OAuthProvider",
    "BitbucketOAuthProvider",
    "GitHubOAuthProvider",
    "GitLabOAuthProvider",
    "ProviderRegistry",
    "OAuthClientImpl",
]
