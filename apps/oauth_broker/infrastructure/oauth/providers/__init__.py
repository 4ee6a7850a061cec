"""OAuth Providers.

각 OAuth 프로바이더 구현체입니다.
"""

from apps.oauth_broker.infrastructure.oauth.providers.base import OAuthProvider
from apps.oauth_broker.infrastructure.oauth.providers.bitbucket import BitbucketOAuthProvider
from apps.oauth_broker.infrastructure.oauth.providers.github import GitHubOAuthProvider
from apps.oauth_broker.infrastructure.oauth.providers.gitlab import GitLabOAuthProvider

__all__ = [
    "OAuthProvider",
    "BitbucketOAuthProvider",
    "GitHubOAuthProvider",
    "GitLabOAuthProvider",
]
