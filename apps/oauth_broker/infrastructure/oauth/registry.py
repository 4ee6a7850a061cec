"""OAuth Provider Registry."""

from __future__ import annotations

from typing import Iterable

from apps.oauth_broker.infrastructure.oauth.providers import (
    BitbucketOAuthProvider,
    GitHubOAuthProvider,
    GitLabOAuthProvider,
    OAuthProvider,
)


class ProviderRegistry:
    """이름으로 OAuth 프로바이더를 조회하는 레지스트리.

    지원 프로바이더는 고정되어 있으며 이름은 대소문자를 구분합니다.
    """

    def __init__(self, providers: Iterable[OAuthProvider]) -> None:
        self._providers: dict[str, OAuthProvider] = {p.name: p for p in providers}

    @classmethod
    def default(cls) -> "ProviderRegistry":
        """기본 프로바이더(GitHub, GitLab, Bitbucket) 레지스트리."""
        return cls(
            [
                GitHubOAuthProvider(),
                GitLabOAuthProvider(),
                BitbucketOAuthProvider(),
            ]
        )

    def get(self, name: str) -> OAuthProvider | None:
        """프로바이더 조회. 미지원 이름이면 None."""
        return self._providers.get(name)

    def names(self) -> tuple[str, ...]:
        """등록된 프로바이더 이름 목록."""
        return tuple(self._providers)
