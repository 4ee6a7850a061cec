"""GitLab OAuth Provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from apps.oauth_broker.application.oauth.dto import TokenBundle
from apps.oauth_broker.application.oauth.exceptions import TokenRevocationError
from apps.oauth_broker.infrastructure.oauth.credentials import GitLabCredentials
from apps.oauth_broker.infrastructure.oauth.providers.base import (
    FORM_CONTENT_TYPE,
    OAuthProvider,
    to_seconds,
)

if TYPE_CHECKING:
    import httpx

    from apps.oauth_broker.infrastructure.oauth.credentials import ClientCredentials

GITLAB_AUTH_URL = "https://gitlab.com/oauth/authorize"
GITLAB_TOKEN_URL = "https://gitlab.com/oauth/token"
GITLAB_USER_URL = "https://gitlab.com/api/v4/user"
GITLAB_REVOKE_URL = "https://gitlab.com/oauth/revoke"


class GitLabOAuthProvider(OAuthProvider):
    """GitLab OAuth 프로바이더."""

    name = "gitlab"
    authorize_url = GITLAB_AUTH_URL
    token_url = GITLAB_TOKEN_URL
    user_url = GITLAB_USER_URL
    revoke_url = GITLAB_REVOKE_URL
    scopes = "api read_user read_repository write_repository"
    credentials_class = GitLabCredentials

    def parse_token_response(self, data: dict[str, Any], *, now: int) -> TokenBundle:
        created_at = data.get("created_at")
        expires_in = data.get("expires_in")
        if created_at and expires_in:
            # created_at은 발급 시각(epoch 초)이므로 절대 만료 시각을 계산할 수 있음
            expires_at = to_seconds(created_at) + to_seconds(expires_in)
        elif expires_in:
            expires_at = now + to_seconds(expires_in)
        else:
            expires_at = 0
        return TokenBundle(
            access_token=data["access_token"],
            refresh_token=data.get("refresh_token") or "",
            expires_at=expires_at,
        )

    async def revoke(
        self,
        *,
        client: "httpx.AsyncClient",
        access_token: str,
        refresh_token: str | None,
        credentials: "ClientCredentials",
    ) -> None:
        response = await client.post(
            self.revoke_url,
            headers={"Content-Type": FORM_CONTENT_TYPE},
            data={
                "token": access_token,
                "client_id": credentials.client_id,
                "client_secret": credentials.client_secret,
            },
        )
        if not response.is_success:
            raise TokenRevocationError(
                self.name, f"GitLab revoke failed: {response.status_code} {response.text}"
            )
