"""GitHub OAuth Provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from apps.oauth_broker.application.oauth.dto import TokenBundle
from apps.oauth_broker.application.oauth.exceptions import TokenRevocationError
from apps.oauth_broker.infrastructure.oauth.credentials import GitHubCredentials
from apps.oauth_broker.infrastructure.oauth.providers.base import (
    OAuthProvider,
    basic_auth_header,
    to_seconds,
)

if TYPE_CHECKING:
    import httpx

    from apps.oauth_broker.infrastructure.oauth.credentials import ClientCredentials

GITHUB_AUTH_URL = "https://github.com/login/oauth/authorize"
GITHUB_TOKEN_URL = "https://github.com/login/oauth/access_token"
GITHUB_USER_URL = "https://api.github.com/user"
GITHUB_REVOKE_URL = "https://api.github.com/applications/{client_id}/token"


class GitHubOAuthProvider(OAuthProvider):
    """GitHub OAuth 프로바이더.

    GitHub OAuth App은 기본적으로 refresh token을 발급하지 않고 토큰도 만료되지 않습니다.
    """

    name = "github"
    authorize_url = GITHUB_AUTH_URL
    token_url = GITHUB_TOKEN_URL
    user_url = GITHUB_USER_URL
    revoke_url = GITHUB_REVOKE_URL
    scopes = "repo,user:email,admin:repo_hook"
    credentials_class = GitHubCredentials

    def parse_token_response(self, data: dict[str, Any], *, now: int) -> TokenBundle:
        expires_in = data.get("expires_in")
        return TokenBundle(
            access_token=data["access_token"],
            refresh_token=data.get("refresh_token") or "",
            expires_at=now + to_seconds(expires_in) if expires_in else 0,
        )

    async def revoke(
        self,
        *,
        client: "httpx.AsyncClient",
        access_token: str,
        refresh_token: str | None,
        credentials: "ClientCredentials",
    ) -> None:
        # client 단위 엔드포인트에 Basic 인증 + JSON body로 DELETE
        response = await client.request(
            "DELETE",
            self.revoke_url.format(client_id=credentials.client_id),
            headers={
                "Authorization": basic_auth_header(
                    credentials.client_id, credentials.client_secret
                ),
                "Accept": "application/vnd.github+json",
            },
            json={"access_token": access_token},
        )
        if not response.is_success and response.status_code != 204:
            raise TokenRevocationError(
                self.name, f"GitHub revoke failed: {response.status_code} {response.text}"
            )
