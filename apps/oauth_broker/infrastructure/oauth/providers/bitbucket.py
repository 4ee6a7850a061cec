"""Bitbucket OAuth Provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from apps.oauth_broker.application.oauth.dto import TokenBundle
from apps.oauth_broker.application.oauth.exceptions import TokenRevocationError
from apps.oauth_broker.infrastructure.oauth.credentials import BitbucketCredentials
from apps.oauth_broker.infrastructure.oauth.providers.base import (
    FORM_CONTENT_TYPE,
    OAuthProvider,
    basic_auth_header,
    to_seconds,
)

if TYPE_CHECKING:
    import httpx

    from apps.oauth_broker.infrastructure.oauth.credentials import ClientCredentials

BITBUCKET_AUTH_URL = "https://bitbucket.org/site/oauth2/authorize"
BITBUCKET_TOKEN_URL = "https://bitbucket.org/site/oauth2/access_token"
BITBUCKET_USER_URL = "https://api.bitbucket.org/2.0/user"
BITBUCKET_REVOKE_URL = "https://bitbucket.org/site/oauth2/revoke_token"


class BitbucketOAuthProvider(OAuthProvider):
    """Bitbucket OAuth 프로바이더.

    토큰 엔드포인트는 Basic 인증을 사용합니다.
    갱신 요청 body에는 client 자격 증명을 넣지 않습니다 (다른 프로바이더와 다름).
    """

    name = "bitbucket"
    authorize_url = BITBUCKET_AUTH_URL
    token_url = BITBUCKET_TOKEN_URL
    user_url = BITBUCKET_USER_URL
    revoke_url = BITBUCKET_REVOKE_URL
    scopes = "account repository:admin pullrequest:write webhook"
    credentials_class = BitbucketCredentials

    def build_auth_header(self, credentials: "ClientCredentials") -> str | None:
        return basic_auth_header(credentials.client_id, credentials.client_secret)

    def build_refresh_body(
        self,
        *,
        refresh_token: str,
        credentials: "ClientCredentials",
    ) -> dict[str, str]:
        return {
            "grant_type": "refresh_token",
            "refresh_token": refresh_token,
        }

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
        response = await client.post(
            self.revoke_url,
            headers={
                "Authorization": basic_auth_header(
                    credentials.client_id, credentials.client_secret
                ),
                "Content-Type": FORM_CONTENT_TYPE,
            },
            data={"token": access_token, "token_type_hint": "access_token"},
        )
        if not response.is_success:
            raise TokenRevocationError(
                self.name, f"Bitbucket revoke failed: {response.status_code} {response.text}"
            )
