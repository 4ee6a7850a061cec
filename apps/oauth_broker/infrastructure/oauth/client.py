"""OAuth Client Implementation.

OAuthProviderGateway 포트의 구현체입니다.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qsl

import httpx

from apps.oauth_broker.application.oauth.exceptions import (
    OAuthProviderError,
    ProviderNotConfiguredError,
    ProviderNotFoundError,
    TokenExchangeError,
    TokenRefreshError,
    TokenRevocationError,
)

if TYPE_CHECKING:
    from apps.oauth_broker.application.oauth.dto import TokenBundle
    from apps.oauth_broker.infrastructure.oauth.credentials import ClientCredentials
    from apps.oauth_broker.infrastructure.oauth.providers import OAuthProvider
    from apps.oauth_broker.infrastructure.oauth.registry import ProviderRegistry

logger = logging.getLogger(__name__)


def parse_token_payload(response: httpx.Response) -> dict[str, Any]:
    """토큰 응답 body를 dict로 파싱.

    content-type이 JSON이 아니면 form-encoded로 간주합니다
    (GitHub은 Accept 헤더가 없으면 form 응답을 보냄).
    """
    content_type = response.headers.get("content-type", "")
    if "application/json" in content_type:
        payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError("token response is not a JSON object")
        return payload
    return dict(parse_qsl(response.text, keep_blank_values=True))


class OAuthClientImpl:
    """OAuth 클라이언트 구현체.

    OAuthProviderGateway 구현체. 업스트림 호출은 재시도하지 않습니다.
    """

    def __init__(
        self,
        registry: "ProviderRegistry",
        timeout_seconds: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            registry: OAuth 프로바이더 레지스트리
            timeout_seconds: 업스트림 호출 타임아웃 (설정에서 주입)
            transport: httpx transport (테스트용 MockTransport 주입)
        """
        self._registry = registry
        self._timeout = timeout_seconds
        self._transport = transport

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    def _get(self, provider: str) -> "OAuthProvider":
        oauth_provider = self._registry.get(provider)
        if oauth_provider is None:
            raise ProviderNotFoundError(provider)
        return oauth_provider

    def supports(self, provider: str) -> bool:
        return self._registry.get(provider) is not None

    def get_authorization_url(self, provider: str, *, redirect_uri: str, state: str) -> str:
        """인증 URL 생성."""
        oauth_provider = self._get(provider)
        credentials = oauth_provider.credentials()
        if not credentials.is_configured:
            logger.error("OAuth provider not configured", extra={"provider": provider})
            raise ProviderNotConfiguredError(provider)

        return oauth_provider.build_authorization_url(
            client_id=credentials.client_id,
            redirect_uri=redirect_uri,
            state=state,
        )

    async def exchange_code(self, provider: str, *, code: str, redirect_uri: str) -> "TokenBundle":
        """인가 코드로 토큰 교환."""
        oauth_provider = self._get(provider)
        credentials = oauth_provider.credentials()
        body = oauth_provider.build_exchange_body(
            code=code,
            redirect_uri=redirect_uri,
            credentials=credentials,
        )
        return await self._request_tokens(
            oauth_provider, body, credentials, error_cls=TokenExchangeError
        )

    async def refresh(self, provider: str, *, refresh_token: str) -> "TokenBundle":
        """리프레시 토큰으로 토큰 갱신."""
        oauth_provider = self._get(provider)
        credentials = oauth_provider.credentials()
        body = oauth_provider.build_refresh_body(
            refresh_token=refresh_token,
            credentials=credentials,
        )
        return await self._request_tokens(
            oauth_provider, body, credentials, error_cls=TokenRefreshError
        )

    async def revoke(
        self,
        provider: str,
        *,
        access_token: str,
        refresh_token: str | None = None,
    ) -> None:
        """토큰 폐기 (프로토콜은 프로바이더에 위임)."""
        oauth_provider = self._get(provider)
        credentials = oauth_provider.credentials()
        try:
            async with self._http_client() as client:
                await oauth_provider.revoke(
                    client=client,
                    access_token=access_token,
                    refresh_token=refresh_token,
                    credentials=credentials,
                )
        except TokenRevocationError as e:
            logger.warning(
                "OAuth revoke rejected",
                extra={"provider": provider, "error": e.reason},
            )
            raise
        except httpx.HTTPError as e:
            logger.warning(f"OAuth revoke request failed: {e!r}", extra={"provider": provider})
            raise TokenRevocationError(provider, str(e) or type(e).__name__) from e

    async def _request_tokens(
        self,
        oauth_provider: "OAuthProvider",
        body: dict[str, str],
        credentials: "ClientCredentials",
        *,
        error_cls: type[OAuthProviderError],
    ) -> "TokenBundle":
        """토큰 엔드포인트 POST 후 TokenBundle로 정규화."""
        provider = oauth_provider.name
        try:
            async with self._http_client() as client:
                response = await client.post(
                    oauth_provider.token_url,
                    data=body,
                    headers=oauth_provider.token_headers(credentials),
                )
        except httpx.HTTPError as e:
            logger.warning(f"OAuth token request failed: {e!r}", extra={"provider": provider})
            raise error_cls(provider, str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.warning(
                f"OAuth API error: {response.status_code}",
                extra={"provider": provider, "status_code": response.status_code},
            )
            raise error_cls(provider, f"{response.status_code} {response.text}")

        try:
            payload = parse_token_payload(response)
        except ValueError as e:
            raise error_cls(provider, f"malformed token response: {e}") from e

        # 일부 프로바이더는 200 응답 body의 error 필드로 실패를 알림
        if payload.get("error"):
            raise error_cls(
                provider,
                f"{payload['error']} - {payload.get('error_description') or ''}",
            )
        access_token = payload.get("access_token")
        if not access_token or not isinstance(access_token, str):
            raise error_cls(provider, "missing access_token in token response")
        refresh_token = payload.get("refresh_token")
        if refresh_token is not None and not isinstance(refresh_token, str):
            raise error_cls(provider, "malformed token response: refresh_token is not a string")

        try:
            return oauth_provider.parse_token_response(payload, now=int(time.time()))
        except (TypeError, ValueError, OverflowError) as e:
            raise error_cls(provider, f"malformed token response: {e}") from e
