"""OAuth Provider Base Class."""

from __future__ import annotations

import base64
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

if TYPE_CHECKING:
    import httpx

    from apps.oauth_broker.application.oauth.dto import TokenBundle
    from apps.oauth_broker.infrastructure.oauth.credentials import ClientCredentials

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_ACCEPT = "application/json"


def basic_auth_header(client_id: str, client_secret: str) -> str:
    """client_id:client_secret 기반 HTTP Basic 인증 헤더 값."""
    raw = f"{client_id}:{client_secret}".encode()
    return "Basic " + base64.b64encode(raw).decode()


def to_seconds(value: Any) -> int:
    """토큰 응답의 숫자 필드를 정수 초로 변환 (form 응답은 문자열)."""
    return int(float(value))


class OAuthProvider(ABC):
    """OAuth 프로바이더 추상 클래스.

    프로바이더별 차이(만료 계산, 갱신 요청 형태, 폐기 프로토콜)는
    하위 클래스에만 둡니다.
    """

    name: str
    authorize_url: str
    token_url: str
    user_url: str
    revoke_url: str
    scopes: str
    credentials_class: type["ClientCredentials"]

    def credentials(self) -> "ClientCredentials":
        """현재 환경변수 기준 client 자격 증명."""
        return self.credentials_class()

    def build_authorization_url(self, *, client_id: str, redirect_uri: str, state: str) -> str:
        """인증 URL 생성."""
        params = {
            "client_id": client_id,
            "redirect_uri": redirect_uri,
            "scope": self.scopes,
            "state": state,
            "response_type": "code",
        }
        return f"{self.authorize_url}?{urlencode(params)}"

    def build_auth_header(self, credentials: "ClientCredentials") -> str | None:
        """토큰 엔드포인트용 Authorization 헤더. 기본은 body 자격 증명만 사용."""
        return None

    def token_headers(self, credentials: "ClientCredentials") -> dict[str, str]:
        """토큰 엔드포인트 요청 헤더."""
        headers = {"Content-Type": FORM_CONTENT_TYPE, "Accept": JSON_ACCEPT}
        auth_header = self.build_auth_header(credentials)
        if auth_header:
            headers["Authorization"] = auth_header
        return headers

    def build_exchange_body(
        self,
        *,
        code: str,
        redirect_uri: str,
        credentials: "ClientCredentials",
    ) -> dict[str, str]:
        """인가 코드 교환 요청 body."""
        return {
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": redirect_uri,
            "client_id": credentials.client_id,
            "client_secret": credentials.client_secret,
        }

    def build_refresh_body(
        self,
        *,
        refresh_token: str,
        credentials: "ClientCredentials",
    ) -> dict[str, str]:
        """토큰 갱신 요청 body."""
        return {
            "grant_type": "refresh_token",
            "refresh_token": refresh_token,
            "client_id": credentials.client_id,
            "client_secret": credentials.client_secret,
        }

    @abstractmethod
    def parse_token_response(self, data: dict[str, Any], *, now: int) -> "TokenBundle":
        """토큰 엔드포인트 응답을 TokenBundle로 정규화.

        Args:
            data: JSON 또는 form 응답을 파싱한 dict
            now: 현재 epoch 초
        """
        raise NotImplementedError

    @abstractmethod
    async def revoke(
        self,
        *,
        client: "httpx.AsyncClient",
        access_token: str,
        refresh_token: str | None,
        credentials: "ClientCredentials",
    ) -> None:
        """토큰 폐기.

        Raises:
            TokenRevocationError: 프로바이더가 폐기를 거부함
        """
        raise NotImplementedError
