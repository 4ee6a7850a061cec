"""OAuthProviderGateway Port.

OAuth 프로바이더(GitHub, GitLab, Bitbucket)와의 통신을 담당하는 Gateway 인터페이스입니다.
"""

from typing import Protocol

from apps.oauth_broker.application.oauth.dto import TokenBundle


class OAuthProviderGateway(Protocol):
    """OAuth 프로바이더 Gateway 인터페이스.

    구현체:
        - OAuthClientImpl (infrastructure/oauth/)
    """

    def supports(self, provider: str) -> bool:
        """등록된 프로바이더인지 확인."""
        ...

    def get_authorization_url(self, provider: str, *, redirect_uri: str, state: str) -> str:
        """인증 URL 생성.

        Raises:
            ProviderNotConfiguredError: client id 미설정
        """
        ...

    async def exchange_code(self, provider: str, *, code: str, redirect_uri: str) -> TokenBundle:
        """인가 코드로 토큰 교환.

        Raises:
            TokenExchangeError: 프로바이더 오류
        """
        ...

    async def refresh(self, provider: str, *, refresh_token: str) -> TokenBundle:
        """리프레시 토큰으로 토큰 갱신.

        Raises:
            TokenRefreshError: 프로바이더 오류
        """
        ...

    async def revoke(
        self,
        provider: str,
        *,
        access_token: str,
        refresh_token: str | None = None,
    ) -> None:
        """토큰 폐기.

        Raises:
            TokenRevocationError: 프로바이더 오류
        """
        ...
