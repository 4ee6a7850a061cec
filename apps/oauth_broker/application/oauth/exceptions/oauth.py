"""OAuth Exceptions.

HTTP 계층에서 상태 코드로 변환됩니다 (presentation/http/errors/handlers.py).
"""

from apps.oauth_broker.application.common.exceptions.base import ApplicationError


class ProviderNotFoundError(ApplicationError):
    """지원하지 않는 OAuth 프로바이더."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"unknown provider: {provider}")


class ProviderNotConfiguredError(ApplicationError):
    """프로바이더 client id가 설정되지 않음."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"{provider} not configured")


class InvalidRequestError(ApplicationError):
    """필수 파라미터 누락 등 잘못된 클라이언트 입력."""

    pass


class InvalidStateError(InvalidRequestError):
    """OAuth 상태 검증 실패."""

    def __init__(self, reason: str = "invalid or expired state") -> None:
        super().__init__(reason)


class ProviderDeniedError(InvalidRequestError):
    """프로바이더가 콜백에 error 파라미터를 담아 인가를 거부함."""

    def __init__(self, provider: str, error: str) -> None:
        self.provider = provider
        self.error = error
        super().__init__(f"OAuth error from {provider}: {error}")


class OAuthProviderError(ApplicationError):
    """OAuth 프로바이더 오류 (토큰/폐기 엔드포인트 실패)."""

    summary = "oauth provider request failed"

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        self.reason = reason
        super().__init__(f"OAuth provider error ({provider}): {reason}")


class TokenExchangeError(OAuthProviderError):
    """인가 코드 → 토큰 교환 실패."""

    summary = "token exchange failed"


class TokenRefreshError(OAuthProviderError):
    """리프레시 토큰 갱신 실패."""

    summary = "token refresh failed"


class TokenRevocationError(OAuthProviderError):
    """토큰 폐기 실패."""

    summary = "token revocation failed"
