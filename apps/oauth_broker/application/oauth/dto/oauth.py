"""OAuth DTOs."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TokenBundle:
    """프로바이더와 무관하게 정규화된 토큰 묶음.

    expires_at은 epoch 초이며, 0은 만료 없음(또는 미지정)을 뜻합니다.
    """

    access_token: str
    refresh_token: str = ""
    expires_at: int = 0


@dataclass(frozen=True, slots=True)
class OAuthAuthorizeRequest:
    """OAuth 인증 시작 요청."""

    provider: str
    redirect: str | None = None


@dataclass(frozen=True, slots=True)
class OAuthAuthorizeResponse:
    """OAuth 인증 시작 응답."""

    authorization_url: str
    state: str


@dataclass(frozen=True, slots=True)
class OAuthCallbackRequest:
    """OAuth 콜백 요청."""

    provider: str
    code: str | None = None
    state: str | None = None
    error: str | None = None


@dataclass(frozen=True, slots=True)
class OAuthCallbackResponse:
    """OAuth 콜백 응답.

    redirect는 인증 시작 시 저장된 호출자 URL 원본입니다.
    """

    redirect: str
    provider: str
    tokens: TokenBundle
