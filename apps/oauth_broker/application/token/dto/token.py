"""Provider Token DTOs."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RefreshTokenRequest:
    """프로바이더 토큰 갱신 요청."""

    provider: str
    refresh_token: str | None = None


@dataclass(frozen=True, slots=True)
class RevokeTokenRequest:
    """프로바이더 토큰 폐기 요청."""

    provider: str
    access_token: str | None = None
    refresh_token: str | None = None
