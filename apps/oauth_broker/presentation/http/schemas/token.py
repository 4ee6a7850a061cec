"""Provider Token HTTP Schemas.

요청/응답 JSON은 camelCase 키를 사용합니다 (웹 클라이언트 계약).
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase alias 기본 모델."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RefreshTokenBody(CamelModel):
    """토큰 갱신 요청 body."""

    refresh_token: str | None = Field(None, description="프로바이더 리프레시 토큰")


class RevokeTokenBody(CamelModel):
    """토큰 폐기 요청 body."""

    access_token: str | None = Field(None, description="폐기할 액세스 토큰")
    refresh_token: str | None = Field(None, description="리프레시 토큰 (선택)")


class TokenBundleResponse(CamelModel):
    """정규화된 토큰 응답."""

    access_token: str = Field(..., description="액세스 토큰")
    refresh_token: str = Field(..., description="리프레시 토큰 (없으면 빈 문자열)")
    expires_at: int = Field(..., description="만료 시각 (epoch 초, 0은 만료 없음)")


class RevokeResponse(BaseModel):
    """토큰 폐기 응답."""

    status: str = Field("revoked", description="처리 결과")
