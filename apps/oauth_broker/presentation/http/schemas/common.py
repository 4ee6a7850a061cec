"""Common HTTP Schemas."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """표준 에러 응답."""

    error: str = Field(..., description="에러 메시지")
    code: str = Field(..., description="에러 코드")
    detail: str | None = Field(None, description="업스트림 실패 상세")


class HealthResponse(BaseModel):
    """헬스체크 응답."""

    status: str = Field("ok", description="상태")
    service: str = Field(..., description="서비스 이름")
