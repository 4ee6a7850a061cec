"""Application Settings.

env_prefix="OAUTH_BROKER_" 사용. 배포 호환을 위해 PORT, CALLBACK_BASE_URL 등
접두사 없는 환경변수도 함께 허용합니다.

프로바이더 client id/secret은 여기 두지 않습니다
(infrastructure/oauth/credentials.py, 호출 시점마다 조회).
"""

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정.

    예시:
        CALLBACK_BASE_URL → callback_base_url
        OAUTH_BROKER_STATE_TTL_SECONDS → state_ttl_seconds
    """

    # Service
    app_name: str = "OAuth Broker"
    service_name: str = "oauth-broker"
    environment: str = Field(
        "local",
        validation_alias=AliasChoices("ENVIRONMENT", "OAUTH_BROKER_ENVIRONMENT"),
    )
    port: int = Field(
        3000,
        validation_alias=AliasChoices("PORT", "OAUTH_BROKER_PORT"),
    )
    log_level: Optional[str] = None
    log_format: str = Field("text", description="text | json (ECS)")

    # OAuth
    callback_base_url: str = Field(
        "http://localhost:3000",
        validation_alias=AliasChoices("CALLBACK_BASE_URL", "OAUTH_BROKER_CALLBACK_BASE_URL"),
        description="콜백 URL 기준 주소 ({base}/{provider}/callback)",
    )
    state_ttl_seconds: int = 600
    state_sweep_interval_seconds: int = 300
    upstream_timeout_seconds: float = 10.0

    # CORS
    cors_origins: str = ""

    # OpenTelemetry (prefix 없이 직접 매핑)
    otel_enabled: bool = Field(
        False,
        validation_alias=AliasChoices("OTEL_ENABLED", "OAUTH_BROKER_OTEL_ENABLED"),
    )
    otel_exporter_endpoint: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "OTEL_EXPORTER_OTLP_ENDPOINT", "OAUTH_BROKER_OTEL_EXPORTER_ENDPOINT"
        ),
    )

    model_config = SettingsConfigDict(
        env_prefix="OAUTH_BROKER_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("callback_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        """끝의 '/' 제거 ({base}/{provider}/callback 조합용)."""
        return value.rstrip("/")

    @property
    def resolved_log_level(self) -> str:
        if self.log_level:
            return self.log_level
        return "DEBUG" if self.environment == "local" else "INFO"

    @property
    def cors_origin_list(self) -> list[str]:
        if self.cors_origins:
            return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        return ["http://localhost:3000", "http://localhost:5173"]


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환 (FastAPI 공식 패턴)."""
    return Settings()
