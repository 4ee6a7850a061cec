"""Logging configuration.

- text: 로컬 개발용 한 줄 포맷
- json: ecs_logging 기반 ECS JSON (수집기 연동용)

토큰/시크릿/인가 코드는 로그에 남기지 않습니다.
extra 필드와 access log의 쿼리 문자열을 모두 마스킹합니다.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Any

import ecs_logging

TEXT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

MASK_PLACEHOLDER = "***"
MASK_PRESERVE_PREFIX = 4
MASK_MIN_LENGTH = 12

SENSITIVE_FIELD_PATTERNS = ("token", "secret", "password", "authorization")
SENSITIVE_FIELD_NAMES = frozenset({"code"})

# 콜백 리다이렉트/요청 URL에 실리는 값
SENSITIVE_QUERY_PARAMS = ("access_token", "refresh_token", "code", "state", "client_secret")
_SENSITIVE_QUERY_RE = re.compile(
    r"(?<=[?&])(?P<key>(?:" + "|".join(SENSITIVE_QUERY_PARAMS) + r"))=(?P<value>[^&\s\"']+)"
)

EXCLUDED_LOG_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
        "asctime",
    }
)


def _is_sensitive_key(key: str) -> bool:
    key_lower = key.lower()
    if key_lower in SENSITIVE_FIELD_NAMES:
        return True
    return any(pattern in key_lower for pattern in SENSITIVE_FIELD_PATTERNS)


def _mask_value(value: Any) -> str:
    if value is None:
        return MASK_PLACEHOLDER
    str_value = str(value)
    if len(str_value) <= MASK_MIN_LENGTH:
        return MASK_PLACEHOLDER
    return f"{str_value[:MASK_PRESERVE_PREFIX]}{MASK_PLACEHOLDER}"


def mask_sensitive_data(data: dict[str, Any]) -> dict[str, Any]:
    """민감한 키의 값을 마스킹한 사본 반환 (중첩 dict 포함)."""
    result = {}
    for key, value in data.items():
        if _is_sensitive_key(key):
            result[key] = _mask_value(value)
        elif isinstance(value, dict):
            result[key] = mask_sensitive_data(value)
        else:
            result[key] = value
    return result


def mask_query_string(text: str) -> str:
    """문자열 안의 `access_token=...`, `code=...` 등 쿼리 값 마스킹."""
    return _SENSITIVE_QUERY_RE.sub(lambda m: f"{m.group('key')}={MASK_PLACEHOLDER}", text)


class SensitiveQueryFilter(logging.Filter):
    """로그 메시지의 민감한 쿼리 파라미터 값을 가립니다.

    uvicorn access log는 요청 경로를 args로 넘기므로 포맷 후 치환합니다.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = mask_query_string(message)
        if masked != message:
            record.msg = masked
            record.args = ()
        return True


class SensitiveExtraFilter(logging.Filter):
    """extra로 전달된 토큰/시크릿/인가 코드 필드를 마스킹합니다."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in list(record.__dict__.items()):
            if key in EXCLUDED_LOG_RECORD_ATTRS:
                continue
            if _is_sensitive_key(key):
                setattr(record, key, _mask_value(value))
            elif isinstance(value, dict):
                setattr(record, key, mask_sensitive_data(value))
        return True


class ServiceContextFilter(logging.Filter):
    """ECS service.* 필드 추가."""

    def __init__(self, service_name: str, environment: str) -> None:
        super().__init__()
        self.service = {"name": service_name, "environment": environment}

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = dict(self.service)
        return True


def setup_logging(
    level: str = "INFO",
    *,
    log_format: str = "text",
    service_name: str = "oauth-broker",
    environment: str = "local",
) -> None:
    """애플리케이션 로깅을 설정합니다."""
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(SensitiveQueryFilter())
    handler.addFilter(SensitiveExtraFilter())
    if log_format == "json":
        # ECS JSON 포맷터
        handler.setFormatter(ecs_logging.StdlibFormatter())
        handler.addFilter(ServiceContextFilter(service_name, environment))
    else:
        handler.setFormatter(logging.Formatter(TEXT_LOG_FORMAT))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[handler],
    )

    # uvicorn access log는 자체 핸들러로 출력되므로 logger에 직접 필터 적용
    access_logger = logging.getLogger("uvicorn.access")
    if not any(isinstance(f, SensitiveQueryFilter) for f in access_logger.filters):
        access_logger.addFilter(SensitiveQueryFilter())

    # httpx 요청 로그는 URL 쿼리(토큰 등)를 포함할 수 있으므로 레벨 조정
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
