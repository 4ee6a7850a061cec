"""Redirect URL Utilities.

콜백 성공 시 호출자 redirect URL에 토큰을 쿼리 파라미터로 덧붙입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

if TYPE_CHECKING:
    from apps.oauth_broker.application.oauth.dto import TokenBundle


def append_query_params(url: str, params: Mapping[str, str]) -> str:
    """URL 쿼리에 파라미터 설정.

    같은 이름의 기존 파라미터는 교체하고 나머지 쿼리와 fragment는 유지합니다.
    """
    parts = urlsplit(url)
    query = [
        (key, value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
        if key not in params
    ]
    query.extend(params.items())
    return urlunsplit(parts._replace(query=urlencode(query)))


def build_token_redirect_url(redirect: str, *, provider: str, tokens: "TokenBundle") -> str:
    """저장된 redirect URL + access_token/refresh_token/expires_at/provider."""
    return append_query_params(
        redirect,
        {
            "access_token": tokens.access_token,
            "refresh_token": tokens.refresh_token,
            "expires_at": str(tokens.expires_at),
            "provider": provider,
        },
    )
