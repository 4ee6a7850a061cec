"""HTTP utilities."""

from apps.oauth_broker.presentation.http.utils.redirect import (
    append_query_params,
    build_token_redirect_url,
)

__all__ = ["append_query_params", "build_token_redirect_url"]
