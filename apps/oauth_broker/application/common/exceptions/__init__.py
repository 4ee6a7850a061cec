"""Application Exceptions.

공통 예외만 포함합니다. OAuth 예외는 직접 import하세요:
  - apps.oauth_broker.application.oauth.exceptions.*
"""

from apps.oauth_broker.application.common.exceptions.base import ApplicationError

__all__ = ["ApplicationError"]
