"""Root Router.

최상위 라우터로, 모든 하위 라우터를 통합합니다.
"""

from fastapi import APIRouter

from apps.oauth_broker.presentation.http.controllers.general.router import (
    router as general_router,
)
from apps.oauth_broker.presentation.http.controllers.oauth.router import (
    router as oauth_router,
)

router = APIRouter()

# /health는 /{provider} 패턴보다 먼저 매칭되어야 함
router.include_router(general_router, tags=["general"])
router.include_router(oauth_router, tags=["oauth"])
