"""OAuth Router.

OAuth 중계 엔드포인트를 통합합니다.
"""

from fastapi import APIRouter

from apps.oauth_broker.presentation.http.controllers.oauth.authorize import (
    router as authorize_router,
)
from apps.oauth_broker.presentation.http.controllers.oauth.callback import (
    router as callback_router,
)
from apps.oauth_broker.presentation.http.controllers.oauth.refresh import (
    router as refresh_router,
)
from apps.oauth_broker.presentation.http.controllers.oauth.revoke import (
    router as revoke_router,
)

router = APIRouter()

router.include_router(authorize_router)
router.include_router(callback_router)
router.include_router(refresh_router)
router.include_router(revoke_router)
