"""State Sweeper.

만료된 OAuth state를 주기적으로 정리하는 백그라운드 태스크입니다.
FastAPI lifespan에서 시작/종료됩니다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from apps.oauth_broker.application.oauth.ports import PendingAuthorizationStore

logger = logging.getLogger(__name__)

DEFAULT_SWEEP_INTERVAL_SECONDS = 300


class StateSweeper:
    """취소 가능한 주기 정리 태스크."""

    def __init__(
        self,
        store: "PendingAuthorizationStore",
        interval_seconds: float = DEFAULT_SWEEP_INTERVAL_SECONDS,
    ) -> None:
        self._store = store
        self._interval = interval_seconds
        self._task: Optional[asyncio.Task[None]] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """정리 루프 시작 (이미 실행 중이면 무시)."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="oauth-state-sweeper")
        logger.info("State sweeper started", extra={"interval_seconds": self._interval})

    async def stop(self) -> None:
        """정리 루프 취소 및 종료 대기."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("State sweeper stopped")

    def sweep_once(self) -> int:
        """한 번 정리하고 제거된 항목 수를 반환."""
        evicted = self._store.sweep()
        if evicted:
            logger.debug("Expired OAuth states evicted", extra={"evicted": evicted})
        return evicted

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                self.sweep_once()
            except Exception as e:
                logger.error(f"State sweep failed: {e}")
