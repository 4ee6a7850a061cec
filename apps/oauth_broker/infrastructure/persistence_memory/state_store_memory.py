"""In-Memory State Store.

PendingAuthorizationStore 포트의 구현체입니다.
프로세스 로컬 저장소이므로 단일 인스턴스 배포를 전제로 합니다.
"""

from __future__ import annotations

import logging
import secrets
import threading
import time
from typing import Callable

from apps.oauth_broker.application.oauth.exceptions import InvalidStateError
from apps.oauth_broker.application.oauth.ports import PendingAuthorization

logger = logging.getLogger(__name__)

STATE_TOKEN_BYTES = 24
DEFAULT_STATE_TTL_SECONDS = 600


class InMemoryStateStore:
    """메모리 기반 OAuth 상태 저장소.

    PendingAuthorizationStore 구현체.
    만료는 조회 시점에 직접 판단하므로 sweep 주기와 무관하게 TTL이 지켜집니다.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_STATE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, PendingAuthorization] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def _is_expired(self, entry: PendingAuthorization, now: float) -> bool:
        return entry.created_at is not None and now - entry.created_at > self._ttl

    def generate(self) -> str:
        """state 토큰 생성 (24바이트 난수, hex)."""
        return secrets.token_hex(STATE_TOKEN_BYTES)

    def put(self, state: str, entry: PendingAuthorization) -> None:
        """상태 저장."""
        if entry.created_at is None:
            entry.created_at = self._clock()
        with self._lock:
            self._entries[state] = entry

    def take(self, state: str, *, provider: str) -> PendingAuthorization | None:
        """상태 조회 및 삭제."""
        with self._lock:
            entry = self._entries.get(state)
            if entry is None:
                return None
            if self._is_expired(entry, self._clock()):
                del self._entries[state]
                return None
            if entry.provider != provider:
                # 다른 프로바이더의 플로우는 소비하지 않음
                raise InvalidStateError("state provider mismatch")
            del self._entries[state]
            return entry

    def sweep(self) -> int:
        """TTL이 지난 항목 제거."""
        with self._lock:
            now = self._clock()
            expired = [s for s, e in self._entries.items() if self._is_expired(e, now)]
            for state in expired:
                del self._entries[state]
        return len(expired)
