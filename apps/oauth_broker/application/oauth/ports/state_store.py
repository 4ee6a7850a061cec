"""PendingAuthorizationStore Port.

OAuth 인증 플로우의 일회용 state 관리를 위한 저장소 인터페이스입니다.
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass
class PendingAuthorization:
    """콜백을 기다리는 인증 요청."""

    redirect: str
    provider: str
    created_at: float | None = None


class PendingAuthorizationStore(Protocol):
    """OAuth 상태 저장소 인터페이스.

    구현체:
        - InMemoryStateStore (infrastructure/persistence_memory/)

    다중 인스턴스 배포에서는 동일한 일회성/TTL 의미를 지키는
    공유 key-value 저장소 구현체로 교체합니다.
    """

    def generate(self) -> str:
        """추측 불가능한 state 토큰 생성 (hex)."""
        ...

    def put(self, state: str, entry: PendingAuthorization) -> None:
        """상태 저장. created_at이 없으면 저장소 시계 기준으로 기록."""
        ...

    def take(self, state: str, *, provider: str) -> PendingAuthorization | None:
        """상태 조회 및 삭제 (일회용, 원자적).

        Args:
            state: 상태 키
            provider: 콜백을 받은 프로바이더

        Returns:
            상태 데이터 또는 None (없거나 만료)

        Raises:
            InvalidStateError: 다른 프로바이더의 state (항목은 삭제하지 않음)
        """
        ...

    def sweep(self) -> int:
        """TTL이 지난 항목 제거.

        Returns:
            제거된 항목 수
        """
        ...
