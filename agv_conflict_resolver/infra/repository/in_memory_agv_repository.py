"""인메모리 AGV 저장소 구현체."""

import threading

from agv_conflict_resolver.domain.entities.agv import Agv
from agv_conflict_resolver.domain.exceptions import AgvNotFoundError
from agv_conflict_resolver.usecase.ports.agv_repository import AgvRepository


class InMemoryAgvRepository(AgvRepository):
    """AgvRepository의 인메모리 구현체.

    dict 기반으로 AGV를 메모리에 저장한다.
    모든 접근은 Lock으로 스레드 안전성을 보장한다.
    저장된 AGV 자체의 변경(위치, 경로 캐시)은 보호하지 않는다.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._agvs: dict[str, Agv] = {}

    def add(self, agv: Agv) -> None:
        with self._lock:
            self._agvs[agv.agv_id] = agv

    def get(self, agv_id: str) -> Agv:
        with self._lock:
            agv = self._agvs.get(agv_id)
        if agv is None:
            raise AgvNotFoundError(
                f"AGV [{agv_id}]가 등록되어 있지 않습니다."
            )
        return agv

    def find(self, agv_id: str) -> Agv | None:
        with self._lock:
            return self._agvs.get(agv_id)

    def list_all(self) -> list[Agv]:
        with self._lock:
            return list(self._agvs.values())

    def remove(self, agv_id: str) -> None:
        with self._lock:
            self._agvs.pop(agv_id, None)

    def clear(self) -> None:
        with self._lock:
            self._agvs.clear()
