"""AGV 저장소 포트 인터페이스.

식별자 → AGV 조회 테이블을 추상화한다.
충돌 결과 값은 AGV 식별자만 보관하므로 실제 차량은 여기서 조회한다.
"""

from abc import ABC, abstractmethod

from agv_conflict_resolver.domain.entities.agv import Agv


class AgvRepository(ABC):
    """AGV 저장소 인터페이스."""

    @abstractmethod
    def add(self, agv: Agv) -> None:
        """AGV를 등록한다. 같은 식별자가 있으면 교체한다.

        Args:
            agv: 등록할 AGV.
        """

    @abstractmethod
    def get(self, agv_id: str) -> Agv:
        """AGV를 조회한다.

        Args:
            agv_id: AGV 식별자.

        Returns:
            등록된 AGV.

        Raises:
            AgvNotFoundError: 등록되지 않은 식별자일 때.
        """

    @abstractmethod
    def find(self, agv_id: str) -> Agv | None:
        """AGV를 조회한다. 없으면 None."""

    @abstractmethod
    def list_all(self) -> list[Agv]:
        """등록 순서대로 모든 AGV를 반환한다."""

    @abstractmethod
    def remove(self, agv_id: str) -> None:
        """AGV 등록을 해제한다.

        Args:
            agv_id: AGV 식별자.
        """

    @abstractmethod
    def clear(self) -> None:
        """모든 AGV 등록을 해제한다."""
