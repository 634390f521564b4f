"""공간 인덱스 포트 인터페이스.

차량 현재 위치 기반 반경 이웃 탐색을 추상화한다.
검출 패스마다 현재 차량 스냅샷으로 다시 만든다.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from agv_conflict_resolver.domain.entities.agv import Agv


class SpatialIndex(ABC):
    """반경 이웃 탐색 인덱스 인터페이스."""

    @abstractmethod
    def build(self, agvs: Sequence[Agv]) -> None:
        """현재 차량 위치로 인덱스를 새로 만든다.

        이전 인덱스는 버려진다. 입력 시퀀스의 순서는 바꾸지 않는다.

        Args:
            agvs: 인덱싱할 차량 목록.
        """

    @abstractmethod
    def range_search(self, target: Agv, radius: float) -> list[Agv]:
        """target으로부터 radius 이내의 다른 차량을 찾는다.

        Args:
            target: 기준 차량 (결과에서 제외).
            radius: 탐색 반경 (m).

        Returns:
            반경 이내 차량 목록.
        """
