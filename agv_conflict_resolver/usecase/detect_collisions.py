"""차량군 정밀 충돌 검출 유스케이스.

공간 인덱스로 후보 쌍을 추린 뒤 경로 교차 기반 검출기를 적용한다.
"""

from collections.abc import Sequence
import logging

from agv_conflict_resolver.domain.entities.agv import Agv
from agv_conflict_resolver.domain.events.conflict_events import (
    CollisionDetectedEvent,
)
from agv_conflict_resolver.domain.services.exact_detector import (
    detect_collision_between,
)
from agv_conflict_resolver.domain.value_objects.collision import (
    CollisionEvent,
)
from agv_conflict_resolver.usecase.candidate_pairs import (
    all_pairs,
    indexed_pairs,
)
from agv_conflict_resolver.usecase.ports.event_publisher import EventPublisher
from agv_conflict_resolver.usecase.ports.spatial_index import SpatialIndex

logger = logging.getLogger(__name__)


class DetectCollisions:
    """차량군 정밀 충돌 검출 유스케이스.

    후보 쌍 선정 → 경로 교차 검출 → 이벤트 발행.

    Args:
        spatial_index: 후보 쌍 선정용 공간 인덱스.
        event_publisher: 이벤트 발행자.
    """

    def __init__(
        self,
        spatial_index: SpatialIndex,
        event_publisher: EventPublisher,
    ) -> None:
        self._spatial_index = spatial_index
        self._event_publisher = event_publisher

    def detect_between(
        self, agv: Agv, other: Agv, time_tolerance: float
    ) -> CollisionEvent | None:
        """두 AGV 사이의 잠재 충돌을 검출한다.

        Args:
            agv: 첫 번째 AGV.
            other: 두 번째 AGV.
            time_tolerance: 도착 시간 차 허용치 (s).

        Returns:
            CollisionEvent 또는 None.

        Raises:
            InvalidSpeedError: 어느 한 차량의 속도가 0 이하일 때.
        """
        event = detect_collision_between(agv, other, time_tolerance)
        if event is not None:
            logger.debug(
                "Collision %s-%s at (%.3f, %.3f), dt=%.3f",
                event.agv1_id, event.agv2_id,
                event.point.x, event.point.y, event.delta_t,
            )
            self._event_publisher.publish(
                CollisionDetectedEvent(
                    agv1_id=event.agv1_id,
                    agv2_id=event.agv2_id,
                    x=event.point.x,
                    y=event.point.y,
                    delta_t=event.delta_t,
                )
            )
        return event

    def detect_with_index(
        self,
        agvs: Sequence[Agv],
        time_tolerance: float,
        radius: float,
    ) -> list[CollisionEvent]:
        """공간 인덱스로 radius 이내 쌍만 검사한다.

        Args:
            agvs: 차량 목록.
            time_tolerance: 도착 시간 차 허용치 (s).
            radius: 이웃 탐색 반경 (m).

        Returns:
            검출된 CollisionEvent 목록.
        """
        pairs = indexed_pairs(agvs, self._spatial_index, radius)
        events = self._detect_pairs(pairs, time_tolerance)
        logger.info(
            "Exact detection (index, r=%.2f): %d vehicles, "
            "%d candidate pairs, %d collisions",
            radius, len(agvs), len(pairs), len(events),
        )
        return events

    def detect_brute_force(
        self, agvs: Sequence[Agv], time_tolerance: float
    ) -> list[CollisionEvent]:
        """모든 차량 쌍을 검사한다.

        Args:
            agvs: 차량 목록.
            time_tolerance: 도착 시간 차 허용치 (s).

        Returns:
            검출된 CollisionEvent 목록.
        """
        pairs = all_pairs(agvs)
        events = self._detect_pairs(pairs, time_tolerance)
        logger.info(
            "Exact detection (all pairs): %d vehicles, %d collisions",
            len(agvs), len(events),
        )
        return events

    def _detect_pairs(
        self,
        pairs: list[tuple[Agv, Agv]],
        time_tolerance: float,
    ) -> list[CollisionEvent]:
        events: list[CollisionEvent] = []
        for agv, other in pairs:
            event = self.detect_between(agv, other, time_tolerance)
            if event is not None:
                events.append(event)
        return events
