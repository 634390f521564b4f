"""충돌 해소 스케줄링 유스케이스.

정밀 검출 결과를 PROCEED/WAIT 명령 쌍으로 변환하여
디스패치 담당 외부 협력자에게 넘길 명령 목록을 만든다.
"""

from collections.abc import Sequence
import logging

from agv_conflict_resolver.domain.entities.agv import Agv
from agv_conflict_resolver.domain.events.conflict_events import (
    ScheduleIssuedEvent,
)
from agv_conflict_resolver.domain.services.conflict_resolver import (
    resolve_collision,
)
from agv_conflict_resolver.domain.value_objects.collision import (
    CollisionEvent,
    ScheduleAction,
)
from agv_conflict_resolver.usecase.detect_collisions import DetectCollisions
from agv_conflict_resolver.usecase.ports.agv_repository import AgvRepository
from agv_conflict_resolver.usecase.ports.config_port import ResolverConfig
from agv_conflict_resolver.usecase.ports.event_publisher import EventPublisher

logger = logging.getLogger(__name__)


class ScheduleConflicts:
    """충돌 해소 스케줄링 유스케이스.

    Args:
        detector: 정밀 충돌 검출 유스케이스.
        agv_repo: AGV 저장소.
        event_publisher: 이벤트 발행자.
    """

    def __init__(
        self,
        detector: DetectCollisions,
        agv_repo: AgvRepository,
        event_publisher: EventPublisher,
    ) -> None:
        self._detector = detector
        self._agv_repo = agv_repo
        self._event_publisher = event_publisher

    def resolve_collision(
        self, event: CollisionEvent, safe_gap: float
    ) -> tuple[ScheduleAction, ScheduleAction]:
        """충돌 이벤트 하나를 (PROCEED, WAIT) 명령 쌍으로 변환한다.

        Args:
            event: 충돌 이벤트.
            safe_gap: 최소 시간 간격 (s).

        Returns:
            (PROCEED 명령, WAIT 명령) 튜플.
        """
        proceed, wait = resolve_collision(event, safe_gap)
        for action in (proceed, wait):
            self._event_publisher.publish(
                ScheduleIssuedEvent(
                    agv_id=action.agv_id,
                    command=action.command,
                    wait_time=action.effective_wait_time,
                )
            )
        return proceed, wait

    def detect_and_schedule(
        self,
        agvs: Sequence[Agv],
        time_tolerance: float,
        radius: float,
        safe_gap: float,
    ) -> list[ScheduleAction]:
        """KD-tree 정밀 검출 후 모든 충돌을 명령 쌍으로 변환한다.

        Args:
            agvs: 차량 목록.
            time_tolerance: 도착 시간 차 허용치 (s).
            radius: 이웃 탐색 반경 (m).
            safe_gap: 최소 시간 간격 (s).

        Returns:
            이벤트당 두 개씩 나열된 ScheduleAction 목록.
        """
        events = self._detector.detect_with_index(
            agvs, time_tolerance, radius
        )

        actions: list[ScheduleAction] = []
        for event in events:
            actions.extend(self.resolve_collision(event, safe_gap))

        logger.info(
            "Scheduled %d actions for %d collisions", len(actions), len(events)
        )
        return actions

    def schedule_registered_fleet(
        self, config: ResolverConfig
    ) -> list[ScheduleAction]:
        """저장소에 등록된 모든 차량을 대상으로 스케줄링한다.

        Args:
            config: 검출/해소 파라미터.

        Returns:
            ScheduleAction 목록.
        """
        return self.detect_and_schedule(
            self._agv_repo.list_all(),
            config.time_tolerance,
            config.search_radius,
            config.safe_gap,
        )
