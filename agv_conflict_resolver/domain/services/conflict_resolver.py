"""충돌 이벤트를 스케줄 명령으로 변환하는 해소 정책."""

from agv_conflict_resolver.domain.enums import ScheduleCommand
from agv_conflict_resolver.domain.value_objects.collision import (
    CollisionEvent,
    ScheduleAction,
)


def resolve_collision(
    event: CollisionEvent, safe_gap: float
) -> tuple[ScheduleAction, ScheduleAction]:
    """충돌 이벤트에서 PROCEED/WAIT 명령 쌍을 만든다.

    먼저 도착하는 차량(동시 도착이면 AGV1)이 PROCEED,
    다른 차량은 선행 차량 도착 후 safe_gap초가 지나도록 대기한다.
    대기 시간 = (선행 도착 + safe_gap) - 후행 도착 이며, 음수일 수 있다.

    Args:
        event: 충돌 이벤트.
        safe_gap: 충돌 지점 사용 간 최소 시간 간격 (s).

    Returns:
        (PROCEED 명령, WAIT 명령) 튜플.
    """
    if event.time1 <= event.time2:
        first_id, first_time = event.agv1_id, event.time1
        second_id, second_time = event.agv2_id, event.time2
    else:
        first_id, first_time = event.agv2_id, event.time2
        second_id, second_time = event.agv1_id, event.time1

    proceed = ScheduleAction(
        agv_id=first_id,
        command=ScheduleCommand.PROCEED,
        wait_time=0.0,
        collision=event,
    )
    wait = ScheduleAction(
        agv_id=second_id,
        command=ScheduleCommand.WAIT,
        wait_time=(first_time + safe_gap) - second_time,
        collision=event,
    )
    return proceed, wait
