"""충돌 엔진 도메인 이벤트."""

from agv_conflict_resolver.domain.events.conflict_events import (
    CollisionDetectedEvent,
    CollisionPredictedEvent,
    DomainEvent,
    ScheduleIssuedEvent,
)

__all__ = [
    "CollisionDetectedEvent",
    "CollisionPredictedEvent",
    "DomainEvent",
    "ScheduleIssuedEvent",
]
