"""충돌 엔진 값 객체 (불변, 동등성 기반 비교)."""

from agv_conflict_resolver.domain.value_objects.collision import (
    Collision,
    CollisionEvent,
    CollisionPrediction,
    ScheduleAction,
    risk_level_for,
)
from agv_conflict_resolver.domain.value_objects.geometry import (
    Point,
    Pose,
    Segment,
)

__all__ = [
    'Collision',
    'CollisionEvent',
    'CollisionPrediction',
    'Point',
    'Pose',
    'ScheduleAction',
    'Segment',
    'risk_level_for',
]
