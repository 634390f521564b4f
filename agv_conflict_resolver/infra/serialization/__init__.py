"""결과 직렬화 인프라."""

from agv_conflict_resolver.infra.serialization.result_serializer import (
    serialize_collision_events,
    serialize_predictions,
    serialize_schedule,
)

__all__ = [
    "serialize_collision_events",
    "serialize_predictions",
    "serialize_schedule",
]
