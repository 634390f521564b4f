"""도메인 이벤트 인프라 (EventPublisher 구현)."""

from agv_conflict_resolver.infra.event.in_memory_event_publisher import (
    InMemoryEventPublisher,
)

__all__ = ["InMemoryEventPublisher"]
