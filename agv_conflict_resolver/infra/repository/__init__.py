"""AGV 저장소 인프라 (AgvRepository 구현)."""

from agv_conflict_resolver.infra.repository.in_memory_agv_repository import (
    InMemoryAgvRepository,
)

__all__ = ["InMemoryAgvRepository"]
