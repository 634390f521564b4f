"""유스케이스 포트 인터페이스 (ABC).

infra 레이어에서 구현해야 하는 추상 인터페이스를 정의한다.
"""

from agv_conflict_resolver.usecase.ports.agv_repository import AgvRepository
from agv_conflict_resolver.usecase.ports.config_port import (
    ConfigPort,
    ResolverConfig,
)
from agv_conflict_resolver.usecase.ports.event_publisher import EventPublisher
from agv_conflict_resolver.usecase.ports.spatial_index import SpatialIndex

__all__ = [
    "AgvRepository",
    "ConfigPort",
    "EventPublisher",
    "ResolverConfig",
    "SpatialIndex",
]
