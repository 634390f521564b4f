"""공간 인덱스 인프라 (SpatialIndex 구현)."""

from agv_conflict_resolver.infra.spatial.kd_tree import (
    KDNode,
    KdTreeSpatialIndex,
    build_kd_tree,
    range_search,
)

__all__ = ["KDNode", "KdTreeSpatialIndex", "build_kd_tree", "range_search"]
