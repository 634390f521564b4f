"""충돌 검출/해소 도메인 서비스."""

from agv_conflict_resolver.domain.services.conflict_resolver import (
    resolve_collision,
)
from agv_conflict_resolver.domain.services.exact_detector import (
    check_path_intersection,
    detect_collision_between,
    earliest_collision,
    find_all_collisions,
    path_distance_to_point,
)
from agv_conflict_resolver.domain.services.predictive_detector import (
    optimal_search_radius,
    predict_collision_between,
    risk_level_for,
)

__all__ = [
    'check_path_intersection',
    'detect_collision_between',
    'earliest_collision',
    'find_all_collisions',
    'optimal_search_radius',
    'path_distance_to_point',
    'predict_collision_between',
    'resolve_collision',
    'risk_level_for',
]
