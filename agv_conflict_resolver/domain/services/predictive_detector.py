"""시간 샘플링 기반 충돌 예측.

시간 축을 일정 간격으로 나누어 두 AGV의 위치를 반복 예측하고,
중심 거리가 임계값 이하가 되는 가장 이른 샘플 시각을 찾는다.
"""

from __future__ import annotations

from collections.abc import Sequence
import math

from agv_conflict_resolver.domain.entities.agv import Agv
from agv_conflict_resolver.domain.enums import ForecastMode
from agv_conflict_resolver.domain.value_objects.collision import (
    CollisionPrediction,
    risk_level_for,
)
from agv_conflict_resolver.domain.value_objects.geometry import Point

DEFAULT_TIME_STEP = 0.1

__all__ = [
    'DEFAULT_TIME_STEP',
    'optimal_search_radius',
    'predict_collision_between',
    'risk_level_for',
    'sample_times',
]


def sample_times(time_range: float, time_step: float) -> list[float]:
    """0부터 time_range까지(포함) time_step 간격의 샘플 시각 목록."""
    if time_range < 0:
        return []
    count = math.floor(time_range / time_step + 1e-9) + 1
    return [i * time_step for i in range(count)]


def predict_collision_between(
    agv: Agv,
    other: Agv,
    time_range: float,
    time_step: float,
    collision_threshold: float,
    mode: ForecastMode = ForecastMode.FIXED_BASE,
) -> CollisionPrediction | None:
    """두 AGV의 예측 위치가 임계 거리 이내로 가까워지는 시각을 찾는다.

    FIXED_BASE 모드는 모든 샘플을 현재 상태에서 독립적으로 예측하며
    AGV 상태를 바꾸지 않는다. COMPOUNDING 모드는 샘플마다
    predict_position()으로 위치를 확정하므로 이동 거리가 누적되고,
    호출 후 AGV는 전체 구간을 시뮬레이션한 상태로 남는다.

    Args:
        agv: 첫 번째 AGV.
        other: 두 번째 AGV.
        time_range: 예측 범위 (s).
        time_step: 샘플 간격 (s). 0 이하면 0.1초.
        collision_threshold: 충돌 판정 거리 (m). 0 이하면 두 차폭의 평균.
        mode: 위치 예측 방식.

    Returns:
        가장 이른 CollisionPrediction 또는 None.
    """
    if time_step <= 0:
        time_step = DEFAULT_TIME_STEP
    if collision_threshold <= 0:
        collision_threshold = (agv.width + other.width) / 2

    compounding = mode == ForecastMode.COMPOUNDING
    earliest: CollisionPrediction | None = None

    for t in sample_times(time_range, time_step):
        if compounding:
            pose1 = agv.predict_position(t)
            pose2 = other.predict_position(t)
        else:
            pose1 = agv.forecast_pose(t)
            pose2 = other.forecast_pose(t)

        dist = math.hypot(pose1.x - pose2.x, pose1.y - pose2.y)
        if dist > collision_threshold or earliest is not None:
            continue

        earliest = CollisionPrediction(
            agv1_id=agv.agv_id,
            agv2_id=other.agv_id,
            collision_time=t,
            collision_point=Point(
                (pose1.x + pose2.x) / 2, (pose1.y + pose2.y) / 2
            ),
            agv1_pose=pose1,
            agv2_pose=pose2,
            distance=dist,
            collision_threshold=collision_threshold,
        )
        if not compounding:
            break

    return earliest


def optimal_search_radius(
    agvs: Sequence[Agv], time_range: float, collision_threshold: float
) -> float:
    """예측 검출용 KD-tree 탐색 반경을 계산한다.

    반경 = 최대 차폭 + 최대 속도 * 예측 범위 + 임계 거리 + 최대 차폭의 50%.
    임계 거리가 0 이하면 최대 차폭으로 대신한다.
    """
    max_width = max((a.width for a in agvs), default=0.0)
    max_speed = max((a.speed for a in agvs), default=0.0)
    if collision_threshold <= 0:
        collision_threshold = max_width

    safety_margin = max_width * 0.5
    return (
        max_width + max_speed * time_range
        + collision_threshold + safety_margin
    )
