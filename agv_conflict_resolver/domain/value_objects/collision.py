"""충돌 검출/해소 결과 값 객체.

결과 값은 AGV 참조 대신 AGV 식별자를 보관한다.
실제 AGV는 AgvRepository에서 식별자로 조회한다.
"""

from dataclasses import dataclass

from agv_conflict_resolver.domain.enums import RiskLevel, ScheduleCommand
from agv_conflict_resolver.domain.value_objects.geometry import Point, Pose

# 위험 등급 경계 (초). 경계값은 더 높은 위험 등급에 포함된다.
CRITICAL_WITHIN_SEC = 1.0
HIGH_WITHIN_SEC = 3.0
MEDIUM_WITHIN_SEC = 5.0


def risk_level_for(collision_time: float) -> RiskLevel:
    """충돌까지 남은 시간으로 위험 등급을 판정한다.

    Args:
        collision_time: 예측 충돌 시각 (s).

    Returns:
        위험 등급.
    """
    if collision_time <= CRITICAL_WITHIN_SEC:
        return RiskLevel.CRITICAL
    if collision_time <= HIGH_WITHIN_SEC:
        return RiskLevel.HIGH
    if collision_time <= MEDIUM_WITHIN_SEC:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


@dataclass(frozen=True)
class Collision:
    """두 경로의 교차점과 각 차량의 도착 시간.

    Args:
        point: 교차점 (또는 겹침 구간 중점).
        path_a_dist: 경로 A 시작점부터 교차점까지 누적 거리 (m).
        path_b_dist: 경로 B 시작점부터 교차점까지 누적 거리 (m).
        time_a: A 차량 도착 시간 (s).
        time_b: B 차량 도착 시간 (s).
        time_diff: 도착 시간 차이의 절대값 (s).
    """

    point: Point
    path_a_dist: float
    path_b_dist: float
    time_a: float
    time_b: float
    time_diff: float


@dataclass(frozen=True)
class CollisionEvent:
    """두 AGV 사이의 확정된 잠재 충돌 이벤트.

    Args:
        agv1_id: 첫 번째 AGV 식별자.
        agv2_id: 두 번째 AGV 식별자.
        point: 충돌 지점.
        time1: AGV1 도착 시간 (s).
        time2: AGV2 도착 시간 (s).
        delta_t: 도착 시간 차이 (s).
    """

    agv1_id: str
    agv2_id: str
    point: Point
    time1: float
    time2: float
    delta_t: float


@dataclass(frozen=True)
class CollisionPrediction:
    """시간 샘플링 기반 충돌 예측 결과.

    Args:
        agv1_id: 첫 번째 AGV 식별자.
        agv2_id: 두 번째 AGV 식별자.
        collision_time: 예측 충돌 시각 (s).
        collision_point: 두 예측 위치의 중점.
        agv1_pose: 충돌 시각의 AGV1 예측 위치.
        agv2_pose: 충돌 시각의 AGV2 예측 위치.
        distance: 충돌 시각의 두 차량 중심 거리 (m).
        collision_threshold: 판정에 사용한 거리 임계값 (m).
    """

    agv1_id: str
    agv2_id: str
    collision_time: float
    collision_point: Point
    agv1_pose: Pose
    agv2_pose: Pose
    distance: float
    collision_threshold: float

    @property
    def risk_level(self) -> RiskLevel:
        """충돌 시각 기준 위험 등급."""
        return risk_level_for(self.collision_time)


@dataclass(frozen=True)
class ScheduleAction:
    """충돌 해소를 위한 AGV별 스케줄 명령.

    wait_time은 계산된 원시 값으로 음수일 수 있다.
    디스패처는 effective_wait_time을 사용해야 한다.

    Args:
        agv_id: 대상 AGV 식별자.
        command: PROCEED 또는 WAIT.
        wait_time: 대기 시간 (s).
        collision: 명령의 원인이 된 충돌 이벤트.
    """

    agv_id: str
    command: ScheduleCommand
    wait_time: float
    collision: CollisionEvent

    @property
    def effective_wait_time(self) -> float:
        """0 이상으로 보정한 대기 시간 (s)."""
        return max(0.0, self.wait_time)
