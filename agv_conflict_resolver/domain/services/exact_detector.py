"""경로 교차 기반 정밀 충돌 검출.

두 전체 경로의 기하학적 교차점을 구하고, 각 차량의 속도로
도착 시간을 환산하여 거의 동시에 도착하는 지점을 충돌로 판정한다.
"""

from __future__ import annotations

import math

from agv_conflict_resolver.domain.entities.agv import Agv
from agv_conflict_resolver.domain.exceptions import InvalidSpeedError
from agv_conflict_resolver.domain.geometry import (
    cross,
    distance,
    segment_distance,
    segment_intersect,
    segments_of,
)
from agv_conflict_resolver.domain.value_objects.collision import (
    Collision,
    CollisionEvent,
)
from agv_conflict_resolver.domain.value_objects.geometry import Point, Segment

# 점이 선분 위에 있는지 판정할 때의 위치 허용 오차 (m)
ON_SEGMENT_TOLERANCE = 1e-6


def _lies_on(point: Point, seg: Segment) -> bool:
    area = cross(
        point.x - seg.start.x, point.y - seg.start.y, seg.dx, seg.dy
    )
    if abs(area) > ON_SEGMENT_TOLERANCE * seg.length:
        return False
    tol = ON_SEGMENT_TOLERANCE
    return (
        min(seg.start.x, seg.end.x) - tol <= point.x
        <= max(seg.start.x, seg.end.x) + tol
        and min(seg.start.y, seg.end.y) - tol <= point.y
        <= max(seg.start.y, seg.end.y) + tol
    )


def path_distance_to_point(path: list[Point], point: Point) -> float:
    """경로 시작점부터 지정한 점까지의 누적 경로 길이를 구한다.

    점이 처음으로 놓인 선분에서 멈추고 그 선분 위 부분 거리만 더한다.
    어느 선분 위에도 없으면 경로 전체 길이를 반환한다.

    Args:
        path: 경로 점 목록.
        point: 대상 점 (보통 교차점).

    Returns:
        누적 거리 (m).
    """
    total = 0.0
    for seg in segments_of(list(path)):
        if _lies_on(point, seg):
            return total + distance(seg.start, point)
        total += seg.length
    return total


def find_all_collisions(
    path_a: list[Point],
    path_b: list[Point],
    speed_a: float,
    speed_b: float,
    width: float,
) -> list[Collision]:
    """두 경로의 모든 교차/겹침 지점과 도착 시간을 구한다.

    Args:
        path_a: A 차량 경로.
        path_b: B 차량 경로.
        speed_a: A 차량 속도 (m/s).
        speed_b: B 차량 속도 (m/s).
        width: 공선 근접 허용치로 쓰는 차량 폭 (m).

    Returns:
        교차 지점별 Collision 목록.

    Raises:
        InvalidSpeedError: 속도가 0 이하일 때.
    """
    if speed_a <= 0 or speed_b <= 0:
        raise InvalidSpeedError(
            f'도착 시간 계산에는 양수 속도가 필요합니다: '
            f'speed_a={speed_a}, speed_b={speed_b}'
        )

    collisions: list[Collision] = []
    for s1 in segments_of(list(path_a)):
        for s2 in segments_of(list(path_b)):
            inter = segment_intersect(s1, s2, width)
            if inter is None:
                continue

            dist_a = path_distance_to_point(path_a, inter)
            dist_b = path_distance_to_point(path_b, inter)
            time_a = dist_a / speed_a
            time_b = dist_b / speed_b
            collisions.append(
                Collision(
                    point=inter,
                    path_a_dist=dist_a,
                    path_b_dist=dist_b,
                    time_a=time_a,
                    time_b=time_b,
                    time_diff=abs(time_a - time_b),
                )
            )
    return collisions


def earliest_collision(
    path_a: list[Point],
    path_b: list[Point],
    speed_a: float,
    speed_b: float,
    width: float,
    time_tolerance: float,
) -> Collision | None:
    """도착 시간 차가 허용치 이내인 교차점 중 가장 먼저 닥치는 것을 고른다.

    비교 기준은 min(time_a, time_b)이다.

    Returns:
        가장 이른 위험 교차점 또는 None.
    """
    best: Collision | None = None
    min_time = math.inf
    for collision in find_all_collisions(
        path_a, path_b, speed_a, speed_b, width
    ):
        if collision.time_diff > time_tolerance:
            continue
        earliest = min(collision.time_a, collision.time_b)
        if earliest < min_time:
            min_time = earliest
            best = collision
    return best


def check_path_intersection(
    path_a: list[Point], path_b: list[Point], width: float
) -> Point | None:
    """두 경로가 교차하거나 반 차폭 이내로 근접하는지 검사한다.

    선분 교차를 우선 사용하고, 교차가 없으면 선분 간 최소 거리가
    width/2 이하인 경우를 접촉으로 본다. 후보 중 경로 A 시작점에
    가장 가까운 점을 반환한다.

    Returns:
        접촉점 또는 None.
    """
    if not path_a:
        return None

    origin = path_a[0]
    nearest: Point | None = None
    min_dist = math.inf

    for s1 in segments_of(list(path_a)):
        for s2 in segments_of(list(path_b)):
            candidate = segment_intersect(s1, s2, width)
            if candidate is None:
                gap, contact = segment_distance(s1, s2)
                if gap > width / 2:
                    continue
                candidate = contact

            d = distance(origin, candidate)
            if d < min_dist:
                min_dist = d
                nearest = candidate
    return nearest


def detect_collision_between(
    agv: Agv, other: Agv, time_tolerance: float
) -> CollisionEvent | None:
    """두 AGV의 전체 경로로 잠재 충돌 이벤트를 검출한다.

    차폭 허용치는 두 차량 폭의 평균을 사용한다.

    Args:
        agv: 첫 번째 AGV.
        other: 두 번째 AGV.
        time_tolerance: 도착 시간 차 허용치 (s).

    Returns:
        CollisionEvent 또는 None.
    """
    collision = earliest_collision(
        list(agv.path),
        list(other.path),
        agv.speed,
        other.speed,
        (agv.width + other.width) / 2,
        time_tolerance,
    )
    if collision is None:
        return None

    return CollisionEvent(
        agv1_id=agv.agv_id,
        agv2_id=other.agv_id,
        point=collision.point,
        time1=collision.time_a,
        time2=collision.time_b,
        delta_t=collision.time_diff,
    )
