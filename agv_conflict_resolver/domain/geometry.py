"""평면 기하 연산 커널.

점, 선분, 벡터에 대한 순수 함수를 제공한다.
퇴화 입력(길이 0 선분 등)은 예외 없이 중립 값으로 처리한다.
"""

from __future__ import annotations

import math

from agv_conflict_resolver.domain.value_objects.geometry import (
    Point,
    Pose,
    Segment,
)


def distance(p1: Point, p2: Point) -> float:
    """두 점 사이의 유클리드 거리."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def dot(ax: float, ay: float, bx: float, by: float) -> float:
    """2차원 벡터 내적."""
    return ax * bx + ay * by


def cross(ax: float, ay: float, bx: float, by: float) -> float:
    """2차원 벡터 외적.

    양수면 B가 A의 반시계 방향, 음수면 시계 방향, 0이면 공선이다.
    """
    return ax * by - ay * bx


def interpolate(p1: Point, p2: Point, ratio: float) -> Point:
    """두 점 사이를 선형 보간한다.

    ratio는 제한하지 않는다. 범위 제한은 호출자가 담당한다.

    Args:
        p1: 시작점 (ratio=0).
        p2: 끝점 (ratio=1).
        ratio: 보간 비율.

    Returns:
        보간된 점.
    """
    return Point(
        p1.x + (p2.x - p1.x) * ratio,
        p1.y + (p2.y - p1.y) * ratio,
    )


def _clamped_projection(
    x: float, y: float, segment: Segment
) -> tuple[Point, float]:
    vx = segment.dx
    vy = segment.dy
    seg_len2 = vx * vx + vy * vy
    if seg_len2 == 0:
        return segment.start, 0.0

    t = dot(x - segment.start.x, y - segment.start.y, vx, vy) / seg_len2
    t = min(max(t, 0.0), 1.0)
    return Point(segment.start.x + t * vx, segment.start.y + t * vy), t


def project_point_on_segment(
    pose: Pose, segment: Segment
) -> tuple[Point, float]:
    """위치를 선분 위로 정사영한다.

    선분 밖으로 벗어나는 투영은 가까운 끝점으로 고정된다.

    Args:
        pose: 투영할 위치 (보통 AGV 현재 위치).
        segment: 대상 선분.

    Returns:
        (투영점, t) 튜플. t는 [0, 1] 범위이며
        길이 0 선분이면 (시작점, 0)을 반환한다.
    """
    return _clamped_projection(pose.x, pose.y, segment)


def closest_point_on_segment(point: Point, segment: Segment) -> Point:
    """선분 위에서 주어진 점과 가장 가까운 점을 찾는다."""
    closest, _ = _clamped_projection(point.x, point.y, segment)
    return closest


def _point_contact(
    point: Point, segment: Segment, width: float
) -> Point | None:
    if distance(point, closest_point_on_segment(point, segment)) <= width / 2:
        return point
    return None


def segment_intersect(
    s1: Segment, s2: Segment, width: float
) -> Point | None:
    """두 선분의 교차점 또는 공선 겹침 구간의 중점을 구한다.

    - 평행하지 않으면 두 매개변수가 모두 [0, 1]일 때 교차점을 반환한다.
    - 공선이면 주축(x 변화량이 있으면 x축, 없으면 y축)으로 투영한 두 구간의
      간격이 width/2 이하일 때 겹침 구간의 중점을 반환한다.
    - 평행하지만 공선이 아니면 None.
    - 길이 0 선분은 점으로 보고, 상대 선분까지 거리가 width/2 이하일 때만
      그 점을 반환한다.

    Args:
        s1: 첫 번째 선분.
        s2: 두 번째 선분.
        width: AGV 폭 (m). 공선 근접 허용치로 사용한다.

    Returns:
        교차점 또는 None.
    """
    if s1.length == 0:
        return _point_contact(s1.start, s2, width)
    if s2.length == 0:
        return _point_contact(s2.start, s1, width)

    dx1, dy1 = s1.dx, s1.dy
    dx2, dy2 = s2.dx, s2.dy
    ox = s2.start.x - s1.start.x
    oy = s2.start.y - s1.start.y

    denom = cross(dx1, dy1, dx2, dy2)
    if denom == 0:
        if cross(ox, oy, dx1, dy1) != 0:
            return None

        if dx1 != 0:
            min_a, max_a = sorted((s1.start.x, s1.end.x))
            min_b, max_b = sorted((s2.start.x, s2.end.x))
        else:
            min_a, max_a = sorted((s1.start.y, s1.end.y))
            min_b, max_b = sorted((s2.start.y, s2.end.y))

        overlap_start = max(min_a, min_b)
        overlap_end = min(max_a, max_b)
        if overlap_start > overlap_end + width / 2:
            return None

        mid = (overlap_start + overlap_end) / 2
        if dx1 != 0:
            return Point(mid, s1.start.y)
        return Point(s1.start.x, mid)

    t = cross(ox, oy, dx2, dy2) / denom
    u = cross(ox, oy, dx1, dy1) / denom
    if 0 <= t <= 1 and 0 <= u <= 1:
        return Point(s1.start.x + t * dx1, s1.start.y + t * dy1)
    return None


def segment_distance(s1: Segment, s2: Segment) -> tuple[float, Point]:
    """두 선분 사이의 최소 거리와 접촉점을 구한다.

    각 선분의 양 끝점을 상대 선분에 투영한 네 후보 중 최소값을 취한다.

    Returns:
        (최소 거리, 상대 선분 위의 접촉점) 튜플.
    """
    candidates = (
        (s1.start, s2),
        (s1.end, s2),
        (s2.start, s1),
        (s2.end, s1),
    )

    best_dist = math.inf
    best_point = s1.start
    for endpoint, other in candidates:
        contact = closest_point_on_segment(endpoint, other)
        d = distance(endpoint, contact)
        if d < best_dist:
            best_dist = d
            best_point = contact
    return best_dist, best_point


def segments_of(path: list[Point]) -> list[Segment]:
    """연속한 점 쌍으로 선분 목록을 만든다."""
    return [Segment(path[i], path[i + 1]) for i in range(len(path) - 1)]


def path_length(path: list[Point]) -> float:
    """경로 전체 길이 (m)."""
    return sum(seg.length for seg in segments_of(path))
