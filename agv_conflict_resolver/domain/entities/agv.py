"""AGV 엔티티와 경로 추적 로직."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
import math

from agv_conflict_resolver.domain.exceptions import InvalidSpeedError
from agv_conflict_resolver.domain.geometry import (
    distance,
    interpolate,
    project_point_on_segment,
    segments_of,
)
from agv_conflict_resolver.domain.value_objects.geometry import Point, Pose


@dataclass
class Agv:
    """경로를 따라 주행하는 AGV.

    sub_path는 현재 위치 이후의 남은 경로 캐시다. 한 번 초기화되면
    항상 현재 위치의 투영점에서 시작하며, 캐시 점이 2개 미만이 되면
    전체 경로에서 다시 만든다.

    Args:
        agv_id: AGV 식별자 (중복 쌍 제거와 자기 자신 제외에 사용).
        width: 차체 폭 (m).
        pose: 현재 위치.
        speed: 경로 접선 방향 속도 (m/s).
        path: 계획된 전체 경로 (불변 입력).
        sub_path: 남은 경로 캐시.
        initialized: sub_path가 전체 경로에서 한 번 이상 생성되었는지 여부.
    """

    agv_id: str
    width: float
    pose: Pose
    speed: float = 0.0
    path: tuple[Point, ...] = ()
    sub_path: list[Point] = field(default_factory=list)
    initialized: bool = False

    def __post_init__(self) -> None:
        self.path = tuple(self.path)

    # -- 남은 경로 --

    def _basis_path(self) -> list[Point]:
        if not self.initialized or len(self.sub_path) < 2:
            return list(self.path)
        return self.sub_path

    def _rebase(self, basis: list[Point]) -> list[Point]:
        position = self.pose.point
        min_dist = math.inf
        seg_idx = 0
        proj = basis[0]

        for i, seg in enumerate(segments_of(basis)):
            p, _ = project_point_on_segment(self.pose, seg)
            d = distance(position, p)
            if d < min_dist:
                min_dist = d
                seg_idx = i
                proj = p

        return [proj, *basis[seg_idx + 1:]]

    def compute_sub_path(self) -> list[Point]:
        """현재 위치 기준 남은 경로를 계산한다 (캐시 갱신 없음).

        Returns:
            [투영점, 이후 경로 점...]. 기준 경로의 점이 2개 미만이면
            기준 경로를 그대로 반환한다.
        """
        basis = self._basis_path()
        if len(basis) < 2:
            return list(basis)
        return self._rebase(basis)

    def generate_sub_path(self) -> list[Point]:
        """현재 위치 기준 남은 경로를 계산하고 캐시에 기록한다.

        첫 호출이거나 캐시 점이 2개 미만이면 전체 경로를,
        그 외에는 캐시된 남은 경로를 기준으로 삼는다.

        Returns:
            새 남은 경로.
        """
        basis = self._basis_path()
        if len(basis) < 2:
            return list(basis)

        self.sub_path = self._rebase(basis)
        self.initialized = True
        return list(self.sub_path)

    # -- 위치 예측 --

    def _pose_along(self, sub_path: list[Point], dt: float) -> Pose:
        if dt < 0:
            raise ValueError(f'예측 시간은 음수일 수 없습니다: {dt}')
        if self.speed < 0:
            raise InvalidSpeedError(
                f'AGV [{self.agv_id}] 속도가 음수입니다: {self.speed}'
            )

        n = len(sub_path)
        if n < 2:
            return self.pose

        segments = segments_of(sub_path)
        lengths = [seg.length for seg in segments]
        cumulative = [0.0]
        for length in lengths:
            cumulative.append(cumulative[-1] + length)

        target_s = self.speed * dt
        if target_s >= cumulative[-1]:
            last = sub_path[-1]
            moving = [seg for seg in segments if seg.length > 0]
            theta = moving[-1].heading if moving else self.pose.theta
            return Pose(last.x, last.y, theta)

        seg_idx = 0
        for i in range(1, n):
            if target_s <= cumulative[i] and lengths[i - 1] > 0:
                seg_idx = i - 1
                break

        seg = segments[seg_idx]
        ratio = (target_s - cumulative[seg_idx]) / lengths[seg_idx]
        pt = interpolate(seg.start, seg.end, ratio)
        return Pose(pt.x, pt.y, seg.heading)

    def forecast_pose(self, dt: float) -> Pose:
        """dt초 후의 위치를 예측한다 (상태 변경 없음).

        Args:
            dt: 예측 시간 (s).

        Returns:
            예측 위치.
        """
        return self._pose_along(self.compute_sub_path(), dt)

    def advance(self, dt: float) -> Pose:
        """dt초 후의 위치를 예측하고 현재 위치로 확정한다.

        남은 경로 캐시도 함께 갱신되므로 연속 호출 시 이동 거리가 누적된다.

        Args:
            dt: 전진 시간 (s).

        Returns:
            확정된 새 위치.
        """
        sub_path = self.generate_sub_path()
        self.pose = self._pose_along(sub_path, dt)
        return self.pose

    def predict_position(self, dt: float) -> Pose:
        """advance()와 동일. 예측 결과를 현재 위치로 확정한다."""
        return self.advance(dt)

    def snapshot(self) -> Agv:
        """캐시까지 복제한 독립 사본을 만든다."""
        return replace(self, sub_path=list(self.sub_path))
