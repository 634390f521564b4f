"""공통 테스트 fixture."""

import math

import pytest

from agv_conflict_resolver.domain.entities.agv import Agv
from agv_conflict_resolver.domain.value_objects.geometry import Point, Pose
from agv_conflict_resolver.usecase.ports.config_port import ResolverConfig


@pytest.fixture
def straight_path():
    return (Point(0.0, 0.0), Point(10.0, 0.0), Point(10.0, 10.0))


@pytest.fixture
def sample_agv(straight_path):
    return Agv(
        agv_id="AGV-001",
        width=1.0,
        pose=Pose(0.0, 0.0, 0.0),
        speed=1.0,
        path=straight_path,
    )


@pytest.fixture
def head_on_pair():
    """같은 선 위에서 마주 보고 달리는 두 AGV (2 m/s, 10 m)."""
    agv_a = Agv(
        agv_id="A",
        width=1.0,
        pose=Pose(0.0, 0.0, 0.0),
        speed=2.0,
        path=(Point(0.0, 0.0), Point(10.0, 0.0)),
    )
    agv_b = Agv(
        agv_id="B",
        width=1.0,
        pose=Pose(10.0, 0.0, math.pi),
        speed=2.0,
        path=(Point(10.0, 0.0), Point(0.0, 0.0)),
    )
    return agv_a, agv_b


@pytest.fixture
def short_head_on_pair():
    """8 m 직선에서 마주 보는 두 AGV (1 m/s). 샘플 값이 이진수로 정확하다."""
    agv_a = Agv(
        agv_id="A",
        width=1.0,
        pose=Pose(0.0, 0.0, 0.0),
        speed=1.0,
        path=(Point(0.0, 0.0), Point(8.0, 0.0)),
    )
    agv_b = Agv(
        agv_id="B",
        width=1.0,
        pose=Pose(8.0, 0.0, math.pi),
        speed=1.0,
        path=(Point(8.0, 0.0), Point(0.0, 0.0)),
    )
    return agv_a, agv_b


@pytest.fixture
def crossing_pair():
    """(5, 5)에서 직교 교차하는 두 AGV."""
    agv_a = Agv(
        agv_id="A",
        width=1.0,
        pose=Pose(0.0, 5.0, 0.0),
        speed=1.0,
        path=(Point(0.0, 5.0), Point(10.0, 5.0)),
    )
    agv_b = Agv(
        agv_id="B",
        width=1.0,
        pose=Pose(5.0, 0.0, math.pi / 2),
        speed=1.0,
        path=(Point(5.0, 0.0), Point(5.0, 10.0)),
    )
    return agv_a, agv_b


@pytest.fixture
def parallel_fleet():
    """서로 100 m 떨어진 평행 차로를 달리는 충돌 없는 차량군."""
    return [
        Agv(
            agv_id=f"P{i:02d}",
            width=1.0,
            pose=Pose(0.0, 100.0 * i, 0.0),
            speed=1.0,
            path=(Point(0.0, 100.0 * i), Point(10.0, 100.0 * i)),
        )
        for i in range(12)
    ]


@pytest.fixture
def sample_config():
    return ResolverConfig(
        time_tolerance=0.1,
        search_radius=15.0,
        safe_gap=2.0,
        time_range=10.0,
        time_step=0.5,
    )
