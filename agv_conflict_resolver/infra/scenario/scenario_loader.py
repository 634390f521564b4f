"""YAML 시나리오 파일 → AGV 목록 변환.

차량 경로는 좌표 목록(path) 또는 nav graph 웨이포인트 이름(route)으로
지정할 수 있다. reference_coordinates가 있으면 nav graph 좌표를
로봇 좌표계로 변환한 뒤 사용한다.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from agv_conflict_resolver.domain.entities.agv import Agv
from agv_conflict_resolver.domain.exceptions import (
    InvalidPathError,
    ScenarioError,
)
from agv_conflict_resolver.domain.value_objects.geometry import (
    Point,
    Pose,
    Segment,
)
from agv_conflict_resolver.infra.nav_graph.graph_utils import (
    apply_transform,
    compute_transforms,
    load_waypoints,
    parse_waypoints,
    route_to_points,
)

logger = logging.getLogger(__name__)

# 좌표/숫자 항목 변환 실패 시 발생하는 예외
_MALFORMED_ERRORS = (IndexError, KeyError, TypeError, ValueError)


def load_scenario(scenario_path: str | Path) -> list[Agv]:
    """시나리오 YAML 파일을 읽어 AGV 목록을 만든다.

    Args:
        scenario_path: 시나리오 파일 경로.

    Returns:
        파일에 나열된 순서의 AGV 목록.

    Raises:
        ScenarioError: 파일 형식이 잘못되었을 때.
        InvalidPathError: 경로가 비어 있는 차량이 있을 때.
    """
    path = Path(scenario_path)
    with open(path, encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ScenarioError(
                f"시나리오 YAML 파싱에 실패했습니다: {path}"
            ) from e

    if not isinstance(data, dict):
        raise ScenarioError(f"시나리오 형식이 잘못되었습니다: {path}")

    return parse_scenario(data, base_dir=path.parent)


def parse_scenario(
    data: dict[str, Any], base_dir: Path | None = None
) -> list[Agv]:
    """시나리오 dict에서 AGV 목록을 만든다.

    Args:
        data: 시나리오 dict.
        base_dir: nav_graph 상대 경로의 기준 디렉터리.

    Returns:
        AGV 목록.
    """
    vehicles = data.get('vehicles')
    if not isinstance(vehicles, list) or not vehicles:
        raise ScenarioError("시나리오에 vehicles 목록이 없습니다.")

    waypoints = _load_waypoints(data, base_dir)
    agvs = [_parse_vehicle(v, waypoints) for v in vehicles]
    logger.info('Scenario loaded: %d vehicles', len(agvs))
    return agvs


def _load_waypoints(
    data: dict[str, Any], base_dir: Path | None
) -> dict[str, dict[str, float]]:
    nav_graph = data.get('nav_graph')
    if nav_graph is None:
        return {}

    level = data.get('level', 'L1')
    if isinstance(nav_graph, dict):
        waypoints = parse_waypoints(nav_graph, level)
    else:
        graph_path = Path(nav_graph)
        if base_dir is not None and not graph_path.is_absolute():
            graph_path = base_dir / graph_path
        waypoints = load_waypoints(str(graph_path), level)

    ref = data.get('reference_coordinates')
    if ref:
        try:
            tf = compute_transforms(ref['rmf'], ref['robot'])
        except _MALFORMED_ERRORS as e:
            raise ScenarioError(
                f"reference_coordinates 형식이 잘못되었습니다: {ref}"
            ) from e
        apply_transform(waypoints, tf)
    return waypoints


def _parse_vehicle(
    raw: dict[str, Any], waypoints: dict[str, dict[str, float]]
) -> Agv:
    if not isinstance(raw, dict) or 'id' not in raw:
        raise ScenarioError(f"차량 항목에 id가 없습니다: {raw}")
    agv_id = str(raw['id'])

    try:
        if 'route' in raw:
            path = route_to_points(list(raw['route']), waypoints)
        else:
            path = [
                Point(float(p[0]), float(p[1])) for p in raw.get('path', [])
            ]
    except _MALFORMED_ERRORS as e:
        raise ScenarioError(
            f"AGV [{agv_id}]의 경로 형식이 잘못되었습니다."
        ) from e
    if not path:
        raise InvalidPathError(f"AGV [{agv_id}]의 경로가 비어 있습니다.")

    try:
        width = float(raw.get('width', 1.0))
        speed = float(raw.get('speed', 0.0))
        pose = _parse_pose(raw.get('pose'), path)
    except _MALFORMED_ERRORS as e:
        raise ScenarioError(
            f"AGV [{agv_id}]의 width/speed/pose 값이 잘못되었습니다."
        ) from e
    if width <= 0:
        raise ScenarioError(f"AGV [{agv_id}]의 폭은 양수여야 합니다: {width}")
    if speed < 0:
        raise ScenarioError(
            f"AGV [{agv_id}]의 속도는 음수일 수 없습니다: {speed}"
        )

    return Agv(
        agv_id=agv_id,
        width=width,
        pose=pose,
        speed=speed,
        path=tuple(path),
    )


def _parse_pose(raw: list[float] | None, path: list[Point]) -> Pose:
    """pose가 없으면 경로 시작점과 첫 구간 방향을 사용한다."""
    if raw is not None:
        theta = float(raw[2]) if len(raw) > 2 else 0.0
        return Pose(float(raw[0]), float(raw[1]), theta)

    theta = Segment(path[0], path[1]).heading if len(path) > 1 else 0.0
    return Pose(path[0].x, path[0].y, theta)
