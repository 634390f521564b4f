"""내비게이션 그래프 웨이포인트 및 좌표 변환 유틸리티.

RMF nav graph의 정점 파싱, nav graph ↔ 로봇 좌표 변환,
웨이포인트 이름 경로 → 좌표 경로 변환 기능을 제공한다.
"""

from __future__ import annotations

import logging
import math
from typing import Any

import nudged
import yaml

from agv_conflict_resolver.domain.exceptions import ScenarioError
from agv_conflict_resolver.domain.value_objects.geometry import Point

logger = logging.getLogger(__name__)


def parse_waypoints(
    nav_graph: dict[str, Any], level: str = 'L1'
) -> dict[str, dict[str, float]]:
    """nav graph dict에서 웨이포인트 좌표를 추출한다.

    Args:
        nav_graph: `levels.<level>.vertices` 구조의 dict.
        level: 사용할 레벨 이름.

    Returns:
        {name: {x, y}} 형태. 빈 이름이나 중복은 node{i}로 대체된다.

    Raises:
        ScenarioError: 레벨 또는 정점 목록이 없을 때.
    """
    try:
        vertices = nav_graph['levels'][level]['vertices']
    except (KeyError, TypeError) as e:
        raise ScenarioError(
            f"nav graph에 레벨 [{level}] 정점 정보가 없습니다."
        ) from e

    nodes: dict[str, dict[str, float]] = {}
    for i, vertex in enumerate(vertices):
        attrs = vertex[2] if len(vertex) > 2 else {}
        name = attrs.get('name', '') if isinstance(attrs, dict) else ''
        if not name or name in nodes:
            name = f'node{i}'
        nodes[name] = {'x': float(vertex[0]), 'y': float(vertex[1])}

    logger.info('Parsed nav graph level %s: %d waypoints', level, len(nodes))
    return nodes


def load_waypoints(
    nav_graph_path: str, level: str = 'L1'
) -> dict[str, dict[str, float]]:
    """nav graph YAML 파일에서 웨이포인트 좌표를 읽는다."""
    with open(nav_graph_path, 'r', encoding='utf-8') as f:
        nav_graph = yaml.safe_load(f)
    return parse_waypoints(nav_graph, level)


def compute_transforms(
    rmf_coords: list[list[float]],
    robot_coords: list[list[float]],
) -> nudged.Transform:
    """nav graph(RMF) → 로봇 좌표계 변환을 추정한다.

    Args:
        rmf_coords: RMF 좌표 기준점 [[x,y], ...].
        robot_coords: 로봇 좌표 기준점 [[x,y], ...].

    Returns:
        nudged Transform 객체 (rmf → robot).
    """
    tf = nudged.estimate(rmf_coords, robot_coords)
    mse = nudged.estimate_error(tf, rmf_coords, robot_coords)
    logger.info('Coordinate transform MSE: %.6f', mse)
    return tf


def transform_coords(
    x: float, y: float,
    rotation: float, scale: float, translation: list[float],
) -> tuple[float, float]:
    """RMF 좌표를 로봇 좌표로 변환한다.

    Args:
        x: RMF x 좌표.
        y: RMF y 좌표.
        rotation: 회전 각도 (rad).
        scale: 스케일 팩터.
        translation: [tx, ty] 이동 벡터.

    Returns:
        (x', y') 변환된 좌표.
    """
    cos_r = math.cos(rotation)
    sin_r = math.sin(rotation)
    x_out = (x * cos_r - y * sin_r) * scale + translation[0]
    y_out = (x * sin_r + y * cos_r) * scale + translation[1]
    return x_out, y_out


def apply_transform(
    nodes: dict[str, dict[str, float]], tf: nudged.Transform
) -> None:
    """웨이포인트 좌표에 변환을 적용한다 (in-place)."""
    rotation = tf.get_rotation()
    scale = tf.get_scale()
    translation = tf.get_translation()
    for name, node in nodes.items():
        node['x'], node['y'] = transform_coords(
            node['x'], node['y'], rotation, scale, translation
        )
        logger.debug(
            'Transformed waypoint %s: x=%.3f, y=%.3f',
            name, node['x'], node['y'],
        )


def route_to_points(
    route: list[str], nodes: dict[str, dict[str, float]]
) -> list[Point]:
    """웨이포인트 이름 경로를 좌표 경로로 변환한다.

    Args:
        route: 웨이포인트 이름 목록.
        nodes: 웨이포인트 좌표 dict.

    Returns:
        Point 목록.

    Raises:
        ScenarioError: 알 수 없는 웨이포인트가 있을 때.
    """
    points: list[Point] = []
    for name in route:
        node = nodes.get(name)
        if node is None:
            raise ScenarioError(f"알 수 없는 웨이포인트입니다: {name}")
        points.append(Point(node['x'], node['y']))
    return points
