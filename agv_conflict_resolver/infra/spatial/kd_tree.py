"""차량 현재 위치 기반 2차원 KD-tree.

깊이에 따라 x축(짝수)과 y축(홀수)을 번갈아 분할한다.
검출 패스마다 다시 만들며 점진적 갱신은 지원하지 않는다.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging
import math

from agv_conflict_resolver.domain.entities.agv import Agv
from agv_conflict_resolver.usecase.ports.spatial_index import SpatialIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KDNode:
    """KD-tree 노드.

    Args:
        agv: 노드가 보관하는 차량.
        left: 분할축 좌표가 작은 쪽 서브트리.
        right: 분할축 좌표가 큰 쪽 서브트리.
        depth: 노드 깊이 (분할축 = depth % 2).
    """

    agv: Agv
    left: KDNode | None
    right: KDNode | None
    depth: int

    @property
    def axis(self) -> int:
        return self.depth % 2


def _coord(agv: Agv, axis: int) -> float:
    return agv.pose.x if axis == 0 else agv.pose.y


def build_kd_tree(agvs: Sequence[Agv], depth: int = 0) -> KDNode | None:
    """차량 목록으로 KD-tree를 재귀 구성한다.

    현재 축으로 정렬한 복사본의 중앙값을 분할점으로 쓴다.
    입력 시퀀스는 변경하지 않는다.

    Args:
        agvs: 차량 목록.
        depth: 현재 깊이.

    Returns:
        루트 노드 또는 빈 입력이면 None.
    """
    if not agvs:
        return None

    axis = depth % 2
    ordered = sorted(agvs, key=lambda a: _coord(a, axis))
    median = len(ordered) // 2
    return KDNode(
        agv=ordered[median],
        left=build_kd_tree(ordered[:median], depth + 1),
        right=build_kd_tree(ordered[median + 1:], depth + 1),
        depth=depth,
    )


def range_search(
    node: KDNode | None,
    target: Agv,
    radius: float,
    results: list[Agv],
) -> None:
    """target으로부터 radius 이내의 차량을 results에 추가한다.

    target을 포함하는 쪽 서브트리를 먼저 탐색하고, 분할 평면까지의
    축 방향 거리가 radius 이하일 때만 반대쪽도 탐색한다.

    Args:
        node: 탐색 시작 노드.
        target: 기준 차량 (같은 ID는 제외).
        radius: 탐색 반경 (m).
        results: 결과를 누적할 리스트.
    """
    if node is None:
        return

    candidate = node.agv
    if candidate.agv_id != target.agv_id and math.hypot(
        candidate.pose.x - target.pose.x,
        candidate.pose.y - target.pose.y,
    ) <= radius:
        results.append(candidate)

    diff = _coord(target, node.axis) - _coord(candidate, node.axis)
    if diff <= 0:
        near, far = node.left, node.right
    else:
        near, far = node.right, node.left

    range_search(near, target, radius, results)
    if abs(diff) <= radius:
        range_search(far, target, radius, results)


class KdTreeSpatialIndex(SpatialIndex):
    """SpatialIndex의 KD-tree 구현체.

    build() 후에는 트리가 불변이므로 동시 읽기는 안전하지만,
    차량 위치가 바뀌면 다시 build() 해야 한다.
    """

    def __init__(self) -> None:
        self._root: KDNode | None = None

    @property
    def root(self) -> KDNode | None:
        return self._root

    def build(self, agvs: Sequence[Agv]) -> None:
        self._root = build_kd_tree(agvs)
        logger.debug("KD-tree built over %d vehicles", len(agvs))

    def range_search(self, target: Agv, radius: float) -> list[Agv]:
        results: list[Agv] = []
        range_search(self._root, target, radius, results)
        return results
