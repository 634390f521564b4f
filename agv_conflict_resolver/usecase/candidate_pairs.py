"""충돌 검사 후보 차량 쌍 생성.

순서 없는 쌍을 (작은 ID, 큰 ID) 키 하나로 정규화하여 중복을 제거한다.
"""

from collections.abc import Sequence

from agv_conflict_resolver.domain.entities.agv import Agv
from agv_conflict_resolver.usecase.ports.spatial_index import SpatialIndex


def pair_key(agv_id: str, other_id: str) -> tuple[str, str]:
    """순서와 무관한 쌍 키."""
    if agv_id <= other_id:
        return agv_id, other_id
    return other_id, agv_id


def indexed_pairs(
    agvs: Sequence[Agv], spatial_index: SpatialIndex, radius: float
) -> list[tuple[Agv, Agv]]:
    """공간 인덱스로 radius 이내의 후보 쌍을 찾는다.

    인덱스는 호출마다 현재 위치로 다시 만든다.
    쌍의 첫 원소는 질의한 차량이다.

    Args:
        agvs: 차량 목록.
        spatial_index: 공간 인덱스.
        radius: 탐색 반경 (m).

    Returns:
        중복 없는 (차량, 이웃) 쌍 목록.
    """
    spatial_index.build(agvs)

    seen: set[tuple[str, str]] = set()
    pairs: list[tuple[Agv, Agv]] = []
    for agv in agvs:
        for other in spatial_index.range_search(agv, radius):
            key = pair_key(agv.agv_id, other.agv_id)
            if key in seen:
                continue
            seen.add(key)
            pairs.append((agv, other))
    return pairs


def all_pairs(agvs: Sequence[Agv]) -> list[tuple[Agv, Agv]]:
    """모든 차량 쌍을 목록 순서대로 만든다."""
    seen: set[tuple[str, str]] = set()
    pairs: list[tuple[Agv, Agv]] = []
    for i, agv in enumerate(agvs):
        for other in agvs[i + 1:]:
            if agv.agv_id == other.agv_id:
                continue
            key = pair_key(agv.agv_id, other.agv_id)
            if key in seen:
                continue
            seen.add(key)
            pairs.append((agv, other))
    return pairs
