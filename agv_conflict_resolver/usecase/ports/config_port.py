"""설정 포트 인터페이스.

충돌 엔진 설정의 로딩을 추상화한다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from agv_conflict_resolver.domain.enums import ForecastMode


@dataclass(frozen=True)
class ResolverConfig:
    """충돌 검출/해소 파라미터.

    Args:
        time_tolerance: 정밀 검출의 도착 시간 차 허용치 (s).
        search_radius: 정밀 검출의 KD-tree 탐색 반경 (m).
        safe_gap: 충돌 지점 사용 간 최소 시간 간격 (s).
        time_range: 예측 검출 범위 (s).
        time_step: 예측 검출 샘플 간격 (s).
        collision_threshold: 예측 충돌 거리 임계값 (m). 0이면 쌍별 차폭 평균.
        use_spatial_index: 예측 검출에서 KD-tree 사용 여부.
        min_index_fleet_size: KD-tree를 사용하기 시작하는 차량 수 초과 기준.
        forecast_mode: 예측 검출의 위치 예측 방식.
    """

    time_tolerance: float = 0.5
    search_radius: float = 20.0
    safe_gap: float = 2.0
    time_range: float = 10.0
    time_step: float = 0.1
    collision_threshold: float = 0.0
    use_spatial_index: bool = True
    min_index_fleet_size: int = 10
    forecast_mode: ForecastMode = ForecastMode.FIXED_BASE


class ConfigPort(ABC):
    """설정 로더 인터페이스."""

    @abstractmethod
    def load(self) -> ResolverConfig:
        """설정을 로드한다.

        Returns:
            ResolverConfig.

        Raises:
            ConfigValidationError: 값이 허용 범위를 벗어났을 때.
        """
