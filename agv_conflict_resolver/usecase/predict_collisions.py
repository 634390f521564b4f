"""차량군 충돌 예측 유스케이스.

차량 수에 따라 KD-tree 후보 선정 또는 전체 쌍 검사를 선택하고
시간 샘플링 기반 예측 검출기를 적용한다.
"""

from collections.abc import Sequence
import logging

from agv_conflict_resolver.domain.entities.agv import Agv
from agv_conflict_resolver.domain.enums import ForecastMode
from agv_conflict_resolver.domain.events.conflict_events import (
    CollisionPredictedEvent,
)
from agv_conflict_resolver.domain.services.predictive_detector import (
    optimal_search_radius,
    predict_collision_between,
)
from agv_conflict_resolver.domain.value_objects.collision import (
    CollisionPrediction,
)
from agv_conflict_resolver.usecase.candidate_pairs import (
    all_pairs,
    indexed_pairs,
)
from agv_conflict_resolver.usecase.ports.event_publisher import EventPublisher
from agv_conflict_resolver.usecase.ports.spatial_index import SpatialIndex

logger = logging.getLogger(__name__)


class PredictCollisions:
    """차량군 충돌 예측 유스케이스.

    COMPOUNDING 모드에서는 쌍을 검사할 때마다 차량 위치가 확정되므로
    뒤에 검사하는 쌍은 앞선 검사가 남긴 상태에서 시작한다.

    Args:
        spatial_index: 후보 쌍 선정용 공간 인덱스.
        event_publisher: 이벤트 발행자.
        min_index_fleet_size: 차량 수가 이 값을 초과하면 인덱스를 사용한다.
    """

    def __init__(
        self,
        spatial_index: SpatialIndex,
        event_publisher: EventPublisher,
        min_index_fleet_size: int = 10,
    ) -> None:
        self._spatial_index = spatial_index
        self._event_publisher = event_publisher
        self._min_index_fleet_size = min_index_fleet_size

    def predict_between(
        self,
        agv: Agv,
        other: Agv,
        time_range: float,
        time_step: float,
        collision_threshold: float,
        mode: ForecastMode = ForecastMode.FIXED_BASE,
    ) -> CollisionPrediction | None:
        """두 AGV의 충돌 시각을 예측한다."""
        prediction = predict_collision_between(
            agv, other, time_range, time_step, collision_threshold, mode
        )
        if prediction is not None:
            logger.debug(
                "Predicted collision %s-%s at t=%.2fs (%s)",
                prediction.agv1_id, prediction.agv2_id,
                prediction.collision_time, prediction.risk_level,
            )
            self._event_publisher.publish(
                CollisionPredictedEvent(
                    agv1_id=prediction.agv1_id,
                    agv2_id=prediction.agv2_id,
                    collision_time=prediction.collision_time,
                    risk_level=prediction.risk_level,
                )
            )
        return prediction

    def predict_with_index(
        self,
        agvs: Sequence[Agv],
        time_range: float,
        time_step: float,
        collision_threshold: float,
        mode: ForecastMode = ForecastMode.FIXED_BASE,
        radius: float | None = None,
    ) -> list[CollisionPrediction]:
        """KD-tree로 후보 쌍을 추려 예측한다.

        Args:
            agvs: 차량 목록.
            time_range: 예측 범위 (s).
            time_step: 샘플 간격 (s).
            collision_threshold: 충돌 거리 임계값 (m).
            mode: 위치 예측 방식.
            radius: 탐색 반경 (m). None이면 optimal_search_radius() 사용.

        Returns:
            CollisionPrediction 목록.
        """
        if radius is None:
            radius = optimal_search_radius(
                agvs, time_range, collision_threshold
            )
        pairs = indexed_pairs(agvs, self._spatial_index, radius)
        predictions = self._predict_pairs(
            pairs, time_range, time_step, collision_threshold, mode
        )
        logger.info(
            "Predictive detection (index, r=%.2f, mode=%s): %d vehicles, "
            "%d candidate pairs, %d collisions",
            radius, mode, len(agvs), len(pairs), len(predictions),
        )
        return predictions

    def predict_brute_force(
        self,
        agvs: Sequence[Agv],
        time_range: float,
        time_step: float,
        collision_threshold: float,
        mode: ForecastMode = ForecastMode.FIXED_BASE,
    ) -> list[CollisionPrediction]:
        """모든 차량 쌍을 예측한다."""
        predictions = self._predict_pairs(
            all_pairs(agvs), time_range, time_step, collision_threshold, mode
        )
        logger.info(
            "Predictive detection (all pairs, mode=%s): %d vehicles, "
            "%d collisions",
            mode, len(agvs), len(predictions),
        )
        return predictions

    def predict_for_fleet(
        self,
        agvs: Sequence[Agv],
        time_range: float,
        time_step: float,
        collision_threshold: float,
        use_index: bool = True,
        mode: ForecastMode = ForecastMode.FIXED_BASE,
    ) -> list[CollisionPrediction]:
        """차량 수에 따라 검사 전략을 골라 예측한다.

        use_index가 True이고 차량 수가 기준을 초과하면 KD-tree,
        그 외에는 전체 쌍 검사를 사용한다.
        """
        if use_index and len(agvs) > self._min_index_fleet_size:
            return self.predict_with_index(
                agvs, time_range, time_step, collision_threshold, mode
            )
        return self.predict_brute_force(
            agvs, time_range, time_step, collision_threshold, mode
        )

    def _predict_pairs(
        self,
        pairs: list[tuple[Agv, Agv]],
        time_range: float,
        time_step: float,
        collision_threshold: float,
        mode: ForecastMode,
    ) -> list[CollisionPrediction]:
        predictions: list[CollisionPrediction] = []
        for agv, other in pairs:
            prediction = self.predict_between(
                agv, other, time_range, time_step, collision_threshold, mode
            )
            if prediction is not None:
                predictions.append(prediction)
        return predictions
