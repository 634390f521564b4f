"""충돌 엔진 유스케이스 레이어.

도메인 서비스를 포트를 통해 조율하는 애플리케이션 서비스를 정의한다.
domain 레이어만 의존하며, infra 레이어 의존성은 없다.
"""

from agv_conflict_resolver.usecase.detect_collisions import DetectCollisions
from agv_conflict_resolver.usecase.predict_collisions import PredictCollisions
from agv_conflict_resolver.usecase.schedule_conflicts import ScheduleConflicts

__all__ = [
    "DetectCollisions",
    "PredictCollisions",
    "ScheduleConflicts",
]
