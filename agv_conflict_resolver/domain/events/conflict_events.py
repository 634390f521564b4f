"""충돌 엔진 도메인 이벤트 정의.

검출/예측/스케줄 결과가 나올 때 발행되는 이벤트를 정의한다.
usecase/infra 레이어에서 이벤트를 구독하여 부가 로직을 처리한다.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from agv_conflict_resolver.domain.enums import RiskLevel, ScheduleCommand


@dataclass(frozen=True)
class DomainEvent:
    """도메인 이벤트 기본 클래스.

    Args:
        timestamp: 이벤트 발생 시각 (UTC).
    """

    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True)
class CollisionDetectedEvent(DomainEvent):
    """경로 교차 기반 충돌 검출 이벤트.

    Args:
        agv1_id: 첫 번째 AGV 식별자.
        agv2_id: 두 번째 AGV 식별자.
        x: 충돌 지점 X 좌표 (m).
        y: 충돌 지점 Y 좌표 (m).
        delta_t: 도착 시간 차이 (s).
    """

    agv1_id: str = ""
    agv2_id: str = ""
    x: float = 0.0
    y: float = 0.0
    delta_t: float = 0.0


@dataclass(frozen=True)
class CollisionPredictedEvent(DomainEvent):
    """시간 샘플링 기반 충돌 예측 이벤트.

    Args:
        agv1_id: 첫 번째 AGV 식별자.
        agv2_id: 두 번째 AGV 식별자.
        collision_time: 예측 충돌 시각 (s).
        risk_level: 위험 등급.
    """

    agv1_id: str = ""
    agv2_id: str = ""
    collision_time: float = 0.0
    risk_level: RiskLevel = RiskLevel.LOW


@dataclass(frozen=True)
class ScheduleIssuedEvent(DomainEvent):
    """스케줄 명령 발행 이벤트.

    Args:
        agv_id: 대상 AGV 식별자.
        command: 스케줄 명령.
        wait_time: 보정된 대기 시간 (s).
    """

    agv_id: str = ""
    command: ScheduleCommand = ScheduleCommand.PROCEED
    wait_time: float = 0.0
