"""충돌 엔진 도메인 열거형 정의."""

from enum import StrEnum


class ScheduleCommand(StrEnum):
    """충돌 해소 스케줄 명령."""

    PROCEED = 'PROCEED'
    WAIT = 'WAIT'


class RiskLevel(StrEnum):
    """예측 충돌 위험 등급."""

    CRITICAL = 'critical'
    HIGH = 'high'
    MEDIUM = 'medium'
    LOW = 'low'


class ForecastMode(StrEnum):
    """예측 검출기의 위치 예측 방식.

    FIXED_BASE: 모든 샘플 시각을 동일한 기준 상태에서 예측한다 (상태 불변).
    COMPOUNDING: 샘플마다 위치를 확정하며 누적 전진한다 (상태 변경).
    """

    FIXED_BASE = 'FIXED_BASE'
    COMPOUNDING = 'COMPOUNDING'
