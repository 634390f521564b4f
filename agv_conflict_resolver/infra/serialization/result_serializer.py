"""충돌 엔진 결과 JSON 직렬화.

도메인 결과 값 → camelCase JSON 변환을 담당한다.
snake_case(도메인) → camelCase(외부 디스패처) 변환은
이 모듈에서만 처리한다.
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from enum import Enum
import json
import re
from typing import Any

from agv_conflict_resolver.domain.value_objects.collision import (
    CollisionEvent,
    CollisionPrediction,
    ScheduleAction,
)

_SNAKE_RE = re.compile(r'_([a-z0-9])')


def _snake_to_camel(name: str) -> str:
    """snake_case → camelCase 변환."""
    return _SNAKE_RE.sub(lambda m: m.group(1).upper(), name)


def _serialize_value(value: Any) -> Any:
    """단일 값을 JSON 호환 타입으로 변환한다."""
    if value is None:
        return None
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_serialize_value(v) for v in value]
    if is_dataclass(value) and not isinstance(value, type):
        return _dataclass_to_dict(value)
    return value


def _dataclass_to_dict(obj: Any) -> dict[str, Any]:
    """dataclass를 camelCase JSON dict로 변환한다."""
    result: dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        result[_snake_to_camel(f.name)] = _serialize_value(value)
    return result


def action_to_dict(action: ScheduleAction) -> dict[str, Any]:
    """ScheduleAction을 dict로 변환한다 (보정된 대기 시간 포함)."""
    data = _dataclass_to_dict(action)
    data['effectiveWaitTime'] = action.effective_wait_time
    return data


def prediction_to_dict(prediction: CollisionPrediction) -> dict[str, Any]:
    """CollisionPrediction을 dict로 변환한다 (위험 등급 포함)."""
    data = _dataclass_to_dict(prediction)
    data['riskLevel'] = prediction.risk_level.value
    return data


def serialize_schedule(actions: list[ScheduleAction]) -> str:
    """스케줄 명령 목록을 JSON 문자열로 직렬화한다."""
    data = {'actions': [action_to_dict(a) for a in actions]}
    return json.dumps(data, ensure_ascii=False)


def serialize_collision_events(events: list[CollisionEvent]) -> str:
    """충돌 이벤트 목록을 JSON 문자열로 직렬화한다."""
    data = {'collisions': [_dataclass_to_dict(e) for e in events]}
    return json.dumps(data, ensure_ascii=False)


def serialize_predictions(predictions: list[CollisionPrediction]) -> str:
    """충돌 예측 목록을 JSON 문자열로 직렬화한다."""
    data = {'predictions': [prediction_to_dict(p) for p in predictions]}
    return json.dumps(data, ensure_ascii=False)
