"""도메인 이벤트 단위 테스트."""

from datetime import datetime

from agv_conflict_resolver.domain.enums import RiskLevel, ScheduleCommand
from agv_conflict_resolver.domain.events.conflict_events import (
    CollisionDetectedEvent,
    CollisionPredictedEvent,
    DomainEvent,
    ScheduleIssuedEvent,
)


class TestDomainEvents:
    def test_timestamp_is_utc(self):
        event = DomainEvent()
        assert isinstance(event.timestamp, datetime)
        assert event.timestamp.tzinfo is not None

    def test_collision_detected(self):
        event = CollisionDetectedEvent(
            agv1_id='A', agv2_id='B', x=5.0, y=0.0, delta_t=0.0,
        )
        assert isinstance(event, DomainEvent)
        assert event.agv1_id == 'A'
        assert event.x == 5.0

    def test_collision_predicted(self):
        event = CollisionPredictedEvent(
            agv1_id='A', agv2_id='B', collision_time=2.0,
            risk_level=RiskLevel.HIGH,
        )
        assert event.risk_level == 'high'

    def test_schedule_issued_defaults(self):
        event = ScheduleIssuedEvent(agv_id='B')
        assert event.command == ScheduleCommand.PROCEED
        assert event.wait_time == 0.0
