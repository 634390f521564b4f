"""InMemoryEventPublisher 단위 테스트."""

import pytest

from agv_conflict_resolver.domain.enums import RiskLevel, ScheduleCommand
from agv_conflict_resolver.domain.events.conflict_events import (
    CollisionDetectedEvent,
    CollisionPredictedEvent,
    DomainEvent,
    ScheduleIssuedEvent,
)
from agv_conflict_resolver.infra.event import InMemoryEventPublisher


@pytest.fixture
def publisher():
    return InMemoryEventPublisher()


class TestPublishSubscribe:
    def test_handler_receives_event(self, publisher):
        received = []
        publisher.subscribe(CollisionDetectedEvent, received.append)

        publisher.publish(CollisionDetectedEvent(agv1_id="A", agv2_id="B"))

        assert len(received) == 1
        assert received[0].agv2_id == "B"

    def test_multiple_handlers(self, publisher):
        r1, r2 = [], []
        publisher.subscribe(ScheduleIssuedEvent, r1.append)
        publisher.subscribe(ScheduleIssuedEvent, r2.append)

        publisher.publish(
            ScheduleIssuedEvent(agv_id="A", command=ScheduleCommand.WAIT)
        )

        assert len(r1) == 1
        assert len(r2) == 1

    def test_type_isolation(self, publisher):
        detected = []
        predicted = []
        publisher.subscribe(CollisionDetectedEvent, detected.append)
        publisher.subscribe(CollisionPredictedEvent, predicted.append)

        publisher.publish(CollisionDetectedEvent(agv1_id="A"))
        publisher.publish(
            CollisionPredictedEvent(agv1_id="A", risk_level=RiskLevel.HIGH)
        )

        assert len(detected) == 1
        assert len(predicted) == 1

    def test_base_type_receives_all(self, publisher):
        received = []
        publisher.subscribe(DomainEvent, received.append)

        publisher.publish(CollisionDetectedEvent(agv1_id="A"))
        publisher.publish(ScheduleIssuedEvent(agv_id="A"))

        assert len(received) == 2

    def test_no_handler_no_error(self, publisher):
        publisher.publish(CollisionDetectedEvent(agv1_id="A"))

    def test_handler_exception_does_not_break_others(self, publisher):
        results = []

        def bad_handler(event):
            raise ValueError("boom")

        def good_handler(event):
            results.append(event)

        publisher.subscribe(ScheduleIssuedEvent, bad_handler)
        publisher.subscribe(ScheduleIssuedEvent, good_handler)

        publisher.publish(ScheduleIssuedEvent(agv_id="A"))

        assert len(results) == 1


class TestUnsubscribe:
    def test_unsubscribed_handler_not_called(self, publisher):
        received = []
        publisher.subscribe(ScheduleIssuedEvent, received.append)

        publisher.unsubscribe(ScheduleIssuedEvent, received.append)
        publisher.publish(ScheduleIssuedEvent(agv_id="A"))

        assert received == []

    def test_unknown_handler_ignored(self, publisher):
        publisher.unsubscribe(ScheduleIssuedEvent, print)
