"""인메모리 도메인 이벤트 발행자 구현체."""

import logging
import threading
from collections import defaultdict

from agv_conflict_resolver.domain.events.conflict_events import DomainEvent
from agv_conflict_resolver.usecase.ports.event_publisher import (
    EventHandler,
    EventPublisher,
)

logger = logging.getLogger(__name__)


class InMemoryEventPublisher(EventPublisher):
    """EventPublisher의 인메모리 구현체.

    동기 방식으로 이벤트를 핸들러에 전달한다.
    상위 이벤트 타입에 등록한 핸들러도 하위 타입 이벤트를 받는다.
    (DomainEvent 구독 = 전체 구독)
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = (
            defaultdict(list)
        )

    def publish(self, event: DomainEvent) -> None:
        """도메인 이벤트를 발행한다.

        구체 타입 핸들러부터 상위 타입 핸들러 순으로 호출한다.
        개별 핸들러의 예외는 로깅 후 다음 핸들러로 넘어간다.
        """
        event_type = type(event)
        with self._lock:
            handlers = [
                handler
                for klass in event_type.__mro__
                for handler in self._handlers.get(klass, [])
            ]

        logger.debug(
            "Publishing event: %s (handlers=%d)",
            event_type.__name__, len(handlers),
        )

        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "Error in event handler for %s", event_type.__name__
                )

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """특정 타입(및 하위 타입)의 도메인 이벤트를 구독한다."""
        with self._lock:
            self._handlers[event_type].append(handler)
        logger.debug("Subscribed to event: %s", event_type.__name__)

    def unsubscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """구독을 해제한다. 등록되지 않은 핸들러는 무시한다."""
        with self._lock:
            handlers = self._handlers.get(event_type, [])
            if handler in handlers:
                handlers.remove(handler)
