"""충돌 엔진 이벤트 발행 포트 인터페이스.

검출/예측/스케줄 결과를 외부 관찰자(로깅, 디스패처 연동)에게
알리는 경로를 추상화한다.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from agv_conflict_resolver.domain.events.conflict_events import DomainEvent

EventHandler = Callable[[DomainEvent], None]


class EventPublisher(ABC):
    """충돌 엔진 이벤트 버스 인터페이스.

    상위 타입으로 구독하면 하위 타입 이벤트도 전달받는다.
    """

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """이벤트를 구독자에게 전달한다.

        Args:
            event: CollisionDetectedEvent 등 발행할 이벤트.
        """

    @abstractmethod
    def subscribe(
        self, event_type: type[DomainEvent], handler: EventHandler
    ) -> None:
        """이벤트 타입(및 하위 타입)에 핸들러를 등록한다.

        Args:
            event_type: 구독할 이벤트 타입. DomainEvent면 전체 구독.
            handler: 이벤트를 인자로 받는 콜백.
        """

    @abstractmethod
    def unsubscribe(
        self, event_type: type[DomainEvent], handler: EventHandler
    ) -> None:
        """등록한 핸들러를 해제한다."""
