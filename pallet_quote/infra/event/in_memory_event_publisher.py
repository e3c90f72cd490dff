"""인메모리 도메인 이벤트 발행자 구현체.

스캔 워커/견적 워커가 발행한 이벤트를 큐에 넣고, 관찰 계층(화면, CLI)이
자신의 스레드에서 dispatch_pending()을 호출하여 핸들러를 실행한다.
핸들러는 발행한 워커 스레드에서 실행되지 않는다.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
import logging
import queue
import threading

from pallet_quote.domain.events.pallet_events import DomainEvent
from pallet_quote.usecase.ports.event_publisher import EventPublisher

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], None]


class InMemoryEventPublisher(EventPublisher):
    """큐 기반 인메모리 EventPublisher.

    publish()는 어느 스레드에서나 호출할 수 있으며 이벤트를 적재만 한다.
    dispatch_pending()을 호출한 스레드가 발행 순서대로 핸들러를 실행한다.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = (
            defaultdict(list)
        )
        self._pending: queue.Queue[DomainEvent] = queue.Queue()

    @property
    def pending_count(self) -> int:
        """아직 전달되지 않은 이벤트 수 (근사값)."""
        return self._pending.qsize()

    def publish(self, event: DomainEvent) -> None:
        self._pending.put(event)

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        with self._lock:
            self._handlers[event_type].append(handler)
        logger.debug('Subscribed to event: %s', event_type.__name__)

    def dispatch_pending(self, timeout: float | None = None) -> int:
        """대기 중인 이벤트를 호출 스레드에서 구독자에게 전달한다.

        개별 핸들러의 예외는 로깅 후 무시하여
        다른 핸들러 실행에 영향을 주지 않는다.

        Args:
            timeout: 대기 이벤트가 없을 때 첫 이벤트를 기다릴 시간 (초).
                None이면 기다리지 않는다.

        Returns:
            전달한 이벤트 수.
        """
        dispatched = 0
        if timeout is not None:
            try:
                event = self._pending.get(timeout=timeout)
            except queue.Empty:
                return 0
            self._deliver(event)
            dispatched += 1

        while True:
            try:
                event = self._pending.get_nowait()
            except queue.Empty:
                return dispatched
            self._deliver(event)
            dispatched += 1

    def _deliver(self, event: DomainEvent) -> None:
        event_type = type(event)
        with self._lock:
            handlers = list(self._handlers.get(event_type, []))

        logger.debug(
            'Dispatching event: %s (handlers=%d)',
            event_type.__name__, len(handlers),
        )
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(
                    'Error in event handler for %s', event_type.__name__
                )
