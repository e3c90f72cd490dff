"""MQTT 미러링 이벤트 발행자 구현체.

이벤트를 프로세스 내부 큐에 적재하고, 같은 이벤트를 JSON으로
직렬화하여 MQTT 토픽으로 즉시 발행한다. 내부 구독자는
dispatch_pending()을 호출한 스레드에서 이벤트를 받는다.
토픽: {topic_prefix}/{event_name} (e.g. 'pallet_quote/scan_snapshot')
"""

from __future__ import annotations

from collections.abc import Callable
import logging

from pallet_quote.domain.events.pallet_events import DomainEvent
from pallet_quote.infra.event.in_memory_event_publisher import (
    InMemoryEventPublisher,
)
from pallet_quote.infra.mqtt.event_serializer import (
    event_topic_name,
    serialize_event,
)
from pallet_quote.infra.mqtt.mqtt_client import MqttClient
from pallet_quote.usecase.ports.event_publisher import EventPublisher

logger = logging.getLogger(__name__)


class MqttEventPublisher(EventPublisher):
    """EventPublisher의 MQTT 미러링 구현체.

    Args:
        mqtt_client: MQTT 클라이언트.
        topic_prefix: 토픽 prefix.
        local: 프로세스 내부 발행자. None이면 새로 생성.
    """

    def __init__(
        self,
        mqtt_client: MqttClient,
        topic_prefix: str,
        local: InMemoryEventPublisher | None = None,
    ) -> None:
        self._mqtt = mqtt_client
        self._prefix = topic_prefix.rstrip('/')
        self._local = local or InMemoryEventPublisher()

    def publish(self, event: DomainEvent) -> None:
        self._local.publish(event)

        if not self._mqtt.is_connected:
            logger.debug(
                'MQTT not connected, skipping mirror of %s',
                type(event).__name__,
            )
            return

        topic = f'{self._prefix}/{event_topic_name(event)}'
        self._mqtt.publish(topic, serialize_event(event), qos=0)

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: Callable[[DomainEvent], None],
    ) -> None:
        self._local.subscribe(event_type, handler)

    def dispatch_pending(self, timeout: float | None = None) -> int:
        return self._local.dispatch_pending(timeout)
