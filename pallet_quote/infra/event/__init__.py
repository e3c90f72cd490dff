"""도메인 이벤트 발행 인프라."""

from pallet_quote.infra.event.in_memory_event_publisher import (
    InMemoryEventPublisher,
)

__all__ = ["InMemoryEventPublisher"]
