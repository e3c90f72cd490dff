"""팔레트 견적 도메인 이벤트."""

from pallet_quote.domain.events.pallet_events import (
    DomainEvent,
    MeasurementCompletedEvent,
    QuoteState,
    QuoteStateChangedEvent,
    ScanFailedEvent,
    ScanSnapshotEvent,
)

__all__ = [
    "DomainEvent",
    "MeasurementCompletedEvent",
    "QuoteState",
    "QuoteStateChangedEvent",
    "ScanFailedEvent",
    "ScanSnapshotEvent",
]
