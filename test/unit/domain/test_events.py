"""도메인 이벤트 단위 테스트."""

from datetime import datetime

import pytest

from pallet_quote.domain.enums import QuoteStatus, ScanPhase
from pallet_quote.domain.events.pallet_events import (
    DomainEvent,
    MeasurementCompletedEvent,
    QuoteState,
    QuoteStateChangedEvent,
    ScanFailedEvent,
    ScanSnapshotEvent,
)
from pallet_quote.domain.value_objects.measurement import PalletMeasurement


class TestDomainEvent:
    def test_timestamp_auto_set(self):
        event = DomainEvent()
        assert isinstance(event.timestamp, datetime)
        assert event.timestamp.tzinfo is not None

    def test_frozen(self):
        event = DomainEvent()
        with pytest.raises(AttributeError):
            event.timestamp = datetime.now()


class TestScanEvents:
    def test_snapshot_default(self):
        event = ScanSnapshotEvent()
        assert event.snapshot.phase == ScanPhase.INITIAL

    def test_measurement_completed(self):
        m = PalletMeasurement(48.0, 40.0, 30.0)
        event = MeasurementCompletedEvent(measurement=m)
        assert event.measurement.length == 48.0

    def test_scan_failed(self):
        event = ScanFailedEvent(reason='Scan timed out after 30 seconds')
        assert 'timed out' in event.reason


class TestQuoteState:
    def test_default_idle(self):
        state = QuoteState()
        assert state.status == QuoteStatus.IDLE
        assert not state.is_loading
        assert state.response is None

    def test_loading(self):
        assert QuoteState(status=QuoteStatus.LOADING).is_loading

    def test_changed_event(self):
        state = QuoteState(
            status=QuoteStatus.FAILED, error_code=404,
            error_message='invalid zip',
        )
        event = QuoteStateChangedEvent(state=state)
        assert event.state.error_code == 404
