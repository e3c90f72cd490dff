"""도메인 이벤트 직렬화 유닛 테스트."""

from datetime import datetime, UTC
import json

from pallet_quote.domain.enums import QuoteStatus, ScanPhase
from pallet_quote.domain.events.pallet_events import (
    MeasurementCompletedEvent,
    QuoteState,
    QuoteStateChangedEvent,
    ScanSnapshotEvent,
)
from pallet_quote.domain.value_objects.measurement import PalletMeasurement
from pallet_quote.domain.value_objects.scan import ScanSnapshot
from pallet_quote.infra.mqtt.event_serializer import (
    _camel_to_snake,
    _snake_to_camel,
    event_topic_name,
    serialize_event,
)


class TestNameConversion:
    def test_snake_to_camel(self):
        assert _snake_to_camel('expiration_time_utc') == 'expirationTimeUtc'
        assert _snake_to_camel('phase') == 'phase'

    def test_camel_to_snake(self):
        assert _camel_to_snake('ScanSnapshotEvent') == 'scan_snapshot_event'
        assert _camel_to_snake('errorCode') == 'error_code'


class TestEventTopicName:
    def test_strips_event_suffix(self):
        assert event_topic_name(ScanSnapshotEvent()) == 'scan_snapshot'
        assert event_topic_name(
            MeasurementCompletedEvent()
        ) == 'measurement_completed'
        assert event_topic_name(
            QuoteStateChangedEvent()
        ) == 'quote_state_changed'


class TestSerializeEvent:
    def test_snapshot_event(self):
        snapshot = ScanSnapshot(
            phase=ScanPhase.COMPLETE,
            message='Scan complete',
            progress=1.0,
            measurement=PalletMeasurement(48.0, 40.0, 30.0),
        )
        event = ScanSnapshotEvent(
            timestamp=datetime(2026, 10, 19, 12, 0, 0, tzinfo=UTC),
            snapshot=snapshot,
        )

        data = json.loads(serialize_event(event))

        assert data['event'] == 'scan_snapshot'
        assert data['timestamp'] == '2026-10-19T12:00:00.000Z'
        assert data['snapshot']['phase'] == 'complete'
        assert data['snapshot']['measurement'] == {
            'length': 48.0, 'width': 40.0, 'height': 30.0,
        }
        # None 필드는 생략
        assert 'boundingBox' not in data['snapshot']
        assert data['snapshot']['measurements'] == []

    def test_quote_state_event(self):
        event = QuoteStateChangedEvent(state=QuoteState(
            status=QuoteStatus.FAILED, error_code=404,
            error_message='invalid zip',
        ))

        data = json.loads(serialize_event(event))

        assert data['state'] == {
            'status': 'failed',
            'errorCode': 404,
            'errorMessage': 'invalid zip',
        }
