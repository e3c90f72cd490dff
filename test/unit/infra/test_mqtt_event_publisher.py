"""MqttEventPublisher 유닛 테스트."""

import json
from unittest.mock import MagicMock

import pytest

from pallet_quote.domain.events.pallet_events import (
    ScanFailedEvent,
    ScanSnapshotEvent,
)
from pallet_quote.infra.mqtt.mqtt_event_publisher import MqttEventPublisher


@pytest.fixture
def mqtt_client():
    client = MagicMock()
    client.is_connected = True
    return client


class TestMqttEventPublisher:
    def test_mirrors_to_topic(self, mqtt_client):
        publisher = MqttEventPublisher(mqtt_client, 'pallet_quote/')

        publisher.publish(ScanFailedEvent(reason='timeout'))

        topic, payload = mqtt_client.publish.call_args[0]
        assert topic == 'pallet_quote/scan_failed'
        assert json.loads(payload)['reason'] == 'timeout'

    def test_local_subscribers_notified(self, mqtt_client):
        publisher = MqttEventPublisher(mqtt_client, 'pallet_quote')
        handler = MagicMock()
        publisher.subscribe(ScanSnapshotEvent, handler)

        event = ScanSnapshotEvent()
        publisher.publish(event)
        handler.assert_not_called()
        publisher.dispatch_pending()

        handler.assert_called_once_with(event)

    def test_skips_mqtt_when_disconnected(self, mqtt_client):
        mqtt_client.is_connected = False
        publisher = MqttEventPublisher(mqtt_client, 'pallet_quote')
        handler = MagicMock()
        publisher.subscribe(ScanFailedEvent, handler)

        publisher.publish(ScanFailedEvent())
        publisher.dispatch_pending()

        handler.assert_called_once()
        mqtt_client.publish.assert_not_called()
