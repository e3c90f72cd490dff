"""MqttClient 유닛 테스트."""

from unittest.mock import MagicMock, patch

import paho.mqtt.client as mqtt
import pytest

from pallet_quote.infra.mqtt.mqtt_client import MqttClient
from pallet_quote.usecase.ports.config_port import MqttConfig


@pytest.fixture
def config():
    """Create test MQTT configuration."""
    return MqttConfig(
        enabled=True,
        broker_host='localhost',
        broker_port=1883,
        keepalive_sec=60,
        reconnect_max_delay_sec=30,
    )


@pytest.fixture
def mock_paho():
    with patch(
        'pallet_quote.infra.mqtt.mqtt_client.mqtt.Client'
    ) as MockPaho:
        paho = MagicMock()
        MockPaho.return_value = paho
        yield MockPaho, paho


@pytest.fixture
def client(config, mock_paho):
    """Create test MQTT client with mocked paho client."""
    return MqttClient(config, client_id='test')


def _reason(is_failure):
    rc = MagicMock()
    rc.is_failure = is_failure
    return rc


class TestConstruction:
    def test_uses_callback_api_v2(self, client, mock_paho):
        MockPaho, paho = mock_paho
        args, kwargs = MockPaho.call_args
        assert args[0] == mqtt.CallbackAPIVersion.VERSION2
        assert kwargs['client_id'] == 'test'
        paho.reconnect_delay_set.assert_called_once_with(
            min_delay=1, max_delay=30,
        )


class TestConnection:
    def test_connect_starts_loop(self, client, mock_paho):
        _, paho = mock_paho
        client.connect()

        paho.connect.assert_called_once_with(
            host='localhost', port=1883, keepalive=60,
        )
        paho.loop_start.assert_called_once()

    def test_on_connect_success(self, client):
        client._on_connect(None, None, {}, _reason(False), None)
        assert client.is_connected

    def test_on_connect_failure(self, client):
        client._on_connect(None, None, {}, _reason(True), None)
        assert not client.is_connected

    def test_on_disconnect(self, client):
        client._on_connect(None, None, {}, _reason(False), None)
        client._on_disconnect(None, None, {}, _reason(True), None)
        assert not client.is_connected

    def test_disconnect(self, client, mock_paho):
        _, paho = mock_paho
        client._on_connect(None, None, {}, _reason(False), None)
        client.disconnect()

        paho.loop_stop.assert_called_once()
        paho.disconnect.assert_called_once()
        assert not client.is_connected


class TestPublish:
    def test_publish_encodes_payload(self, client, mock_paho):
        _, paho = mock_paho
        paho.publish.return_value.rc = mqtt.MQTT_ERR_SUCCESS

        client.publish('pallet_quote/scan_failed', '{"a": 1}', qos=0)

        paho.publish.assert_called_once_with(
            'pallet_quote/scan_failed', b'{"a": 1}', qos=0, retain=False,
        )

    def test_publish_failure_logged(self, client, mock_paho, caplog):
        _, paho = mock_paho
        paho.publish.return_value.rc = mqtt.MQTT_ERR_NO_CONN

        client.publish('t', '{}')

        assert 'MQTT publish failed' in caplog.text
