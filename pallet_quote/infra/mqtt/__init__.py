"""MQTT 통신 인프라 (이벤트 미러링)."""

from pallet_quote.infra.mqtt.mqtt_client import MqttClient
from pallet_quote.infra.mqtt.mqtt_event_publisher import MqttEventPublisher

__all__ = ["MqttClient", "MqttEventPublisher"]
