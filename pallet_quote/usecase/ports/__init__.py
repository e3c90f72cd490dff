"""유스케이스 포트 인터페이스 (ABC).

infra 레이어에서 구현해야 하는 추상 인터페이스를 정의한다.
"""

from pallet_quote.usecase.ports.config_port import (
    AppConfig,
    ConfigPort,
    MqttConfig,
    QuoteApiConfig,
    ScanConfig,
)
from pallet_quote.usecase.ports.event_publisher import EventPublisher
from pallet_quote.usecase.ports.pallet_scanner import PalletScanner
from pallet_quote.usecase.ports.quote_gateway import QuoteGateway

__all__ = [
    "AppConfig",
    "ConfigPort",
    "EventPublisher",
    "MqttConfig",
    "PalletScanner",
    "QuoteApiConfig",
    "QuoteGateway",
    "ScanConfig",
]
