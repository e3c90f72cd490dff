"""설정 포트 인터페이스.

애플리케이션 설정의 로딩을 추상화한다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from pallet_quote.domain.enums import ScanStrategy


@dataclass(frozen=True)
class ScanConfig:
    """팔레트 스캔 설정.

    Args:
        strategy: 스캔 전략.
        camera_radius_m: 카메라 기준 전경 반경 (m).
        cluster_radius_m: 무게중심 기준 클러스터 반경 (m).
        max_samples: 프레임당 최대 샘플 수.
        min_extent_m: 유효 박스의 축별 최소 크기 (m).
        stability_epsilon_m: 안정 판정 코너 이동 한계 (m).
        required_stable_frames: 완료에 필요한 연속 안정 프레임 수.
        view_angle_threshold: 시야 방향 판정 코사인 임계값.
        timeout_sec: 스캔 제한 시간 (초).
    """

    strategy: ScanStrategy = ScanStrategy.STABILITY
    camera_radius_m: float = 1.5
    cluster_radius_m: float = 0.3
    max_samples: int = 2000
    min_extent_m: float = 0.05
    stability_epsilon_m: float = 0.01
    required_stable_frames: int = 30
    view_angle_threshold: float = 0.7
    timeout_sec: float = 30.0


@dataclass(frozen=True)
class QuoteApiConfig:
    """운임 견적 API 접속 설정.

    Args:
        base_url: API 호스트 URL.
        quote_path: 견적 엔드포인트 경로.
        api_key: API 키 (환경 변수에서 주입, YAML에 두지 않는다).
        timeout_sec: HTTP 요청 제한 시간 (초).
    """

    base_url: str = 'https://stg.wearewarp.com'
    quote_path: str = '/api/v1/freights/quote'
    api_key: str = field(default='', repr=False)
    timeout_sec: float = 15.0

    @property
    def quote_url(self) -> str:
        return self.base_url.rstrip('/') + self.quote_path


@dataclass(frozen=True)
class MqttConfig:
    """MQTT 브로커 접속 설정 (이벤트 미러링용).

    Args:
        enabled: MQTT 미러링 사용 여부.
        broker_host: 브로커 호스트 주소.
        broker_port: 브로커 포트 번호.
        keepalive_sec: 연결 유지 간격 (초).
        reconnect_max_delay_sec: 재연결 최대 대기 시간 (초).
        topic_prefix: 이벤트 토픽 prefix.
    """

    enabled: bool = False
    broker_host: str = 'localhost'
    broker_port: int = 1883
    keepalive_sec: int = 60
    reconnect_max_delay_sec: int = 60
    topic_prefix: str = 'pallet_quote'


@dataclass(frozen=True)
class AppConfig:
    """애플리케이션 전체 설정."""

    scan: ScanConfig = field(default_factory=ScanConfig)
    quote_api: QuoteApiConfig = field(default_factory=QuoteApiConfig)
    mqtt: MqttConfig = field(default_factory=MqttConfig)


class ConfigPort(ABC):
    """설정 로더 인터페이스."""

    @abstractmethod
    def load(self) -> AppConfig:
        """설정을 로드하여 AppConfig로 반환한다.

        Raises:
            ConfigError: 설정값이 유효하지 않을 때.
        """
