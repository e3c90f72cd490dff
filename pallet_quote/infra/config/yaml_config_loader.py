"""YAML 파일 기반 설정 로더 구현체."""

from __future__ import annotations

from collections.abc import Mapping
import logging
import math
import os
from pathlib import Path
from typing import Any

import yaml

from pallet_quote.domain.enums import ScanStrategy
from pallet_quote.domain.exceptions import ConfigError
from pallet_quote.usecase.ports.config_port import (
    AppConfig,
    ConfigPort,
    MqttConfig,
    QuoteApiConfig,
    ScanConfig,
)

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = (
    Path(__file__).resolve().parent.parent.parent
    / "config"
    / "default_params.yaml"
)

DEFAULT_API_KEY_ENV = "PALLET_QUOTE_API_KEY"


def _section(params: dict[str, Any], name: str) -> dict[str, Any]:
    data = params.get(name) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{name} section must be a mapping: {data!r}")
    return data


def _number(
    section: str,
    data: dict[str, Any],
    key: str,
    default: float,
    kind: type = float,
) -> Any:
    value = data.get(key, default)
    if isinstance(value, bool):
        raise ConfigError(f"{section}.{key} must be a number: {value!r}")
    try:
        number = kind(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ConfigError(
            f"{section}.{key} must be a number: {value!r}"
        ) from exc
    if not math.isfinite(number):
        raise ConfigError(f"{section}.{key} must be finite: {value!r}")
    return number


def _flag(section: str, data: dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{section}.{key} must be true or false: {value!r}")
    return value


class YamlConfigLoader(ConfigPort):
    """ConfigPort의 YAML 파일 구현체.

    YAML 파일에서 설정을 읽어 AppConfig로 변환한다.
    파일이 없으면 기본값을 사용한다.
    API 키는 YAML이 아닌 환경 변수(quote_api.api_key_env)에서 읽는다.

    Args:
        config_path: YAML 설정 파일 경로. None이면 기본 경로 사용.
        environ: 환경 변수 매핑. None이면 os.environ.
    """

    def __init__(
        self,
        config_path: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._path = Path(config_path) if config_path else _DEFAULT_CONFIG_PATH
        self._environ = os.environ if environ is None else environ

    def load(self) -> AppConfig:
        """YAML 파일에서 설정을 로드한다.

        Raises:
            ConfigError: YAML 형식이나 설정 값이 잘못되었을 때.
        """
        raw = self._read_yaml()
        params = self._extract_params(raw)

        config = AppConfig(
            scan=self._build_scan(_section(params, "scan")),
            quote_api=self._build_quote_api(_section(params, "quote_api")),
            mqtt=self._build_mqtt(_section(params, "mqtt")),
        )

        logger.info("Config loaded from %s", self._path)
        return config

    def _build_scan(self, data: dict[str, Any]) -> ScanConfig:
        defaults = ScanConfig()
        strategy_name = data.get("strategy", defaults.strategy.value)
        try:
            strategy = ScanStrategy(strategy_name)
        except ValueError as exc:
            raise ConfigError(
                f"Unknown scan strategy: {strategy_name!r}"
            ) from exc

        scan = ScanConfig(
            strategy=strategy,
            camera_radius_m=_number(
                "scan", data, "camera_radius_m", defaults.camera_radius_m
            ),
            cluster_radius_m=_number(
                "scan", data, "cluster_radius_m", defaults.cluster_radius_m
            ),
            max_samples=_number(
                "scan", data, "max_samples", defaults.max_samples, int
            ),
            min_extent_m=_number(
                "scan", data, "min_extent_m", defaults.min_extent_m
            ),
            stability_epsilon_m=_number(
                "scan", data, "stability_epsilon_m",
                defaults.stability_epsilon_m,
            ),
            required_stable_frames=_number(
                "scan", data, "required_stable_frames",
                defaults.required_stable_frames, int,
            ),
            view_angle_threshold=_number(
                "scan", data, "view_angle_threshold",
                defaults.view_angle_threshold,
            ),
            timeout_sec=_number(
                "scan", data, "timeout_sec", defaults.timeout_sec
            ),
        )
        self._validate_scan(scan)
        return scan

    @staticmethod
    def _validate_scan(scan: ScanConfig) -> None:
        positive = {
            "camera_radius_m": scan.camera_radius_m,
            "cluster_radius_m": scan.cluster_radius_m,
            "stability_epsilon_m": scan.stability_epsilon_m,
            "timeout_sec": scan.timeout_sec,
            "max_samples": scan.max_samples,
            "required_stable_frames": scan.required_stable_frames,
        }
        for name, value in positive.items():
            if value <= 0:
                raise ConfigError(f"scan.{name} must be positive: {value}")
        if not 0.0 < scan.view_angle_threshold < 1.0:
            raise ConfigError(
                "scan.view_angle_threshold must be in (0, 1): "
                f"{scan.view_angle_threshold}"
            )

    def _build_quote_api(self, data: dict[str, Any]) -> QuoteApiConfig:
        defaults = QuoteApiConfig()
        if "api_key" in data:
            logger.warning(
                "quote_api.api_key in YAML is ignored, "
                "set it through the environment instead"
            )

        key_env = data.get("api_key_env", DEFAULT_API_KEY_ENV)
        api_key = self._environ.get(key_env, "")
        if not api_key:
            logger.warning(
                "Environment variable %s is not set, quote requests "
                "will be refused", key_env,
            )

        return QuoteApiConfig(
            base_url=data.get("base_url", defaults.base_url),
            quote_path=data.get("quote_path", defaults.quote_path),
            api_key=api_key,
            timeout_sec=_number(
                "quote_api", data, "timeout_sec", defaults.timeout_sec
            ),
        )

    @staticmethod
    def _build_mqtt(data: dict[str, Any]) -> MqttConfig:
        defaults = MqttConfig()
        return MqttConfig(
            enabled=_flag("mqtt", data, "enabled", defaults.enabled),
            broker_host=data.get("broker_host", defaults.broker_host),
            broker_port=_number(
                "mqtt", data, "broker_port", defaults.broker_port, int
            ),
            keepalive_sec=_number(
                "mqtt", data, "keepalive_sec", defaults.keepalive_sec, int
            ),
            reconnect_max_delay_sec=_number(
                "mqtt", data, "reconnect_max_delay_sec",
                defaults.reconnect_max_delay_sec, int,
            ),
            topic_prefix=data.get("topic_prefix", defaults.topic_prefix),
        )

    def _read_yaml(self) -> dict[str, Any]:
        """YAML 파일을 dict로 읽는다."""
        if not self._path.exists():
            logger.warning(
                "Config file not found: %s, using defaults", self._path
            )
            return {}

        with open(self._path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ConfigError(
                    f"Malformed config file {self._path}: {exc}"
                ) from exc

        if not isinstance(data, dict):
            logger.warning("Invalid YAML format, using defaults")
            return {}

        return data

    @staticmethod
    def _extract_params(raw: dict[str, Any]) -> dict[str, Any]:
        """최상위 pallet_quote 섹션이 있으면 그 안을 사용한다."""
        node_data = raw.get("pallet_quote", raw)
        if isinstance(node_data, dict):
            return node_data
        return {}
