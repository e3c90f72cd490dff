"""설정에 따라 팔레트 스캐너 구현을 선택한다."""

from collections.abc import Callable
import time

from pallet_quote.domain.enums import ScanStrategy
from pallet_quote.domain.exceptions import ConfigError
from pallet_quote.usecase.manual_scanner import ManualPalletScanner
from pallet_quote.usecase.ports.config_port import ScanConfig
from pallet_quote.usecase.ports.pallet_scanner import PalletScanner
from pallet_quote.usecase.stability_scanner import StabilityPalletScanner


def create_scanner(
    config: ScanConfig,
    clock: Callable[[], float] = time.monotonic,
) -> PalletScanner:
    """ScanConfig.strategy에 해당하는 스캐너를 생성한다.

    Raises:
        ConfigError: 알 수 없는 전략일 때.
    """
    if config.strategy == ScanStrategy.STABILITY:
        return StabilityPalletScanner(config, clock=clock)
    if config.strategy == ScanStrategy.MANUAL:
        return ManualPalletScanner()
    raise ConfigError(f'Unknown scan strategy: {config.strategy!r}')
