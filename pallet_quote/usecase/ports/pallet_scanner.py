"""팔레트 스캐너 포트 인터페이스.

포인트 클라우드 안정화 방식과 수동 4점 방식이
동일한 인터페이스로 교체 가능하도록 추상화한다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pallet_quote.domain.value_objects.geometry import Point3D
from pallet_quote.domain.value_objects.scan import (
    DeviceCapabilities,
    ScanFrame,
    ScanSnapshot,
)


class PalletScanner(ABC):
    """팔레트 치수 스캐너 인터페이스.

    내부 상태는 한 스레드(스캔 세션 워커)에서만 변경해야 하며
    외부에는 snapshot()의 불변 스냅샷만 공개한다.
    """

    @abstractmethod
    def start(self, capabilities: DeviceCapabilities) -> ScanSnapshot:
        """이전 상태를 모두 지우고 새 스캔을 시작한다.

        Args:
            capabilities: 기기 지원 기능.

        Returns:
            시작 직후 스냅샷.

        Raises:
            ScanCapabilityUnsupportedError: 필요한 기능이 없을 때.
        """

    @abstractmethod
    def process_frame(self, frame: ScanFrame) -> ScanSnapshot:
        """포인트 클라우드 프레임 하나를 반영한다.

        Raises:
            ScanTimeoutError: 제한 시간이 지났을 때.
        """

    @abstractmethod
    def add_point(self, point: Point3D) -> ScanSnapshot:
        """레이캐스트로 얻은 탭 지점 하나를 반영한다."""

    @abstractmethod
    def check_timeout(self) -> None:
        """입력이 없을 때도 제한 시간을 확인한다.

        Raises:
            ScanTimeoutError: 제한 시간이 지났을 때.
        """

    @abstractmethod
    def snapshot(self) -> ScanSnapshot:
        """현재 상태의 불변 스냅샷을 반환한다."""
