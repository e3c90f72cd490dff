"""수동 4점 팔레트 스캐너.

사용자가 탭한 네 꼭짓점으로부터 박스의 세 변 길이를 계산한다.
탭 순서: 기준 꼭짓점 → 너비 방향 → 길이 방향 → 기준점 위 높이.
직교성/평면성은 검증하지 않는다.
"""

from __future__ import annotations

import logging

from pallet_quote.domain.enums import ScanPhase
from pallet_quote.domain.exceptions import ScanCapabilityUnsupportedError
from pallet_quote.domain.value_objects.geometry import (
    meters_to_inches,
    Point3D,
)
from pallet_quote.domain.value_objects.measurement import (
    MeasuredSegment,
    PalletMeasurement,
)
from pallet_quote.domain.value_objects.scan import (
    DeviceCapabilities,
    ScanFrame,
    ScanSnapshot,
)
from pallet_quote.usecase.ports.pallet_scanner import PalletScanner

logger = logging.getLogger(__name__)

_POINTS_PER_MEASUREMENT = 4

# 이미 탭한 점 개수별 안내 문구
_PROMPTS: dict[int, str] = {
    0: 'Tap first corner',
    1: 'Tap second corner (width)',
    2: 'Tap third corner (length)',
    3: 'Tap fourth corner (height)',
}


def measure_box(points: list[Point3D]) -> PalletMeasurement:
    """네 점으로부터 치수를 계산한다.

    width = |p2 - p1|, length = |p3 - p2|, height = |p4 - p1|

    Raises:
        ValueError: 점이 4개가 아닐 때.
    """
    if len(points) != _POINTS_PER_MEASUREMENT:
        raise ValueError(f'Expected 4 points, got {len(points)}')
    p1, p2, p3, p4 = points
    return PalletMeasurement(
        length=meters_to_inches((p3 - p2).length()),
        width=meters_to_inches((p2 - p1).length()),
        height=meters_to_inches((p4 - p1).length()),
    )


class ManualPalletScanner(PalletScanner):
    """탭 4회로 치수를 측정하는 스캐너.

    네 번째 점 이후 점 목록을 비우고 다시 첫 꼭짓점부터 안내한다.
    완료된 측정값은 세션 동안 누적된다.
    """

    def __init__(self) -> None:
        self._points: list[Point3D] = []
        self._segments: list[MeasuredSegment] = []
        self._measurements: list[PalletMeasurement] = []
        self._active = False

    def start(self, capabilities: DeviceCapabilities) -> ScanSnapshot:
        if not capabilities.raycasting:
            raise ScanCapabilityUnsupportedError(
                'Surface raycasting is not supported on this device'
            )
        self._points.clear()
        self._segments.clear()
        self._measurements.clear()
        self._active = True
        logger.info('Manual scan started')
        return self.snapshot()

    def process_frame(self, frame: ScanFrame) -> ScanSnapshot:
        return self.snapshot()

    def add_point(self, point: Point3D) -> ScanSnapshot:
        if not self._active:
            logger.debug('Tap ignored, manual scan not started')
            return self.snapshot()

        self._points.append(point)
        count = len(self._points)

        if count == 1:
            # 새 측정 시작 시 이전 변 표시 제거
            self._segments.clear()
        else:
            self._segments.append(
                MeasuredSegment.between(self._points[-2], point)
            )

        if count == _POINTS_PER_MEASUREMENT:
            self._segments.append(
                MeasuredSegment.between(point, self._points[0])
            )
            measurement = measure_box(self._points)
            self._measurements.append(measurement)
            self._points.clear()
            logger.info(
                'Manual measurement: L=%.1f W=%.1f H=%.1f in',
                measurement.length,
                measurement.width,
                measurement.height,
            )

        return self.snapshot()

    def check_timeout(self) -> None:
        # 수동 모드는 제한 시간 없음
        return None

    def snapshot(self) -> ScanSnapshot:
        count = len(self._points)
        latest = self._measurements[-1] if self._measurements else None
        return ScanSnapshot(
            phase=ScanPhase.COMPLETE if latest else ScanPhase.INITIAL,
            message=_PROMPTS[count],
            progress=count / _POINTS_PER_MEASUREMENT,
            measurement=latest,
            measurements=tuple(self._measurements),
            segments=tuple(self._segments),
        )
