"""포인트 클라우드 안정화 기반 팔레트 스캐너.

매 프레임 포인트 클라우드에서 카메라에 가장 가까운 물체를 분리하여
바운딩 박스를 추정하고, 박스가 연속 프레임 동안 움직이지 않으면
측정을 완료한다.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import logging
import time

from pallet_quote.domain.enums import ScanPhase, ViewAngle
from pallet_quote.domain.exceptions import (
    ScanCapabilityUnsupportedError,
    ScanTimeoutError,
)
from pallet_quote.domain.point_cloud import bounding_box, isolate_primary_cluster
from pallet_quote.domain.value_objects.geometry import BoundingBox, Point3D
from pallet_quote.domain.value_objects.measurement import PalletMeasurement
from pallet_quote.domain.value_objects.scan import (
    DeviceCapabilities,
    ScanFrame,
    ScanSnapshot,
)
from pallet_quote.usecase.ports.config_port import ScanConfig
from pallet_quote.usecase.ports.pallet_scanner import PalletScanner

logger = logging.getLogger(__name__)

# 관측 순서 고정: front → left → right → top
_REQUIRED_ANGLES: tuple[ViewAngle, ...] = (
    ViewAngle.FRONT,
    ViewAngle.LEFT,
    ViewAngle.RIGHT,
    ViewAngle.TOP,
)

_PHASE_BY_ANGLE: dict[ViewAngle, ScanPhase] = {
    ViewAngle.FRONT: ScanPhase.FRONT,
    ViewAngle.LEFT: ScanPhase.LEFT,
    ViewAngle.RIGHT: ScanPhase.RIGHT,
    ViewAngle.TOP: ScanPhase.TOP,
}

_MESSAGES: dict[ScanPhase, str] = {
    ScanPhase.INITIAL: 'Point the camera at the front of the pallet',
    ScanPhase.FRONT: 'Move to the left side of the pallet',
    ScanPhase.LEFT: 'Move to the right side of the pallet',
    ScanPhase.RIGHT: 'Scan the pallet from the top',
    ScanPhase.TOP: 'Hold steady while the measurement settles',
    ScanPhase.COMPLETE: 'Scan complete',
}


def view_angle_matches(
    angle: ViewAngle, direction: Point3D, threshold: float
) -> bool:
    """카메라→박스 중심 단위 벡터가 해당 시야 방향인지 판정한다.

    카메라는 -Z를 바라보는 좌표계를 가정한다.
    """
    if angle == ViewAngle.FRONT:
        return direction.z < -threshold
    if angle == ViewAngle.LEFT:
        return direction.x > threshold
    if angle == ViewAngle.RIGHT:
        return direction.x < -threshold
    return direction.y < -threshold


@dataclass
class _ScanState:
    """스캔 세션 동안 변경되는 내부 상태."""

    active: bool = False
    started_at: float = 0.0
    box: BoundingBox | None = None
    stable_frames: int = 0
    observed: list[ViewAngle] = field(default_factory=list)
    phase: ScanPhase = ScanPhase.INITIAL
    measurement: PalletMeasurement | None = None
    failure: str | None = None


class StabilityPalletScanner(PalletScanner):
    """바운딩 박스 안정화 기반 스캐너.

    Args:
        config: 스캔 설정.
        clock: 단조 증가 시계 (초). 테스트에서 주입한다.
    """

    def __init__(
        self,
        config: ScanConfig,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = config
        self._clock = clock
        self._state = _ScanState()

    @property
    def stable_frames(self) -> int:
        """현재 연속 안정 프레임 수."""
        return self._state.stable_frames

    def start(self, capabilities: DeviceCapabilities) -> ScanSnapshot:
        if not capabilities.scene_reconstruction:
            raise ScanCapabilityUnsupportedError(
                'Scene reconstruction is not supported on this device'
            )
        self._state = _ScanState(active=True, started_at=self._clock())
        logger.info('Stability scan started')
        return self.snapshot()

    def process_frame(self, frame: ScanFrame) -> ScanSnapshot:
        state = self._state
        if not state.active:
            return self.snapshot()

        self.check_timeout()

        cfg = self._config
        cluster = isolate_primary_cluster(
            frame.points,
            frame.camera_position,
            cfg.camera_radius_m,
            cfg.cluster_radius_m,
            cfg.max_samples,
        )
        candidate = bounding_box(cluster)
        if candidate is None or min(candidate.extents) < cfg.min_extent_m:
            logger.debug(
                'Frame rejected as noise (%d points kept)', len(cluster)
            )
            return self.snapshot()

        self._update_stability(candidate)
        self._track_view_angle(frame.camera_position, candidate.center)

        if state.stable_frames >= cfg.required_stable_frames:
            self._complete(candidate)

        return self.snapshot()

    def add_point(self, point: Point3D) -> ScanSnapshot:
        logger.debug('Tap ignored by stability scanner: %s', point)
        return self.snapshot()

    def check_timeout(self) -> None:
        state = self._state
        if not state.active:
            return
        elapsed = self._clock() - state.started_at
        if elapsed >= self._config.timeout_sec:
            state.active = False
            state.failure = (
                f'Scan timed out after {self._config.timeout_sec:g} seconds'
            )
            logger.warning('Stability scan timed out (%.1fs)', elapsed)
            raise ScanTimeoutError(state.failure)

    def snapshot(self) -> ScanSnapshot:
        state = self._state
        if state.phase == ScanPhase.COMPLETE:
            progress = 1.0
        else:
            progress = len(state.observed) / len(_REQUIRED_ANGLES)
        return ScanSnapshot(
            phase=state.phase,
            message=state.failure or _MESSAGES[state.phase],
            progress=progress,
            bounding_box=state.box,
            measurement=state.measurement,
            measurements=(
                (state.measurement,) if state.measurement else ()
            ),
            failure=state.failure,
        )

    def _update_stability(self, candidate: BoundingBox) -> None:
        """이전 박스와 비교하여 연속 안정 프레임 수를 갱신한다."""
        state = self._state
        if state.box is not None:
            min_delta, max_delta = candidate.corner_deltas(state.box)
            eps = self._config.stability_epsilon_m
            if min_delta < eps and max_delta < eps:
                state.stable_frames += 1
            else:
                state.stable_frames = 0
        state.box = candidate

    def _track_view_angle(self, camera: Point3D, center: Point3D) -> None:
        """다음 순서의 시야 방향이 관측되었으면 단계를 진행한다."""
        state = self._state
        if len(state.observed) >= len(_REQUIRED_ANGLES):
            return

        expected = _REQUIRED_ANGLES[len(state.observed)]
        direction = (center - camera).normalized()
        if view_angle_matches(
            expected, direction, self._config.view_angle_threshold
        ):
            state.observed.append(expected)
            state.phase = _PHASE_BY_ANGLE[expected]
            logger.info('View angle observed: %s', expected)

    def _complete(self, box: BoundingBox) -> None:
        state = self._state
        state.measurement = PalletMeasurement.from_extents(box.extents)
        state.phase = ScanPhase.COMPLETE
        state.active = False
        logger.info(
            'Stability scan complete: L=%.1f W=%.1f H=%.1f in',
            state.measurement.length,
            state.measurement.width,
            state.measurement.height,
        )
