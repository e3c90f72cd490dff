"""팔레트 스캔 세션 유스케이스.

AR 런타임의 프레임/탭 입력을 큐로 받아 단일 소비자에서만
스캐너 상태를 변경하고, 변경된 불변 스냅샷을 이벤트로 발행한다.
"""

from __future__ import annotations

import logging
import queue
import threading

from pallet_quote.domain.entities.pallet import Pallet
from pallet_quote.domain.events.pallet_events import (
    MeasurementCompletedEvent,
    ScanFailedEvent,
    ScanSnapshotEvent,
)
from pallet_quote.domain.exceptions import (
    ScanCapabilityUnsupportedError,
    ScanTimeoutError,
)
from pallet_quote.domain.value_objects.geometry import Point3D
from pallet_quote.domain.value_objects.scan import (
    DeviceCapabilities,
    ScanFrame,
    ScanSnapshot,
)
from pallet_quote.usecase.ports.event_publisher import EventPublisher
from pallet_quote.usecase.ports.pallet_scanner import PalletScanner

logger = logging.getLogger(__name__)

_STOP = object()
_FRAME = 'frame'
_TAP = 'tap'


class ScanSession:
    """스캔 세션.

    프레임 입력 → 큐 → (워커 스레드 또는 drain 호출자) → 스캐너 → 이벤트 발행.

    Args:
        scanner: 사용할 스캔 전략.
        event_publisher: 스냅샷/완료/실패 이벤트 발행자.
        poll_interval_sec: 워커가 입력 없이 제한 시간을 확인하는 주기 (초).
    """

    def __init__(
        self,
        scanner: PalletScanner,
        event_publisher: EventPublisher,
        poll_interval_sec: float = 0.1,
    ) -> None:
        self._scanner = scanner
        self._event_publisher = event_publisher
        self._poll_interval_sec = poll_interval_sec
        self._queue: queue.Queue = queue.Queue()
        self._lock = threading.Lock()
        self._latest = ScanSnapshot()
        self._accepting = False
        self._measurement_count = 0
        self._stop_event = threading.Event()
        self._worker: threading.Thread | None = None

    @property
    def latest_snapshot(self) -> ScanSnapshot:
        """가장 최근 발행된 스냅샷."""
        with self._lock:
            return self._latest

    @property
    def is_scanning(self) -> bool:
        return self._accepting

    def start(self, capabilities: DeviceCapabilities) -> ScanSnapshot:
        """이전 입력과 측정값을 모두 지우고 스캔을 시작한다.

        워커 스레드가 동작 중이면 호출할 수 없다.

        Raises:
            ScanCapabilityUnsupportedError: 기기가 기능을 지원하지 않을 때.
            RuntimeError: 워커 스레드가 동작 중일 때.
        """
        if self._worker is not None and self._worker.is_alive():
            raise RuntimeError('Cannot restart a scan while the worker runs')

        self._discard_pending()
        self._measurement_count = 0
        try:
            snapshot = self._scanner.start(capabilities)
        except ScanCapabilityUnsupportedError as exc:
            self._accepting = False
            logger.error('Scan cannot start: %s', exc)
            self._event_publisher.publish(ScanFailedEvent(reason=str(exc)))
            raise

        self._accepting = True
        self._publish_if_changed(snapshot)
        return snapshot

    def submit_frame(self, frame: ScanFrame) -> None:
        """프레임을 큐에 넣는다 (스레드 안전)."""
        self._queue.put((_FRAME, frame))

    def submit_tap(self, point: Point3D) -> None:
        """레이캐스트된 탭 지점을 큐에 넣는다 (스레드 안전)."""
        self._queue.put((_TAP, point))

    def drain(self) -> ScanSnapshot:
        """대기 중인 입력을 호출 스레드에서 모두 처리한다.

        Returns:
            처리 후 최신 스냅샷.
        """
        while True:
            try:
                item = self._queue.get_nowait()
            except queue.Empty:
                break
            self._apply(item)
        return self.latest_snapshot

    def start_worker(self) -> None:
        """전용 워커 스레드에서 입력 처리를 시작한다.

        이전 워커가 아직 살아 있으면 새 스레드를 만들지 않는다.
        """
        if self._worker is not None and self._worker.is_alive():
            return
        self._remove_stop_markers()
        self._stop_event.clear()
        self._worker = threading.Thread(
            target=self.run_forever, name='scan-session', daemon=True
        )
        self._worker.start()

    def stop_worker(self, timeout: float | None = None) -> bool:
        """워커 스레드를 정지하고 종료를 기다린다.

        Returns:
            워커가 없거나 종료되었으면 True. 제한 시간 안에 끝나지
            않았으면 False이며, 이때 워커 참조는 유지된다.
        """
        worker = self._worker
        if worker is None or not worker.is_alive():
            self._worker = None
            return True

        self._stop_event.set()
        self._queue.put(_STOP)
        worker.join(timeout)
        if worker.is_alive():
            logger.warning('Scan worker did not stop within %s seconds', timeout)
            return False

        self._worker = None
        self._remove_stop_markers()
        return True

    def run_forever(self) -> None:
        """정지 요청 전까지 큐 입력을 처리한다."""
        while not self._stop_event.is_set():
            try:
                item = self._queue.get(timeout=self._poll_interval_sec)
            except queue.Empty:
                self._check_timeout()
                continue
            if item is _STOP:
                break
            self._apply(item)

    def confirm(self, pallet: Pallet) -> bool:
        """최근 측정값을 팔레트에 반영한다.

        Returns:
            반영할 측정값이 있었으면 True.
        """
        measurement = self.latest_snapshot.measurement
        if measurement is None:
            return False
        pallet.apply_measurement(measurement)
        logger.info('Measurement applied to pallet %s', pallet.pallet_id)
        return True

    def _apply(self, item: object) -> None:
        if item is _STOP or not self._accepting:
            return

        kind, payload = item
        try:
            if kind == _FRAME:
                snapshot = self._scanner.process_frame(payload)
            else:
                snapshot = self._scanner.add_point(payload)
        except ScanTimeoutError as exc:
            self._fail(exc)
            return

        self._publish_if_changed(snapshot)

    def _check_timeout(self) -> None:
        if not self._accepting:
            return
        try:
            self._scanner.check_timeout()
        except ScanTimeoutError as exc:
            self._fail(exc)

    def _fail(self, exc: ScanTimeoutError) -> None:
        self._accepting = False
        logger.warning('Scan stopped: %s', exc)
        self._publish_if_changed(self._scanner.snapshot())
        self._event_publisher.publish(ScanFailedEvent(reason=str(exc)))

    def _publish_if_changed(self, snapshot: ScanSnapshot) -> None:
        with self._lock:
            if snapshot == self._latest:
                return
            self._latest = snapshot

        self._event_publisher.publish(ScanSnapshotEvent(snapshot=snapshot))

        count = len(snapshot.measurements)
        if count > self._measurement_count:
            self._measurement_count = count
            self._event_publisher.publish(
                MeasurementCompletedEvent(measurement=snapshot.measurement)
            )

    def _discard_pending(self) -> None:
        while True:
            try:
                self._queue.get_nowait()
            except queue.Empty:
                return

    def _remove_stop_markers(self) -> None:
        """큐에 남은 정지 표식만 제거하고 입력 순서는 유지한다."""
        pending = []
        while True:
            try:
                item = self._queue.get_nowait()
            except queue.Empty:
                break
            if item is not _STOP:
                pending.append(item)
        for item in pending:
            self._queue.put(item)
