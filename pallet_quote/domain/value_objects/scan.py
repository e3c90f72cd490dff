"""스캔 입력/출력 관련 값 객체."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np

from pallet_quote.domain.enums import ScanPhase
from pallet_quote.domain.value_objects.geometry import BoundingBox, Point3D
from pallet_quote.domain.value_objects.measurement import (
    MeasuredSegment,
    PalletMeasurement,
)


@dataclass(frozen=True)
class DeviceCapabilities:
    """AR 런타임이 보고한 기기 지원 기능.

    Args:
        scene_reconstruction: 메시 재구성(포인트 클라우드) 지원 여부.
        raycasting: 화면 탭 → 월드 좌표 레이캐스트 지원 여부.
    """

    scene_reconstruction: bool = True
    raycasting: bool = True


@dataclass(frozen=True, eq=False)
class ScanFrame:
    """한 프레임의 포인트 클라우드 샘플.

    Args:
        camera_position: 카메라 위치.
        points: (N, 3) 월드 좌표 배열 (m).
    """

    camera_position: Point3D
    points: np.ndarray

    @classmethod
    def from_points(
        cls, camera_position: Point3D, points: Iterable
    ) -> ScanFrame:
        """[x, y, z] 시퀀스 목록으로부터 프레임을 만든다."""
        array = np.asarray(list(points), dtype=float).reshape(-1, 3)
        return cls(camera_position=camera_position, points=array)


@dataclass(frozen=True)
class ScanSnapshot:
    """관찰자에게 공개되는 스캔 상태의 불변 스냅샷.

    Args:
        phase: 안내 상태.
        message: 사용자 안내 문구.
        progress: 진행률 (0.0~1.0).
        bounding_box: 현재 채택된 바운딩 박스.
        measurement: 가장 최근 완료된 측정값.
        measurements: 세션 동안 완료된 측정값 전체.
        segments: 화면에 그려진 측정 변 목록.
        failure: 스캔 실패 사유. 실패하지 않았으면 None.
    """

    phase: ScanPhase = ScanPhase.INITIAL
    message: str = ''
    progress: float = 0.0
    bounding_box: BoundingBox | None = None
    measurement: PalletMeasurement | None = None
    measurements: tuple[PalletMeasurement, ...] = field(default_factory=tuple)
    segments: tuple[MeasuredSegment, ...] = field(default_factory=tuple)
    failure: str | None = None

    @property
    def is_complete(self) -> bool:
        return self.measurement is not None

    @property
    def is_failed(self) -> bool:
        return self.failure is not None
