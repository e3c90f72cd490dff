"""팔레트 치수 측정 결과 값 객체."""

from __future__ import annotations

from dataclasses import dataclass

from pallet_quote.domain.value_objects.geometry import (
    meters_to_inches,
    Point3D,
)


@dataclass(frozen=True)
class PalletMeasurement:
    """스캔으로 얻은 팔레트 치수.

    Args:
        length: 길이 (in).
        width: 너비 (in).
        height: 높이 (in).
    """

    length: float
    width: float
    height: float

    @classmethod
    def from_extents(
        cls, extents: tuple[float, float, float]
    ) -> PalletMeasurement:
        """박스 축별 크기(m)로부터 치수를 만든다.

        인치 변환 후 내림차순 정렬하여 가장 긴 값을 length,
        가장 짧은 값을 height로 둔다. 실제 물체 방향은 고려하지 않는다.
        """
        longest, middle, shortest = sorted(
            (meters_to_inches(e) for e in extents), reverse=True
        )
        return cls(length=longest, width=middle, height=shortest)


@dataclass(frozen=True)
class MeasuredSegment:
    """수동 측정 중 그려지는 한 변.

    Args:
        start: 시작점.
        end: 끝점.
        inches: 변 길이 (in).
    """

    start: Point3D
    end: Point3D
    inches: float

    @classmethod
    def between(cls, start: Point3D, end: Point3D) -> MeasuredSegment:
        return cls(
            start=start,
            end=end,
            inches=meters_to_inches(start.distance_to(end)),
        )

    @property
    def label(self) -> str:
        """오버레이 표시용 라벨 (e.g. '78.7"')."""
        return f'{self.inches:.1f}"'
