"""3차원 기하 값 객체.

좌표는 AR 런타임이 제공하는 월드 좌표계 기준이며 단위는 미터다.
"""

from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np

# 1 m = 39.3701 in
INCHES_PER_METER = 39.3701


def meters_to_inches(meters: float) -> float:
    """미터 값을 인치로 변환한다."""
    return meters * INCHES_PER_METER


@dataclass(frozen=True)
class Point3D:
    """월드 좌표계의 한 점.

    Args:
        x: X 좌표 (m).
        y: Y 좌표 (m).
        z: Z 좌표 (m).
    """

    x: float
    y: float
    z: float

    def __sub__(self, other: Point3D) -> Point3D:
        return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __add__(self, other: Point3D) -> Point3D:
        return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def length(self) -> float:
        """원점으로부터의 거리 (벡터 길이)."""
        return math.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2)

    def distance_to(self, other: Point3D) -> float:
        """다른 점까지의 유클리드 거리."""
        return (self - other).length()

    def normalized(self) -> Point3D:
        """단위 벡터를 반환한다. 길이가 0이면 그대로 반환한다."""
        norm = self.length()
        if norm == 0.0:
            return self
        return Point3D(self.x / norm, self.y / norm, self.z / norm)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    @classmethod
    def from_sequence(cls, values) -> Point3D:
        """[x, y, z] 형태의 시퀀스로부터 생성한다."""
        x, y, z = values
        return cls(float(x), float(y), float(z))


@dataclass(frozen=True)
class BoundingBox:
    """축 정렬 바운딩 박스.

    Args:
        min: 각 축 최소값 코너.
        max: 각 축 최대값 코너.
    """

    min: Point3D
    max: Point3D

    @classmethod
    def from_array(cls, points: np.ndarray) -> BoundingBox:
        """(N, 3) 배열의 축별 최소/최대값으로 박스를 만든다.

        Raises:
            ValueError: 점이 하나도 없을 때.
        """
        if points.size == 0:
            raise ValueError('Cannot build a bounding box from zero points')
        lo = points.min(axis=0)
        hi = points.max(axis=0)
        return cls(
            min=Point3D.from_sequence(lo),
            max=Point3D.from_sequence(hi),
        )

    @property
    def extents(self) -> tuple[float, float, float]:
        """축별 크기 (x, y, z). 항상 0 이상이다."""
        delta = self.max - self.min
        return (delta.x, delta.y, delta.z)

    @property
    def center(self) -> Point3D:
        return Point3D(
            (self.min.x + self.max.x) / 2.0,
            (self.min.y + self.max.y) / 2.0,
            (self.min.z + self.max.z) / 2.0,
        )

    def corner_deltas(self, other: BoundingBox) -> tuple[float, float]:
        """두 박스의 (min 코너 이동량, max 코너 이동량)을 반환한다."""
        return (
            self.min.distance_to(other.min),
            self.max.distance_to(other.max),
        )
