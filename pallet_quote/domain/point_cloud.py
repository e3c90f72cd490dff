"""포인트 클라우드 필터링/집계 함수.

모든 함수는 (N, 3) numpy 배열을 입력받아 새 배열을 반환하며
입력을 변경하지 않는다.
"""

from __future__ import annotations

import math

import numpy as np

from pallet_quote.domain.value_objects.geometry import BoundingBox, Point3D


def filter_within_radius(
    points: np.ndarray, center: Point3D, radius: float
) -> np.ndarray:
    """center로부터 radius 이내의 점만 남긴다 (경계 포함)."""
    if points.size == 0:
        return points.reshape(0, 3)
    distances = np.linalg.norm(points - center.as_array(), axis=1)
    return points[distances <= radius]


def centroid(points: np.ndarray) -> Point3D:
    """점들의 무게중심.

    Raises:
        ValueError: 점이 하나도 없을 때.
    """
    if points.size == 0:
        raise ValueError('Cannot compute the centroid of zero points')
    return Point3D.from_sequence(points.mean(axis=0))


def subsample(points: np.ndarray, max_samples: int) -> np.ndarray:
    """점 개수가 max_samples를 넘으면 일정 간격(stride)으로 추출한다."""
    count = len(points)
    if max_samples <= 0 or count <= max_samples:
        return points
    stride = math.ceil(count / max_samples)
    return points[::stride]


def isolate_primary_cluster(
    points: np.ndarray,
    camera_position: Point3D,
    camera_radius: float,
    cluster_radius: float,
    max_samples: int,
) -> np.ndarray:
    """카메라에 가장 가까운 주 물체의 점 집합을 추출한다.

    1. 카메라 반경 밖의 점 제거 (전경 분리)
    2. 남은 점의 무게중심 기준 클러스터 반경 밖의 점 제거
    3. 최대 샘플 수를 넘으면 균등 추출

    Returns:
        필터링된 (M, 3) 배열. 남은 점이 없으면 빈 배열.
    """
    foreground = filter_within_radius(points, camera_position, camera_radius)
    if foreground.size == 0:
        return foreground

    cluster = filter_within_radius(
        foreground, centroid(foreground), cluster_radius
    )
    return subsample(cluster, max_samples)


def bounding_box(points: np.ndarray) -> BoundingBox | None:
    """점 집합의 축 정렬 바운딩 박스. 점이 없으면 None."""
    if points.size == 0:
        return None
    return BoundingBox.from_array(points)
