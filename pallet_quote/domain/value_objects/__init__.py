"""팔레트 견적 값 객체 (불변, 동등성 기반 비교)."""

from pallet_quote.domain.value_objects.geometry import (
    BoundingBox,
    INCHES_PER_METER,
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

__all__ = [
    'BoundingBox',
    'DeviceCapabilities',
    'INCHES_PER_METER',
    'MeasuredSegment',
    'meters_to_inches',
    'PalletMeasurement',
    'Point3D',
    'ScanFrame',
    'ScanSnapshot',
]
