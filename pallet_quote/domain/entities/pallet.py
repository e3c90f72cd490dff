"""팔레트 엔티티."""

from dataclasses import dataclass, field
import math
import uuid

from pallet_quote.domain.value_objects.measurement import PalletMeasurement


@dataclass
class Pallet:
    """견적 요청에 포함될 팔레트 한 개.

    사용자 입력과 스캔 결과로 갱신되며 요청 작성 세션 동안만 유지된다.

    Args:
        weight: 중량 입력값 (lb, 문자열 그대로 보관).
        length: 길이 (in).
        width: 너비 (in).
        height: 높이 (in).
        notes: 메모.
        stackable: 적재 가능 여부.
        pallet_id: 식별자.
    """

    weight: str = ''
    length: float = 0.0
    width: float = 0.0
    height: float = 0.0
    notes: str = ''
    stackable: bool = False
    pallet_id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @property
    def weight_lbs(self) -> float:
        """중량 문자열을 숫자로 해석한다. 숫자가 아니면 0."""
        try:
            value = float(self.weight)
        except ValueError:
            return 0.0
        return value if math.isfinite(value) else 0.0

    def apply_measurement(self, measurement: PalletMeasurement) -> None:
        """스캔 측정값으로 치수를 갱신한다."""
        self.length = measurement.length
        self.width = measurement.width
        self.height = measurement.height

    @property
    def has_finite_dimensions(self) -> bool:
        """길이/너비/높이가 모두 유한한 숫자인지 여부."""
        return all(
            math.isfinite(v) for v in (self.length, self.width, self.height)
        )

    def dimension_key(self) -> tuple[int, int, int, int]:
        """라인 아이템 그룹핑 키 (length, width, height, weight) 정수값."""
        return (
            int(self.length),
            int(self.width),
            int(self.height),
            int(self.weight_lbs),
        )
