"""팔레트 견적 도메인 이벤트 정의.

스캔 세션과 견적 요청에서 발생하는 이벤트를 정의한다.
presentation/infra 레이어에서 이벤트를 구독하여 화면 갱신 등을 처리한다.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from pallet_quote.domain.enums import QuoteStatus
from pallet_quote.domain.entities.quote import QuoteResponse
from pallet_quote.domain.value_objects.measurement import PalletMeasurement
from pallet_quote.domain.value_objects.scan import ScanSnapshot


@dataclass(frozen=True)
class DomainEvent:
    """도메인 이벤트 기본 클래스.

    Args:
        timestamp: 이벤트 발생 시각 (UTC).
    """

    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True)
class ScanSnapshotEvent(DomainEvent):
    """스캔 상태 변경 이벤트.

    Args:
        snapshot: 변경 후 스냅샷.
    """

    snapshot: ScanSnapshot = field(default_factory=ScanSnapshot)


@dataclass(frozen=True)
class MeasurementCompletedEvent(DomainEvent):
    """팔레트 치수 측정 완료 이벤트.

    Args:
        measurement: 측정 결과.
    """

    measurement: PalletMeasurement | None = None


@dataclass(frozen=True)
class ScanFailedEvent(DomainEvent):
    """스캔 실패 이벤트 (기능 미지원, 시간 초과).

    Args:
        reason: 실패 사유.
    """

    reason: str = ''


@dataclass(frozen=True)
class QuoteState:
    """견적 요청 상태 스냅샷.

    Args:
        status: 진행 상태.
        response: 성공 시 응답.
        error_code: 실패 시 HTTP 상태 코드 (없으면 None).
        error_message: 실패 시 메시지.
    """

    status: QuoteStatus = QuoteStatus.IDLE
    response: QuoteResponse | None = None
    error_code: int | None = None
    error_message: str = ''

    @property
    def is_loading(self) -> bool:
        return self.status == QuoteStatus.LOADING


@dataclass(frozen=True)
class QuoteStateChangedEvent(DomainEvent):
    """견적 요청 상태 변경 이벤트.

    Args:
        state: 변경 후 상태.
    """

    state: QuoteState = field(default_factory=QuoteState)
