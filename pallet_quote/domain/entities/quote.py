"""견적 요청/응답 엔티티."""

from dataclasses import dataclass, field
from datetime import date

from pallet_quote.domain.entities.pallet import Pallet
from pallet_quote.domain.enums import ServiceCategory, ServiceType
from pallet_quote.domain.exceptions import QuoteValidationError


def _default_pickup_services() -> set[ServiceType]:
    return {ServiceType.LIFTGATE_PICKUP}


def _default_delivery_services() -> set[ServiceType]:
    return {ServiceType.LIFTGATE_DELIVERY}


def _default_additional_services() -> set[ServiceType]:
    return {ServiceType.PHOTO_REQUIRED}


@dataclass
class QuoteRequest:
    """견적 요청 작성 상태.

    Args:
        pickup_date: 픽업 날짜.
        pickup_zipcode: 픽업지 우편번호.
        delivery_zipcode: 배송지 우편번호.
        pallets: 팔레트 목록.
        pickup_services: 픽업 서비스 집합.
        delivery_services: 배송 서비스 집합.
        additional_services: 기타 서비스 집합.
    """

    pickup_date: date = field(default_factory=date.today)
    pickup_zipcode: str = ''
    delivery_zipcode: str = ''
    pallets: list[Pallet] = field(default_factory=lambda: [Pallet()])
    pickup_services: set[ServiceType] = field(
        default_factory=_default_pickup_services
    )
    delivery_services: set[ServiceType] = field(
        default_factory=_default_delivery_services
    )
    additional_services: set[ServiceType] = field(
        default_factory=_default_additional_services
    )

    def add_pallet(self) -> Pallet:
        """빈 팔레트를 추가하고 반환한다."""
        pallet = Pallet()
        self.pallets.append(pallet)
        return pallet

    @property
    def active_pallet(self) -> Pallet | None:
        """스캔 결과를 반영할 대상 (마지막 팔레트)."""
        return self.pallets[-1] if self.pallets else None

    def toggle_service(self, service: ServiceType, enabled: bool) -> None:
        """서비스 분류에 맞는 집합에 서비스를 추가/제거한다."""
        target = self._services_for(service.category)
        if enabled:
            target.add(service)
        else:
            target.discard(service)

    def validate(self) -> None:
        """요청 내용을 검증한다.

        Raises:
            QuoteValidationError: 팔레트가 없거나 서비스 분류가 맞지 않을 때.
        """
        if not self.pallets:
            raise QuoteValidationError('At least one pallet is required')

        for pallet in self.pallets:
            if not pallet.has_finite_dimensions:
                raise QuoteValidationError(
                    f'Pallet {pallet.pallet_id} has non-finite dimensions'
                )

        for category in ServiceCategory:
            for service in self._services_for(category):
                if service.category != category:
                    raise QuoteValidationError(
                        f'Service [{service}] does not belong to '
                        f'{category} services'
                    )

    def _services_for(self, category: ServiceCategory) -> set[ServiceType]:
        if category == ServiceCategory.PICKUP:
            return self.pickup_services
        if category == ServiceCategory.DELIVERY:
            return self.delivery_services
        return self.additional_services


@dataclass(frozen=True)
class LineItem:
    """동일 치수/중량 팔레트 묶음.

    Args:
        length: 길이 (in).
        width: 너비 (in).
        height: 높이 (in).
        total_weight: 중량 (lb).
        quantity: 팔레트 개수.
        stackable: 적재 가능 여부.
        notes: 메모.
    """

    length: int
    width: int
    height: int
    total_weight: int
    quantity: int = 1
    stackable: bool = False
    notes: str = ''
    size_unit: str = 'IN'
    weight_unit: str = 'lbs'


@dataclass(frozen=True)
class Price:
    amount: float
    currency_code: str


@dataclass(frozen=True)
class Charge:
    code: str
    description: str
    amount: float


@dataclass(frozen=True)
class QuoteResponse:
    """견적 API 응답.

    Args:
        quote_id: 견적 ID.
        price: 총액.
        charges: 항목별 요금.
        expiration_time_utc: 만료 시각 (epoch).
        status: 견적 상태.
        notes: 안내 문구.
        shipment_type: 운송 유형.
    """

    quote_id: str
    price: Price
    charges: tuple[Charge, ...]
    expiration_time_utc: int
    status: str
    notes: str
    shipment_type: str
