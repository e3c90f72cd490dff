"""도메인 열거형 단위 테스트."""

from pallet_quote.domain.enums import (
    QuoteStatus,
    ScanPhase,
    ScanStrategy,
    ServiceCategory,
    ServiceType,
)


class TestServiceType:
    def test_wire_tags(self):
        expected = {
            'liftgate-pickup', 'liftgate-delivery', 'photo-required',
            'inside-pickup', 'inside-delivery', 'notification',
        }
        assert {s.value for s in ServiceType} == expected

    def test_display_name(self):
        assert ServiceType.LIFTGATE_PICKUP.display_name == 'Liftgate Pickup'
        assert ServiceType.NOTIFICATION.display_name == 'Notification'

    def test_category_from_tag(self):
        assert ServiceType.INSIDE_PICKUP.category == ServiceCategory.PICKUP
        assert ServiceType.LIFTGATE_DELIVERY.category == ServiceCategory.DELIVERY
        assert ServiceType.PHOTO_REQUIRED.category == ServiceCategory.ADDITIONAL

    def test_for_category(self):
        assert ServiceType.for_category(ServiceCategory.PICKUP) == [
            ServiceType.LIFTGATE_PICKUP, ServiceType.INSIDE_PICKUP,
        ]
        assert ServiceType.for_category(ServiceCategory.ADDITIONAL) == [
            ServiceType.PHOTO_REQUIRED, ServiceType.NOTIFICATION,
        ]

    def test_from_string(self):
        assert ServiceType('photo-required') is ServiceType.PHOTO_REQUIRED


class TestScanStrategy:
    def test_all_strategies_exist(self):
        assert {s.value for s in ScanStrategy} == {'stability', 'manual'}


class TestScanPhase:
    def test_order(self):
        assert [p.value for p in ScanPhase] == [
            'initial', 'front', 'left', 'right', 'top', 'complete',
        ]


class TestQuoteStatus:
    def test_all_states_exist(self):
        expected = {'idle', 'loading', 'succeeded', 'failed'}
        assert {s.value for s in QuoteStatus} == expected
