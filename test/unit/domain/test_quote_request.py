"""견적 요청 엔티티 단위 테스트."""

from datetime import date

import pytest

from pallet_quote.domain.entities.pallet import Pallet
from pallet_quote.domain.entities.quote import QuoteRequest
from pallet_quote.domain.enums import ServiceType
from pallet_quote.domain.exceptions import QuoteValidationError


class TestDefaults:
    def test_new_request(self):
        request = QuoteRequest()
        assert request.pickup_date == date.today()
        assert len(request.pallets) == 1
        assert request.pickup_services == {ServiceType.LIFTGATE_PICKUP}
        assert request.delivery_services == {ServiceType.LIFTGATE_DELIVERY}
        assert request.additional_services == {ServiceType.PHOTO_REQUIRED}

    def test_defaults_not_shared(self):
        a = QuoteRequest()
        b = QuoteRequest()
        a.toggle_service(ServiceType.INSIDE_PICKUP, True)
        assert ServiceType.INSIDE_PICKUP not in b.pickup_services


class TestPallets:
    def test_add_pallet_becomes_active(self):
        request = QuoteRequest()
        added = request.add_pallet()
        assert request.active_pallet is added
        assert len(request.pallets) == 2

    def test_no_active_pallet_when_empty(self):
        request = QuoteRequest(pallets=[])
        assert request.active_pallet is None


class TestToggleService:
    def test_enable_routes_to_category(self):
        request = QuoteRequest()
        request.toggle_service(ServiceType.INSIDE_DELIVERY, True)
        request.toggle_service(ServiceType.NOTIFICATION, True)
        assert ServiceType.INSIDE_DELIVERY in request.delivery_services
        assert ServiceType.NOTIFICATION in request.additional_services

    def test_disable(self):
        request = QuoteRequest()
        request.toggle_service(ServiceType.LIFTGATE_PICKUP, False)
        assert request.pickup_services == set()

    def test_disable_missing_is_noop(self):
        request = QuoteRequest()
        request.toggle_service(ServiceType.INSIDE_PICKUP, False)
        assert request.pickup_services == {ServiceType.LIFTGATE_PICKUP}


class TestValidate:
    def test_valid(self):
        QuoteRequest(pallets=[Pallet(weight='10')]).validate()

    def test_no_pallets(self):
        with pytest.raises(QuoteValidationError, match='At least one pallet'):
            QuoteRequest(pallets=[]).validate()

    def test_service_in_wrong_set(self):
        request = QuoteRequest(
            pickup_services={ServiceType.LIFTGATE_DELIVERY},
        )
        with pytest.raises(QuoteValidationError):
            request.validate()

    @pytest.mark.parametrize('value', [float('inf'), float('-inf'), float('nan')])
    def test_non_finite_dimensions(self, value):
        request = QuoteRequest(pallets=[Pallet(weight='10', height=value)])
        with pytest.raises(QuoteValidationError, match='non-finite'):
            request.validate()
