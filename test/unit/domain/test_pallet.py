"""팔레트 엔티티 단위 테스트."""

import pytest

from pallet_quote.domain.entities.pallet import Pallet
from pallet_quote.domain.value_objects.measurement import PalletMeasurement


class TestPalletWeight:
    @pytest.mark.parametrize('raw, expected', [
        ('500', 500.0),
        ('500.4', 500.4),
        ('', 0.0),
        ('heavy', 0.0),
        ('inf', 0.0),
        ('nan', 0.0),
    ])
    def test_weight_lbs(self, raw, expected):
        assert Pallet(weight=raw).weight_lbs == pytest.approx(expected)


class TestPalletMeasurement:
    def test_apply_measurement(self):
        pallet = Pallet()
        pallet.apply_measurement(PalletMeasurement(48.2, 40.1, 30.9))
        assert (pallet.length, pallet.width, pallet.height) == (
            48.2, 40.1, 30.9,
        )


class TestDimensionKey:
    def test_truncates_values(self):
        pallet = Pallet(weight='500.9', length=48.7, width=40.2, height=50.9)
        assert pallet.dimension_key() == (48, 40, 50, 500)

    def test_unique_ids(self):
        assert Pallet().pallet_id != Pallet().pallet_id


class TestFiniteDimensions:
    def test_finite(self):
        assert Pallet(length=48, width=40, height=50).has_finite_dimensions

    @pytest.mark.parametrize('field', ['length', 'width', 'height'])
    def test_non_finite(self, field):
        pallet = Pallet(**{field: float('inf')})
        assert not pallet.has_finite_dimensions
        pallet = Pallet(**{field: float('nan')})
        assert not pallet.has_finite_dimensions
