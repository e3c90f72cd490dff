"""견적 요청 파일 로더 유닛 테스트."""

from datetime import date

import pytest
import yaml

from pallet_quote.domain.enums import ServiceType
from pallet_quote.domain.exceptions import QuoteValidationError
from pallet_quote.infra.config.quote_request_loader import (
    load_quote_request,
    quote_request_from_dict,
)


class TestQuoteRequestFromDict:
    def test_full_request(self):
        request = quote_request_from_dict({
            'pickup_date': '2026-10-20',
            'pickup_zipcode': 94107,
            'delivery_zipcode': '10001',
            'pallets': [
                {'weight': 500, 'length': 48, 'width': 40, 'height': 50,
                 'stackable': True, 'notes': 'fragile'},
            ],
            'pickup_services': ['inside-pickup'],
            'additional_services': [],
        })

        assert request.pickup_date == date(2026, 10, 20)
        assert request.pickup_zipcode == '94107'
        pallet = request.pallets[0]
        assert pallet.weight == '500'
        assert pallet.length == 48.0
        assert pallet.stackable is True
        assert request.pickup_services == {ServiceType.INSIDE_PICKUP}
        assert request.additional_services == set()
        # 생략한 서비스는 기본값 유지
        assert request.delivery_services == {ServiceType.LIFTGATE_DELIVERY}

    def test_unknown_service(self):
        with pytest.raises(QuoteValidationError, match='Unknown service'):
            quote_request_from_dict({'pickup_services': ['teleport']})

    def test_invalid_date(self):
        with pytest.raises(QuoteValidationError):
            quote_request_from_dict({'pickup_date': '20/10/2026'})

    def test_invalid_pallet(self):
        with pytest.raises(QuoteValidationError):
            quote_request_from_dict({'pallets': [{'length': 'long'}]})

    def test_no_pallets(self):
        assert quote_request_from_dict({}).pallets == []

    @pytest.mark.parametrize('value', ['.inf', '-.inf', '.nan'])
    def test_non_finite_dimension(self, value):
        data = yaml.safe_load(f'pallets: [{{length: {value}}}]')
        with pytest.raises(QuoteValidationError, match='finite'):
            quote_request_from_dict(data)

    @pytest.mark.parametrize('raw, expected', [
        ('false', False),
        ('False', False),
        ('no', False),
        ('yes', True),
        (' TRUE ', True),
        (True, True),
    ])
    def test_stackable_words(self, raw, expected):
        request = quote_request_from_dict({'pallets': [{'stackable': raw}]})
        assert request.pallets[0].stackable is expected

    @pytest.mark.parametrize('raw', ['maybe', 1, None])
    def test_invalid_stackable(self, raw):
        with pytest.raises(QuoteValidationError, match='stackable'):
            quote_request_from_dict({'pallets': [{'stackable': raw}]})

    @pytest.mark.parametrize('pallets', [{'length': 48}, 'one pallet', 3])
    def test_pallets_not_a_list(self, pallets):
        with pytest.raises(QuoteValidationError, match="'pallets'"):
            quote_request_from_dict({'pallets': pallets})

    def test_pallet_entry_not_a_mapping(self):
        with pytest.raises(QuoteValidationError, match='Invalid pallet entry'):
            quote_request_from_dict({'pallets': [48]})

    def test_services_not_a_list(self):
        with pytest.raises(QuoteValidationError):
            quote_request_from_dict({'pickup_services': 'inside-pickup'})


class TestLoadQuoteRequest:
    def test_load_yaml(self, tmp_path):
        path = tmp_path / 'request.yaml'
        with open(path, 'w') as f:
            yaml.dump({
                'pickup_date': '2026-10-20',
                'pickup_zipcode': '94107',
                'delivery_zipcode': '10001',
                'pallets': [{'weight': '750', 'length': 48,
                             'width': 40, 'height': 50}],
            }, f)

        request = load_quote_request(path)

        assert request.delivery_zipcode == '10001'
        assert request.pallets[0].weight_lbs == 750.0

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / 'request.yaml'
        path.write_text('- a\n- b\n')
        with pytest.raises(QuoteValidationError):
            load_quote_request(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_quote_request(tmp_path / 'missing.yaml')

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / 'request.yaml'
        path.write_text('pallets: [\n  - {length: 1\n')
        with pytest.raises(QuoteValidationError, match='Malformed'):
            load_quote_request(path)
