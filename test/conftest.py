"""공통 테스트 fixture."""

from datetime import date

import numpy as np
import pytest

from pallet_quote.domain.entities.pallet import Pallet
from pallet_quote.domain.entities.quote import (
    Charge,
    Price,
    QuoteRequest,
    QuoteResponse,
)
from pallet_quote.domain.value_objects.geometry import Point3D
from pallet_quote.domain.value_objects.scan import ScanFrame
from pallet_quote.usecase.ports.config_port import (
    AppConfig,
    MqttConfig,
    QuoteApiConfig,
    ScanConfig,
)


class FakeClock:
    """수동으로 진행시키는 단조 시계."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_box_points(center, size, steps=5):
    """center를 중심으로 size 크기의 박스를 채우는 격자 점 (N, 3)."""
    axes = [
        np.linspace(c - s / 2.0, c + s / 2.0, steps)
        for c, s in zip(center, size)
    ]
    grid = np.meshgrid(*axes, indexing='ij')
    return np.stack([g.ravel() for g in grid], axis=1)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scan_config():
    return ScanConfig(required_stable_frames=3, timeout_sec=30.0)


@pytest.fixture
def box_frame():
    """카메라 정면 1 m 앞의 0.4 x 0.3 x 0.2 m 박스 프레임 팩토리."""
    def _make(
        camera=(0.0, 0.0, 0.0),
        center=(0.0, 0.0, -1.0),
        size=(0.4, 0.3, 0.2),
    ):
        return ScanFrame(
            camera_position=Point3D(*camera),
            points=make_box_points(center, size),
        )
    return _make


@pytest.fixture
def sample_pallets():
    return [
        Pallet(weight='500', length=48.0, width=40.0, height=50.0),
        Pallet(weight='500.4', length=48.7, width=40.2, height=50.9),
        Pallet(weight='750', length=48.0, width=40.0, height=50.0),
    ]


@pytest.fixture
def sample_request(sample_pallets):
    return QuoteRequest(
        pickup_date=date(2026, 10, 20),
        pickup_zipcode='94107',
        delivery_zipcode='10001',
        pallets=sample_pallets,
    )


@pytest.fixture
def sample_response_json():
    return {
        'quote_id': 'Q-123',
        'price': {'amount': 412.5, 'currency_code': 'USD'},
        'charges': [
            {'code': 'BASE', 'description': 'Base rate', 'amount': 380.0},
            {'code': 'LG', 'description': 'Liftgate', 'amount': 32.5},
        ],
        'expiration_time_utc': 1792454400,
        'status': 'ACTIVE',
        'notes': 'Valid for 24 hours',
        'shipmentType': 'LTL',
    }


@pytest.fixture
def sample_quote_response():
    return QuoteResponse(
        quote_id='Q-123',
        price=Price(amount=412.5, currency_code='USD'),
        charges=(Charge(code='BASE', description='Base rate', amount=412.5),),
        expiration_time_utc=1792454400,
        status='ACTIVE',
        notes='Valid for 24 hours',
        shipment_type='LTL',
    )


@pytest.fixture
def sample_config():
    return AppConfig(
        scan=ScanConfig(),
        quote_api=QuoteApiConfig(
            base_url='https://quotes.example.test', api_key='secret-key'
        ),
        mqtt=MqttConfig(),
    )
