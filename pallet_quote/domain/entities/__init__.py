"""팔레트 견적 도메인 엔티티."""

from pallet_quote.domain.entities.pallet import Pallet
from pallet_quote.domain.entities.quote import (
    Charge,
    LineItem,
    Price,
    QuoteRequest,
    QuoteResponse,
)

__all__ = [
    'Charge',
    'LineItem',
    'Pallet',
    'Price',
    'QuoteRequest',
    'QuoteResponse',
]
