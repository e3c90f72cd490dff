"""견적 API 응답 역직렬화.

응답 JSON은 snake_case(quote_id, currency_code 등)와 camelCase
(shipmentType)가 섞여 있으므로 필드별로 직접 매핑한다.
"""

from __future__ import annotations

from typing import Any

from pallet_quote.domain.entities.quote import Charge, Price, QuoteResponse


def _require(data: dict[str, Any], key: str, kind: type | tuple) -> Any:
    """필수 필드를 꺼내고 타입을 확인한다.

    Raises:
        KeyError: 필드가 없을 때.
        TypeError: 타입이 맞지 않을 때.
    """
    value = data[key]
    # bool은 int의 하위 타입이므로 숫자 필드에서 제외
    if isinstance(value, bool) or not isinstance(value, kind):
        raise TypeError(
            f"Field '{key}' has unexpected type {type(value).__name__}"
        )
    return value


def _parse_price(data: dict[str, Any]) -> Price:
    return Price(
        amount=float(_require(data, 'amount', (int, float))),
        currency_code=_require(data, 'currency_code', str),
    )


def _parse_charge(data: dict[str, Any]) -> Charge:
    return Charge(
        code=_require(data, 'code', str),
        description=_require(data, 'description', str),
        amount=float(_require(data, 'amount', (int, float))),
    )


def deserialize_quote_response(data: Any) -> QuoteResponse:
    """JSON dict를 QuoteResponse로 변환한다.

    Raises:
        KeyError: 필수 필드가 없을 때.
        TypeError: 필드 타입이 맞지 않을 때.
    """
    if not isinstance(data, dict):
        raise TypeError(
            f'Expected a JSON object, got {type(data).__name__}'
        )
    return QuoteResponse(
        quote_id=_require(data, 'quote_id', str),
        price=_parse_price(_require(data, 'price', dict)),
        charges=tuple(
            _parse_charge(c) for c in _require(data, 'charges', list)
        ),
        expiration_time_utc=_require(data, 'expiration_time_utc', int),
        status=_require(data, 'status', str),
        notes=_require(data, 'notes', str),
        shipment_type=_require(data, 'shipmentType', str),
    )
