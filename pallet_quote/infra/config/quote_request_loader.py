"""YAML 견적 요청 파일 로더.

CLI에서 사용하는 견적 요청 입력 파일을 QuoteRequest로 변환한다.
서비스 목록을 생략하면 QuoteRequest 기본 선택을 사용한다.
"""

from __future__ import annotations

from datetime import date
import logging
import math
from pathlib import Path
from typing import Any

import yaml

from pallet_quote.domain.entities.pallet import Pallet
from pallet_quote.domain.entities.quote import QuoteRequest
from pallet_quote.domain.enums import ServiceType
from pallet_quote.domain.exceptions import QuoteValidationError

logger = logging.getLogger(__name__)


def _require_list(data: dict[str, Any], key: str) -> list:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise QuoteValidationError(f"'{key}' must be a list: {value!r}")
    return value


def _parse_services(values: list[str]) -> set[ServiceType]:
    services = set()
    for value in values:
        try:
            services.add(ServiceType(value))
        except ValueError as exc:
            raise QuoteValidationError(
                f'Unknown service: {value!r}'
            ) from exc
    return services


def _parse_date(value: Any) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError as exc:
        raise QuoteValidationError(
            f'Invalid pickup_date: {value!r}'
        ) from exc


_TRUE_WORDS = frozenset({'true', 'yes', 'on', '1'})
_FALSE_WORDS = frozenset({'false', 'no', 'off', '0'})


def _parse_dimension(data: dict[str, Any], key: str) -> float:
    value = data.get(key, 0.0)
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise QuoteValidationError(
            f'Invalid pallet {key}: {value!r}'
        ) from exc
    if not math.isfinite(number):
        raise QuoteValidationError(f'Pallet {key} must be finite: {value!r}')
    return number


def _parse_stackable(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise QuoteValidationError(f'Invalid pallet stackable: {value!r}')


def _parse_pallet(data: Any) -> Pallet:
    if not isinstance(data, dict):
        raise QuoteValidationError(f'Invalid pallet entry: {data!r}')
    return Pallet(
        weight=str(data.get('weight', '')),
        length=_parse_dimension(data, 'length'),
        width=_parse_dimension(data, 'width'),
        height=_parse_dimension(data, 'height'),
        notes=str(data.get('notes', '')),
        stackable=_parse_stackable(data.get('stackable', False)),
    )


def quote_request_from_dict(data: dict[str, Any]) -> QuoteRequest:
    """dict를 QuoteRequest로 변환한다.

    Raises:
        QuoteValidationError: 값이 잘못되었을 때.
    """
    pallets = _require_list(data, 'pallets')
    request = QuoteRequest(
        pickup_date=_parse_date(data.get('pickup_date', date.today())),
        pickup_zipcode=str(data.get('pickup_zipcode', '')),
        delivery_zipcode=str(data.get('delivery_zipcode', '')),
        pallets=[_parse_pallet(p) for p in pallets],
    )
    for key in ('pickup_services', 'delivery_services', 'additional_services'):
        if key in data:
            setattr(request, key, _parse_services(_require_list(data, key)))
    return request


def load_quote_request(path: Path) -> QuoteRequest:
    """YAML 파일에서 견적 요청을 읽는다.

    Raises:
        FileNotFoundError: 파일이 없을 때.
        QuoteValidationError: 형식이나 값이 잘못되었을 때.
    """
    with open(path, encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise QuoteValidationError(
                f'Malformed quote request file {path}: {exc}'
            ) from exc

    if not isinstance(data, dict):
        raise QuoteValidationError(f'Invalid quote request file: {path}')

    logger.info('Quote request loaded from %s', path)
    return quote_request_from_dict(data)
