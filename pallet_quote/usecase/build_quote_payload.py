"""견적 요청 본문 생성.

QuoteRequest를 운임 견적 API의 JSON 요청 본문(camelCase dict)으로
변환한다. 네트워크나 가변 상태에 의존하지 않는 순수 함수다.
"""

from __future__ import annotations

from collections.abc import Iterable
import json
import logging
from typing import Any

from pallet_quote.domain.entities.pallet import Pallet
from pallet_quote.domain.entities.quote import LineItem, QuoteRequest
from pallet_quote.domain.enums import ServiceType

logger = logging.getLogger(__name__)

_DATE_FORMAT = '%Y-%m-%d'


def consolidate_pallets(pallets: Iterable[Pallet]) -> list[LineItem]:
    """동일한 (length, width, height, weight) 정수값 팔레트를 묶는다.

    묶음 순서는 처음 등장한 순서를 따르며, notes/stackable은
    묶음의 첫 팔레트 값을 사용한다.
    """
    groups: dict[tuple[int, int, int, int], list[Pallet]] = {}
    for pallet in pallets:
        groups.setdefault(pallet.dimension_key(), []).append(pallet)

    items = []
    for (length, width, height, weight), members in groups.items():
        first = members[0]
        items.append(
            LineItem(
                length=length,
                width=width,
                height=height,
                total_weight=weight,
                quantity=len(members),
                stackable=first.stackable,
                notes=first.notes,
            )
        )
    return items


def _line_item_to_dict(item: LineItem) -> dict[str, Any]:
    return {
        'height': item.height,
        'length': item.length,
        'width': item.width,
        'sizeUnit': item.size_unit,
        'totalWeight': item.total_weight,
        'weightUnit': item.weight_unit,
        'stackable': item.stackable,
        'notes': item.notes,
        'quantity': item.quantity,
    }


def _services_to_list(services: Iterable[ServiceType]) -> list[dict[str, Any]]:
    # 집합 순서에 의존하지 않도록 태그 순 정렬
    return [
        {'quantity': 1, 'service': service.value}
        for service in sorted(services, key=lambda s: s.value)
    ]


def build_quote_payload(request: QuoteRequest) -> dict[str, Any]:
    """견적 요청 본문을 생성한다.

    Args:
        request: 견적 요청 작성 상태.

    Returns:
        JSON 직렬화 가능한 요청 본문.
    """
    payload = {
        'pickupDate': request.pickup_date.strftime(_DATE_FORMAT),
        'pickupInfo': {'zipcode': request.pickup_zipcode},
        'deliveryInfo': {'zipcode': request.delivery_zipcode},
        'pickupServices': _services_to_list(request.pickup_services),
        'deliveryServices': _services_to_list(request.delivery_services),
        'additionalServices': _services_to_list(
            request.additional_services
        ),
        'listItems': [
            _line_item_to_dict(item)
            for item in consolidate_pallets(request.pallets)
        ],
    }

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug('Quote payload: %s', json.dumps(payload, indent=2))

    return payload
