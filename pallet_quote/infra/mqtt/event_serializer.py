"""도메인 이벤트 JSON 직렬화.

도메인 이벤트 → camelCase JSON 변환을 담당한다.
snake_case(도메인) → camelCase(메시지) 변환은 이 모듈에서만 처리한다.
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from datetime import datetime
from enum import Enum
import json
import re
from typing import Any

from pallet_quote.domain.events.pallet_events import DomainEvent

_SNAKE_RE = re.compile(r'_([a-z0-9])')
_CAMEL_RE = re.compile(r'(?<!^)([A-Z])')

_EVENT_SUFFIX = '_event'


def _snake_to_camel(name: str) -> str:
    """snake_case → camelCase 변환."""
    return _SNAKE_RE.sub(lambda m: m.group(1).upper(), name)


def _camel_to_snake(name: str) -> str:
    """CamelCase/camelCase 이름을 snake_case로 변환한다."""
    return _CAMEL_RE.sub(r'_\1', name).lower()


def event_topic_name(event: DomainEvent) -> str:
    """이벤트 클래스명으로 토픽 이름을 만든다.

    e.g. ScanSnapshotEvent → 'scan_snapshot'
    """
    name = _camel_to_snake(type(event).__name__)
    if name.endswith(_EVENT_SUFFIX):
        name = name[:-len(_EVENT_SUFFIX)]
    return name


def _serialize_value(value: Any) -> Any:
    """단일 값을 JSON 호환 타입으로 변환한다."""
    if value is None:
        return None
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + 'Z'
    if isinstance(value, (list, tuple)):
        return [_serialize_value(v) for v in value]
    if is_dataclass(value) and not isinstance(value, type):
        return _dataclass_to_dict(value)
    return value


def _dataclass_to_dict(obj: Any) -> dict[str, Any]:
    """dataclass를 camelCase dict로 변환한다. None 필드는 생략한다."""
    result: dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        result[_snake_to_camel(f.name)] = _serialize_value(value)
    return result


def serialize_event(event: DomainEvent) -> str:
    """도메인 이벤트를 JSON 문자열로 직렬화한다."""
    data = _dataclass_to_dict(event)
    data['event'] = event_topic_name(event)
    return json.dumps(data, ensure_ascii=False)
