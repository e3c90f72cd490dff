"""JSONL 스캔 녹화 파일 리더.

AR 런타임에서 기록한 프레임/탭 입력을 한 줄에 하나씩 읽어
도메인 입력으로 변환한다.

    {"type": "frame", "camera": [x, y, z], "points": [[x, y, z], ...]}
    {"type": "tap", "point": [x, y, z]}
"""

from __future__ import annotations

from collections.abc import Iterator
import json
import logging
from pathlib import Path

from pallet_quote.domain.value_objects.geometry import Point3D
from pallet_quote.domain.value_objects.scan import ScanFrame

logger = logging.getLogger(__name__)

RecordedInput = ScanFrame | Point3D


class RecordingFormatError(ValueError):
    """녹화 파일 형식 오류."""


def parse_record(data: dict) -> RecordedInput:
    """녹화 레코드 하나를 ScanFrame 또는 Point3D로 변환한다.

    Raises:
        RecordingFormatError: 알 수 없는 타입이거나 필드가 잘못되었을 때.
    """
    kind = data.get('type')
    try:
        if kind == 'frame':
            return ScanFrame.from_points(
                Point3D.from_sequence(data['camera']),
                data.get('points', []),
            )
        if kind == 'tap':
            return Point3D.from_sequence(data['point'])
    except (KeyError, TypeError, ValueError) as exc:
        raise RecordingFormatError(f'Malformed {kind} record: {exc}') from exc
    raise RecordingFormatError(f'Unknown record type: {kind!r}')


def read_recording(path: Path) -> Iterator[RecordedInput]:
    """녹화 파일을 순서대로 읽는다. 빈 줄은 건너뛴다.

    Raises:
        RecordingFormatError: JSON 해석 실패 또는 레코드 형식 오류 시.
    """
    with open(path, encoding='utf-8') as f:
        for line_no, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                data = json.loads(line)
            except json.JSONDecodeError as exc:
                raise RecordingFormatError(
                    f'{path}:{line_no}: invalid JSON: {exc}'
                ) from exc
            if not isinstance(data, dict):
                raise RecordingFormatError(
                    f'{path}:{line_no}: expected a JSON object'
                )
            yield parse_record(data)
