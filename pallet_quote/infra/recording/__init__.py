"""스캔 녹화 파일 입력 인프라."""

from pallet_quote.infra.recording.jsonl_recording import (
    parse_record,
    read_recording,
    RecordingFormatError,
)

__all__ = ["parse_record", "read_recording", "RecordingFormatError"]
