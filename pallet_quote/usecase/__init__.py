"""팔레트 견적 유스케이스 레이어.

도메인 로직을 포트를 통해 조율하는 애플리케이션 서비스를 정의한다.
domain 레이어만 의존하며, infra 레이어 의존성은 없다.
"""

from pallet_quote.usecase.build_quote_payload import (
    build_quote_payload,
    consolidate_pallets,
)
from pallet_quote.usecase.manual_scanner import ManualPalletScanner
from pallet_quote.usecase.request_quote import RequestQuote
from pallet_quote.usecase.scan_session import ScanSession
from pallet_quote.usecase.scanner_factory import create_scanner
from pallet_quote.usecase.stability_scanner import StabilityPalletScanner

__all__ = [
    "build_quote_payload",
    "consolidate_pallets",
    "create_scanner",
    "ManualPalletScanner",
    "RequestQuote",
    "ScanSession",
    "StabilityPalletScanner",
]
