"""HTTP 통신 인프라 (QuoteGateway 구현)."""

from pallet_quote.infra.http.quote_http_client import RequestsQuoteGateway

__all__ = ["RequestsQuoteGateway"]
