"""requests 기반 QuoteGateway 구현.

견적 요청 본문을 JSON POST로 전송하고, 응답을 QuoteResponse로
해석하거나 QuoteRequestError 계열 예외로 변환한다.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from pallet_quote.domain.entities.quote import QuoteResponse
from pallet_quote.domain.exceptions import (
    QuoteDecodeError,
    QuoteHttpError,
    QuoteTransportError,
)
from pallet_quote.infra.http.quote_serializer import deserialize_quote_response
from pallet_quote.usecase.ports.config_port import QuoteApiConfig
from pallet_quote.usecase.ports.quote_gateway import QuoteGateway

logger = logging.getLogger(__name__)


def extract_error_message(response: requests.Response) -> str:
    """2xx 이외 응답 본문에서 'message' 필드를 꺼낸다.

    없거나 해석할 수 없으면 'Error: HTTP <code>'를 반환한다.
    """
    fallback = f'Error: HTTP {response.status_code}'
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict) and isinstance(body.get('message'), str):
        return body['message']
    return fallback


class RequestsQuoteGateway(QuoteGateway):
    """requests.Session을 사용하는 견적 API 클라이언트.

    Args:
        config: 견적 API 접속 설정.
        session: 재사용할 requests 세션. None이면 새로 생성.
    """

    def __init__(
        self,
        config: QuoteApiConfig,
        session: requests.Session | None = None,
    ) -> None:
        self._config = config
        self._session = session or requests.Session()
        self._session.headers.update({
            'Content-Type': 'application/json',
            'apikey': config.api_key,
        })

    def request_quote(self, payload: dict[str, Any]) -> QuoteResponse:
        if not self._config.api_key:
            raise QuoteTransportError(None, 'API key is not configured')

        url = self._config.quote_url
        logger.info('POST %s', url)
        try:
            response = self._session.post(
                url, json=payload, timeout=self._config.timeout_sec
            )
        except requests.RequestException as exc:
            raise QuoteTransportError(None, str(exc)) from exc

        status = response.status_code
        logger.debug('Quote response (%d): %s', status, response.text)

        if not 200 <= status <= 299:
            raise QuoteHttpError(status, extract_error_message(response))

        if not response.content:
            raise QuoteDecodeError(status, 'No data received')

        try:
            return deserialize_quote_response(response.json())
        except (ValueError, KeyError, TypeError) as exc:
            raise QuoteDecodeError(
                status, f'Failed to decode response: {exc}'
            ) from exc

    def close(self) -> None:
        """HTTP 세션을 닫는다."""
        self._session.close()
