"""견적 API 게이트웨이 포트 인터페이스."""

from abc import ABC, abstractmethod
from typing import Any

from pallet_quote.domain.entities.quote import QuoteResponse


class QuoteGateway(ABC):
    """운임 견적 서비스 통신 인터페이스."""

    @abstractmethod
    def request_quote(self, payload: dict[str, Any]) -> QuoteResponse:
        """견적 요청 본문을 전송하고 응답을 반환한다.

        Args:
            payload: build_quote_payload()로 만든 요청 본문.

        Returns:
            해석된 견적 응답.

        Raises:
            QuoteRequestError: 전송 실패, 2xx 이외 응답, 응답 해석 실패 시.
        """
