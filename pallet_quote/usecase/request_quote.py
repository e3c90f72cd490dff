"""견적 요청 유스케이스.

요청 본문 생성 → 게이트웨이 호출(백그라운드) → 상태 갱신 → 이벤트 발행.
새 요청이 제출되면 이전 요청의 결과는 무시한다.
"""

from __future__ import annotations

from concurrent.futures import Executor, Future, ThreadPoolExecutor
import logging
import threading

from pallet_quote.domain.entities.quote import QuoteRequest, QuoteResponse
from pallet_quote.domain.enums import QuoteStatus
from pallet_quote.domain.events.pallet_events import (
    QuoteState,
    QuoteStateChangedEvent,
)
from pallet_quote.domain.exceptions import QuoteRequestError
from pallet_quote.usecase.build_quote_payload import build_quote_payload
from pallet_quote.usecase.ports.event_publisher import EventPublisher
from pallet_quote.usecase.ports.quote_gateway import QuoteGateway

logger = logging.getLogger(__name__)


class RequestQuote:
    """견적 요청 유스케이스.

    상태는 idle → loading → succeeded | failed 로 변하며,
    변경될 때마다 QuoteStateChangedEvent를 발행한다.
    자동 재시도는 하지 않는다.

    Args:
        quote_gateway: 견적 API 포트.
        event_publisher: 이벤트 발행자.
        executor: 게이트웨이 호출 실행기. None이면 단일 워커 스레드 풀.
    """

    def __init__(
        self,
        quote_gateway: QuoteGateway,
        event_publisher: EventPublisher,
        executor: Executor | None = None,
    ) -> None:
        self._quote_gateway = quote_gateway
        self._event_publisher = event_publisher
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix='quote'
        )
        self._lock = threading.Lock()
        self._generation = 0
        self._state = QuoteState()

    @property
    def state(self) -> QuoteState:
        """현재 견적 상태 스냅샷."""
        with self._lock:
            return self._state

    def submit(self, request: QuoteRequest) -> Future:
        """견적 요청을 제출한다.

        Args:
            request: 견적 요청 작성 상태.

        Returns:
            게이트웨이 호출 Future. 결과는 QuoteState.

        Raises:
            QuoteValidationError: 요청 검증 실패 시.
        """
        request.validate()
        payload = build_quote_payload(request)

        with self._lock:
            self._generation += 1
            generation = self._generation
        self._set_state(QuoteState(status=QuoteStatus.LOADING), generation)
        logger.info('Quote request submitted (generation=%d)', generation)

        return self._executor.submit(self._call_gateway, payload, generation)

    def shutdown(self) -> None:
        """직접 생성한 실행기를 종료한다."""
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    def _call_gateway(self, payload: dict, generation: int) -> QuoteState:
        try:
            response = self._quote_gateway.request_quote(payload)
        except QuoteRequestError as exc:
            logger.error(
                'Quote request failed: code=%s, message=%s',
                exc.code, exc.message,
            )
            state = QuoteState(
                status=QuoteStatus.FAILED,
                error_code=exc.code,
                error_message=exc.message,
            )
        else:
            state = self._success_state(response)

        self._set_state(state, generation)
        return state

    @staticmethod
    def _success_state(response: QuoteResponse) -> QuoteState:
        logger.info(
            'Quote received: id=%s, amount=%.2f %s',
            response.quote_id,
            response.price.amount,
            response.price.currency_code,
        )
        return QuoteState(status=QuoteStatus.SUCCEEDED, response=response)

    def _set_state(self, state: QuoteState, generation: int) -> None:
        """현재 세대의 결과일 때만 상태를 갱신하고 이벤트를 발행한다."""
        with self._lock:
            if generation != self._generation:
                logger.info(
                    'Ignoring superseded quote result (generation=%d, '
                    'current=%d)', generation, self._generation,
                )
                return
            self._state = state

        self._event_publisher.publish(QuoteStateChangedEvent(state=state))
