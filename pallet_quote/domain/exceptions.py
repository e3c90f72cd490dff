"""팔레트 견적 도메인 예외 정의."""


class DomainError(Exception):
    """도메인 계층 기본 예외."""


class ConfigError(DomainError):
    """설정값이 유효하지 않을 때."""


class ScanCapabilityUnsupportedError(DomainError):
    """기기가 스캔에 필요한 AR 기능을 지원하지 않을 때."""


class ScanTimeoutError(DomainError):
    """제한 시간 안에 스캔이 완료되지 않았을 때."""


class QuoteValidationError(DomainError):
    """견적 요청 내용이 유효하지 않을 때."""


class QuoteRequestError(DomainError):
    """견적 API 호출 실패 기본 예외.

    Args:
        code: HTTP 상태 코드. 응답을 받지 못했으면 None.
        message: 사용자에게 보여줄 오류 메시지.
    """

    def __init__(self, code: int | None, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f'{type(self).__name__}(code={self.code!r}, message={self.message!r})'


class QuoteTransportError(QuoteRequestError):
    """네트워크/전송 계층 실패 시."""


class QuoteHttpError(QuoteRequestError):
    """2xx 이외의 HTTP 응답 수신 시."""


class QuoteDecodeError(QuoteRequestError):
    """성공 응답 본문을 해석하지 못했을 때."""
