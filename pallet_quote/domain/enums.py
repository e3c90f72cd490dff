"""팔레트 견적 도메인 열거형 정의."""

from enum import StrEnum


class ServiceCategory(StrEnum):
    """부가 서비스 분류."""

    PICKUP = 'pickup'
    DELIVERY = 'delivery'
    ADDITIONAL = 'additional'


class ServiceType(StrEnum):
    """견적 요청에 포함할 수 있는 부가 서비스 태그."""

    LIFTGATE_PICKUP = 'liftgate-pickup'
    LIFTGATE_DELIVERY = 'liftgate-delivery'
    PHOTO_REQUIRED = 'photo-required'
    INSIDE_PICKUP = 'inside-pickup'
    INSIDE_DELIVERY = 'inside-delivery'
    NOTIFICATION = 'notification'

    @property
    def display_name(self) -> str:
        """화면 표시용 이름 (e.g. 'Liftgate Pickup')."""
        return ' '.join(part.capitalize() for part in self.value.split('-'))

    @property
    def category(self) -> ServiceCategory:
        """태그 문자열로부터 분류를 결정한다."""
        if 'pickup' in self.value:
            return ServiceCategory.PICKUP
        if 'delivery' in self.value:
            return ServiceCategory.DELIVERY
        return ServiceCategory.ADDITIONAL

    @classmethod
    def for_category(cls, category: ServiceCategory) -> list['ServiceType']:
        """분류에 속한 서비스 목록을 정의 순서대로 반환한다."""
        return [s for s in cls if s.category == category]


class ScanStrategy(StrEnum):
    """팔레트 스캔 전략."""

    STABILITY = 'stability'
    MANUAL = 'manual'


class ViewAngle(StrEnum):
    """스캔 시 관측해야 하는 시야 방향."""

    FRONT = 'front'
    LEFT = 'left'
    RIGHT = 'right'
    TOP = 'top'


class ScanPhase(StrEnum):
    """스캔 안내 상태 (역행하지 않음)."""

    INITIAL = 'initial'
    FRONT = 'front'
    LEFT = 'left'
    RIGHT = 'right'
    TOP = 'top'
    COMPLETE = 'complete'


class QuoteStatus(StrEnum):
    """견적 요청 진행 상태."""

    IDLE = 'idle'
    LOADING = 'loading'
    SUCCEEDED = 'succeeded'
    FAILED = 'failed'
