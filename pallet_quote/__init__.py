"""AR 팔레트 치수 스캔 및 운임 견적 요청."""

__version__ = "0.1.0"
