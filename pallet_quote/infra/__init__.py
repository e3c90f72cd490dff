"""인프라 어댑터 레이어 (포트 구현체)."""
