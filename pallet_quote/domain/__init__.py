"""팔레트 견적 도메인 레이어."""
