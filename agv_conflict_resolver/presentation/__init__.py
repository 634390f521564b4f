"""충돌 엔진 진입점 레이어."""
