"""AGV 경로 충돌 예측 및 해소 엔진."""
