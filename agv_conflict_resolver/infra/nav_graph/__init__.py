"""내비게이션 그래프 인프라."""
