"""충돌 엔진 도메인 예외 정의."""


class DomainError(Exception):
    """도메인 계층 기본 예외."""


class AgvNotFoundError(DomainError):
    """등록되지 않은 AGV 접근 시."""


class InvalidSpeedError(DomainError):
    """도착 시간 계산 또는 위치 예측에 사용할 수 없는 속도일 때."""


class InvalidPathError(DomainError):
    """운행에 필요한 경로 점이 부족할 때."""


class ConfigValidationError(DomainError):
    """설정 값이 허용 범위를 벗어났을 때."""


class ScenarioError(DomainError):
    """시나리오 파일 형식이 잘못되었을 때."""
