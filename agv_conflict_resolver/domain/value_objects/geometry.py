"""평면 기하 관련 값 객체."""

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Point:
    """2차원 평면 위의 점 (방향 없음).

    Args:
        x: X 좌표 (m).
        y: Y 좌표 (m).
    """

    x: float
    y: float


@dataclass(frozen=True)
class Pose:
    """AGV 위치와 방향.

    Args:
        x: X 좌표 (m).
        y: Y 좌표 (m).
        theta: 방향 (rad). 0이면 +x 방향.
    """

    x: float
    y: float
    theta: float = 0.0

    @property
    def point(self) -> Point:
        """방향을 제외한 위치."""
        return Point(self.x, self.y)


@dataclass(frozen=True)
class Segment:
    """경로를 구성하는 선분.

    시작점과 끝점이 같은 퇴화 선분도 유효하다.

    Args:
        start: 시작점.
        end: 끝점.
    """

    start: Point
    end: Point

    @property
    def dx(self) -> float:
        return self.end.x - self.start.x

    @property
    def dy(self) -> float:
        return self.end.y - self.start.y

    @property
    def length(self) -> float:
        """선분 길이 (m)."""
        return math.hypot(self.dx, self.dy)

    @property
    def heading(self) -> float:
        """시작점에서 끝점을 향하는 방향 (rad)."""
        return math.atan2(self.dy, self.dx)
