"""충돌 엔진 도메인 엔티티."""

from agv_conflict_resolver.domain.entities.agv import Agv

__all__ = ['Agv']
