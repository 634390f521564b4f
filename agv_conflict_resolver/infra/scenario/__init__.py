"""시나리오 파일 인프라."""

from agv_conflict_resolver.infra.scenario.scenario_loader import (
    load_scenario,
    parse_scenario,
)

__all__ = ["load_scenario", "parse_scenario"]
