"""YAML 파일 기반 설정 로더 구현체."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from agv_conflict_resolver.domain.enums import ForecastMode
from agv_conflict_resolver.domain.exceptions import ConfigValidationError
from agv_conflict_resolver.usecase.ports.config_port import (
    ConfigPort,
    ResolverConfig,
)

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = (
    Path(__file__).resolve().parent.parent.parent
    / "config"
    / "default_params.yaml"
)

_NON_NEGATIVE_FIELDS = (
    "time_tolerance",
    "search_radius",
    "safe_gap",
    "time_range",
)


class YamlConfigLoader(ConfigPort):
    """ConfigPort의 YAML 파일 구현체.

    YAML 파일에서 설정을 읽어 ResolverConfig로 변환한다.
    파일이 없거나 형식이 잘못되면 기본값을 사용한다.

    Args:
        config_path: YAML 설정 파일 경로. None이면 기본 경로 사용.
    """

    def __init__(self, config_path: Path | str | None = None) -> None:
        self._path = Path(config_path) if config_path else _DEFAULT_CONFIG_PATH

    def load(self) -> ResolverConfig:
        """YAML 파일에서 설정을 로드한다."""
        params = self._extract_params(self._read_yaml())
        defaults = ResolverConfig()

        use_spatial_index = params.get(
            "use_spatial_index", defaults.use_spatial_index
        )
        if not isinstance(use_spatial_index, bool):
            raise ConfigValidationError(
                "use_spatial_index는 true/false 여야 합니다: "
                f"{use_spatial_index!r}"
            )

        try:
            config = ResolverConfig(
                time_tolerance=float(
                    params.get("time_tolerance", defaults.time_tolerance)
                ),
                search_radius=float(
                    params.get("search_radius", defaults.search_radius)
                ),
                safe_gap=float(params.get("safe_gap", defaults.safe_gap)),
                time_range=float(
                    params.get("time_range", defaults.time_range)
                ),
                time_step=float(params.get("time_step", defaults.time_step)),
                collision_threshold=float(
                    params.get(
                        "collision_threshold", defaults.collision_threshold
                    )
                ),
                use_spatial_index=use_spatial_index,
                min_index_fleet_size=int(
                    params.get(
                        "min_index_fleet_size", defaults.min_index_fleet_size
                    )
                ),
                forecast_mode=ForecastMode(
                    str(
                        params.get("forecast_mode", defaults.forecast_mode)
                    ).upper()
                ),
            )
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(
                f"설정 값 형식이 잘못되었습니다 ({self._path}): {e}"
            ) from e

        self._validate(config)
        logger.info("Config loaded from %s", self._path)
        return config

    def _read_yaml(self) -> dict[str, Any]:
        """YAML 파일을 dict로 읽는다."""
        if not self._path.exists():
            logger.warning(
                "Config file not found: %s, using defaults", self._path
            )
            return {}

        with open(self._path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            logger.warning("Invalid YAML format, using defaults")
            return {}

        return data

    def _extract_params(self, raw: dict[str, Any]) -> dict[str, Any]:
        """YAML 구조에서 parameters 를 추출한다."""
        # agv_conflict_resolver.parameters 구조 탐색
        node_data = raw.get("agv_conflict_resolver", raw)
        if isinstance(node_data, dict):
            params = node_data.get("parameters", node_data)
            if isinstance(params, dict):
                return params
        return {}

    def _validate(self, config: ResolverConfig) -> None:
        for name in _NON_NEGATIVE_FIELDS:
            if getattr(config, name) < 0:
                raise ConfigValidationError(
                    f"{name}는 음수일 수 없습니다: {getattr(config, name)}"
                )
        if config.min_index_fleet_size < 1:
            raise ConfigValidationError(
                "min_index_fleet_size는 1 이상이어야 합니다: "
                f"{config.min_index_fleet_size}"
            )
