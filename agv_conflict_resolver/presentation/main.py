r"""AGV 충돌 해소 엔진 진입점.

시나리오 파일의 차량을 등록하고 한 번의 검출/스케줄 패스를 실행하여
결과를 JSON으로 출력한다.

실행: agv_conflict_resolver -s scenario.yaml -c params.yaml \\
        [--predict] [--no-index] [-v]
"""

from __future__ import annotations

import argparse
import logging
import sys

from agv_conflict_resolver.domain.events.conflict_events import DomainEvent
from agv_conflict_resolver.domain.exceptions import DomainError
from agv_conflict_resolver.infra.config.yaml_config_loader import (
    YamlConfigLoader,
)
from agv_conflict_resolver.infra.event.in_memory_event_publisher import (
    InMemoryEventPublisher,
)
from agv_conflict_resolver.infra.repository.in_memory_agv_repository import (
    InMemoryAgvRepository,
)
from agv_conflict_resolver.infra.scenario.scenario_loader import (
    load_scenario,
)
from agv_conflict_resolver.infra.serialization.result_serializer import (
    serialize_predictions,
    serialize_schedule,
)
from agv_conflict_resolver.infra.spatial.kd_tree import KdTreeSpatialIndex
from agv_conflict_resolver.usecase.detect_collisions import DetectCollisions
from agv_conflict_resolver.usecase.predict_collisions import PredictCollisions
from agv_conflict_resolver.usecase.schedule_conflicts import (
    ScheduleConflicts,
)

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='agv_conflict_resolver',
        description='AGV path conflict prediction and resolution',
    )
    parser.add_argument(
        '-s', '--scenario', type=str, required=True,
        help='Path to the scenario YAML file (vehicles and paths)',
    )
    parser.add_argument(
        '-c', '--config_file', type=str, default=None,
        help='Path to the parameter YAML file, default: bundled params',
    )
    parser.add_argument(
        '--predict', action='store_true',
        help='Run time-sampled prediction instead of exact scheduling',
    )
    parser.add_argument(
        '--no-index', action='store_true',
        help='Disable the KD-tree for predictive detection',
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='Enable debug logging',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """충돌 해소 패스를 한 번 실행한다.

    Args:
        argv: 커맨드 라인 인자 (프로그램 이름 제외).

    Returns:
        종료 코드.
    """
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='[%(name)s] %(levelname)s: %(message)s',
    )

    try:
        config = YamlConfigLoader(args.config_file).load()
        agvs = load_scenario(args.scenario)
    except (DomainError, OSError) as e:
        logger.error('Failed to start: %s', e)
        return 1

    # 1. 저장소/이벤트 버스 구성
    agv_repo = InMemoryAgvRepository()
    for agv in agvs:
        agv_repo.add(agv)

    event_publisher = InMemoryEventPublisher()
    event_publisher.subscribe(
        DomainEvent, lambda event: logger.debug('Event: %s', event)
    )

    # 2. 유스케이스 구성
    spatial_index = KdTreeSpatialIndex()
    detector = DetectCollisions(spatial_index, event_publisher)

    # 3. 검출 패스 실행
    try:
        if args.predict:
            predictor = PredictCollisions(
                spatial_index,
                event_publisher,
                min_index_fleet_size=config.min_index_fleet_size,
            )
            logger.info('Forecast mode: %s', config.forecast_mode)
            predictions = predictor.predict_for_fleet(
                agv_repo.list_all(),
                config.time_range,
                config.time_step,
                config.collision_threshold,
                use_index=config.use_spatial_index and not args.no_index,
                mode=config.forecast_mode,
            )
            print(serialize_predictions(predictions))
        else:
            scheduler = ScheduleConflicts(detector, agv_repo, event_publisher)
            actions = scheduler.schedule_registered_fleet(config)
            print(serialize_schedule(actions))
    except DomainError as e:
        logger.error('Detection failed: %s', e)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
