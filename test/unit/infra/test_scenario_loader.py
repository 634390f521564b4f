"""시나리오 로더 유닛 테스트."""

import math

import pytest
import yaml

from agv_conflict_resolver.domain.exceptions import (
    InvalidPathError,
    ScenarioError,
)
from agv_conflict_resolver.domain.value_objects.geometry import Point, Pose
from agv_conflict_resolver.infra.scenario import (
    load_scenario,
    parse_scenario,
)


@pytest.fixture
def scenario_data():
    return {
        'vehicles': [
            {
                'id': 'A',
                'width': 1.0,
                'speed': 2.0,
                'pose': [0.0, 0.0, 0.0],
                'path': [[0, 0], [10, 0]],
            },
            {
                'id': 'B',
                'speed': 2.0,
                'path': [[10, 0], [0, 0]],
            },
        ]
    }


@pytest.fixture
def nav_graph():
    return {
        'levels': {
            'L1': {
                'vertices': [
                    [0.0, 0.0, {'name': 'wp1'}],
                    [1.0, 0.0, {'name': 'wp2'}],
                    [1.0, 1.0, {'name': 'wp3'}],
                ],
            }
        }
    }


class TestParseScenario:
    """parse_scenario() 테스트."""

    def test_vehicles_in_file_order(self, scenario_data):
        """파일 순서대로 AGV를 만든다."""
        agvs = parse_scenario(scenario_data)

        assert [a.agv_id for a in agvs] == ['A', 'B']
        assert agvs[0].path == (Point(0.0, 0.0), Point(10.0, 0.0))
        assert agvs[0].speed == 2.0

    def test_default_pose_from_path(self, scenario_data):
        """pose가 없으면 경로 시작점과 첫 구간 방향을 쓴다."""
        agv_b = parse_scenario(scenario_data)[1]

        assert agv_b.pose.x == 10.0
        assert agv_b.pose.y == 0.0
        assert agv_b.pose.theta == pytest.approx(math.pi)
        assert agv_b.width == 1.0

    def test_route_through_inline_nav_graph(self, nav_graph):
        """route는 nav graph 웨이포인트 이름으로 해석한다."""
        data = {
            'nav_graph': nav_graph,
            'vehicles': [{'id': 'A', 'speed': 1.0,
                          'route': ['wp1', 'wp2', 'wp3']}],
        }

        agv = parse_scenario(data)[0]

        assert agv.path == (Point(0, 0), Point(1, 0), Point(1, 1))
        assert agv.pose == Pose(0.0, 0.0, 0.0)

    def test_route_with_reference_coordinates(self, nav_graph):
        """reference_coordinates가 있으면 로봇 좌표로 변환한다."""
        data = {
            'nav_graph': nav_graph,
            'reference_coordinates': {
                'rmf': [[0, 0], [1, 0], [0, 1], [1, 1]],
                'robot': [[0, 0], [10, 0], [0, 10], [10, 10]],
            },
            'vehicles': [{'id': 'A', 'speed': 1.0, 'route': ['wp2', 'wp3']}],
        }

        agv = parse_scenario(data)[0]

        assert agv.path[0].x == pytest.approx(10.0)
        assert agv.path[1].y == pytest.approx(10.0)

    def test_missing_vehicles(self):
        """vehicles가 없으면 ScenarioError."""
        with pytest.raises(ScenarioError):
            parse_scenario({'vehicles': []})

    def test_missing_id(self):
        """id가 없으면 ScenarioError."""
        with pytest.raises(ScenarioError):
            parse_scenario({'vehicles': [{'path': [[0, 0], [1, 0]]}]})

    def test_empty_path(self):
        """빈 경로는 InvalidPathError."""
        with pytest.raises(InvalidPathError):
            parse_scenario({'vehicles': [{'id': 'A', 'path': []}]})

    def test_unknown_waypoint(self, nav_graph):
        """nav graph에 없는 웨이포인트는 ScenarioError."""
        data = {
            'nav_graph': nav_graph,
            'vehicles': [{'id': 'A', 'route': ['wp1', 'wp9']}],
        }
        with pytest.raises(ScenarioError):
            parse_scenario(data)

    @pytest.mark.parametrize('field, value', [
        ('width', 0.0), ('width', -1.0), ('speed', -0.5),
    ])
    def test_invalid_vehicle_parameters(self, field, value):
        """차폭 0 이하 또는 음수 속도는 ScenarioError."""
        vehicle = {'id': 'A', 'path': [[0, 0], [1, 0]], field: value}
        with pytest.raises(ScenarioError):
            parse_scenario({'vehicles': [vehicle]})

    @pytest.mark.parametrize('vehicle', [
        {'id': 'A', 'path': [[1.0]]},
        {'id': 'A', 'path': [[0, 0], ['x', 1]]},
        {'id': 'A', 'path': [[0, 0], [1, 0]], 'speed': 'fast'},
        {'id': 'A', 'path': [[0, 0], [1, 0]], 'pose': [0.0]},
        {'id': 'A', 'route': 5},
    ])
    def test_malformed_vehicle_values(self, vehicle):
        """좌표/숫자 변환 실패는 원래 예외를 감싼 ScenarioError."""
        with pytest.raises(ScenarioError) as exc_info:
            parse_scenario({'vehicles': [vehicle]})

        assert isinstance(exc_info.value.__cause__, (IndexError, TypeError,
                                                     ValueError))

    def test_reference_coordinates_missing_robot(self, nav_graph):
        """reference_coordinates에 robot이 없으면 ScenarioError."""
        data = {
            'nav_graph': nav_graph,
            'reference_coordinates': {'rmf': [[0, 0], [1, 0]]},
            'vehicles': [{'id': 'A', 'route': ['wp1', 'wp2']}],
        }
        with pytest.raises(ScenarioError) as exc_info:
            parse_scenario(data)

        assert isinstance(exc_info.value.__cause__, KeyError)


class TestLoadScenario:
    """load_scenario() 테스트."""

    def test_load_with_relative_nav_graph(self, tmp_path, nav_graph):
        """nav_graph 경로는 시나리오 파일 기준 상대 경로다."""
        with open(tmp_path / 'nav.yaml', 'w') as f:
            yaml.dump(nav_graph, f)
        scenario_path = tmp_path / 'scenario.yaml'
        with open(scenario_path, 'w') as f:
            yaml.dump({
                'nav_graph': 'nav.yaml',
                'vehicles': [{'id': 'A', 'speed': 1.0,
                              'route': ['wp1', 'wp3']}],
            }, f)

        agvs = load_scenario(scenario_path)

        assert agvs[0].path[-1] == Point(1.0, 1.0)

    def test_not_a_mapping(self, tmp_path):
        """dict가 아닌 파일은 ScenarioError."""
        path = tmp_path / 'scenario.yaml'
        with open(path, 'w') as f:
            f.write('- just\n- a list\n')

        with pytest.raises(ScenarioError):
            load_scenario(path)

    def test_broken_yaml(self, tmp_path):
        """YAML 문법 오류는 ScenarioError로 변환한다."""
        path = tmp_path / 'scenario.yaml'
        with open(path, 'w') as f:
            f.write('vehicles: [\n')

        with pytest.raises(ScenarioError) as exc_info:
            load_scenario(path)

        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)
