"""CLI 진입점 테스트."""

import json

import pytest
import yaml

from agv_conflict_resolver.presentation.main import main


@pytest.fixture
def scenario_file(tmp_path):
    path = tmp_path / 'scenario.yaml'
    with open(path, 'w') as f:
        yaml.dump({
            'vehicles': [
                {'id': 'A', 'speed': 1.0, 'path': [[0, 0], [8, 0]]},
                {'id': 'B', 'speed': 1.0, 'path': [[8, 0], [0, 0]]},
            ]
        }, f)
    return str(path)


class TestMain:
    def test_schedule_output(self, scenario_file, capsys):
        assert main(['-s', scenario_file]) == 0

        data = json.loads(capsys.readouterr().out)
        commands = [(a['agvId'], a['command']) for a in data['actions']]
        assert commands == [('A', 'PROCEED'), ('B', 'WAIT')]
        assert data['actions'][1]['waitTime'] == pytest.approx(2.0)

    def test_predict_output(self, scenario_file, capsys):
        assert main(['-s', scenario_file, '--predict', '--no-index']) == 0

        data = json.loads(capsys.readouterr().out)
        assert len(data['predictions']) == 1
        assert data['predictions'][0]['agv1Id'] == 'A'

    def test_custom_config(self, scenario_file, tmp_path, capsys):
        config_path = tmp_path / 'params.yaml'
        with open(config_path, 'w') as f:
            yaml.dump({'safe_gap': 5.0}, f)

        assert main(['-s', scenario_file, '-c', str(config_path)]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data['actions'][1]['waitTime'] == pytest.approx(5.0)

    def test_missing_scenario(self, tmp_path):
        assert main(['-s', str(tmp_path / 'missing.yaml')]) == 1

    def test_invalid_scenario(self, tmp_path):
        path = tmp_path / 'scenario.yaml'
        with open(path, 'w') as f:
            yaml.dump({'vehicles': [{'id': 'A', 'path': []}]}, f)

        assert main(['-s', str(path)]) == 1

    @pytest.mark.parametrize('content', [
        'vehicles: [\n',
        'vehicles:\n  - id: A\n    path: [[1.0]]\n',
    ])
    def test_malformed_scenario_exits_with_error(self, tmp_path, content):
        path = tmp_path / 'scenario.yaml'
        with open(path, 'w') as f:
            f.write(content)

        assert main(['-s', str(path)]) == 1

    def test_zero_speed_vehicle_fails_detection(self, tmp_path):
        path = tmp_path / 'scenario.yaml'
        with open(path, 'w') as f:
            yaml.dump({
                'vehicles': [
                    {'id': 'A', 'speed': 0.0, 'path': [[0, 0], [8, 0]]},
                    {'id': 'B', 'speed': 1.0, 'path': [[8, 0], [0, 0]]},
                ]
            }, f)

        assert main(['-s', str(path)]) == 1
