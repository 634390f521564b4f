"""DetectCollisions 유스케이스 단위 테스트."""

from unittest.mock import MagicMock

import pytest

from agv_conflict_resolver.domain.entities.agv import Agv
from agv_conflict_resolver.domain.events.conflict_events import (
    CollisionDetectedEvent,
)
from agv_conflict_resolver.domain.exceptions import InvalidSpeedError
from agv_conflict_resolver.domain.value_objects.geometry import Point, Pose
from agv_conflict_resolver.infra.spatial.kd_tree import KdTreeSpatialIndex
from agv_conflict_resolver.usecase.candidate_pairs import (
    all_pairs,
    indexed_pairs,
    pair_key,
)
from agv_conflict_resolver.usecase.detect_collisions import DetectCollisions


@pytest.fixture
def publisher():
    return MagicMock()


@pytest.fixture
def usecase(publisher):
    return DetectCollisions(KdTreeSpatialIndex(), publisher)


class TestCandidatePairs:
    def test_pair_key_is_order_free(self):
        assert pair_key('B', 'A') == pair_key('A', 'B') == ('A', 'B')

    def test_all_pairs(self, parallel_fleet):
        pairs = all_pairs(parallel_fleet[:4])
        assert len(pairs) == 6

    def test_all_pairs_skips_same_id(self):
        agv = Agv('A', 1.0, Pose(0, 0))
        twin = Agv('A', 1.0, Pose(1, 0))
        assert all_pairs([agv, twin]) == []

    def test_indexed_pairs_deduplicates(self, head_on_pair):
        pairs = indexed_pairs(list(head_on_pair), KdTreeSpatialIndex(), 20.0)

        assert len(pairs) == 1
        agv, other = pairs[0]
        assert (agv.agv_id, other.agv_id) == ('A', 'B')

    def test_indexed_pairs_rebuilds_index(self, head_on_pair):
        index = MagicMock()
        index.range_search.return_value = []

        indexed_pairs(list(head_on_pair), index, 20.0)

        index.build.assert_called_once()
        assert index.range_search.call_count == 2


class TestDetectWithIndex:
    def test_head_on_collision(self, usecase, publisher, head_on_pair):
        events = usecase.detect_with_index(list(head_on_pair), 0.5, 20.0)

        assert len(events) == 1
        event = events[0]
        assert (event.agv1_id, event.agv2_id) == ('A', 'B')
        assert event.point == Point(5.0, 0.0)

        published = publisher.publish.call_args[0][0]
        assert isinstance(published, CollisionDetectedEvent)
        assert published.x == pytest.approx(5.0)

    def test_radius_excludes_distant_pair(self, usecase, head_on_pair):
        assert usecase.detect_with_index(list(head_on_pair), 0.5, 5.0) == []

    def test_input_order_preserved(self, usecase, head_on_pair):
        agvs = [head_on_pair[1], head_on_pair[0]]

        events = usecase.detect_with_index(agvs, 0.5, 20.0)

        assert [a.agv_id for a in agvs] == ['B', 'A']
        assert events[0].agv1_id == 'B'

    def test_parallel_fleet_has_no_collisions(
        self, usecase, publisher, parallel_fleet,
    ):
        assert usecase.detect_with_index(parallel_fleet, 0.5, 150.0) == []
        publisher.publish.assert_not_called()

    def test_zero_speed_raises(self, usecase, head_on_pair):
        head_on_pair[1].speed = 0.0
        with pytest.raises(InvalidSpeedError):
            usecase.detect_with_index(list(head_on_pair), 0.5, 20.0)


class TestDetectBruteForce:
    def test_ignores_distance(self, usecase, head_on_pair):
        events = usecase.detect_brute_force(list(head_on_pair), 0.5)
        assert len(events) == 1

    def test_matches_index_with_large_radius(
        self, usecase, head_on_pair, crossing_pair, parallel_fleet,
    ):
        crossing_pair[0].agv_id = 'C'
        crossing_pair[1].agv_id = 'D'
        agvs = [*head_on_pair, *crossing_pair, *parallel_fleet[1:4]]

        brute = usecase.detect_brute_force(agvs, 0.5)
        indexed = usecase.detect_with_index(agvs, 0.5, 1000.0)

        def keys(events):
            return {pair_key(e.agv1_id, e.agv2_id) for e in events}

        assert keys(brute) == keys(indexed)
        assert ('A', 'B') in keys(brute)
        assert ('C', 'D') in keys(brute)
