"""
Tests for Stop and StopSet construction, normalization and lookup.
"""

import logging

import numpy as np
import pytest

from chromaramp.colors import ColorRGB
from chromaramp.gradients import Stop, StopSet, NormalizeMode

RED = ColorRGB((1.0, 0.0, 0.0))
GREEN = ColorRGB((0.0, 1.0, 0.0))
BLUE = ColorRGB((0.0, 0.0, 1.0))


class TestStop:

    def test_defaults(self):
        stop = Stop(0, RED)
        assert stop.position == 0.0
        assert isinstance(stop.position, float)
        assert stop.weight == 0.5

    @pytest.mark.parametrize("weight, expected", [(-1.0, 0.0), (0.25, 0.25), (3.0, 1.0)])
    def test_weight_is_clamped(self, weight, expected):
        assert Stop(0.0, RED, weight).weight == expected

    def test_color_must_be_a_color(self):
        with pytest.raises(TypeError):
            Stop(0.0, (1.0, 0.0, 0.0))

    def test_moved_to(self):
        stop = Stop(0.3, RED, 0.2)
        moved = stop.moved_to(0.8)
        assert moved.position == 0.8
        assert moved.color is RED
        assert moved.weight == 0.2
        assert stop.position == 0.3
        assert stop.moved_to(0.3) is stop

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Stop(0.0, RED).position = 1.0


class TestStopSetLookup:

    def setup_method(self):
        self.stops = StopSet([Stop(1.0, BLUE), Stop(0.0, RED), Stop(0.5, GREEN)])

    def test_sorted_by_position(self):
        assert self.stops.positions == (0.0, 0.5, 1.0)
        assert [s.color for s in self.stops] == [RED, GREEN, BLUE]

    def test_later_duplicate_wins(self):
        stops = StopSet([Stop(0.5, RED), Stop(0.5, BLUE)])
        assert len(stops) == 1
        assert stops[0].color == BLUE

    @pytest.mark.parametrize("position, index", [
        (-1.0, 0),
        (0.0, 0),
        (0.25, 1),
        (0.5, 1),
        (0.75, 2),
        (1.0, 2),
        (2.0, 3),
    ])
    def test_lower_bound(self, position, index):
        assert self.stops.lower_bound(position) == index

    def test_contains(self):
        assert 0.5 in self.stops
        assert 0.25 not in self.stops
        assert "0.5" not in self.stops

    def test_contains_numpy_scalars(self):
        assert np.float32(0.5) in self.stops
        assert np.float64(1.0) in self.stops
        assert np.int64(0) in self.stops
        assert np.float32(0.25) not in self.stops

    def test_as_dict_is_a_copy(self):
        mapping = self.stops.as_dict()
        assert list(mapping) == [0.0, 0.5, 1.0]
        mapping.clear()
        assert len(self.stops) == 3

    def test_with_stop_leaves_original(self):
        extended = self.stops.with_stop(Stop(0.25, BLUE))
        assert extended.positions == (0.0, 0.25, 0.5, 1.0)
        assert self.stops.positions == (0.0, 0.5, 1.0)

    def test_with_stop_replaces_same_position(self):
        replaced = self.stops.with_stop(Stop(0.5, RED))
        assert len(replaced) == 3
        assert replaced[1].color == RED

    def test_without(self):
        reduced = self.stops.without(0.5)
        assert reduced.positions == (0.0, 1.0)
        assert self.stops.without(0.3) is self.stops

    def test_equality_and_hash(self):
        same = StopSet([Stop(0.0, RED), Stop(0.5, GREEN), Stop(1.0, BLUE)])
        assert same == self.stops
        assert hash(same) == hash(self.stops)
        assert same != StopSet()

    def test_rejects_non_stops(self):
        with pytest.raises(TypeError):
            StopSet([Stop(0.0, RED), (1.0, BLUE)])


class TestFromStops:

    def test_empty(self):
        assert len(StopSet.from_stops([])) == 0

    def test_single_stop_moves_to_start(self):
        stops = StopSet.from_stops([Stop(0.7, RED)])
        assert stops.positions == (0.0,)
        assert stops[0].color == RED

    def test_normalize_rescales_to_unit_range(self):
        stops = StopSet.from_stops([Stop(-3.0, RED), Stop(2.0, GREEN), Stop(7.0, BLUE)])
        assert stops.positions == (0.0, 0.5, 1.0)
        assert [s.color for s in stops] == [RED, GREEN, BLUE]

    def test_normalize_keeps_weights(self):
        stops = StopSet.from_stops([Stop(2.0, RED, 0.1), Stop(4.0, BLUE, 0.9)])
        assert [s.weight for s in stops] == [0.1, 0.9]

    def test_normalize_is_idempotent(self):
        once = StopSet.from_stops([Stop(0.1, RED), Stop(0.35, GREEN), Stop(0.9, BLUE)])
        assert StopSet.from_stops(list(once)) == once

    def test_normalize_coincident_positions(self, caplog):
        with caplog.at_level(logging.WARNING, logger="chromaramp"):
            stops = StopSet.from_stops([Stop(2.0, RED), Stop(2.0, BLUE)])
        assert stops.positions == (0.0,)
        assert stops[0].color == BLUE
        assert "share position" in caplog.text

    def test_truncate_fills_endpoints(self):
        stops = StopSet.from_stops(
            [Stop(-1.0, RED), Stop(0.5, GREEN), Stop(2.0, BLUE)],
            NormalizeMode.TRUNCATE,
        )
        assert stops.positions == (0.0, 0.5, 1.0)
        assert all(s.color == GREEN for s in stops)

    def test_truncate_keeps_inner_stops(self):
        stops = StopSet.from_stops(
            [Stop(0.0, RED), Stop(0.3, GREEN), Stop(0.6, BLUE), Stop(1.4, RED)],
            "truncate",
        )
        assert stops.positions == (0.0, 0.3, 0.6, 1.0)
        assert stops[-1].color == BLUE

    def test_truncate_drops_everything(self):
        stops = StopSet.from_stops([Stop(-2.0, RED), Stop(1.5, BLUE)], "truncate")
        assert len(stops) == 0

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            StopSet.from_stops([Stop(0.0, RED), Stop(1.0, BLUE)], "stretch")
