"""
Tests for the pure helpers: rounding rules, warm-up ramp and plate calculator.
"""
import pytest

from app.services.plates import PlateCount, calculate_plates, loaded_weight
from app.services.rounding import clamp_min, floor_to_unit, round_to_nearest
from app.services.warmup import WarmupSet, calculate_warmup_sets


class TestRounding:
    @pytest.mark.parametrize("unit", [2.5, 5.0])
    @pytest.mark.parametrize("value", [0.0, 1.0, 2.5, 19.99, 20.0, 22.4, 57.5, 62.4, 87.0, 142.6])
    def test_floor_to_unit_brackets_value(self, value, unit):
        floored = floor_to_unit(value, unit)
        assert floored <= value < floored + unit
        assert (floored / unit) == int(floored / unit)

    def test_floor_to_unit_examples(self):
        assert floor_to_unit(62.4, 2.5) == 60.0
        assert floor_to_unit(87.0, 5.0) == 85.0
        assert floor_to_unit(54.0, 2.5) == 52.5
        assert floor_to_unit(45.0, 5.0) == 45.0

    def test_round_to_nearest_goes_up_on_half(self):
        # 21.25 is exactly between 20 and 22.5
        assert round_to_nearest(21.25, 2.5) == 22.5
        assert round_to_nearest(21.0, 2.5) == 20.0
        assert round_to_nearest(24.0, 2.5) == 25.0

    def test_clamp_min(self):
        assert clamp_min(0.0, 20.0) == 20.0
        assert clamp_min(40.0, 20.0) == 40.0


class TestWarmup:
    def test_bar_weight_gives_two_empty_bar_sets(self):
        assert calculate_warmup_sets(20.0) == [(20.0, "5"), (20.0, "5")]

    def test_below_bar_weight_gives_two_empty_bar_sets(self):
        assert calculate_warmup_sets(10.0) == [WarmupSet(20.0, "5"), WarmupSet(20.0, "5")]

    def test_hundred_kilos(self):
        assert calculate_warmup_sets(100.0) == [
            (20.0, "5"),
            (40.0, "5"),
            (60.0, "3"),
            (80.0, "2"),
        ]

    def test_light_weight_collapses_duplicates_keeping_first_label(self):
        # 40% of 40 = 16 -> clamped to the bar, same as the empty-bar sets
        # 60% = 24 -> 25, 80% = 32 -> 32.5 (nearest, not floor)
        assert calculate_warmup_sets(40.0) == [(20.0, "5"), (25.0, "3"), (32.5, "2")]

    def test_consecutive_weights_are_never_equal(self):
        for work in [22.5, 30.0, 47.5, 62.5, 85.0, 120.0, 180.0]:
            sets = calculate_warmup_sets(work)
            assert all(a.weight != b.weight for a, b in zip(sets, sets[1:]))
            assert all(s.weight % 2.5 == 0 for s in sets)
            assert sets[0] == (20.0, "5")


class TestPlates:
    def test_hundred_kilos_is_two_twenties_per_side(self):
        assert calculate_plates(100.0) == [(20.0, 2)]

    def test_bar_or_less_needs_no_plates(self):
        assert calculate_plates(20.0) == []
        assert calculate_plates(15.0) == []

    def test_uses_every_denomination_greedily(self):
        # per side: (122.5 - 20) / 2 = 51.25 = 20+20+10+1.25
        assert calculate_plates(122.5) == [PlateCount(20.0, 2), PlateCount(10.0, 1), PlateCount(1.25, 1)]

    def test_small_increment(self):
        # per side 1.25
        assert calculate_plates(22.5) == [(1.25, 1)]

    def test_heaviest_plate_first_and_exact_load(self):
        for target in [25.0, 47.5, 62.5, 77.5, 102.5, 140.0, 167.5]:
            plates = calculate_plates(target)
            sizes = [p.weight for p in plates]
            assert sizes == sorted(sizes, reverse=True)
            assert loaded_weight(plates) == pytest.approx(target)
