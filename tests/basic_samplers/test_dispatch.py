"""Tests for the region dispatch of the truncated Gaussian sampler."""

import math

import numpy as np
import pytest

from rtnorm.basic_samplers import (
    InvalidIntervalError,
    Region,
    draw,
    sample_standard,
    select_region,
)


class TestSelectRegion:
    """Routing of standardized intervals."""

    def test_right_tail(self, table):
        route = select_region(4.0, 6.0, table)
        assert route.region is Region.RIGHT_TAIL
        assert not route.flipped
        assert (route.a, route.b) == (4.0, 6.0)

    def test_interval_left_of_table_is_folded(self, table):
        route = select_region(-6.0, -4.0, table)
        assert route.flipped
        assert route.region is Region.RIGHT_TAIL
        assert (route.a, route.b) == (4.0, 6.0)

    def test_left_bound_beyond_table_uses_gaussian_proposal(self, table):
        route = select_region(table.xmin - 0.5, 3.0, table)
        assert route.region is Region.LEFT_TAIL
        assert not route.flipped

    def test_whole_line(self, table):
        route = select_region(-math.inf, math.inf, table)
        assert route.region is Region.LEFT_TAIL

    def test_bulk_spanning_the_table(self, table):
        eps = 1e-3
        route = select_region(table.xmin + eps, table.xmax - eps, table)
        assert route.region is Region.BULK
        assert route.ka == 0
        assert route.kb == table.n_cells - 1
        assert route.kb - route.ka >= table.kmin

    def test_bulk_with_unbounded_right_end(self, table):
        route = select_region(0.0, math.inf, table)
        assert route.region is Region.BULK
        assert route.kb == table.n_cells

    def test_right_bound_at_xmax_maps_to_tail_cell(self, table):
        route = select_region(0.0, table.xmax, table)
        assert route.kb == table.n_cells

    def test_narrow_interval(self, table):
        route = select_region(0.5, 0.5005, table)
        assert route.region is Region.NARROW
        assert abs(route.kb - route.ka) < table.kmin

    def test_narrow_at_table_end(self, table):
        route = select_region(3.45, 10.0, table)
        assert route.region is Region.NARROW
        assert route.kb == table.n_cells

    def test_kb_is_the_cell_holding_b(self, table):
        values = np.random.default_rng(11).uniform(1.6, table.xmax, 2_000)
        for b in values:
            route = select_region(-1.5, b, table)
            assert table.x[route.kb] <= b < table.x[route.kb + 1]

    def test_fold_happens_at_most_once(self, table):
        route = select_region(-6.0, -4.0, table)
        again = select_region(route.a, route.b, table)
        assert not again.flipped

    def test_equal_magnitudes_are_not_folded(self, table):
        assert not select_region(-2.0, 2.0, table).flipped

    @pytest.mark.parametrize(
        "a, b", [(1.0, 1.0), (2.0, 1.0), (math.nan, 1.0), (0.0, math.nan)]
    )
    def test_invalid_interval(self, table, a, b):
        with pytest.raises(InvalidIntervalError):
            select_region(a, b, table)

    def test_invalid_interval_is_value_error(self, table):
        with pytest.raises(ValueError, match="B must be greater than A"):
            select_region(3.0, 3.0, table)


class TestDraw:
    """The selected region decides which random draws are consumed."""

    def test_left_tail_uses_normal_draws(self, table, counting_rng):
        rng = counting_rng(1)
        route = select_region(-3.0, 3.5, table)
        for _ in range(100):
            assert -3.0 <= draw(route, rng, table) <= 3.5
        assert rng.n_normal >= 100
        assert rng.n_uniform == 0

    @pytest.mark.parametrize(
        "a, b", [(4.0, 6.0), (-1.0, 2.0), (0.5, 0.5005), (-7.0, -5.0)]
    )
    def test_other_regions_use_uniform_draws(self, table, counting_rng, a, b):
        rng = counting_rng(2)
        route = select_region(a, b, table)
        for _ in range(100):
            assert a <= draw(route, rng, table) <= b
        assert rng.n_normal == 0
        assert rng.n_uniform >= 200

    def test_folded_draw_is_negated(self, table, scripted_rng):
        # rtexp on (4, 6) with u1 = u2 = 0.5 accepts at once
        a, b = 4.0, 6.0
        z = math.log1p(0.5 * math.expm1(-a * (b - a)))
        expected = a - z / a

        direct = sample_standard(a, b, scripted_rng(uniforms=[0.5, 0.5]), table)
        folded = sample_standard(-b, -a, scripted_rng(uniforms=[0.5, 0.5]), table)
        assert direct == pytest.approx(expected)
        assert folded == -direct

    def test_narrow_interval_at_mode_terminates(self, table, rng):
        for _ in range(1_000):
            r = sample_standard(0.0, 1e-6, rng, table)
            assert 0.0 <= r <= 1e-6

    def test_narrow_interval_left_of_mode(self, table, rng):
        for _ in range(1_000):
            r = sample_standard(-1e-6, 0.0, rng, table)
            assert -1e-6 <= r <= 0.0
