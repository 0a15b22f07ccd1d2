"""Tests for the transit search loop."""

import math
import unittest
from datetime import datetime, timezone

from transitloom.errors import ErrorKind, OutOfTimeRangeError, UserTimeLimitError
from transitloom.transits.calculator import TransitCalculator
from transitloom.transits.search import (
    SearchState,
    TransitSearch,
    get_transit,
    get_transit_ut,
)


class ScriptedCalculator(TransitCalculator):
    """Calculator evaluating a plain function of time."""

    def __init__(
        self,
        func,
        min_speed,
        max_speed,
        offset=0.0,
        deg_prec=0.001,
        rollover=False,
        engine=None,
    ):
        super().__init__(engine)
        self.func = func
        self.rollover = rollover
        self._min_speed = min_speed
        self._max_speed = max_speed
        self.deg_prec = deg_prec
        self.evaluated = []
        self.offset = offset

    @property
    def min_speed(self):
        return self._min_speed

    @property
    def max_speed(self):
        return self._max_speed

    def calc(self, jd):
        self.evaluated.append(jd)
        return self.func(jd)

    def degree_precision(self, jd):
        return self.deg_prec

    def object_identifiers(self):
        return ("scripted",)


class UnitStepCalculator(ScriptedCalculator):
    """Steps exactly one day per iteration."""

    def get_next_jd(self, jd, value, offset, min_speed, max_speed, backward):
        return jd - 1.0 if backward else jd + 1.0


class StalledCalculator(ScriptedCalculator):
    """Never proposes a step of its own."""

    def get_next_jd(self, jd, value, offset, min_speed, max_speed, backward):
        return jd


class DeltaTEngine:
    """Minimal engine providing a constant delta T."""

    def __init__(self, delta_t):
        self._delta_t = delta_t

    def delta_t(self, jd):
        return self._delta_t


class TestGetTransit(unittest.TestCase):
    """Tests for get_transit."""

    def test_identity_converges_to_offset(self):
        """A quantity equal to the time reaches offset 5 at time 5."""
        calc = ScriptedCalculator(lambda t: t, 1.0, 1.0, offset=5.0, deg_prec=0.001)
        time_prec = calc.time_precision(calc.deg_prec / 2.0)

        result = get_transit(calc, 0.0)

        self.assertAlmostEqual(result, 5.0, places=9)
        self.assertLessEqual(result, 5.0 + time_prec)
        self.assertLess(len(calc.evaluated), 10)

    def test_immediate_hit_returns_start_time(self):
        """Starting exactly at the offset returns the start time."""
        for t0 in (0.0, 12.5, 2460000.5, -3.25):
            calc = ScriptedCalculator(lambda t: 7.0, 1.0, 1.0, offset=7.0)
            self.assertEqual(get_transit(calc, t0), t0)
            self.assertEqual(calc.evaluated, [t0])

    def test_immediate_hit_accounts_for_rollover(self):
        """A start value one period above the offset counts as a hit."""
        calc = ScriptedCalculator(lambda t: 367.0, 1.0, 1.0, offset=7.0, rollover=True)
        self.assertEqual(get_transit(calc, 3.0), 3.0)

    def test_no_variation_is_rejected(self):
        """Zero extreme speeds cannot reach any offset."""
        for offset in (1.0, 50.0, -20.0):
            calc = ScriptedCalculator(lambda t: 0.0, 0.0, 0.0, offset=offset)
            with self.assertRaises(OutOfTimeRangeError) as ctx:
                get_transit(calc, 10.0)
            self.assertEqual(ctx.exception.kind, ErrorKind.OUT_OF_TIME_RANGE)
            self.assertEqual(ctx.exception.jd, 10.0)

    def test_offset_out_of_range(self):
        """Offsets outside a linear target's range are rejected before searching."""
        calc = ScriptedCalculator(lambda t: t, 1.0, 1.0, offset=120.0)
        calc.min_offset, calc.max_offset = -90.0, 90.0

        with self.assertRaises(OutOfTimeRangeError):
            get_transit(calc, 0.0)
        self.assertEqual(calc.evaluated, [])

    def test_forward_search_never_goes_back(self):
        calc = ScriptedCalculator(
            lambda t: t + 0.5 * math.sin(t), 0.5, 1.5, offset=10.0, deg_prec=1e-6
        )
        result = get_transit(calc, 0.0)

        self.assertTrue(all(jd >= 0.0 for jd in calc.evaluated))
        self.assertLessEqual(result, max(calc.evaluated))
        self.assertAlmostEqual(result + 0.5 * math.sin(result), 10.0, places=5)

    def test_backward_search_never_goes_forward(self):
        calc = ScriptedCalculator(lambda t: t, 1.0, 1.0, offset=-5.0)
        result = get_transit(calc, 0.0, backward=True)

        self.assertAlmostEqual(result, -5.0, places=9)
        self.assertTrue(all(jd <= 0.0 for jd in calc.evaluated))

    def test_minimum_time_step(self):
        """A stalled step function still advances by the time precision."""
        calc = StalledCalculator(lambda t: t, 1.0, 1.0, offset=1.0, deg_prec=0.2)
        time_prec = calc.time_precision(calc.deg_prec / 2.0)
        self.assertAlmostEqual(time_prec, 0.1)

        result = get_transit(calc, 0.0)

        steps = [b - a for a, b in zip(calc.evaluated, calc.evaluated[1:])]
        self.assertTrue(steps)
        for step in steps:
            self.assertGreaterEqual(step, time_prec - 1e-12)
        self.assertAlmostEqual(result, 1.0, places=9)

    def test_crossing_at_rollover_seam_forward(self):
        """359.9 -> 0.05 brackets offset 0 without a sign flip."""
        calc = UnitStepCalculator(
            lambda t: (359.9 + 0.15 * t) % 360.0,
            0.15,
            0.15,
            offset=0.0,
            deg_prec=1e-6,
            rollover=True,
        )
        result = get_transit(calc, 0.0)

        self.assertAlmostEqual(result, 2.0 / 3.0, places=6)
        self.assertEqual(calc.evaluated, [0.0, 1.0])

    def test_crossing_at_rollover_seam_backward(self):
        """0.05 -> 359.9 going back in time brackets offset 0."""
        calc = UnitStepCalculator(
            lambda t: (0.05 + 0.15 * t) % 360.0,
            0.15,
            0.15,
            offset=0.0,
            deg_prec=1e-6,
            rollover=True,
        )
        result = get_transit(calc, 0.0, backward=True)

        self.assertAlmostEqual(result, -1.0 / 3.0, places=6)

    def test_result_is_clamped_to_last_sample(self):
        """An interpolation beyond the current sample returns the sample time."""

        class AlwaysFound(UnitStepCalculator):
            def check_result(self, offset, last_value, value, above, forward):
                return True

        calc = AlwaysFound(lambda t: t, 1.0, 1.0, offset=5.0)
        self.assertEqual(get_transit(calc, 0.0), 1.0)

        calc = AlwaysFound(lambda t: -t, -1.0, -1.0, offset=5.0)
        self.assertEqual(get_transit(calc, 0.0, backward=True), -1.0)

    def test_user_time_limit(self):
        calc = ScriptedCalculator(lambda t: 10.0 + 0.0 * t, 1.0, 1.0, offset=50.0)

        with self.assertRaises(UserTimeLimitError) as ctx:
            get_transit(calc, 0.0, jd_limit=30.0)
        self.assertEqual(ctx.exception.kind, ErrorKind.BEYOND_USER_TIME_LIMIT)
        self.assertEqual(ctx.exception.jd, 40.0)

    def test_soft_stop_returns_current_time(self):
        calc = ScriptedCalculator(
            lambda t: t if t < 2.0 else math.inf, 1.0, 1.0, offset=10.0
        )
        self.assertEqual(get_transit(calc, 0.0), 10.0)

    def test_unreachable_offset_in_search_direction(self):
        """A quantity that only increases cannot reach a higher value in the past."""
        calc = ScriptedCalculator(lambda t: t, 1.0, 2.0, offset=5.0)
        with self.assertRaises(OutOfTimeRangeError):
            get_transit(calc, 0.0, backward=True)

    def test_accepts_datetime_start(self):
        start = datetime(2000, 1, 1, 12, tzinfo=timezone.utc)
        calc = ScriptedCalculator(
            lambda t: t - 2451545.0, 1.0, 1.0, offset=3.0, deg_prec=1e-6
        )
        self.assertAlmostEqual(get_transit(calc, start), 2451548.0, places=6)


class TestStepFunction(unittest.TestCase):
    """Tests for the default step and crossing functions."""

    def setUp(self):
        self.linear = ScriptedCalculator(lambda t: t, -1.0, 2.0)
        self.circular = ScriptedCalculator(lambda t: t, -1.0, 2.0, rollover=True)

    def test_linear_forward_takes_smallest_positive_step(self):
        # (10 - 4) / 2 = 3 and (10 - 4) / -1 = -6
        self.assertEqual(self.linear.get_next_jd(0.0, 4.0, 10.0, -1.0, 2.0, False), 3.0)

    def test_linear_backward_takes_largest_non_positive_step(self):
        self.assertEqual(self.linear.get_next_jd(0.0, 4.0, 10.0, -1.0, 2.0, True), -6.0)

    def test_linear_without_step_raises(self):
        with self.assertRaises(OutOfTimeRangeError):
            self.linear.get_next_jd(0.0, 4.0, 10.0, 2.0, 2.0, True)
        with self.assertRaises(OutOfTimeRangeError):
            self.linear.get_next_jd(0.0, 10.0, 4.0, 2.0, 2.0, False)

    def test_circular_step_uses_shorter_arc(self):
        # 350 away forward is 10 away backward, at the fastest speed of 2
        self.assertEqual(self.circular.get_next_jd(0.0, 360.0, 10.0, -1.0, 2.0, False), 5.0)
        self.assertEqual(self.circular.get_next_jd(0.0, 360.0, 10.0, -1.0, 2.0, True), -5.0)
        self.assertEqual(self.circular.get_next_jd(0.0, 40.0, 10.0, -1.0, 2.0, False), 15.0)

    def test_check_result_plain_crossings(self):
        calc = self.linear
        self.assertTrue(calc.check_result(5.0, 4.0, 6.0, False, True))
        self.assertTrue(calc.check_result(5.0, 6.0, 4.0, True, False))
        self.assertFalse(calc.check_result(5.0, 4.0, 4.5, False, True))
        self.assertFalse(calc.check_result(5.0, 6.0, 5.5, True, False))

    def test_check_result_seam_crossings(self):
        calc = self.circular
        self.assertTrue(calc.check_result(0.0, 359.9, 0.05, True, True))
        self.assertTrue(calc.check_result(0.0, 0.05, 359.9, True, False))
        self.assertFalse(calc.check_result(180.0, 359.9, 0.05, True, True))
        # The linear target knows no seam
        self.assertFalse(self.linear.check_result(0.0, 359.9, 0.05, True, True))

    def test_offset_normalization(self):
        self.circular.offset = -30.0
        self.assertEqual(self.circular.offset, 330.0)
        self.circular.offset = 725.0
        self.assertEqual(self.circular.offset, 5.0)
        self.linear.offset = -30.0
        self.assertEqual(self.linear.offset, -30.0)


class TestSearchVariants(unittest.TestCase):
    """Tests for UT searches and the TransitSearch class."""

    def test_get_transit_ut_shifts_by_delta_t(self):
        engine = DeltaTEngine(0.5)
        calc = ScriptedCalculator(lambda t: t, 1.0, 1.0, offset=5.0, engine=engine)

        result_ut = get_transit_ut(calc, 0.0)

        self.assertAlmostEqual(result_ut, 4.5, places=9)
        self.assertAlmostEqual(result_ut, get_transit(calc, 0.5) - 0.5, places=9)
        self.assertEqual(calc.evaluated[0], 0.5)

    def test_get_transit_ut_converts_limit(self):
        engine = DeltaTEngine(1.0)
        calc = ScriptedCalculator(lambda t: 10.0 + 0.0 * t, 1.0, 1.0, offset=50.0, engine=engine)

        with self.assertRaises(UserTimeLimitError) as ctx:
            get_transit_ut(calc, 0.0, jd_limit_ut=30.0)
        # ET start 1.0, one step of 40 days
        self.assertEqual(ctx.exception.jd, 41.0)

    def test_transit_search_uses_its_engine(self):
        search = TransitSearch(DeltaTEngine(0.25))
        calc = ScriptedCalculator(lambda t: t, 1.0, 1.0, offset=5.0, engine=DeltaTEngine(9.0))

        self.assertAlmostEqual(search.get_transit_ut(calc, 0.0), 4.75, places=9)
        self.assertAlmostEqual(search.get_transit(calc, 0.0), 5.0, places=9)

    def test_next_transit_skips_current_hit(self):
        search = TransitSearch(DeltaTEngine(0.0))
        calc = ScriptedCalculator(
            lambda t: (10.0 * t) % 360.0, 10.0, 10.0, offset=0.0, deg_prec=1e-6, rollover=True
        )

        self.assertEqual(search.get_transit(calc, 0.0), 0.0)
        self.assertAlmostEqual(search.next_transit(calc, 0.0), 36.0, places=5)
        self.assertAlmostEqual(search.next_transit(calc, 0.0, backward=True), -36.0, places=5)

    def test_search_state_limit(self):
        state = SearchState(10.0, 0.0, 9.0, 0.0, False, 9.5)
        self.assertTrue(state.beyond_limit())
        state = SearchState(10.0, 0.0, 11.0, 0.0, True, 9.5)
        self.assertFalse(state.beyond_limit())


if __name__ == "__main__":
    unittest.main()
