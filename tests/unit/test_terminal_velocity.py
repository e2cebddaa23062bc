"""Tests for the two terminal velocity heuristics."""
import math

import pytest

from dropsim.terminal_velocity import (AsymptoteProximityDetector, StabilityWindowDetector,
                                       create_detector)
from dropsim.types import DragModel, ScenarioParams, TerminalVelocityHeuristic


def feed(detector, velocities):
    for v in velocities:
        detector.observe(v)
    return detector.estimate


class TestStabilityWindow:

    def test_near_constant_sequence_latches(self, earth_quadratic):
        detector = StabilityWindowDetector(earth_quadratic)
        velocities = [4.4 + (0.005 if i % 2 else 0.0) for i in range(60)]
        assert feed(detector, velocities) == pytest.approx(4.4, abs=0.01)

    def test_oscillating_sequence_never_latches(self, earth_quadratic):
        detector = StabilityWindowDetector(earth_quadratic)
        velocities = [4.4 + (0.02 if i % 2 else 0.0) for i in range(1000)]
        assert feed(detector, velocities) is None
        assert detector.stable_steps == 0

    def test_latches_once_window_is_exceeded(self, earth_quadratic):
        detector = StabilityWindowDetector(earth_quadratic, initial_velocity=3.0)
        assert feed(detector, [3.0] * 50) is None
        assert detector.stable_steps == 50
        assert detector.observe(3.0) == 3.0

    def test_fifty_one_near_constant_steps_latch(self, earth_quadratic):
        detector = StabilityWindowDetector(earth_quadratic, initial_velocity=4.43)
        velocities = [4.43 + (0.005 if i % 2 else 0.0) for i in range(51)]
        assert feed(detector, velocities) == pytest.approx(4.43, abs=0.01)

    def test_first_step_is_compared_with_initial_velocity(self, earth_quadratic):
        detector = StabilityWindowDetector(earth_quadratic)
        detector.observe(3.0)
        assert detector.stable_steps == 0
        detector.observe(3.0)
        assert detector.stable_steps == 1

    def test_unstable_step_resets_counter(self, earth_quadratic):
        detector = StabilityWindowDetector(earth_quadratic)
        feed(detector, [3.0] * 40)
        detector.observe(3.5)
        assert detector.stable_steps == 0
        assert feed(detector, [3.5] * 50) is None
        assert detector.observe(3.5) == 3.5

    def test_latches_magnitude(self, earth_quadratic):
        detector = StabilityWindowDetector(earth_quadratic)
        assert feed(detector, [-2.0] * 60) == 2.0

    def test_estimate_is_immutable_once_latched(self, earth_quadratic):
        detector = StabilityWindowDetector(earth_quadratic)
        feed(detector, [4.0] * 60)
        feed(detector, [1.0] * 200)
        assert detector.estimate == 4.0

    def test_inactive_without_drag(self, free_fall):
        detector = StabilityWindowDetector(free_fall)
        assert not detector.active
        assert feed(detector, [4.0] * 500) is None

    def test_reset_clears_estimate_and_counter(self, earth_quadratic):
        detector = StabilityWindowDetector(earth_quadratic)
        feed(detector, [4.0] * 60)
        detector.reset()
        assert detector.estimate is None
        assert detector.stable_steps == 0
        assert feed(detector, [4.0] * 10) is None

    def test_reset_seeds_previous_velocity(self, earth_quadratic):
        detector = StabilityWindowDetector(earth_quadratic)
        detector.reset(2.5)
        detector.observe(2.5)
        assert detector.stable_steps == 1

    def test_custom_window(self, earth_quadratic):
        detector = StabilityWindowDetector(earth_quadratic, delta=0.1, window=3)
        assert feed(detector, [1.0, 1.05, 1.1, 1.15, 1.2]) == pytest.approx(1.2)


class TestAsymptoteProximity:

    def test_tolerance_uses_absolute_floor(self, earth_quadratic):
        detector = AsymptoteProximityDetector(earth_quadratic)
        assert detector.theoretical == pytest.approx(math.sqrt(19.62))
        assert detector.tolerance == 0.5

    def test_tolerance_scales_with_large_terminal_velocity(self, earth_linear):
        detector = AsymptoteProximityDetector(earth_linear)
        assert detector.theoretical == pytest.approx(19.62)
        assert detector.tolerance == pytest.approx(1.962)

    def test_latches_first_velocity_inside_band(self, earth_quadratic):
        detector = AsymptoteProximityDetector(earth_quadratic)
        assert feed(detector, [0.5, 2.0, 3.5, 3.9]) is None
        assert detector.observe(4.0) == 4.0
        assert detector.observe(4.4) == 4.0

    def test_approach_from_above(self, earth_quadratic):
        detector = AsymptoteProximityDetector(earth_quadratic)
        assert feed(detector, [8.0, 6.0, 4.8]) == 4.8

    def test_inactive_without_drag(self, free_fall):
        detector = AsymptoteProximityDetector(free_fall)
        assert detector.theoretical is None
        assert feed(detector, [1.0, 5.0, 50.0]) is None


def test_heuristics_latch_differently_on_the_same_stream(earth_quadratic):
    velocities = [4.43 * (1 - math.exp(-i / 40.0)) for i in range(400)]
    stability = feed(create_detector(TerminalVelocityHeuristic.STABILITY_WINDOW, earth_quadratic),
                     velocities)
    asymptote = feed(create_detector(TerminalVelocityHeuristic.ASYMPTOTE_PROXIMITY, earth_quadratic),
                     velocities)
    assert stability is not None and asymptote is not None
    assert asymptote < stability


def test_factory_forwards_tuning():
    params = ScenarioParams(gravity=9.81, drag_coefficient=0.5, drag_model=DragModel.LINEAR)
    detector = create_detector(TerminalVelocityHeuristic.ASYMPTOTE_PROXIMITY, params,
                               abs_tolerance=0.1, rel_tolerance=0.0)
    assert isinstance(detector, AsymptoteProximityDetector)
    assert detector.tolerance == 0.1
