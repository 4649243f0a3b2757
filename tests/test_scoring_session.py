"""
Tests for the headless play / draw / evaluate session
"""

import os
import sys
import random

import pytest

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from contour_sketch.config import load_config
from contour_sketch.audio_processing.scoring_session import (ContourSession, PLAY_FIRST_MESSAGE,
                                                             DRAW_FIRST_MESSAGE)


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def draw(session, samples):
    session.begin_gesture()
    for y in samples:
        session.add_sample(y)
    session.end_gesture()


def rising_stroke():
    return [380 - 4 * k for k in range(91)]


def test_evaluate_before_play():
    session = ContourSession(random_source=FixedRandom(0.0))
    assert session.evaluate() == PLAY_FIRST_MESSAGE
    assert session.last_result is None


def test_evaluate_without_drawing():
    session = ContourSession(random_source=FixedRandom(0.0))
    session.play()
    assert session.evaluate() == DRAW_FIRST_MESSAGE


def test_play_selects_and_schedules():
    session = ContourSession(random_source=FixedRandom(0.0))
    schedule = session.play()
    assert session.current_pattern.name == "linear_up"
    assert schedule.frequencies() == list(session.current_pattern.contour)


def test_rising_stroke_matches_linear_up():
    session = ContourSession(random_source=FixedRandom(0.0))
    session.play()
    draw(session, rising_stroke())
    message = session.evaluate()
    assert "Good match" in message
    assert session.last_result.is_match
    assert session.perf_tracker.get_stage_duration("Score Drawing") >= 0


def test_falling_stroke_fails_linear_up():
    session = ContourSession(random_source=FixedRandom(0.0))
    session.play()
    draw(session, rising_stroke()[::-1])
    assert "Try again" in session.evaluate()
    assert not session.last_result.is_match


def test_samples_only_recorded_while_drawing():
    session = ContourSession(random_source=FixedRandom(0.0))
    assert session.add_sample(100) is None
    session.begin_gesture()
    assert session.add_sample(400) == pytest.approx(100.0)
    assert session.add_sample(0) == pytest.approx(600.0)
    session.end_gesture()
    session.add_sample(200)
    assert session.trace == [400, 0]


def test_new_gesture_resets_trace():
    session = ContourSession()
    draw(session, [10, 20])
    draw(session, [30])
    assert session.trace == [30]


def test_play_and_clear_reset_drawing():
    session = ContourSession(random_source=FixedRandom(0.0))
    session.play()
    draw(session, rising_stroke())
    session.evaluate()
    session.play()
    assert session.trace == []
    assert session.last_result is None
    draw(session, [10])
    session.clear()
    assert session.evaluate() == DRAW_FIRST_MESSAGE


def test_seeded_sessions_agree():
    first = ContourSession(random_source=random.Random(3))
    second = ContourSession(random_source=random.Random(3))
    for _ in range(5):
        first.play()
        second.play()
        assert first.current_pattern == second.current_pattern


def test_guide_points():
    session = ContourSession(random_source=FixedRandom(0.0))
    assert session.guide(400, 400) == []
    session.play()
    points = session.guide(400, 400)
    assert len(points) == 11
    assert points[0] == pytest.approx((50.0, 350.0))
    assert points[-1] == pytest.approx((350.0, 50.0))


def test_config_threshold_applies():
    config = load_config(overrides={"scoring": {"threshold": 10.0}})
    session = ContourSession(random_source=FixedRandom(0.0), config=config)
    session.play()
    draw(session, rising_stroke()[::-1])
    session.evaluate()
    assert session.last_result.is_match


def test_partial_config_merges_over_defaults():
    session = ContourSession(random_source=FixedRandom(0.0), config={"scoring": {"threshold": 10.0}})
    assert session.score_calculator.threshold == 10.0
    assert session.score_calculator.epsilon == 0.0001
    assert session.preprocessor.axis_extent == 400
    session.play()
    draw(session, rising_stroke()[::-1])
    session.evaluate()
    assert session.last_result.is_match


def test_invalid_sample_not_recorded():
    session = ContourSession()
    session.begin_gesture()
    session.add_sample(120)
    with pytest.raises(ValueError):
        session.add_sample("abc")
    assert session.trace == [120.0]
