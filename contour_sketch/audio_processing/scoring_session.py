"""
Headless play / draw / evaluate session
"""

import logging
import random
from typing import Any, Dict, List, Optional, Tuple

from contour_sketch.config import load_config
from contour_sketch.audio_processing.playback import (PlaybackSchedule, build_playback_schedule,
                                                      position_to_frequency)
from contour_sketch.patterns.pattern_library import (ReferencePattern, generate_patterns,
                                                     select_reference)
from contour_sketch.preprocessing.trace_preprocessor import TracePreprocessor
from contour_sketch.scoring.score_calculator import ScoreCalculator, ScoreResult
from contour_sketch.utils.performance_tracker import PerformanceTracker
from contour_sketch.visualization.alignment_plot import guide_points

PLAY_FIRST_MESSAGE = "Play melody first!"
DRAW_FIRST_MESSAGE = "Draw something first!"


class ContourSession:
    def __init__(self, catalog: Optional[Dict[str, ReferencePattern]] = None,
                 random_source: Optional[random.Random] = None,
                 config: Optional[Dict[str, Any]] = None):
        """Initialize a new session

        Args:
            catalog: Reference patterns to choose from (default catalog if None)
            random_source: Source of randomness for selection (fresh random.Random if None)
            config: Configuration dict, merged over the defaults (sections may be partial)
        """
        self.config = load_config(overrides=config)
        self.catalog = catalog if catalog is not None else generate_patterns()
        self.random_source = random_source or random.Random()

        scoring_config = self.config["scoring"]
        self.preprocessor = TracePreprocessor(self.config["preprocessing"])
        self.score_calculator = ScoreCalculator(
            threshold=scoring_config["threshold"],
            epsilon=scoring_config["epsilon"]
        )
        self.perf_tracker = PerformanceTracker(name="session")

        self.current_pattern: Optional[ReferencePattern] = None
        self.trace: List[float] = []
        self.is_drawing = False
        self.last_result: Optional[ScoreResult] = None

    def play(self) -> PlaybackSchedule:
        """Pick a new reference pattern and return its playback schedule

        The drawing is cleared, as a new melody starts a new attempt.
        """
        self.current_pattern = select_reference(self.catalog, self.random_source)
        self.clear()

        playback_config = self.config["playback"]
        schedule = build_playback_schedule(
            self.current_pattern.contour,
            note_duration=playback_config["note_duration"],
            ramp_time=playback_config["ramp_time"]
        )
        logging.info(f"Playing pattern {self.current_pattern.name} ({schedule.total_duration:.1f}s)")
        return schedule

    def begin_gesture(self):
        self.is_drawing = True
        self.trace = []

    def add_sample(self, y: float) -> Optional[float]:
        """Record a pointer sample while drawing

        Returns:
            Feedback frequency for the sample, or None when not drawing
        """
        if not self.is_drawing:
            return None

        y = float(y)
        self.trace.append(y)
        feedback_config = self.config["feedback"]
        return position_to_frequency(
            y,
            self.preprocessor.axis_extent,
            min_frequency=feedback_config["min_frequency"],
            max_frequency=feedback_config["max_frequency"]
        )

    def end_gesture(self):
        self.is_drawing = False

    def clear(self):
        """Discard the drawing and the last result"""
        self.trace = []
        self.last_result = None

    def evaluate(self) -> str:
        """Score the current drawing against the current pattern

        Returns:
            Message for the user: a reminder when there is nothing to score yet,
            otherwise the score and verdict
        """
        if self.current_pattern is None:
            return PLAY_FIRST_MESSAGE
        if not self.trace:
            return DRAW_FIRST_MESSAGE

        reference = self.current_pattern.contour
        self.perf_tracker.reset()

        with self.perf_tracker.track_stage("Preprocess Trace"):
            candidate = self.preprocessor.process(self.trace, target_length=len(reference))

        with self.perf_tracker.track_stage("Score Drawing"):
            self.last_result = self.score_calculator.calculate(reference, candidate)

        logging.info(
            f"Evaluated drawing - "
            f"Pattern: {self.current_pattern.name}, "
            f"Samples: {len(self.trace)}, "
            f"Score: {self.last_result.normalized_score:.3f}"
        )
        return self.last_result.verdict_text()

    def guide(self, width: float, height: float) -> List[Tuple[float, float]]:
        """Guide polyline for the current pattern, empty before the first play"""
        if self.current_pattern is None:
            return []
        return guide_points(self.current_pattern.contour, width, height,
                            margin=self.config["guide"]["margin"])
