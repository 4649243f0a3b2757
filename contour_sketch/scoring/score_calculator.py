"""
Turn a DTW distance into a normalized score and a match verdict
"""

import logging
from dataclasses import dataclass, asdict
from typing import Dict, Sequence, Tuple

from contour_sketch.melody_matching.dtw_matcher import ContourMatcher, DTWResult

DEFAULT_THRESHOLD = 0.1
DEFAULT_EPSILON = 0.0001


@dataclass
class ScoreResult:
    """Score for one drawing"""
    distance: float
    normalized_score: float
    is_match: bool

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    def verdict_text(self) -> str:
        result_text = "Good match! ✅" if self.is_match else "Try again ❌"
        return f"DTW Score: {self.normalized_score:.3f} - {result_text}"


class ScoreCalculator:
    def __init__(self, threshold: float = DEFAULT_THRESHOLD, epsilon: float = DEFAULT_EPSILON,
                 matcher: ContourMatcher = None):
        """Initialize score calculator

        Args:
            threshold: Scores strictly below this are a match
            epsilon: Added to the reference length before dividing
            matcher: Contour matcher used for the alignment
        """
        self.threshold = threshold
        self.epsilon = epsilon
        self.matcher = matcher or ContourMatcher()

    def normalize(self, distance: float, reference_length: int) -> float:
        """Divide the distance by the reference length

        The reference length stands in for the largest expected cost. It is not
        a true upper bound, and the threshold is calibrated against it.
        """
        return distance / (reference_length + self.epsilon)

    def calculate(self, reference: Sequence[float], candidate: Sequence[float]) -> ScoreResult:
        """Score a preprocessed candidate against a reference contour

        Args:
            reference: Reference pitch contour
            candidate: Normalized candidate contour

        Returns:
            ScoreResult with distance, normalized score and verdict
        """
        result, _ = self.calculate_with_alignment(reference, candidate)
        return result

    def calculate_with_alignment(self, reference: Sequence[float],
                                 candidate: Sequence[float]) -> Tuple[ScoreResult, DTWResult]:
        """Like calculate(), also returning the DTW alignment behind the score"""
        alignment = self.matcher.match(reference, candidate)
        normalized_score = self.normalize(alignment.distance, len(reference))
        is_match = normalized_score < self.threshold

        logging.info(
            f"Scores - Distance: {alignment.distance:.4f}, "
            f"Normalized: {normalized_score:.3f}, "
            f"Match: {is_match}"
        )

        result = ScoreResult(
            distance=alignment.distance,
            normalized_score=normalized_score,
            is_match=is_match
        )
        return result, alignment


def score(reference: Sequence[float], candidate: Sequence[float],
          threshold: float = DEFAULT_THRESHOLD, epsilon: float = DEFAULT_EPSILON) -> ScoreResult:
    """Score a candidate contour against a reference with the given settings"""
    return ScoreCalculator(threshold=threshold, epsilon=epsilon).calculate(reference, candidate)
