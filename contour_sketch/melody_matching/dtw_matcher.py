"""
Match pitch contours using Dynamic Time Warping (DTW)
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from contour_sketch.preprocessing.trace_preprocessor import normalize_array, to_contour_array


@dataclass
class DTWResult:
    """Outcome of a single DTW alignment"""
    distance: float
    cost_matrix: np.ndarray


def dtw(seq1: Sequence[float], seq2: Sequence[float]) -> DTWResult:
    """Compute the DTW alignment cost between two sequences

    Local cost is the absolute difference; each cell adds the cheapest of the
    insertion, deletion and match predecessors. Only D[0, 0] is a valid start,
    the rest of row 0 and column 0 is +inf.

    Args:
        seq1: First sequence (length n >= 1)
        seq2: Second sequence (length m >= 1)

    Returns:
        DTWResult with distance D[n, m] and the (n+1) x (m+1) cost matrix
    """
    seq1 = to_contour_array(seq1, "first sequence")
    seq2 = to_contour_array(seq2, "second sequence")

    n, m = len(seq1), len(seq2)

    # Initialize cost matrix
    cost = np.full((n + 1, m + 1), np.inf)
    cost[0, 0] = 0.0

    # Fill cost matrix
    for i in range(1, n + 1):
        for j in range(1, m + 1):
            diff = abs(seq1[i-1] - seq2[j-1])
            cost[i, j] = diff + min(
                cost[i-1, j],     # Insertion
                cost[i, j-1],     # Deletion
                cost[i-1, j-1]    # Match
            )

    return DTWResult(distance=float(cost[n, m]), cost_matrix=cost)


def warping_path(cost_matrix: np.ndarray) -> List[Tuple[int, int]]:
    """Backtrack the optimal alignment through a filled cost matrix

    Ties prefer match, then insertion, then deletion.

    Args:
        cost_matrix: Matrix returned by dtw()

    Returns:
        List of (i, j) index pairs into the two sequences, from (0, 0) to (n-1, m-1)
    """
    i, j = cost_matrix.shape[0] - 1, cost_matrix.shape[1] - 1
    path = [(i - 1, j - 1)]

    while (i, j) != (1, 1):
        steps = (
            (cost_matrix[i-1, j-1], i - 1, j - 1),
            (cost_matrix[i-1, j], i - 1, j),
            (cost_matrix[i, j-1], i, j - 1)
        )
        _, i, j = min(steps, key=lambda step: step[0])
        path.append((i - 1, j - 1))

    path.reverse()
    return path


class ContourMatcher:
    def __init__(self, normalize_reference: bool = True):
        """Initialize contour matcher

        Args:
            normalize_reference: Map the reference into [0, 1] before aligning,
                                 so raw pitch values can be passed directly
        """
        self.normalize_reference = normalize_reference

    def match(self, reference: Sequence[float], candidate: Sequence[float]) -> DTWResult:
        """Align a candidate contour against a reference contour

        Args:
            reference: Reference pitch contour
            candidate: Preprocessed candidate contour (values in [0, 1])

        Returns:
            DTWResult for the alignment
        """
        reference = to_contour_array(reference, "reference contour")
        candidate = to_contour_array(candidate, "candidate contour")

        if self.normalize_reference:
            reference = normalize_array(reference)

        result = dtw(reference, candidate)

        logging.debug(
            f"Contour matching complete - "
            f"Reference: {len(reference)}, "
            f"Candidate: {len(candidate)}, "
            f"Distance: {result.distance:.4f}"
        )
        return result
