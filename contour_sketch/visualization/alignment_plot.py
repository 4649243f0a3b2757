"""
Guide geometry for drawing surfaces and DTW alignment plots
"""

import logging
from pathlib import Path
from typing import List, Sequence, Tuple, Union

import numpy as np

from contour_sketch.melody_matching.dtw_matcher import DTWResult, warping_path


def scale_contour_to_canvas(contour: Sequence[float], height: float, margin: float = 50) -> np.ndarray:
    """Map contour values to vertical canvas positions

    The lowest pitch lands at height - margin, the highest at margin
    (screen y grows downwards). A flat contour sits on the lower margin.
    """
    values = np.asarray(contour, dtype=np.float64)
    low, high = height - margin, margin
    min_val, max_val = np.min(values), np.max(values)
    if max_val == min_val:
        return np.full_like(values, low)
    return low + (values - min_val) / (max_val - min_val) * (high - low)


def guide_points(contour: Sequence[float], width: float, height: float,
                 margin: float = 50) -> List[Tuple[float, float]]:
    """Points of the reference guide polyline

    Args:
        contour: Reference pitch contour
        width: Canvas width
        height: Canvas height
        margin: Distance kept from every canvas edge

    Returns:
        List of (x, y) canvas coordinates, one per contour value
    """
    if len(contour) == 0:
        return []

    ys = scale_contour_to_canvas(contour, height, margin)
    if len(ys) == 1:
        xs = np.array([float(margin)])
    else:
        xs = np.linspace(margin, width - margin, len(ys))
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


def plot_alignment(reference: Sequence[float], candidate: Sequence[float], alignment: DTWResult,
                   filename: Union[str, Path]):
    """Save the DTW cost matrix with its warping path

    Args:
        reference: Sequence on the vertical axis (as aligned, i.e. normalized)
        candidate: Sequence on the horizontal axis
        alignment: Result of aligning reference with candidate
        filename: Output image path
    """
    from dtaidistance import dtw_visualisation as dtwvis

    path = warping_path(alignment.cost_matrix)
    dtwvis.plot_warpingpaths(
        np.asarray(reference, dtype=np.float64),
        np.asarray(candidate, dtype=np.float64),
        alignment.cost_matrix,
        path=path,
        filename=str(filename)
    )
    logging.info(f"Saved alignment plot to {filename}")
