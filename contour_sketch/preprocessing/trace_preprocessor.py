"""
Turn a raw pointer trace into a contour comparable with a reference pattern
"""

import logging
import operator
from typing import Dict, Any, Optional, Sequence

import numpy as np

from contour_sketch.exceptions import EmptyInputError, InvalidSequenceError


def to_contour_array(values: Sequence[float], name: str = "sequence") -> np.ndarray:
    """Convert a sequence to a validated 1-D float array

    Args:
        values: Sequence of numbers
        name: Label used in error messages

    Returns:
        New float64 array (the input is never shared)
    """
    try:
        array = np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidSequenceError(f"{name} must contain only numbers: {e}") from e

    if array.ndim != 1:
        raise InvalidSequenceError(f"{name} must be one-dimensional, got shape {array.shape}")
    if array.size == 0:
        raise InvalidSequenceError(f"{name} is empty")
    if not np.all(np.isfinite(array)):
        raise InvalidSequenceError(f"{name} contains NaN or infinite values")
    return array


def flip_axis(raw: Sequence[float], axis_extent: float) -> np.ndarray:
    """Invert screen coordinates so that larger values mean higher pitch"""
    return axis_extent - np.asarray(raw, dtype=np.float64)


def normalize_array(values: Sequence[float]) -> np.ndarray:
    """Map values linearly into [0, 1] using their own min and max

    A constant sequence maps to all zeros.
    """
    array = np.asarray(values, dtype=np.float64)
    min_val, max_val = np.min(array), np.max(array)
    if max_val == min_val:
        return np.zeros_like(array)

    # Halving keeps the span finite for extremes near the float64 limit
    half_span = max_val / 2 - min_val / 2
    if half_span > np.finfo(np.float64).max / 2:
        return (array / 2 - min_val / 2) / half_span
    return (array - min_val) / (max_val - min_val)


def smooth_array(values: Sequence[float], window_size: int = 2) -> np.ndarray:
    """Centered moving average

    The window extends window_size // 2 samples on each side and shrinks at the
    sequence edges instead of padding or wrapping.

    Args:
        values: Sequence to smooth
        window_size: Window size (0 and 1 leave the values unchanged)

    Returns:
        Smoothed array of the same length
    """
    if window_size < 0:
        raise ValueError(f"window_size must be non-negative, got {window_size}")

    array = np.asarray(values, dtype=np.float64)
    n = len(array)
    half = window_size // 2

    idx = np.arange(n)
    start = np.maximum(0, idx - half)
    end = np.minimum(n - 1, idx + half)

    csum = np.concatenate(([0.0], np.cumsum(array)))
    return (csum[end + 1] - csum[start]) / (end - start + 1)


def resample_array(values: Sequence[float], target_length: int) -> np.ndarray:
    """Resample to target_length by nearest-floor indexing (no interpolation)

    output[i] = input[floor(i * len(input) / target_length)]
    """
    try:
        target_length = operator.index(target_length)
    except TypeError:
        raise InvalidSequenceError(f"target_length must be an integer, got {target_length!r}") from None
    if target_length < 1:
        raise InvalidSequenceError(f"target_length must be at least 1, got {target_length}")

    array = np.asarray(values, dtype=np.float64)
    step = len(array) / target_length
    indices = np.floor(np.arange(target_length) * step).astype(int)
    return array[indices]


def preprocess_trace(raw_trace: Sequence[float], axis_extent: float, target_length: int,
                     window_size: int = 2, flip: bool = True) -> np.ndarray:
    """Run the full preprocessing pipeline on a raw trace

    Args:
        raw_trace: Raw vertical samples captured during one gesture
        axis_extent: Height of the drawing surface in the same units as the samples
        target_length: Length of the reference contour to compare against
        window_size: Smoothing window size
        flip: Invert the axis first (screen y grows downwards)

    Returns:
        Normalized, smoothed contour with exactly target_length values
    """
    if raw_trace is None or len(raw_trace) == 0:
        raise EmptyInputError("Raw trace is empty, nothing was drawn")

    trace = to_contour_array(raw_trace, "raw trace")

    if flip:
        if not np.isfinite(axis_extent):
            raise InvalidSequenceError(f"axis_extent must be finite, got {axis_extent}")
        trace = flip_axis(trace, axis_extent)
        if not np.all(np.isfinite(trace)):
            raise InvalidSequenceError("Flipped trace overflows, axis_extent is out of range")
    normalized = normalize_array(trace)
    smoothed = smooth_array(normalized, window_size)
    resampled = resample_array(smoothed, target_length)

    logging.debug(
        f"Preprocessed trace - "
        f"Samples: {len(trace)}, "
        f"Target length: {target_length}, "
        f"Window: {window_size}"
    )
    return resampled


class TracePreprocessor:
    """Preprocessing pipeline bound to a drawing surface configuration"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize preprocessor

        Args:
            config: Dictionary with optional keys:
                    - axis_extent: Drawing surface height (default 400)
                    - smooth_window: Smoothing window size (default 2)
                    - flip_axis: Whether samples need flipping (default True)
        """
        config = config or {}
        self.axis_extent = float(config.get("axis_extent", 400))
        self.window_size = int(config.get("smooth_window", 2))
        self.flip = bool(config.get("flip_axis", True))

    def process(self, raw_trace: Sequence[float], target_length: int) -> np.ndarray:
        return preprocess_trace(
            raw_trace,
            axis_extent=self.axis_extent,
            target_length=target_length,
            window_size=self.window_size,
            flip=self.flip
        )
