"""
Trace preprocessing: flip, normalize, smooth and resample
"""

from .trace_preprocessor import (TracePreprocessor, flip_axis, normalize_array, smooth_array,
                                 resample_array, preprocess_trace, to_contour_array)

__all__ = ['TracePreprocessor', 'flip_axis', 'normalize_array', 'smooth_array',
           'resample_array', 'preprocess_trace', 'to_contour_array']
