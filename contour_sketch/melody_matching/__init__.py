"""
DTW alignment of pitch contours
"""

from .dtw_matcher import ContourMatcher, DTWResult, dtw, warping_path

__all__ = ['ContourMatcher', 'DTWResult', 'dtw', 'warping_path']
