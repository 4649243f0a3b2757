"""
Score hand-drawn pitch contours against reference melodies
"""

from .exceptions import ContourSketchError, EmptyInputError, InvalidSequenceError, ConfigError
from .patterns.pattern_library import ReferencePattern, get_reference_catalog, select_reference
from .preprocessing.trace_preprocessor import preprocess_trace
from .scoring.score_calculator import ScoreResult, score

__version__ = "0.1.0"

__all__ = ['ContourSketchError', 'EmptyInputError', 'InvalidSequenceError', 'ConfigError',
           'ReferencePattern', 'get_reference_catalog', 'select_reference',
           'preprocess_trace', 'ScoreResult', 'score']
