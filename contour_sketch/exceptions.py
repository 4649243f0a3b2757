"""
Exception classes for contour scoring
"""


class ContourSketchError(Exception):
    """Base exception for all contour-sketch errors."""

    pass


class EmptyInputError(ContourSketchError):
    """Raised when a trace, catalog or drawing has no samples."""

    pass


class InvalidSequenceError(ContourSketchError):
    """Raised when a sequence cannot be scored (empty, non-finite or not 1-D)."""

    pass


class ConfigError(ContourSketchError):
    """Raised when a configuration file cannot be loaded."""

    pass
