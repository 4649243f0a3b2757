"""
Fixed catalog of reference pitch contours
"""

import logging
from dataclasses import dataclass
from typing import Dict, Tuple

from contour_sketch.exceptions import EmptyInputError

N_POINTS = 11
PITCH_STEP = 50.0
PITCH_MIN = 100.0
PITCH_MAX = 600.0


@dataclass(frozen=True)
class ReferencePattern:
    """A named reference contour"""
    name: str
    contour: Tuple[float, ...]

    def __len__(self) -> int:
        return len(self.contour)


def _peak(start: float, step: float) -> Tuple[float, ...]:
    # Rise for half the points, then mirror back down
    half = N_POINTS // 2
    rise = [start + i * step for i in range(half + 1)]
    return tuple(rise + rise[-2::-1])


def generate_patterns() -> Dict[str, ReferencePattern]:
    """Build the reference catalog

    The catalog content is deterministic; only the selection from it is random.

    Returns:
        Dict mapping pattern name to pattern, in catalog order
    """
    contours = {
        "linear_up": tuple(PITCH_MIN + i * PITCH_STEP for i in range(N_POINTS)),
        "linear_down": tuple(PITCH_MAX - i * PITCH_STEP for i in range(N_POINTS)),
        "triangle": _peak(PITCH_MIN, PITCH_STEP),
        "inverse_triangle": _peak(PITCH_MAX, -PITCH_STEP),
    }
    return {name: ReferencePattern(name, contour) for name, contour in contours.items()}


get_reference_catalog = generate_patterns


def select_reference(catalog: Dict[str, ReferencePattern], random_source) -> ReferencePattern:
    """Pick a pattern uniformly at random

    Args:
        catalog: Pattern catalog
        random_source: Object with a random() method returning a float in [0, 1),
                       e.g. random.Random

    Returns:
        The selected pattern
    """
    if not catalog:
        raise EmptyInputError("Cannot select from an empty pattern catalog")

    patterns = list(catalog.values())
    index = int(random_source.random() * len(patterns))
    # Guard against sources that can return exactly 1.0
    index = min(index, len(patterns) - 1)

    selected = patterns[index]
    logging.debug(f"Selected reference pattern: {selected.name}")
    return selected


def get_pattern(catalog: Dict[str, ReferencePattern], name: str) -> ReferencePattern:
    """Look up a pattern by name"""
    try:
        return catalog[name]
    except KeyError:
        raise KeyError(f"Unknown pattern '{name}', available: {', '.join(catalog)}") from None
