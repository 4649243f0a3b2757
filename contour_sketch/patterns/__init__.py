"""
Reference pattern catalog and random selection
"""

from .pattern_library import (ReferencePattern, generate_patterns, get_reference_catalog,
                              select_reference, get_pattern)

__all__ = ['ReferencePattern', 'generate_patterns', 'get_reference_catalog',
           'select_reference', 'get_pattern']
