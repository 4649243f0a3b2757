"""
Score normalization and match verdicts
"""

from .score_calculator import ScoreCalculator, ScoreResult, score

__all__ = ['ScoreCalculator', 'ScoreResult', 'score']
