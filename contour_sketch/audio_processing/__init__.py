"""
Session flow and playback data for the drawing exercise
"""

from .playback import NoteEvent, PlaybackSchedule, build_playback_schedule, position_to_frequency
from .scoring_session import ContourSession

__all__ = ['NoteEvent', 'PlaybackSchedule', 'build_playback_schedule', 'position_to_frequency',
           'ContourSession']
