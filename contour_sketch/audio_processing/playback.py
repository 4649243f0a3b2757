"""
Playback schedules and pointer pitch feedback

Nothing here touches an audio device or a timer. The schedule is plain data
that an audio layer can play back note by note.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

from contour_sketch.exceptions import EmptyInputError


@dataclass(frozen=True)
class NoteEvent:
    """One note of a reference playback"""
    index: int
    onset: float  # seconds from playback start
    duration: float
    frequency: float  # Hz
    ramp_time: float  # glide from the previous frequency


@dataclass
class PlaybackSchedule:
    notes: List[NoteEvent] = field(default_factory=list)

    @property
    def total_duration(self) -> float:
        if not self.notes:
            return 0.0
        last = self.notes[-1]
        return last.onset + last.duration

    def frequencies(self) -> List[float]:
        return [note.frequency for note in self.notes]

    def __len__(self) -> int:
        return len(self.notes)


def build_playback_schedule(contour: Sequence[float], note_duration: float = 0.3,
                            ramp_time: float = 0.1) -> PlaybackSchedule:
    """Lay out a contour as back-to-back notes

    Args:
        contour: Pitch values, used directly as frequencies
        note_duration: Seconds each note sounds
        ramp_time: Seconds to glide into each note

    Returns:
        PlaybackSchedule with one note per contour value
    """
    if len(contour) == 0:
        raise EmptyInputError("Cannot schedule playback of an empty contour")
    if note_duration <= 0:
        raise ValueError(f"note_duration must be positive, got {note_duration}")

    notes = [
        NoteEvent(
            index=i,
            onset=i * note_duration,
            duration=note_duration,
            frequency=float(freq),
            ramp_time=ramp_time
        )
        for i, freq in enumerate(contour)
    ]
    return PlaybackSchedule(notes=notes)


def position_to_frequency(y: float, axis_extent: float, min_frequency: float = 100.0,
                          max_frequency: float = 600.0) -> float:
    """Map a vertical pointer position to a feedback frequency

    The bottom edge (y == axis_extent) maps to min_frequency and the top edge
    (y == 0) to max_frequency. Positions outside the surface are not clamped.
    """
    if axis_extent <= 0:
        raise ValueError(f"axis_extent must be positive, got {axis_extent}")
    return min_frequency + (axis_extent - y) / axis_extent * (max_frequency - min_frequency)
