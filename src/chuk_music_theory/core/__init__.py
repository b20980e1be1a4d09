"""
Core theory primitives.

These are the value types everything else composes on:
- Note: Letter + alteration spelling, parsed from 'C#', 'Ebb'
- Interval: Letter distance + alteration, parsed from '3m', '5AA'
- Quality: Interval quality symbols (m, D, P, M, A)
- PitchClass: The 12 chromatic pitch classes (0-11) and their frequencies
- Scale: Root + intervals, resolved to spelled notes
"""

from chuk_music_theory.core.frequency import shift_octave
from chuk_music_theory.core.interval import (
    Interval,
    Quality,
    alter_quality,
    expand_distance_name,
    expand_name,
    expand_quality_name,
    letter_distance,
)
from chuk_music_theory.core.note import Note, accidental_string, letters, transpose
from chuk_music_theory.core.pitch import PitchClass, frequency, fundamental_frequency
from chuk_music_theory.core.scale import Scale

__all__ = [
    # Note
    "Note",
    "accidental_string",
    "letters",
    "transpose",
    # Interval
    "Interval",
    "Quality",
    "alter_quality",
    "expand_distance_name",
    "expand_name",
    "expand_quality_name",
    "letter_distance",
    # Pitch
    "PitchClass",
    "frequency",
    "fundamental_frequency",
    "shift_octave",
    # Scale
    "Scale",
]
