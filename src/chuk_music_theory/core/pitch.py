"""
PitchClass primitive and equal-tempered frequencies.

A pitch class is one of the 12 chromatic classes (octave-independent).
It projects to a canonical Note and to a fundamental frequency.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

from chuk_music_theory.constants import (
    DEFAULT_REFERENCE_FREQUENCY,
    DEFAULT_REFERENCE_OCTAVE_SHIFT,
    DEFAULT_REFERENCE_PITCH_CLASS,
    SEMITONES_PER_OCTAVE,
)

from .frequency import shift_octave
from .note import Note

if TYPE_CHECKING:
    from chuk_music_theory.models.tuning import Tuning


def fundamental_frequency(pitch_class: int, tuning: Tuning | None = None) -> float:
    """
    Equal-tempered frequency of a pitch class in the reference octave.

    With the default A440 tuning the reference octave is four below A4:
        fundamental_frequency(0) -> 16.351597831287414
        fundamental_frequency(9) -> 27.5
    """
    if tuning is None:
        reference = DEFAULT_REFERENCE_FREQUENCY
        reference_pitch_class = DEFAULT_REFERENCE_PITCH_CLASS
        octave_shift = DEFAULT_REFERENCE_OCTAVE_SHIFT
    else:
        reference = tuning.reference_frequency
        reference_pitch_class = tuning.reference_pitch_class
        octave_shift = tuning.reference_octave_shift

    return shift_octave(reference, octave_shift) * 2.0 ** (
        (pitch_class - reference_pitch_class) / SEMITONES_PER_OCTAVE
    )


def frequency(pitch_class: int, octave: int, tuning: Tuning | None = None) -> float:
    """Frequency of a pitch class `octave` octaves above the reference octave."""
    return shift_octave(fundamental_frequency(pitch_class, tuning), octave)


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Enharmonic equivalents share a value (C# == Db == 1); the canonical
    spelling is natural or single sharp.
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def note(self) -> Note:
        """The unaltered Note at this slot; naming respells gaps."""
        return Note(base_pitch_class=self.value)

    def spell(self) -> str:
        """Canonical name: PitchClass.Cs -> 'C#'."""
        return self.note().name

    def fundamental_frequency(self, tuning: Tuning | None = None) -> float:
        return fundamental_frequency(self.value, tuning)

    def frequency(self, octave: int, tuning: Tuning | None = None) -> float:
        return frequency(self.value, octave, tuning)

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % SEMITONES_PER_OCTAVE)

    @classmethod
    def of(cls, note: Note | str) -> PitchClass:
        """The reduced pitch class a note sounds: 'Cb' -> PitchClass.B."""
        return cls(cls.from_note(note) % SEMITONES_PER_OCTAVE)

    @staticmethod
    def from_note(note: Note | str) -> int:
        """
        Sounding pitch class of a note, not reduced.

            from_note('C#') -> 1, from_note('B#') -> 12
        """
        return Note.coerce(note).pitch_class

    @staticmethod
    def name_of(pitch_class: int) -> str:
        """Canonical name of any pitch class integer: 1 -> 'C#'."""
        return Note(base_pitch_class=pitch_class).name
