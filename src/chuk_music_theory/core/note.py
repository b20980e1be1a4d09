"""
Note primitive - a spelled pitch without octave.

A Note is a natural letter position plus an alteration (net accidentals).
C# and Db sound the same but are different Notes: spelling is part of the
value here, which is what makes letter-correct transposition possible.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chuk_music_theory.constants import (
    ACCIDENTALS,
    CHROMATIC_LETTERS,
    FLAT,
    LETTERS,
    SEMITONES_PER_OCTAVE,
    SHARP,
    ErrorMessages,
)

if TYPE_CHECKING:
    from .interval import Interval


def letters() -> list[str]:
    """The 7 natural letters in staff order: C D E F G A B."""
    return list(LETTERS)


def accidental_string(alteration: int) -> str:
    """
    Render an alteration as accidental symbols.

    0 -> "", 2 -> "##", -2 -> "bb"
    """
    if alteration == 0:
        return ""
    symbol = SHARP if alteration > 0 else FLAT
    return symbol * abs(alteration)


def _fix_alteration(alteration: int) -> int:
    """Pick the spelling closest to natural, in (-6, 6]."""
    alteration %= SEMITONES_PER_OCTAVE
    if alteration > SEMITONES_PER_OCTAVE // 2:
        alteration -= SEMITONES_PER_OCTAVE
    return alteration


@dataclass(frozen=True)
class Note:
    """
    A note name: base pitch class plus alteration.

    base_pitch_class indexes the 12-slot chromatic table (C=0 .. B=11).
    alteration counts accidentals: +1 per sharp, -1 per flat, unbounded.

    Examples:
        Note(0, 1) = C#
        Note(4, -2) = Ebb
        Note(1) = C# (gap slot, respelled from the letter below)

    Immutable and hashable.
    """

    base_pitch_class: int
    alteration: int = 0

    @classmethod
    def parse(cls, notation: str) -> Note:
        """
        Parse a note from notation like 'C', 'F#', 'Ebb'.

        The letter is case-sensitive; accidentals are summed left to right.
        """
        if not notation or notation[0] not in LETTERS:
            raise ValueError(ErrorMessages.INVALID_NOTE.format(notation=notation))

        letter, symbols = notation[0], notation[1:]
        return cls(
            base_pitch_class=CHROMATIC_LETTERS.index(letter),
            alteration=cls.alteration_from_notation(symbols, notation),
        )

    @staticmethod
    def alteration_from_notation(symbols: str, notation: str | None = None) -> int:
        """Sum accidental symbols: '##' -> 2, 'bb' -> -2, '' -> 0."""
        alteration = 0
        for symbol in symbols:
            if symbol not in ACCIDENTALS:
                raise ValueError(
                    ErrorMessages.INVALID_ACCIDENTAL.format(
                        symbol=symbol, notation=notation if notation is not None else symbols
                    )
                )
            alteration += ACCIDENTALS[symbol]
        return alteration

    @property
    def name(self) -> str:
        """
        Human-readable spelling.

        Gap slots are respelled from the letter below with one more sharp,
        so Note(1) is 'C#' and Note(1, -1) is 'C'.
        """
        base = self.base_pitch_class
        alteration = self.alteration
        # A natural letter is at most one slot below any gap
        for _ in range(SEMITONES_PER_OCTAVE):
            letter = CHROMATIC_LETTERS[base % SEMITONES_PER_OCTAVE]
            if letter is not None:
                return letter + accidental_string(alteration)
            base -= 1
            alteration += 1
        raise AssertionError("unreachable: chromatic table has no letters")

    @property
    def letter(self) -> str:
        """The natural letter of this note's spelling."""
        return self.name[0]

    @property
    def pitch_class(self) -> int:
        """Sounding pitch class, not reduced mod 12."""
        return self.base_pitch_class + self.alteration

    def transpose(self, interval: Interval | str) -> Note:
        """
        Transpose by an interval, keeping the spelling letter-correct.

        The target letter advances by the interval's letter distance; the
        alteration is whatever lands that letter on the right pitch.

        Examples:
            C + 2M = D, C + 2m = Db, C# + 3M = E#
        """
        from .interval import Interval

        if isinstance(interval, str):
            interval = Interval.parse(interval)

        letter_index = LETTERS.index(self.letter)
        new_letter = LETTERS[(letter_index + interval.letter_distance) % len(LETTERS)]
        new_pitch_class = CHROMATIC_LETTERS.index(new_letter)

        target_pitch_class = (self.pitch_class + interval.semitones) % SEMITONES_PER_OCTAVE

        return Note(
            base_pitch_class=new_pitch_class,
            alteration=_fix_alteration(target_pitch_class - new_pitch_class),
        )

    @classmethod
    def coerce(cls, note: Note | str) -> Note:
        """Accept a Note or its notation."""
        if isinstance(note, Note):
            return note
        return cls.parse(note)

    def __str__(self) -> str:
        return self.name


def transpose(note: Note | str, interval: Interval | str) -> Note:
    """Transpose a note (or note notation) by an interval (or interval notation)."""
    return Note.coerce(note).transpose(interval)
