"""
Interval primitives - Quality and Interval.

An Interval is a letter distance (staff steps) plus an alteration from the
default quality for that distance. Unlike a plain semitone count, it knows
the difference between an augmented fourth and a diminished fifth.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from chuk_music_theory.constants import (
    LETTER_DISTANCE_NAMES,
    LETTER_DISTANCE_SEMITONES,
    LETTERS,
    QUALITY_ABBREVIATIONS,
    QUALITY_SEQUENCE,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)

from .note import Note

# ASCII ordinal followed by one quality symbol (D and A may repeat)
_NOTATION_PATTERN = re.compile(r"^([0-9]+)(m|P|M|D+|A+)$")


class Quality(str, Enum):
    """Interval quality symbols and their alteration deltas."""

    MINOR = "m"
    DIMINISHED = "D"
    PERFECT = "P"
    MAJOR = "M"
    AUGMENTED = "A"

    @property
    def delta(self) -> int:
        """Alteration contributed by one occurrence of this symbol."""
        return _QUALITY_DELTAS[self]

    @property
    def full_name(self) -> str:
        return QUALITY_ABBREVIATIONS[self.value]


_QUALITY_DELTAS: dict[Quality, int] = {
    Quality.MINOR: -1,
    Quality.DIMINISHED: -1,
    Quality.PERFECT: 0,
    Quality.MAJOR: 0,
    Quality.AUGMENTED: +1,
}


def alter_quality(quality: Quality | str, alteration: int) -> str:
    """
    Apply an alteration to a base quality.

    Major has minor one step below before reaching diminished;
    perfect diminishes directly.

        alter_quality("M", -1) -> "m"
        alter_quality("M", -3) -> "DD"
        alter_quality("P", 2) -> "AA"
    """
    quality = Quality(quality)
    if alteration == 0:
        return quality.value
    if alteration > 0:
        return Quality.AUGMENTED.value * alteration
    if quality == Quality.MAJOR:
        return alter_quality(Quality.MINOR, alteration + 1)
    return Quality.DIMINISHED.value * abs(alteration)


def letter_distance(first_letter: str, second_letter: str) -> int:
    """
    Signed staff-step distance between two letters.

    Not wrapped: C->B is 6 and B->C is -6.
    """
    for letter in (first_letter, second_letter):
        if letter not in LETTERS:
            raise ValueError(ErrorMessages.UNKNOWN_LETTER.format(letter=letter))
    return LETTERS.index(second_letter) - LETTERS.index(first_letter)


def expand_quality_name(quality: str) -> str:
    """'m' -> 'Minor', 'AA' -> 'Double Augmented'."""
    if quality not in QUALITY_ABBREVIATIONS:
        raise ValueError(ErrorMessages.UNKNOWN_QUALITY.format(quality=quality))
    return QUALITY_ABBREVIATIONS[quality]


def expand_distance_name(distance: str | int) -> str:
    """'3' -> 'Third'. Only 1 to 7 have names."""
    ordinal = int(distance)
    if not 1 <= ordinal <= len(LETTER_DISTANCE_NAMES):
        raise ValueError(ErrorMessages.UNSUPPORTED_DISTANCE.format(distance=ordinal))
    return LETTER_DISTANCE_NAMES[ordinal - 1]


def expand_name(name: str) -> str:
    """
    Spell out an interval name in English.

        expand_name("3m") -> "Minor Third"
        expand_name("5AAA") -> "Triple Augmented Fifth"
    """
    match = _NOTATION_PATTERN.match(name)
    if not match:
        raise ValueError(ErrorMessages.INVALID_INTERVAL.format(notation=name))
    distance, quality = match.groups()
    return f"{expand_quality_name(quality)} {expand_distance_name(distance)}"


@dataclass(frozen=True)
class Interval:
    """
    The relationship between two notes.

    letter_distance: staff steps from root to target (0 = unison, 6 = seventh)
    alteration: deviation from the default quality (perfect or major)

    Equality is on both fields, so 4A != 5D even though both span 6 semitones.
    Immutable and hashable.
    """

    letter_distance: int
    alteration: int = 0

    letter_distance_between = staticmethod(letter_distance)

    @classmethod
    def parse(cls, notation: str) -> Interval:
        """
        Parse interval notation like '1P', '3m', '5AA', '10M'.

        The number is the 1-based ordinal; each quality symbol adds its delta.
        """
        match = _NOTATION_PATTERN.match(notation)
        if not match:
            raise ValueError(ErrorMessages.INVALID_INTERVAL.format(notation=notation))

        ordinal, symbols = match.groups()
        if int(ordinal) < 1:
            raise ValueError(ErrorMessages.INVALID_INTERVAL.format(notation=notation))
        return cls(
            letter_distance=int(ordinal) - 1,
            alteration=sum(Quality(symbol).delta for symbol in symbols),
        )

    @classmethod
    def coerce(cls, interval: Interval | str) -> Interval:
        """Accept an Interval or its notation."""
        if isinstance(interval, Interval):
            return interval
        return cls.parse(interval)

    @classmethod
    def between(cls, first: Note | str, second: Note | str) -> Interval:
        """
        The interval from one note to another.

        The letter distance keeps its sign: between('B', 'C') has distance -6.

        Examples:
            between('C', 'C#') = Interval(0, 1)
            between('C', 'D') = Interval(1, 0)
        """
        first_note = Note.coerce(first)
        second_note = Note.coerce(second)
        return cls(
            letter_distance=letter_distance(first_note.letter, second_note.letter),
            alteration=second_note.alteration - first_note.alteration,
        )

    @property
    def quality(self) -> str:
        """Quality string, e.g. 'm', 'P', 'DD'."""
        base_quality = QUALITY_SEQUENCE[self.letter_distance % len(QUALITY_SEQUENCE)]
        return alter_quality(base_quality, self.alteration)

    @property
    def name(self) -> str:
        """Short name: Interval(2, -1) -> '3m'."""
        return f"{abs(self.letter_distance) + 1}{self.quality}"

    @property
    def full_name(self) -> str:
        """English name: Interval(3, -1) -> 'Diminished Fourth'."""
        return expand_name(self.name)

    @property
    def semitones(self) -> int:
        """
        Chromatic size reduced to 0-11.

        Distances past the seventh step down one letter and up one
        alteration until they fit the table, so a ninth counts as 1.
        Negative distances measure downwards from the root.
        """
        distance = self.letter_distance
        alteration = self.alteration
        last = len(LETTER_DISTANCE_SEMITONES) - 1
        while distance > last:
            distance -= 1
            alteration += 1
        while distance < -last:
            distance += 1
            alteration -= 1

        if distance >= 0:
            base = LETTER_DISTANCE_SEMITONES[distance]
        else:
            base = -LETTER_DISTANCE_SEMITONES[-distance]
        return (base + alteration) % SEMITONES_PER_OCTAVE

    def sum(self, other: Interval | str) -> Interval:
        """
        Stack another interval on top of this one.

        Letter distances wrap at the octave; alterations accumulate.
        3M + 3M = 5P, 3M + 3m + 3M = 7m
        """
        other = Interval.coerce(other)
        return Interval(
            letter_distance=(self.letter_distance + other.letter_distance) % len(LETTERS),
            alteration=self.alteration + other.alteration,
        )

    def circle(self) -> list[Interval]:
        """
        Stack this interval on itself until the chromatic cycle closes.

        Returns every interval visited, sorted by semitones. The circle of
        the perfect fifth is the major scale: 1P 2M 3M 4P 5P 6M 7M.

        Compound and descending intervals are first folded into the octave,
        so the circle of 9M or of between('D', 'C') is the circle of 2M or 7M.
        Raises ValueError if the stacked states cycle without returning to
        the starting size.
        """
        start = Interval(self.letter_distance % len(LETTERS), self.alteration)
        intervals = [start]
        seen = {start._reduced_state()}
        current = start.sum(self)
        # (letter distance mod 7, alteration mod 12) takes at most 84 values
        for _ in range(len(LETTERS) * SEMITONES_PER_OCTAVE):
            if current.semitones == start.semitones:
                return sorted(intervals, key=lambda interval: interval.semitones)
            state = current._reduced_state()
            if state in seen:
                break
            seen.add(state)
            intervals.append(current)
            current = current.sum(self)
        raise ValueError(ErrorMessages.CIRCLE_NOT_CLOSED.format(name=self.name))

    def _reduced_state(self) -> tuple[int, int]:
        return self.letter_distance % len(LETTERS), self.alteration % SEMITONES_PER_OCTAVE

    def __add__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.sum(other)

    def __str__(self) -> str:
        return self.name
