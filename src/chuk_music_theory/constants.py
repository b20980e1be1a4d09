"""
Constants and lookup tables for the theory system.

No magic strings - every notation table lives here and is read-only.
"""

# Chromatic slots that carry a natural letter. Gaps are None and are
# reached only while respelling a note name.
CHROMATIC_LETTERS: tuple[str | None, ...] = (
    "C",
    None,
    "D",
    None,
    "E",
    "F",
    None,
    "G",
    None,
    "A",
    None,
    "B",
)

# The 7 natural letters, in staff order
LETTERS: tuple[str, ...] = tuple(letter for letter in CHROMATIC_LETTERS if letter is not None)

SHARP = "#"
FLAT = "b"

ACCIDENTALS: dict[str, int] = {
    FLAT: -1,
    SHARP: +1,
}

# Default quality per letter distance (unison .. seventh)
QUALITY_SEQUENCE: tuple[str, ...] = ("P", "M", "M", "P", "P", "M", "M")

# Semitones spanned by each default-quality letter distance
LETTER_DISTANCE_SEMITONES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

QUALITY_ABBREVIATIONS: dict[str, str] = {
    "DDD": "Triple Diminished",
    "DD": "Double Diminished",
    "D": "Diminished",
    "AAA": "Triple Augmented",
    "AA": "Double Augmented",
    "A": "Augmented",
    "M": "Major",
    "m": "Minor",
    "P": "Perfect",
}

LETTER_DISTANCE_NAMES: tuple[str, ...] = (
    "Unison",
    "Second",
    "Third",
    "Fourth",
    "Fifth",
    "Sixth",
    "Seventh",
)

SEMITONES_PER_OCTAVE = 12

# Equal temperament reference: A440, four octaves down from A4
DEFAULT_REFERENCE_FREQUENCY = 440.0
DEFAULT_REFERENCE_PITCH_CLASS = 9
DEFAULT_REFERENCE_OCTAVE_SHIFT = -4


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NOTE = "Invalid note notation: '{notation}'. Expected a letter A-G followed by '#' or 'b'."
    INVALID_ACCIDENTAL = "Invalid accidental symbol '{symbol}' in '{notation}'."
    INVALID_INTERVAL = "Invalid interval notation: '{notation}'. Expected a number and a quality like '3m'."
    CIRCLE_NOT_CLOSED = "Interval '{name}' never returns to its starting size when stacked."
    UNSUPPORTED_DISTANCE = "Unsupported interval distance: {distance}. Only unison to seventh have names."
    UNKNOWN_QUALITY = "Unknown interval quality: '{quality}'."
    UNKNOWN_LETTER = "Unknown note letter: '{letter}'."
    SCALE_NOT_FOUND = "Scale '{name}' not found."
    INVALID_SCALE_DEFINITION = "Scale '{name}' must define exactly one of 'intervals' or 'generator'."
