"""
CHUK Music Theory - spelled notes, intervals and scales.

Notation in, notation out:
    Note.parse("C#").transpose("3M").name -> "E#"
    Interval.between("C", "Eb").name -> "3m"
    Scale.major("Eb").names() -> ['Eb', 'F', 'G', 'Ab', 'Bb', 'C', 'D']
"""

from chuk_music_theory.catalog import CatalogLoader
from chuk_music_theory.core import (
    Interval,
    Note,
    PitchClass,
    Quality,
    Scale,
    alter_quality,
    fundamental_frequency,
    shift_octave,
)
from chuk_music_theory.models import STANDARD_TUNING, ScaleDefinition, Tuning

__version__ = "0.1.0"

__all__ = [
    "STANDARD_TUNING",
    "CatalogLoader",
    "Interval",
    "Note",
    "PitchClass",
    "Quality",
    "Scale",
    "ScaleDefinition",
    "Tuning",
    "alter_quality",
    "fundamental_frequency",
    "shift_octave",
]
