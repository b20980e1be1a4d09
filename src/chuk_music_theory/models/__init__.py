"""
Pydantic models for catalog data.

This module provides:
- Tuning: Reference pitch for frequency computation
- ScaleDefinition: Named interval pattern
- ScaleMetadata: Lightweight listing entry
"""

from chuk_music_theory.models.scale import ScaleDefinition, ScaleMetadata
from chuk_music_theory.models.tuning import STANDARD_TUNING, Tuning

__all__ = [
    "STANDARD_TUNING",
    "ScaleDefinition",
    "ScaleMetadata",
    "Tuning",
]
