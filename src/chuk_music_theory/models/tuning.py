"""
Tuning model - the reference pitch for equal-tempered frequencies.

A tuning pins one pitch class to a frequency; every other pitch class
follows from the twelfth root of two.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_music_theory.constants import (
    DEFAULT_REFERENCE_FREQUENCY,
    DEFAULT_REFERENCE_OCTAVE_SHIFT,
    DEFAULT_REFERENCE_PITCH_CLASS,
)


class Tuning(BaseModel):
    """
    Reference pitch configuration.

    The fundamental of a pitch class is the reference frequency shifted by
    reference_octave_shift octaves, then by the semitone distance from
    reference_pitch_class.
    """

    schema_version: str = Field("tuning/v1", alias="schema")
    name: str = Field(..., description="Tuning name")
    description: str = Field("", description="Tuning description")

    reference_frequency: float = Field(
        DEFAULT_REFERENCE_FREQUENCY,
        gt=0,
        description="Frequency of the reference pitch class in Hz",
    )
    reference_pitch_class: int = Field(
        DEFAULT_REFERENCE_PITCH_CLASS,
        ge=0,
        le=11,
        description="Pitch class the reference frequency belongs to (9 = A)",
    )
    reference_octave_shift: int = Field(
        DEFAULT_REFERENCE_OCTAVE_SHIFT,
        description="Octaves from the reference frequency down to the fundamental octave",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Normalize to a lowercase hyphenated identifier."""
        if not v or not v.replace("_", "").replace("-", "").isalnum():
            raise ValueError(f"Invalid tuning name: {v}")
        return v.lower().replace("_", "-")

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "reference_frequency": self.reference_frequency,
            "reference_pitch_class": self.reference_pitch_class,
            "reference_octave_shift": self.reference_octave_shift,
        }


STANDARD_TUNING = Tuning(name="standard", description="A440 concert pitch")
