"""
Scale definition model - named interval patterns loaded from the catalog.

A definition either lists its intervals from the root or names a single
generating interval whose circle produces them (the major scale is the
circle of the perfect fifth).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from chuk_music_theory.constants import LETTERS, ErrorMessages
from chuk_music_theory.core.interval import Interval


class ScaleDefinition(BaseModel):
    """A named scale pattern."""

    schema_version: str = Field("scale/v1", alias="schema")
    name: str = Field(..., description="Scale name (e.g., 'dorian')")
    description: str = Field("", description="Scale description")
    aliases: list[str] = Field(default_factory=list, description="Alternative names")

    intervals: list[str] | None = Field(
        None, description="Interval notations from the root (e.g., ['1P', '2M', '3m'])"
    )
    generator: str | None = Field(
        None, description="Interval whose circle yields the scale (e.g., '5P')"
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Normalize to a lowercase hyphenated identifier."""
        if not v or not v.replace("_", "").replace("-", "").isalnum():
            raise ValueError(f"Invalid scale name: {v}")
        return v.lower().replace("_", "-")

    @field_validator("intervals")
    @classmethod
    def validate_intervals(cls, v: list[str] | None) -> list[str] | None:
        """Every entry must be valid interval notation."""
        if v is not None:
            for notation in v:
                Interval.parse(notation)
        return v

    @field_validator("generator")
    @classmethod
    def validate_generator(cls, v: str | None) -> str | None:
        """A generator must be a simple interval whose circle closes."""
        if v is not None:
            generator = Interval.parse(v)
            if not 0 <= generator.letter_distance < len(LETTERS):
                raise ValueError(f"Generator must be within an octave: {v}")
            generator.circle()
        return v

    @model_validator(mode="after")
    def check_pattern_source(self) -> ScaleDefinition:
        """Exactly one of intervals or generator."""
        if (self.intervals is None) == (self.generator is None):
            raise ValueError(ErrorMessages.INVALID_SCALE_DEFINITION.format(name=self.name))
        return self

    def resolve_intervals(self) -> tuple[Interval, ...]:
        """The intervals from the root, in scale order."""
        if self.generator is not None:
            return tuple(Interval.parse(self.generator).circle())
        return tuple(Interval.parse(notation) for notation in self.intervals or [])

    def matches(self, name: str) -> bool:
        """Check a name against this definition's name and aliases."""
        key = name.lower().replace("_", "-")
        return key == self.name or key in self.aliases

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        data: dict[str, Any] = {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
        }
        if self.aliases:
            data["aliases"] = self.aliases
        if self.generator is not None:
            data["generator"] = self.generator
        else:
            data["intervals"] = self.intervals
        return data


class ScaleMetadata(BaseModel):
    """Lightweight metadata for listing scales."""

    name: str
    description: str
    size: int

    model_config = {"frozen": True}

    @classmethod
    def from_definition(cls, definition: ScaleDefinition) -> ScaleMetadata:
        """Create metadata from a definition."""
        return cls(
            name=definition.name,
            description=definition.description,
            size=len(definition.resolve_intervals()),
        )
