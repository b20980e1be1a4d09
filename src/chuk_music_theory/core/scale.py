"""
Scale primitive - a root note plus intervals measured from it.

Intervals here are cumulative from the root (1P 2M 3M ...), so the notes
come straight out of transposition and keep letter-correct spelling.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chuk_music_theory.constants import ErrorMessages

from .interval import Interval
from .note import Note

if TYPE_CHECKING:
    from chuk_music_theory.catalog.loader import CatalogLoader
    from chuk_music_theory.models.scale import ScaleDefinition


@dataclass(frozen=True)
class Scale:
    """
    A scale built on a root.

    Examples:
        Scale.major("Eb").names() = ['Eb', 'F', 'G', 'Ab', 'Bb', 'C', 'D']
        Scale("A", ("1P", "2M", "3m")).names() = ['A', 'B', 'C']

    Immutable and hashable.
    """

    root: Note
    intervals: tuple[Interval, ...]
    name: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        # Accept notation strings at the boundary
        object.__setattr__(self, "root", Note.coerce(self.root))
        object.__setattr__(
            self, "intervals", tuple(Interval.coerce(interval) for interval in self.intervals)
        )

    @classmethod
    def major(cls, root: Note | str) -> Scale:
        """The major scale: the circle of the perfect fifth."""
        return cls(root, tuple(Interval.parse("5P").circle()), "major")

    @classmethod
    def from_definition(cls, root: Note | str, definition: ScaleDefinition) -> Scale:
        """Build a scale from a catalog definition."""
        return cls(root, definition.resolve_intervals(), definition.name)

    @classmethod
    def named(cls, root: Note | str, name: str, loader: CatalogLoader | None = None) -> Scale:
        """
        Build a scale by catalog name, e.g. Scale.named('D', 'dorian').

        Raises ValueError if no definition matches the name or an alias.
        """
        if loader is None:
            from chuk_music_theory.catalog.loader import CatalogLoader

            loader = CatalogLoader()

        definition = loader.get_scale(name)
        if definition is None:
            raise ValueError(ErrorMessages.SCALE_NOT_FOUND.format(name=name))
        return cls.from_definition(root, definition)

    def notes(self) -> list[Note]:
        """The scale's notes, in interval order."""
        return [self.root.transpose(interval) for interval in self.intervals]

    def names(self) -> list[str]:
        """The scale's note names."""
        return [note.name for note in self.notes()]

    def __str__(self) -> str:
        return f"{self.root} {self.name}".strip()
