"""
Catalog loader - discovers and loads scale definitions and tunings.

Definitions can come from:
1. Built-in library (shipped with package)
2. Project catalog (user's directory with scales/ and tunings/ folders)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from chuk_music_theory.models.scale import ScaleDefinition, ScaleMetadata
from chuk_music_theory.models.tuning import Tuning

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

SCALES_DIR = "scales"
TUNINGS_DIR = "tunings"


class CatalogLoader:
    """
    Discovers and loads catalog entries.

    Entries are YAML files in the library and project directories.
    Project entries override library entries with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the catalog loader.

        Args:
            library_path: Path to built-in catalog library
            project_path: Path to project catalog directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._scales: dict[str, ScaleDefinition] | None = None
        self._tunings: dict[str, Tuning] | None = None

    def list_scales(self) -> list[ScaleMetadata]:
        """List all available scales, project entries taking precedence."""
        return [ScaleMetadata.from_definition(d) for d in self._all_scales().values()]

    def get_scale(self, name: str) -> ScaleDefinition | None:
        """
        Get a scale definition by name or alias.

        Args:
            name: Scale name (e.g., 'dorian', 'minor')

        Returns:
            ScaleDefinition if found, None otherwise
        """
        scales = self._all_scales()
        key = name.lower().replace("_", "-")
        if key in scales:
            return scales[key]

        for definition in scales.values():
            if definition.matches(name):
                return definition

        return None

    def list_tunings(self) -> list[Tuning]:
        """List all available tunings, project entries taking precedence."""
        return list(self._all_tunings().values())

    def get_tuning(self, name: str) -> Tuning | None:
        """
        Get a tuning by name.

        Args:
            name: Tuning name (e.g., 'standard', 'baroque')

        Returns:
            Tuning if found, None otherwise
        """
        return self._all_tunings().get(name.lower().replace("_", "-"))

    def copy_to_project(self, kind: str, name: str) -> Path | None:
        """
        Copy a library entry to the project for customization.

        Args:
            kind: 'scales' or 'tunings'
            name: Entry name

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError("No project path configured")
        if kind not in (SCALES_DIR, TUNINGS_DIR):
            raise ValueError(f"Unknown catalog kind: {kind}")

        library_file = self.library_path / kind / f"{name}.yaml"
        if not library_file.exists():
            return None

        dest_dir = self.project_path / kind
        dest_dir.mkdir(parents=True, exist_ok=True)

        dest_file = dest_dir / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(f"Catalog entry already exists in project: {kind}/{name}")

        dest_file.write_text(library_file.read_text())
        self.clear_cache()

        return dest_file

    def clear_cache(self) -> None:
        """Clear the catalog cache."""
        self._scales = None
        self._tunings = None

    def _all_scales(self) -> dict[str, ScaleDefinition]:
        if self._scales is None:
            self._scales = self._load_kind(SCALES_DIR, ScaleDefinition)
        return self._scales

    def _all_tunings(self) -> dict[str, Tuning]:
        if self._tunings is None:
            self._tunings = self._load_kind(TUNINGS_DIR, Tuning)
        return self._tunings

    def _load_kind(self, kind: str, model: type[ModelT]) -> dict[str, ModelT]:
        """Load every entry of a kind; project files override library files."""
        entries: dict[str, Any] = {}
        for root in (self.library_path, self.project_path):
            if root is None:
                continue
            directory = root / kind
            if not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                entry = self._load_file(path, model)
                if entry is not None:
                    entries[entry.name] = entry

        logger.debug(f"Loaded {len(entries)} {kind} from catalog")
        return entries

    def _load_file(self, path: Path, model: type[ModelT]) -> ModelT | None:
        """Load one entry from a YAML file, skipping invalid files."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return model.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError):
            logger.warning(f"Skipping invalid catalog file: {path}", exc_info=True)
            return None
