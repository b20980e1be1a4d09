"""
Catalog system - named scales and tunings shipped as YAML.

Project catalogs override built-in entries of the same name.
"""

from chuk_music_theory.catalog.loader import CatalogLoader

__all__ = ["CatalogLoader"]
