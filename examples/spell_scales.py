#!/usr/bin/env python3
"""
Example: Spelling scales from the catalog.

This demonstrates letter-correct scale spelling: every scale degree gets
its own letter, so Eb major has Ab (not G#) and B# major needs double sharps.

Usage:
    python examples/spell_scales.py
"""

from chuk_music_theory.catalog import CatalogLoader
from chuk_music_theory.core import Interval, Scale


def main() -> None:
    """Demonstrate scale construction."""
    print("CHUK Music Theory Scale Demo")
    print("=" * 40)
    print()

    # The major scale is the circle of the perfect fifth
    fifths = Interval.parse("5P").circle()
    print(f"Circle of 5P: {' '.join(i.name for i in fifths)}")
    print()

    print("Major scales:")
    for root in ["C", "G", "D", "Eb", "F#", "B#"]:
        print(f"  {root:>3}: {' '.join(Scale.major(root).names())}")
    print()

    loader = CatalogLoader()

    print("Catalog scales on D:")
    for metadata in loader.list_scales():
        scale = Scale.named("D", metadata.name, loader)
        print(f"  {metadata.name:<17} {' '.join(scale.names())}")
        print(f"    {metadata.description}")
    print()


if __name__ == "__main__":
    main()
