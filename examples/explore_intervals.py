#!/usr/bin/env python3
"""
Example: Intervals, transposition and frequencies.

This demonstrates interval naming between notes, stacking intervals,
transposing with correct spelling, and equal-tempered frequencies under
different tunings.

Usage:
    python examples/explore_intervals.py
"""

from functools import reduce

from chuk_music_theory.catalog import CatalogLoader
from chuk_music_theory.core import Interval, Note, PitchClass


def main() -> None:
    """Demonstrate interval arithmetic."""
    print("CHUK Music Theory Interval Demo")
    print("=" * 40)
    print()

    print("Intervals from C:")
    for target in ["C#", "Db", "E", "F#", "Gb", "Bb"]:
        interval = Interval.between("C", target)
        print(f"  C -> {target:<3} {interval.name:<4} {interval.full_name}")
    print()

    print("Stacked thirds:")
    thirds = [Interval.parse(n) for n in ["3M", "3m", "3M"]]
    for count in range(1, len(thirds) + 1):
        stacked = reduce(Interval.sum, thirds[:count])
        print(f"  {' + '.join(i.name for i in thirds[:count]):<14} = {stacked.name}")
    print()

    print("Transposing C# by each interval of the major scale:")
    root = Note.parse("C#")
    for interval in Interval.parse("5P").circle():
        print(f"  {root} + {interval.name} = {root.transpose(interval)}")
    print()

    loader = CatalogLoader()
    print("Fundamental frequencies (Hz):")
    for tuning in loader.list_tunings():
        row = " ".join(f"{pc.fundamental_frequency(tuning):7.3f}" for pc in PitchClass)
        print(f"  {tuning.name:<9} {row}")
    print()


if __name__ == "__main__":
    main()
