"""
Frequency helpers.

A frequency is a plain float in Hz; the only structure is the octave,
which doubles it.
"""


def shift_octave(frequency: float, amount: int) -> float:
    """
    Move a frequency by whole octaves.

        shift_octave(110, 1) -> 220.0
        shift_octave(440, -4) -> 27.5
    """
    return frequency * 2.0**amount
