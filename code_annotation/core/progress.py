"""Experiment Progress: pure conversion of assignment counts into a percentage.

Invariants:
    - count_all == 0 -> 0.0 exactly (never NaN, never a ZeroDivisionError)
    - Otherwise 100 * count_complete / count_all at single precision, unrounded:
      1 of 3 -> 33.333332, the shortest decimal naming the same float32
    - Non-decreasing in count_complete for fixed count_all; complete == all -> 100.0

Design Decisions:
    - Pure function, no IO: the async counting lives in services/experiments.py
    - float32 narrowing through struct, the value stays a plain float for JSON
"""

import struct

from code_annotation.core.domain_types import Progress


def compute_progress(count_all: int, count_complete: int) -> Progress:
    """Percentage of answered assignments. Pure, no IO."""
    if count_all == 0:
        return Progress(0.0)
    return Progress(to_float32(100.0 * count_complete / count_all))


def to_float32(value: float) -> float:
    """Shortest decimal that reads back as the same single-precision value."""
    packed = struct.pack("<f", value)
    narrowed = struct.unpack("<f", packed)[0]
    for digits in range(1, 10):
        candidate = float(f"{narrowed:.{digits}g}")
        if struct.pack("<f", candidate) == packed:
            return candidate
    return narrowed
