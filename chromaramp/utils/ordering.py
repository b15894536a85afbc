from typing import Sequence


def is_non_decreasing(positions: Sequence) -> bool:
    """Check that every position is >= the one before it."""
    return all(a <= b for a, b in zip(positions, positions[1:]))
