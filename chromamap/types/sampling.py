# No dependencies
from enum import Enum


class Sampling(str, Enum):
    """How palette index ``i`` of ``n`` maps to a path position ``t``."""
    CELL_CENTERED = "cell-centered"
    ENDPOINTS = "endpoints"


def sample_position(i: int, n: int, sampling: Sampling) -> float:
    """
    Position of entry ``i`` on the unit path.

    ``CELL_CENTERED`` places each entry in the middle of its cell,
    ``(i + 0.5) / n``, and never touches the path's ends. ``ENDPOINTS``
    uses ``i / (n - 1)`` so the first and last entries are the exact ends.
    """
    if sampling == Sampling.ENDPOINTS:
        return i / (n - 1.0)
    return (i + 0.5) / n


BYTE_MAX = 255
