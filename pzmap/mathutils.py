"""Small numeric helpers and an integer 2D vector."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2i:
    """A pair of integer coordinates."""

    x: int = 0
    y: int = 0


def fast_min(a, b):
    """Return the smaller of ``a`` and ``b``."""
    return a if a < b else b


def fast_max(a, b):
    """Return the larger of ``a`` and ``b``."""
    return a if a > b else b


def fast_clamp(value, minimum, maximum):
    """Limit ``value`` to the closed range [minimum, maximum]."""
    if value <= minimum:
        return minimum
    if value >= maximum:
        return maximum
    return value