"""Search order used when looking for a matching pixel."""
from __future__ import annotations

from typing import Tuple

Offset = Tuple[int, int]


def concentric_squares(max_distance: int) -> Tuple[Offset, ...]:
    """Return ``(dx, dy)`` offsets ordered by expanding square rings.

    The origin comes first, followed by rings of radius ``1`` up to
    ``max_distance - 1``. Each ring of radius ``r`` holds ``8 * r`` offsets:
    the ``dy = r`` edge from left to right, the ``dx = r`` edge walking down to
    ``dy = -r``, the ``dy = -r`` edge walking back to ``dx = -r`` and finally the
    ``dx = -r`` edge up to ``dy = r - 1``. Matching is first-fit, so nearer
    offsets are always preferred.
    """

    if max_distance < 1:
        raise ValueError(f"max_distance must be at least 1, got {max_distance}")

    offsets = [(0, 0)]
    for level in range(1, max_distance):
        offsets.extend((dx, level) for dx in range(-level, level + 1))
        offsets.extend((level, dy) for dy in range(level - 1, -level - 1, -1))
        offsets.extend((dx, -level) for dx in range(level - 1, -level - 1, -1))
        offsets.extend((-level, dy) for dy in range(-level + 1, level))
    return tuple(offsets)
