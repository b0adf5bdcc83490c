"""Greedy clustering of unmatched pixels into bounding boxes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .types import BoxTuple


@dataclass
class ComparisonBox:
    x1: int
    y1: int
    x2: int
    y2: int

    @property
    def width(self) -> int:
        return self.x2 - self.x1

    @property
    def height(self) -> int:
        return self.y2 - self.y1

    def contains(self, x: int, y: int) -> bool:
        return self.x1 <= x <= self.x2 and self.y1 <= y <= self.y2

    def as_tuple(self) -> BoxTuple:
        return (self.x1, self.y1, self.x2, self.y2)


class BoxAccumulator:
    """Assign points to the first box that can absorb them.

    A box absorbs a point when the grown rectangle stays within
    ``max_width`` x ``max_height`` (measured as ``x2 - x1`` and ``y2 - y1``).
    Otherwise a singleton box is appended. Boxes never merge or shrink.
    """

    def __init__(self, max_width: int, max_height: int) -> None:
        self.max_width = max_width
        self.max_height = max_height
        self.boxes: List[ComparisonBox] = []

    def __len__(self) -> int:
        return len(self.boxes)

    def add(self, x: int, y: int) -> ComparisonBox:
        for box in self.boxes:
            if self._try_extend(box, x, y):
                return box
        box = ComparisonBox(x, y, x, y)
        self.boxes.append(box)
        return box

    def _try_extend(self, box: ComparisonBox, x: int, y: int) -> bool:
        x1 = min(box.x1, x)
        x2 = max(box.x2, x)
        y1 = min(box.y1, y)
        y2 = max(box.y2, y)
        if x2 - x1 > self.max_width or y2 - y1 > self.max_height:
            return False
        box.x1, box.y1, box.x2, box.y2 = x1, y1, x2, y2
        return True

    def as_tuples(self) -> Tuple[BoxTuple, ...]:
        return tuple(box.as_tuple() for box in self.boxes)
