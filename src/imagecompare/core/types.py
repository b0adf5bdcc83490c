from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

BoxTuple = Tuple[int, int, int, int]


class ComparisonState(enum.Enum):
    SIZE_MISMATCH = "size_mismatch"
    MATCH = "match"
    MISMATCH = "mismatch"


@dataclass(frozen=True)
class DirectionalResult:
    """Outcome of scanning one image against the other."""

    failed_pixels: int
    comparison_image: np.ndarray
    diff_image: np.ndarray
    boxes: Tuple[BoxTuple, ...] = ()


@dataclass(frozen=True)
class ComparisonResult:
    """Verdict of a bidirectional comparison.

    Images and boxes are only populated for :attr:`ComparisonState.MISMATCH`.
    """

    outcome: ComparisonState
    forward_comparison_image: Optional[np.ndarray] = None
    backward_comparison_image: Optional[np.ndarray] = None
    forward_diff_image: Optional[np.ndarray] = None
    backward_diff_image: Optional[np.ndarray] = None
    failed_pixels: int = 0
    compared_units: int = 0
    difference_ratio: float = 0.0
    forward_boxes: Tuple[BoxTuple, ...] = field(default_factory=tuple)
    backward_boxes: Tuple[BoxTuple, ...] = field(default_factory=tuple)

    @property
    def passed(self) -> bool:
        return self.outcome is ComparisonState.MATCH


def as_raster(image: object, name: str = "image") -> np.ndarray:
    """Return ``image`` as a ``(height, width, 3)`` uint8 array."""

    array = np.asarray(image)
    if array.ndim != 3 or array.shape[2] != 3:
        raise ValueError(f"{name} must have shape (height, width, 3), got {array.shape}")
    if array.shape[0] == 0 or array.shape[1] == 0:
        raise ValueError(f"{name} must not be empty")
    if array.dtype != np.uint8:
        if not np.issubdtype(array.dtype, np.integer) or array.min() < 0 or array.max() > 255:
            raise ValueError(f"{name} must hold 8-bit RGB values, got dtype {array.dtype}")
        array = array.astype(np.uint8)
    return array
