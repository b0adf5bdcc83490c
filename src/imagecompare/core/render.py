"""Visualisations of a directional comparison."""
from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np

from .boxes import ComparisonBox


def draw_comparison_boxes(
    image: np.ndarray, boxes: Iterable[ComparisonBox], color: Tuple[int, int, int]
) -> None:
    """Outline ``boxes`` on ``image`` in place.

    Edges cover the half-open ranges ``[x1, x2)`` and ``[y1, y2)``, so the
    bottom-right corner pixel stays untouched and single-pixel boxes draw
    nothing.
    """

    rgb = np.asarray(color, dtype=np.uint8)
    for box in boxes:
        image[box.y1, box.x1 : box.x2] = rgb
        image[box.y2, box.x1 : box.x2] = rgb
        image[box.y1 : box.y2, box.x1] = rgb
        image[box.y1 : box.y2, box.x2] = rgb


def render_comparison_image(
    source: np.ndarray, boxes: Iterable[ComparisonBox], color: Tuple[int, int, int]
) -> np.ndarray:
    image = source.copy()
    draw_comparison_boxes(image, boxes, color)
    return image


def render_diff_image(usage_counts: np.ndarray, max_usage: int) -> np.ndarray:
    """Grey levels of ``255 * usage // max_usage`` for each target pixel."""

    # Matching never pushes a count past the quota, so intensities stay <= 255.
    intensity = (255 * usage_counts) // max_usage
    return np.repeat(intensity[:, :, np.newaxis], 3, axis=2).astype(np.uint8)
