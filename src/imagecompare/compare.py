"""Bidirectional fuzzy image comparison."""
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from .core.boxes import BoxAccumulator
from .core.matcher import NeighborhoodMatcher, UsageGrid
from .core.render import render_comparison_image, render_diff_image
from .core.search import concentric_squares
from .core.types import ComparisonResult, ComparisonState, DirectionalResult, as_raster
from .presets import CompareConfig

logger = logging.getLogger(__name__)

ComparisonUnits = Callable[[int, int], int]


def literal_comparison_units(width: int, height: int) -> int:
    """Denominator of the failure ratio: ``width * width * 2``.

    Height is ignored on purpose; this keeps verdicts identical to the
    established behaviour. Use :func:`area_comparison_units` for the
    pixel-count based ratio.
    """

    return width * width * 2


def area_comparison_units(width: int, height: int) -> int:
    return width * height * 2


COMPARISON_UNIT_FORMULAS: Dict[str, ComparisonUnits] = {
    "literal": literal_comparison_units,
    "area": area_comparison_units,
}


class ImageComparison:
    """Compare rasters with shift tolerance and per-pixel usage quotas.

    The search order is computed once and shared by every comparison made
    with this instance. Each call allocates its own usage grids and box
    lists, so instances can be reused freely.
    """

    def __init__(
        self,
        config: Optional[CompareConfig] = None,
        comparison_units: ComparisonUnits = literal_comparison_units,
    ) -> None:
        self.config = config or CompareConfig()
        self.comparison_units = comparison_units
        self.offsets = concentric_squares(self.config.max_search_distance)

    def compare(self, image_a: np.ndarray, image_b: np.ndarray) -> ComparisonResult:
        a = as_raster(image_a, "image_a")
        b = as_raster(image_b, "image_b")
        if a.shape != b.shape:
            logger.info(
                "Images differ in size: %dx%d vs %dx%d",
                a.shape[1],
                a.shape[0],
                b.shape[1],
                b.shape[0],
            )
            return ComparisonResult(outcome=ComparisonState.SIZE_MISMATCH)

        forward = self.compare_direction(a, b)
        backward = self.compare_direction(b, a)

        height, width = a.shape[:2]
        total_units = self.comparison_units(width, height)
        total_failed = forward.failed_pixels + backward.failed_pixels
        ratio = np.float32(total_failed) / np.float32(total_units)

        if ratio <= np.float32(self.config.percent_allowed_different):
            logger.info("Images match (%d failed pixels, ratio %.6g)", total_failed, ratio)
            return ComparisonResult(
                outcome=ComparisonState.MATCH,
                failed_pixels=total_failed,
                compared_units=total_units,
                difference_ratio=float(ratio),
            )

        logger.info("Images do not match (%d failed pixels, ratio %.6g)", total_failed, ratio)
        return ComparisonResult(
            outcome=ComparisonState.MISMATCH,
            forward_comparison_image=forward.comparison_image,
            backward_comparison_image=backward.comparison_image,
            forward_diff_image=forward.diff_image,
            backward_diff_image=backward.diff_image,
            failed_pixels=total_failed,
            compared_units=total_units,
            difference_ratio=float(ratio),
            forward_boxes=forward.boxes,
            backward_boxes=backward.boxes,
        )

    def compare_direction(self, source: np.ndarray, target: np.ndarray) -> DirectionalResult:
        """Scan every ``source`` pixel against ``target``.

        Pixels are visited column by column (all ``y`` for ``x = 0``, then
        ``x = 1``...). The order decides which target pixels are still
        available, so it must not change.
        """

        source = as_raster(source, "source")
        target = as_raster(target, "target")
        height, width = source.shape[:2]
        config = self.config

        usage = UsageGrid(width, height, config.max_usage_per_pixel)
        matcher = NeighborhoodMatcher(source, target, usage, self.offsets, config.pixel_threshold)
        accumulator = BoxAccumulator(config.max_box_width, config.max_box_height)

        failed = 0
        for x in range(width):
            for y in range(height):
                if not matcher.match(x, y):
                    accumulator.add(x, y)
                    failed += 1

        logger.debug("Directional pass: %d failed pixels in %d box(es)", failed, len(accumulator))

        return DirectionalResult(
            failed_pixels=failed,
            comparison_image=render_comparison_image(source, accumulator.boxes, config.outline_color),
            diff_image=render_diff_image(usage.counts, config.max_usage_per_pixel),
            boxes=accumulator.as_tuples(),
        )


def compare_images(
    image_a: np.ndarray,
    image_b: np.ndarray,
    config: Optional[CompareConfig] = None,
) -> ComparisonResult:
    return ImageComparison(config).compare(image_a, image_b)


def compare_many(
    pairs: Sequence[Tuple[np.ndarray, np.ndarray]],
    config: Optional[CompareConfig] = None,
    progress_callback: Optional[Callable[[float], None]] = None,
) -> List[ComparisonResult]:
    """Compare several image pairs with one engine.

    ``progress_callback`` receives a ``0-100`` percentage after each pair.
    """

    engine = ImageComparison(config)
    results: List[ComparisonResult] = []
    total = len(pairs)
    for index, (image_a, image_b) in enumerate(pairs):
        results.append(engine.compare(image_a, image_b))
        if progress_callback:
            progress_callback((index + 1) / total * 100)
    return results
