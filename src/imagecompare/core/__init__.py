"""Building blocks of the comparison engine."""

from .boxes import BoxAccumulator, ComparisonBox
from .matcher import NeighborhoodMatcher, UsageGrid, normalize_channels
from .render import draw_comparison_boxes, render_comparison_image, render_diff_image
from .search import concentric_squares
from .types import ComparisonResult, ComparisonState, DirectionalResult

__all__ = [
    "BoxAccumulator",
    "ComparisonBox",
    "ComparisonResult",
    "ComparisonState",
    "DirectionalResult",
    "NeighborhoodMatcher",
    "UsageGrid",
    "concentric_squares",
    "draw_comparison_boxes",
    "normalize_channels",
    "render_comparison_image",
    "render_diff_image",
]
