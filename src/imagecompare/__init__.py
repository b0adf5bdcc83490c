"""Shift tolerant fuzzy comparison of RGB rasters."""

from __future__ import annotations

from .compare import (
    COMPARISON_UNIT_FORMULAS,
    ImageComparison,
    area_comparison_units,
    compare_images,
    compare_many,
    literal_comparison_units,
)
from .core.types import ComparisonResult, ComparisonState, DirectionalResult
from .errors import InvalidConfigError
from .presets import CompareConfig, Preset, get_preset, iter_presets

__all__ = [
    "COMPARISON_UNIT_FORMULAS",
    "CompareConfig",
    "ComparisonResult",
    "ComparisonState",
    "DirectionalResult",
    "ImageComparison",
    "InvalidConfigError",
    "Preset",
    "area_comparison_units",
    "compare_images",
    "compare_many",
    "get_preset",
    "iter_presets",
    "literal_comparison_units",
]

__version__ = "0.3.0"
