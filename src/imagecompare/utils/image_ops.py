"""Conversions between Pillow images and RGB rasters."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

import numpy as np
from PIL import Image

from ..core.types import ComparisonResult, ComparisonState, as_raster

logger = logging.getLogger(__name__)

RESULT_IMAGE_NAMES = {
    "forward_comparison_image": "forward-comparison.png",
    "backward_comparison_image": "backward-comparison.png",
    "forward_diff_image": "forward-diff.png",
    "backward_diff_image": "backward-diff.png",
}


def to_raster(image: Image.Image) -> np.ndarray:
    """Return ``image`` as an RGB uint8 array; alpha is discarded."""

    if image.mode != "RGB":
        image = image.convert("RGB")
    return np.array(image, dtype=np.uint8)


def from_raster(raster: np.ndarray) -> Image.Image:
    return Image.fromarray(as_raster(raster))


def load_raster(path: str | Path) -> np.ndarray:
    with Image.open(path) as img:
        img.load()
        return to_raster(img)


def save_raster(raster: np.ndarray, path: str | Path) -> Path:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    from_raster(raster).save(out_path)
    return out_path


def save_result_images(result: ComparisonResult, output_dir: str | Path) -> Dict[str, Path]:
    """Write the four visualisations of a mismatch into ``output_dir``.

    Results other than :attr:`ComparisonState.MISMATCH` carry no images and
    nothing is written.
    """

    if result.outcome is not ComparisonState.MISMATCH:
        return {}
    out_dir = Path(output_dir)
    written: Dict[str, Path] = {}
    for attribute, filename in RESULT_IMAGE_NAMES.items():
        written[attribute] = save_raster(getattr(result, attribute), out_dir / filename)
    logger.info("Comparison images saved to %s", out_dir)
    return written
