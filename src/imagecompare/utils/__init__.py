"""Helpers for reading and writing rasters."""

from .image_ops import from_raster, load_raster, save_raster, save_result_images, to_raster

__all__ = [
    "from_raster",
    "load_raster",
    "save_raster",
    "save_result_images",
    "to_raster",
]
