"""Neighbourhood matching of source pixels against a target raster."""
from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np

from .search import Offset

_CHANNEL_SCALE = np.float32(255.0)


def normalize_channels(raster: np.ndarray) -> np.ndarray:
    """Return ``raster`` scaled to ``[0, 1]`` in single precision."""

    return raster.astype(np.float32) / _CHANNEL_SCALE


class UsageGrid:
    """Per target pixel count of how often it has been claimed as a match."""

    def __init__(self, width: int, height: int, max_usage: int) -> None:
        self.max_usage = max_usage
        self.counts = np.zeros((height, width), dtype=np.int64)

    def available(self, x: int, y: int) -> bool:
        return self.counts[y, x] < self.max_usage

    def consume(self, x: int, y: int) -> None:
        self.counts[y, x] += 1


class NeighborhoodMatcher:
    """Decide whether source pixels have a close enough partner in the target.

    Offsets are tried in the order given. Candidate coordinates are clamped
    to the image, so pixels near an edge test the border pixel repeatedly.
    A candidate matches when every channel differs by at most ``threshold``
    and its usage count is still below the quota; the first such candidate
    is consumed. Because quota is shared, results depend on the order in
    which :meth:`match` is called.
    """

    def __init__(
        self,
        source: np.ndarray,
        target: np.ndarray,
        usage: UsageGrid,
        offsets: Sequence[Offset],
        threshold: float,
    ) -> None:
        if source.shape != target.shape:
            raise ValueError(f"source {source.shape} and target {target.shape} differ in size")
        if usage.counts.shape != target.shape[:2]:
            raise ValueError("usage grid does not match the target size")
        self._source = normalize_channels(source)
        self._target = normalize_channels(target)
        self._usage = usage
        self._offsets = np.asarray(offsets, dtype=np.intp).reshape(-1, 2)
        self._threshold = np.float32(threshold)
        self._column_x: Optional[int] = None
        self._column: Tuple[np.ndarray, np.ndarray, np.ndarray] | None = None

    def match(self, x: int, y: int) -> bool:
        """Return ``True`` and consume a target pixel if ``(x, y)`` matches."""

        xs, ys, within = self._candidates_for_column(x)
        for k in np.flatnonzero(within[:, y]):
            cx = int(xs[k])
            cy = int(ys[k, y])
            if self._usage.available(cx, cy):
                self._usage.consume(cx, cy)
                return True
        return False

    def _candidates_for_column(self, x: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        # Colour tolerance does not depend on usage, so it is evaluated for a
        # whole column at once; only the quota check stays sequential.
        if self._column_x == x and self._column is not None:
            return self._column

        height, width = self._target.shape[:2]
        dx = self._offsets[:, 0]
        dy = self._offsets[:, 1]
        xs = np.clip(x + dx, 0, width - 1)
        ys = np.clip(np.arange(height)[np.newaxis, :] + dy[:, np.newaxis], 0, height - 1)

        candidates = self._target[ys, xs[:, np.newaxis]]
        delta = np.abs(candidates - self._source[np.newaxis, :, x])
        within = np.all(delta <= self._threshold, axis=2)

        self._column_x = x
        self._column = (xs, ys, within)
        return self._column
