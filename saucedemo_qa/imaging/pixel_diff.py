"""Perceptual pixel comparison of two equal-sized RGBA rasters.

Follows the pixelmatch metric: each pixel pair is blended onto white by its
alpha, converted to YIQ, and the weighted squared YIQ distance is compared
against ``35215 * threshold**2``.  35215 is the largest delta two RGB colours
can produce, so ``threshold`` is a fraction of the full colour range.

Candidate pixels sitting on an anti-aliased edge in either image are not
counted unless ``include_antialiasing`` is set.  The edge detector is the one
described in "Anti-aliased Pixel and Intensity Slope Detector" by
V. Vysniauskas (2009), as used by pixelmatch.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from .errors import DimensionMismatchError
from .raster import BYTES_PER_PIXEL, RasterImage

logger = logging.getLogger("saucedemo-qa.imaging")

MAX_YIQ_DELTA = 35215.0

DIFF_COLOR = (255, 0, 0)
AA_COLOR = (255, 255, 0)
BACKGROUND_ALPHA = 0.1


def _blend(channel: np.ndarray, alpha: np.ndarray) -> np.ndarray:
    """Composite *channel* over white with opacity *alpha* in [0, 1]."""
    return 255.0 + (channel - 255.0) * alpha


def _rgb2y(r, g, b):
    return r * 0.29889531 + g * 0.58662247 + b * 0.11448223


def _rgb2i(r, g, b):
    return r * 0.59597799 - g * 0.27417610 - b * 0.32180189


def _rgb2q(r, g, b):
    return r * 0.21147017 - g * 0.52261711 + b * 0.31114694


def _blended_channels(pixels: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    values = pixels.astype(np.float64)
    alpha = values[..., 3] / 255.0
    return (
        _blend(values[..., 0], alpha),
        _blend(values[..., 1], alpha),
        _blend(values[..., 2], alpha),
    )


def color_delta(pixels_a: np.ndarray, pixels_b: np.ndarray) -> np.ndarray:
    """Signed YIQ delta for every pixel pair.

    The magnitude is the perceptual distance.  The sign is negative where
    the pixel of *pixels_a* is the brighter one and is only used to pick a
    diff colour.
    """
    r1, g1, b1 = _blended_channels(pixels_a)
    r2, g2, b2 = _blended_channels(pixels_b)

    y1 = _rgb2y(r1, g1, b1)
    y2 = _rgb2y(r2, g2, b2)
    y = y1 - y2
    i = _rgb2i(r1, g1, b1) - _rgb2i(r2, g2, b2)
    q = _rgb2q(r1, g1, b1) - _rgb2q(r2, g2, b2)

    delta = 0.5053 * y * y + 0.299 * i * i + 0.1957 * q * q
    delta = np.where(y1 > y2, -delta, delta)

    same = np.all(pixels_a == pixels_b, axis=-1)
    delta[same] = 0.0
    return delta


class _EdgeProbe:
    """Neighbourhood queries over one image for the anti-aliasing test."""

    def __init__(self, pixels: np.ndarray) -> None:
        self.height, self.width = pixels.shape[:2]
        self.packed = np.ascontiguousarray(pixels).view(np.uint32)[..., 0]
        r, g, b = _blended_channels(pixels)
        self.luma = _rgb2y(r, g, b)

    def _window(self, x: int, y: int) -> tuple[int, int, int, int, int]:
        x0 = max(x - 1, 0)
        y0 = max(y - 1, 0)
        x2 = min(x + 1, self.width - 1)
        y2 = min(y + 1, self.height - 1)
        on_border = 1 if x in (x0, x2) or y in (y0, y2) else 0
        return x0, y0, x2, y2, on_border

    def has_many_siblings(self, x: int, y: int) -> bool:
        """True when more than two neighbours share the exact pixel value."""
        x0, y0, x2, y2, zeroes = self._window(x, y)
        center = self.packed[y, x]
        for nx in range(x0, x2 + 1):
            for ny in range(y0, y2 + 1):
                if nx == x and ny == y:
                    continue
                if self.packed[ny, nx] == center:
                    zeroes += 1
                if zeroes > 2:
                    return True
        return False

    def _luma_delta(self, x: int, y: int, nx: int, ny: int) -> float:
        if self.packed[y, x] == self.packed[ny, nx]:
            return 0.0
        return float(self.luma[y, x] - self.luma[ny, nx])

    def is_antialiased(self, x: int, y: int, other: "_EdgeProbe") -> bool:
        x0, y0, x2, y2, zeroes = self._window(x, y)
        darkest = brightest = 0.0
        min_x = min_y = max_x = max_y = 0

        for nx in range(x0, x2 + 1):
            for ny in range(y0, y2 + 1):
                if nx == x and ny == y:
                    continue
                delta = self._luma_delta(x, y, nx, ny)
                if delta == 0:
                    zeroes += 1
                    # more than two equal siblings means a flat area, not an edge
                    if zeroes > 2:
                        return False
                elif delta < darkest:
                    darkest = delta
                    min_x, min_y = nx, ny
                elif delta > brightest:
                    brightest = delta
                    max_x, max_y = nx, ny

        if darkest == 0 or brightest == 0:
            return False

        return (
            self.has_many_siblings(min_x, min_y) and other.has_many_siblings(min_x, min_y)
        ) or (
            self.has_many_siblings(max_x, max_y) and other.has_many_siblings(max_x, max_y)
        )


def _gray_background(pixels: np.ndarray, alpha: float) -> np.ndarray:
    values = pixels.astype(np.float64)
    luma = _rgb2y(values[..., 0], values[..., 1], values[..., 2])
    gray = _blend(luma, alpha * values[..., 3] / 255.0)
    gray = np.clip(gray, 0, 255).astype(np.uint8)
    out = np.empty(pixels.shape, dtype=np.uint8)
    out[..., 0] = gray
    out[..., 1] = gray
    out[..., 2] = gray
    out[..., 3] = 255
    return out


def new_diff_buffer(width: int, height: int) -> np.ndarray:
    """Allocate an RGBA buffer suitable for the ``diff`` argument."""
    return np.zeros((height, width, BYTES_PER_PIXEL), dtype=np.uint8)


def count_diff_pixels(
    img_a: RasterImage,
    img_b: RasterImage,
    threshold: float = 0.1,
    *,
    include_antialiasing: bool = False,
    diff: np.ndarray | None = None,
    diff_color: Sequence[int] = DIFF_COLOR,
    diff_color_alt: Sequence[int] | None = None,
    aa_color: Sequence[int] = AA_COLOR,
    alpha: float = BACKGROUND_ALPHA,
) -> int:
    """Count pixels whose perceptual delta exceeds *threshold*.

    Parameters
    ----------
    img_a, img_b:
        Rasters of identical size.
    threshold:
        Sensitivity in [0, 1]; lower values flag smaller colour changes.
    include_antialiasing:
        Count pixels detected as anti-aliased edges instead of ignoring them.
    diff:
        Optional ``(height, width, 4)`` uint8 buffer filled in place with a
        visualization: differing pixels in *diff_color* (or *diff_color_alt*
        where *img_a* is brighter), anti-aliased pixels in *aa_color*, and the
        rest as a faded grayscale copy of *img_a*.

    Raises
    ------
    DimensionMismatchError
        When the rasters differ in size; raised before any pixel is read.
    ValueError
        When *threshold* is outside [0, 1] or *diff* has the wrong shape.
    """
    if img_a.size != img_b.size:
        raise DimensionMismatchError(img_a.size, img_b.size)
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"threshold must be within [0, 1], got {threshold}")

    pixels_a = img_a.to_array()
    pixels_b = img_b.to_array()
    if diff is not None and diff.shape != pixels_a.shape:
        raise ValueError(f"diff buffer shape {diff.shape} does not match {pixels_a.shape}")

    if diff is not None:
        diff[...] = _gray_background(pixels_a, alpha)

    if img_a.data == img_b.data:
        return 0

    max_delta = MAX_YIQ_DELTA * threshold * threshold
    delta = color_delta(pixels_a, pixels_b)
    candidates = np.abs(delta) > max_delta

    if include_antialiasing or not candidates.any():
        counted = candidates
    else:
        probe_a = _EdgeProbe(pixels_a)
        probe_b = _EdgeProbe(pixels_b)
        counted = candidates.copy()
        for y, x in zip(*np.nonzero(candidates)):
            x, y = int(x), int(y)
            if probe_a.is_antialiased(x, y, probe_b) or probe_b.is_antialiased(x, y, probe_a):
                counted[y, x] = False
        if diff is not None:
            diff[candidates & ~counted] = (*aa_color, 255)

    if diff is not None:
        diff[counted] = (*diff_color, 255)
        if diff_color_alt is not None:
            diff[counted & (delta < 0)] = (*diff_color_alt, 255)

    total = int(np.count_nonzero(counted))
    logger.debug(
        "Compared %dx%d rasters at threshold %.3f: %d differing pixels",
        img_a.width,
        img_a.height,
        threshold,
        total,
    )
    return total
