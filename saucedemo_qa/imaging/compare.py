"""Comparison facade: load two screenshots, diff them, return the count."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import StorageWriteError
from .pixel_diff import count_diff_pixels, new_diff_buffer
from .raster import RasterImage, load_image, save_image

logger = logging.getLogger("saucedemo-qa.imaging")

# One canonical sensitivity for both the "identical" and the "duplicate"
# checks made by the suite.
DEFAULT_THRESHOLD = 0.1


def compare_images(
    path_a: str | Path,
    path_b: str | Path,
    diff_path: str | Path | None = None,
    *,
    threshold: float = DEFAULT_THRESHOLD,
    include_antialiasing: bool = False,
    raise_on_write_error: bool = False,
) -> int:
    """Return the number of perceptually different pixels between two images.

    ``0`` means the images are identical under *threshold*.  When *diff_path*
    is given a diff visualization of the same size is written there; a failed
    write is logged and the count is still returned, unless
    *raise_on_write_error* is set, in which case the ``StorageWriteError`` is
    re-raised with the count on ``diff_pixels``.

    Raises
    ------
    DecodeError
        Either image cannot be read.
    DimensionMismatchError
        The images differ in width or height.
    """
    img_a = load_image(path_a)
    img_b = load_image(path_b)

    diff = new_diff_buffer(img_a.width, img_a.height) if diff_path and img_a.size == img_b.size else None
    num_diff_pixels = count_diff_pixels(
        img_a,
        img_b,
        threshold,
        include_antialiasing=include_antialiasing,
        diff=diff,
    )
    logger.info("Compared %s with %s: %d differing pixels", path_a, path_b, num_diff_pixels)

    if diff is not None:
        try:
            save_image(RasterImage.from_array(diff), diff_path)
        except StorageWriteError as exc:
            exc.diff_pixels = num_diff_pixels
            logger.error("Diff image not saved (%d differing pixels still valid): %s", num_diff_pixels, exc)
            if raise_on_write_error:
                raise

    return num_diff_pixels
