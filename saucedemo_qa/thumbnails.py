"""Capture product thumbnails and check them for visual duplicates."""

from __future__ import annotations

import logging
from itertools import combinations
from pathlib import Path
from typing import Iterable, Sequence

from .driver import BrowserDriver
from .imaging import DEFAULT_THRESHOLD, compare_images
from .locators import item_image_link
from .models import InventoryItem

logger = logging.getLogger("saucedemo-qa.thumbnails")


def capture_thumbnails(
    driver: BrowserDriver,
    items: Iterable[InventoryItem],
    directory: str | Path,
) -> list[Path]:
    """Screenshot each item's image link to ``directory/item_<index>.png``."""
    target_dir = Path(directory)
    target_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    for index, item in enumerate(items):
        path = driver.screenshot(item_image_link(item.id), target_dir / f"item_{index}.png")
        paths.append(Path(path))
    logger.info("Captured %d thumbnails into %s", len(paths), target_dir)
    return paths


def all_identical(paths: Sequence[str | Path], threshold: float = DEFAULT_THRESHOLD) -> bool:
    """True when every image matches the first one pixel for pixel.

    Stops at the first differing image.
    """
    if len(paths) < 2:
        return True
    first = paths[0]
    for other in paths[1:]:
        num_diff_pixels = compare_images(first, other, threshold=threshold)
        if num_diff_pixels > 0:
            logger.info("%s differs from %s by %d pixels", other, first, num_diff_pixels)
            return False
    return True


def find_duplicates(
    paths: Sequence[str | Path],
    threshold: float = DEFAULT_THRESHOLD,
) -> list[tuple[int, int]]:
    """Index pairs ``(i, j)`` with ``i < j`` whose images compare identical."""
    duplicates = [
        (i, j)
        for i, j in combinations(range(len(paths)), 2)
        if compare_images(paths[i], paths[j], threshold=threshold) == 0
    ]
    if duplicates:
        logger.warning("Found %d duplicate thumbnail pairs", len(duplicates))
    return duplicates
