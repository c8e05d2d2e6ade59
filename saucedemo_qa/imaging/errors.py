"""Error taxonomy for screenshot comparison."""

from __future__ import annotations

from pathlib import Path


class ImageComparisonError(Exception):
    """Base class for every failure raised by the imaging package."""


class DecodeError(ImageComparisonError):
    """Source image is missing, unreadable, or not a valid bitmap."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot decode image {self.path}: {reason}")


class DimensionMismatchError(ImageComparisonError, ValueError):
    """The two images differ in width or height."""

    def __init__(self, size_a: tuple[int, int], size_b: tuple[int, int]) -> None:
        self.size_a = size_a
        self.size_b = size_b
        super().__init__(
            f"Images must have the same size: {size_a[0]}x{size_a[1]} vs {size_b[0]}x{size_b[1]}"
        )


class StorageWriteError(ImageComparisonError):
    """Writing the diff visualization failed.

    The difference count computed before the write is still valid and is
    kept on ``diff_pixels`` when the facade re-raises.
    """

    def __init__(self, path: str | Path, reason: str, diff_pixels: int | None = None) -> None:
        self.path = Path(path)
        self.reason = reason
        self.diff_pixels = diff_pixels
        super().__init__(f"Cannot write diff image {self.path}: {reason}")
