"""Decode and encode RGBA rasters with Pillow."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from .errors import DecodeError, StorageWriteError

logger = logging.getLogger("saucedemo-qa.imaging")

BYTES_PER_PIXEL = 4


@dataclass(frozen=True)
class RasterImage:
    """Decoded bitmap: RGBA bytes, row-major, top-to-bottom."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Raster dimensions must be positive, got {self.width}x{self.height}")
        expected = self.width * self.height * BYTES_PER_PIXEL
        if len(self.data) != expected:
            raise ValueError(f"Raster buffer holds {len(self.data)} bytes, expected {expected}")

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def to_array(self) -> np.ndarray:
        """Return a read-only ``(height, width, 4)`` uint8 view of the pixels."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(self.height, self.width, BYTES_PER_PIXEL)

    @classmethod
    def from_array(cls, pixels: np.ndarray) -> "RasterImage":
        height, width, channels = pixels.shape
        if channels != BYTES_PER_PIXEL:
            raise ValueError(f"Expected RGBA pixels, got {channels} channels")
        return cls(width=width, height=height, data=np.ascontiguousarray(pixels, dtype=np.uint8).tobytes())


def load_image(path: str | Path) -> RasterImage:
    """Read *path* from disk and decode it into an RGBA raster.

    Raises
    ------
    DecodeError
        When the file is missing, unreadable, corrupt, or not an image
        Pillow knows. Images over Pillow's pixel limit are rejected too.
    """
    source = Path(path)
    logger.debug("Decoding %s", source)
    try:
        with Image.open(source) as img:
            rgba = img.convert("RGBA")
    except FileNotFoundError as exc:
        raise DecodeError(source, "file not found") from exc
    except UnidentifiedImageError as exc:
        raise DecodeError(source, "not a valid image") from exc
    except Image.DecompressionBombError as exc:
        raise DecodeError(source, f"exceeds pixel limit: {exc}") from exc
    # Pillow reports damaged PNG chunks as SyntaxError
    except (OSError, ValueError, SyntaxError) as exc:
        raise DecodeError(source, str(exc) or type(exc).__name__) from exc

    try:
        return RasterImage(width=rgba.width, height=rgba.height, data=rgba.tobytes())
    finally:
        rgba.close()


def save_image(raster: RasterImage, path: str | Path) -> Path:
    """Encode *raster* as PNG at *path* in a single write."""
    target = Path(path)
    img = Image.frombytes("RGBA", raster.size, raster.data)
    try:
        img.save(target, format="PNG")
    except (OSError, ValueError) as exc:
        raise StorageWriteError(target, str(exc) or type(exc).__name__) from exc
    finally:
        img.close()
    logger.debug("Wrote %dx%d PNG to %s", raster.width, raster.height, target)
    return target
