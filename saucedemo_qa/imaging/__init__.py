"""Screenshot comparison: decode, pixel diff, and the comparison facade."""

from .compare import DEFAULT_THRESHOLD, compare_images
from .errors import DecodeError, DimensionMismatchError, ImageComparisonError, StorageWriteError
from .pixel_diff import color_delta, count_diff_pixels, new_diff_buffer
from .raster import RasterImage, load_image, save_image

__all__ = [
    "DEFAULT_THRESHOLD",
    "DecodeError",
    "DimensionMismatchError",
    "ImageComparisonError",
    "RasterImage",
    "StorageWriteError",
    "color_delta",
    "compare_images",
    "count_diff_pixels",
    "load_image",
    "new_diff_buffer",
    "save_image",
]
