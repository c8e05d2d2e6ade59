"""End-to-end QA toolkit for the Sauce Labs demo shop."""

from .driver import BrowserDriver, PlaywrightDriver
from .imaging import (
    DEFAULT_THRESHOLD,
    DecodeError,
    DimensionMismatchError,
    StorageWriteError,
    compare_images,
)
from .models import CheckoutForm, InventoryItem, LoginCredentials, SortOption
from .personas import PERSONAS, Persona, get_persona
from .thumbnails import all_identical, capture_thumbnails, find_duplicates

__all__ = [
    "BrowserDriver",
    "CheckoutForm",
    "DEFAULT_THRESHOLD",
    "DecodeError",
    "DimensionMismatchError",
    "InventoryItem",
    "LoginCredentials",
    "PERSONAS",
    "Persona",
    "PlaywrightDriver",
    "SortOption",
    "StorageWriteError",
    "all_identical",
    "capture_thumbnails",
    "compare_images",
    "find_duplicates",
    "get_persona",
]
