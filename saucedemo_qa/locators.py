"""Selector builders and text parsers for the demo shop markup."""

from __future__ import annotations

import re

from .models import InventoryItem

_ITEM_ID_RE = re.compile(r"\d+")


def data_test(value: str) -> str:
    """CSS selector for a ``data-test`` attribute."""
    return f'[data-test="{value}"]'


def cart_button(item: InventoryItem, action: str) -> str:
    """Selector of the add/remove button for *item*.

    >>> cart_button(InventoryItem("Sauce Labs Backpack", 29.99, "4", ""), "add")
    '[data-test="add-to-cart-sauce-labs-backpack"]'
    """
    if action not in ("add", "remove"):
        raise ValueError(f"action must be 'add' or 'remove', got {action!r}")
    prefix = "add-to-cart" if action == "add" else "remove"
    return data_test(f"{prefix}-{item.slug}")


def item_title_link(item_id: str) -> str:
    return data_test(f"item-{item_id}-title-link")


def item_image_link(item_id: str) -> str:
    return data_test(f"item-{item_id}-img-link")


def cart_row(item: InventoryItem) -> str:
    return f'.cart_item:has-text("{item.name}")'


def parse_price(text: str) -> float:
    """``"$29.99"`` -> ``29.99``."""
    cleaned = text.strip().replace("$", "")
    try:
        return float(cleaned)
    except ValueError as exc:
        raise ValueError(f"Unparseable price: {text!r}") from exc


def parse_count(text: str | None) -> int:
    """Cart badge text to an int; a missing badge means an empty cart."""
    if not text or not text.strip():
        return 0
    return int(text.strip())


def extract_item_id(data_test_value: str | None) -> str:
    """Pull the numeric id out of ``item-<n>-title-link``."""
    match = _ITEM_ID_RE.search(data_test_value or "")
    if not match:
        raise ValueError(f"Cannot extract item id from: {data_test_value!r}")
    return match.group(0)
