"""Plain records shared by page objects and scenarios."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class LoginCredentials:
    """Username/password pair typed into the login form."""

    username: str
    password: str


@dataclass(frozen=True)
class InventoryItem:
    """One product row as rendered in the inventory, cart, or overview list."""

    name: str
    price: float
    id: str
    description: str
    image_src: str | None = None

    @property
    def slug(self) -> str:
        """Name in the form used by the add/remove button data-test ids."""
        return self.name.lower().replace(" ", "-")


@dataclass(frozen=True)
class CheckoutForm:
    """Customer information entered on checkout step one."""

    first_name: str
    last_name: str
    zip_code: str

    def with_only(self, *fields: str) -> "CheckoutForm":
        """Copy keeping only *fields*; every other field is blanked."""
        unknown = set(fields) - {"first_name", "last_name", "zip_code"}
        if unknown:
            raise ValueError(f"Unknown checkout fields: {sorted(unknown)}")
        return CheckoutForm(
            first_name=self.first_name if "first_name" in fields else "",
            last_name=self.last_name if "last_name" in fields else "",
            zip_code=self.zip_code if "zip_code" in fields else "",
        )


class SortOption(str, Enum):
    """Values of the product sort ``<select>``."""

    NAME_ASC = "az"
    NAME_DESC = "za"
    PRICE_ASC = "lohi"
    PRICE_DESC = "hilo"

    @property
    def by_price(self) -> bool:
        return self in (SortOption.PRICE_ASC, SortOption.PRICE_DESC)

    @property
    def descending(self) -> bool:
        return self in (SortOption.NAME_DESC, SortOption.PRICE_DESC)

    def apply(self, values: list) -> list:
        """Return *values* ordered the way the shop should order them."""
        return sorted(values, reverse=self.descending)
