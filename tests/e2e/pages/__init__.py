"""Page Object Model classes for E2E testing."""

from .base_page import BasePage
from .cart_page import CartPage
from .checkout_page import CheckoutPage
from .images_flow import ImagesFlow
from .inventory_page import InventoryPage
from .login_page import LoginPage

__all__ = ["BasePage", "CartPage", "CheckoutPage", "ImagesFlow", "InventoryPage", "LoginPage"]
