"""Pytest configuration for E2E tests with Playwright."""
import functools

import pytest
from playwright.sync_api import sync_playwright

from saucedemo_qa.models import CheckoutForm
from saucedemo_qa.personas import PERSONAS
from saucedemo_qa.utils.config import load_settings
from saucedemo_qa.utils.reachability import is_reachable

from .pages import InventoryPage, LoginPage


@functools.lru_cache(maxsize=1)
def _skip_reason():
    settings = load_settings()
    if not settings.run_e2e:
        return "E2E scenarios are opt-in: set RUN_E2E=1"
    if not is_reachable(settings.base_url):
        return f"Shop under test is unreachable: {settings.base_url}"
    return None


def pytest_collection_modifyitems(config, items):
    """Skip browser scenarios unless enabled and the shop answers."""
    e2e_items = [item for item in items if "e2e" in item.keywords]
    if not e2e_items:
        return
    reason = _skip_reason()
    if reason:
        skip = pytest.mark.skip(reason=reason)
        for item in e2e_items:
            item.add_marker(skip)


@pytest.fixture(scope="session")
def settings():
    return load_settings()


@pytest.fixture(scope="session")
def browser(settings):
    """Launch browser for E2E tests."""
    with sync_playwright() as p:
        browser = getattr(p, settings.browser).launch(headless=settings.headless)
        yield browser
        browser.close()


@pytest.fixture(scope="function")
def page(browser):
    """Create a new page for each test."""
    context = browser.new_context(
        viewport={'width': 1920, 'height': 1080}
    )
    page = context.new_page()
    yield page
    page.close()
    context.close()


@pytest.fixture
def base_url(settings):
    """Base URL for the application."""
    return settings.base_url


@pytest.fixture
def customer():
    """Checkout form data used by purchase scenarios."""
    return CheckoutForm(first_name="Daniel", last_name="Viana", zip_code="06406150")


@pytest.fixture
def login_page(page, base_url):
    lp = LoginPage(page, base_url)
    lp.navigate()
    return lp


@pytest.fixture
def login_as(login_page, page, base_url):
    """Factory: log in as a persona key and land on the inventory page."""

    def _login(persona_key: str) -> InventoryPage:
        login_page.login(PERSONAS[persona_key].credentials())
        return InventoryPage(page, base_url)

    return _login


@pytest.fixture
def screenshot_dir(settings, request):
    """Per-test folder under SCREENSHOT_DIR; captures are kept for inspection."""
    directory = settings.screenshot_dir / request.node.name
    directory.mkdir(parents=True, exist_ok=True)
    return directory


@pytest.fixture
def diff_threshold(settings):
    return settings.diff_threshold
