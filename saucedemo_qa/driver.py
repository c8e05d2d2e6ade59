"""Narrow browser capability used by page objects and the thumbnail audit.

Anything that can click, fill, read text and capture an element screenshot
satisfies ``BrowserDriver``; the comparison code never sees Playwright.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from playwright.sync_api import Locator, Page

logger = logging.getLogger("saucedemo-qa.driver")


@runtime_checkable
class BrowserDriver(Protocol):
    def click(self, selector: str) -> None: ...

    def fill(self, selector: str, value: str) -> None: ...

    def screenshot(self, selector: str, path: str | Path) -> Path: ...

    def get_text(self, selector: str) -> str: ...


class PlaywrightDriver:
    """``BrowserDriver`` over a synchronous Playwright ``Page``."""

    def __init__(self, page: Page, *, timeout: float = 5_000) -> None:
        self.page = page
        self.timeout = timeout

    def _visible(self, selector: str) -> Locator:
        locator = self.page.locator(selector).first
        locator.wait_for(state="visible", timeout=self.timeout)
        return locator

    def click(self, selector: str) -> None:
        self._visible(selector).click()

    def fill(self, selector: str, value: str) -> None:
        self._visible(selector).fill(value)

    def get_text(self, selector: str) -> str:
        return self._visible(selector).inner_text()

    def screenshot(self, selector: str, path: str | Path) -> Path:
        """Capture only the element matching *selector* to *path*."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        self._visible(selector).screenshot(path=str(target))
        logger.debug("Captured %s to %s", selector, target)
        return target
