"""Root conftest: shared fixtures available to all test layers."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from PIL import Image

SUITE_ENV_VARS = (
    "SAUCEDEMO_BASE_URL",
    "SAUCEDEMO_PASSWORD",
    "E2E_HEADLESS",
    "E2E_BROWSER",
    "RUN_E2E",
    "SCREENSHOT_DIR",
    "TEST_RESULTS_DIR",
    "IMAGE_DIFF_THRESHOLD",
    "LOG_LEVEL",
)


@pytest.fixture()
def make_png(tmp_path: Path):
    """Factory writing a solid-colour RGBA PNG, optionally with painted pixels.

    ``pixels`` maps ``(x, y)`` to an RGBA tuple drawn over the fill colour.
    """

    def _make(
        name: str,
        size: tuple[int, int] = (100, 150),
        color: tuple[int, int, int, int] = (255, 255, 255, 255),
        pixels: dict[tuple[int, int], tuple[int, int, int, int]] | None = None,
    ) -> Path:
        path = tmp_path / name
        img = Image.new("RGBA", size, color)
        for xy, value in (pixels or {}).items():
            img.putpixel(xy, value)
        img.save(path, format="PNG")
        return path

    return _make


@pytest.fixture()
def clean_env():
    """Remove suite configuration variables for isolation."""
    with patch.dict(os.environ, {}, clear=False):
        for name in SUITE_ENV_VARS:
            os.environ.pop(name, None)
        yield
