"""Environment-driven settings for the suite."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def get_directory_from_env(env_name: str, default_path: str) -> Path:
    """Return a directory path from env, ensuring it exists."""
    configured = os.environ.get(env_name, default_path)
    directory = Path(configured)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def get_bool_from_env(env_name: str, default: bool) -> bool:
    raw = os.environ.get(env_name)
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError(f"{env_name} must be a boolean flag, got {raw!r}")


def get_float_from_env(env_name: str, default: float) -> float:
    raw = os.environ.get(env_name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{env_name} must be a number, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    """Resolved configuration; see ``load_settings``."""

    base_url: str = "https://www.saucedemo.com"
    password: str = "secret_sauce"
    headless: bool = True
    browser: str = "chromium"
    run_e2e: bool = False
    screenshot_dir: Path = Path("screenshots")
    test_results_dir: Path = Path("test_results")
    diff_threshold: float = 0.1
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Read settings from the environment.

    Directories are returned as paths but not created; callers that write
    there use ``get_directory_from_env`` or ``mkdir`` themselves.
    """
    threshold = get_float_from_env("IMAGE_DIFF_THRESHOLD", 0.1)
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"IMAGE_DIFF_THRESHOLD must be within [0, 1], got {threshold}")

    browser = os.environ.get("E2E_BROWSER", "chromium").strip().lower() or "chromium"
    if browser not in ("chromium", "firefox", "webkit"):
        raise ValueError(f"E2E_BROWSER must be chromium, firefox or webkit, got {browser!r}")

    return Settings(
        base_url=os.environ.get("SAUCEDEMO_BASE_URL", "https://www.saucedemo.com").rstrip("/"),
        password=os.environ.get("SAUCEDEMO_PASSWORD", "secret_sauce"),
        headless=get_bool_from_env("E2E_HEADLESS", True),
        browser=browser,
        run_e2e=get_bool_from_env("RUN_E2E", False),
        screenshot_dir=Path(os.environ.get("SCREENSHOT_DIR", "screenshots")),
        test_results_dir=Path(os.environ.get("TEST_RESULTS_DIR", "test_results")),
        diff_threshold=threshold,
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    )
