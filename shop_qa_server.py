#!/usr/bin/env python3
"""
Sauce Demo QA MCP Server
Exposes screenshot comparison and suite execution as MCP tools.
"""
import logging
import sys
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from saucedemo_qa.imaging import DEFAULT_THRESHOLD, ImageComparisonError, StorageWriteError, compare_images
from saucedemo_qa.suite_runner import run_suite as suite_runner_run_suite
from saucedemo_qa.utils.config import get_directory_from_env, load_settings
from saucedemo_qa.utils.logging_utils import configure_json_logging

logger = logging.getLogger("saucedemo-qa.server")

mcp = FastMCP("saucedemo-qa")

PROJECT_DIR = Path(__file__).resolve().parent


@mcp.tool()
async def compare_screenshots(
    path_a: str = "",
    path_b: str = "",
    diff_path: str = "",
    threshold: float = DEFAULT_THRESHOLD,
) -> str:
    """Count perceptually different pixels between two screenshots."""
    if not path_a.strip() or not path_b.strip():
        return "❌ Error: Both image paths are required"

    logger.info("Comparing %s with %s (threshold=%s)", path_a, path_b, threshold)
    write_error: StorageWriteError | None = None
    try:
        num_diff_pixels = compare_images(
            path_a,
            path_b,
            diff_path or None,
            threshold=threshold,
            raise_on_write_error=bool(diff_path),
        )
    except StorageWriteError as exc:
        write_error = exc
        num_diff_pixels = exc.diff_pixels
    except ImageComparisonError as exc:
        return f"❌ {type(exc).__name__}: {exc}"
    except ValueError as exc:
        return f"❌ Error: {exc}"

    verdict = "identical" if num_diff_pixels == 0 else "different"
    status = "⚠️" if write_error is not None else "✅"
    lines = [
        f"{status} Comparison complete: images are {verdict}",
        "",
        f"🔢 Differing pixels: {num_diff_pixels}",
        f"🎚️ Threshold: {threshold}",
    ]
    if write_error is not None:
        lines.append(f"⚠️ Diff image not saved: {write_error.reason}")
    elif diff_path:
        lines.append(f"🖼️ Diff image: {diff_path}")
    return "\n".join(lines)


@mcp.tool()
async def run_suite(marker: str = "", keyword: str = "") -> str:
    """Run the QA suite (optionally filtered by marker or keyword) and summarize results."""
    results_dir = get_directory_from_env("TEST_RESULTS_DIR", "test_results")
    logger.info("Running suite marker=%r keyword=%r", marker, keyword)
    return await suite_runner_run_suite(
        str(PROJECT_DIR),
        results_dir,
        test_path="tests",
        marker=marker,
        keyword=keyword,
    )


if __name__ == "__main__":
    settings = load_settings()
    configure_json_logging(settings.log_level)
    logger.info("Starting Sauce Demo QA MCP server against %s", settings.base_url)

    try:
        mcp.run(transport='stdio')
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        sys.exit(1)
