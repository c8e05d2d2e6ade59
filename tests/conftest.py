"""Test-layer conftest: markers."""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Pytest configuration hook – wire up markers
# ---------------------------------------------------------------------------

def pytest_configure(config):
    """Register custom markers so --strict-markers does not complain."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (MCP tools over real files)")
    config.addinivalue_line("markers", "e2e: End-to-end Playwright tests against the demo shop")
    config.addinivalue_line("markers", "slow: Slow-running tests")
