"""Pre-flight check that the shop under test answers HTTP."""

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger("saucedemo-qa.reachability")


def is_reachable(url: str, timeout: float = 5.0) -> bool:
    """Return True when *url* responds with a non-5xx status."""
    try:
        with httpx.Client(follow_redirects=True, timeout=timeout) as client:
            response = client.head(url)
            if response.status_code == 405:
                response = client.get(url)
    except httpx.HTTPError as exc:
        logger.warning("Target %s unreachable: %s", url, exc)
        return False

    if response.status_code >= 500:
        logger.warning("Target %s answered %s", url, response.status_code)
        return False
    return True
