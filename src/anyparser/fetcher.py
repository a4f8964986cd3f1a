"""
HTTP helpers for the parse endpoint.
"""

from typing import Any, Dict, Optional

import httpx

from .config import get_logger
from .exceptions import TransportFailure

logger = get_logger("fetcher")


def build_auth_headers(api_key: Optional[str]) -> Dict[str, str]:
    """Build authentication headers; no header at all without a key."""
    headers = {"User-Agent": "anyparser-python/1.0"}
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    return headers


async def wrapped_post(
    client: httpx.AsyncClient, url: str, **kwargs: Any
) -> httpx.Response:
    """POST to ``url`` and raise TransportFailure on a non-success status."""
    response = await client.post(url, **kwargs)
    logger.debug("POST %s -> %s", url, response.status_code)

    if not response.is_success:
        await response.aread()
        cause = Exception(response.text)
        raise TransportFailure(
            f"HTTP {response.status_code} {response.reason_phrase}: {url}",
            cause,
            response.status_code,
        ) from cause

    return response
