"""Async HTTP GET using httpx."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from config import settings

_log = logging.getLogger(__name__)


class AsyncHttpError(RuntimeError):
    pass


def default_headers() -> dict[str, str]:
    return {"User-Agent": settings.DEFAULT_USER_AGENT}


async def fetch(url: str, *, client: Optional[httpx.AsyncClient] = None) -> str:
    """Single GET attempt through ``client`` (a short-lived one if not given)."""
    close_client = False
    if client is None:
        client = httpx.AsyncClient(
            headers=default_headers(), timeout=settings.DEFAULT_TIMEOUT, follow_redirects=True
        )
        close_client = True
    try:
        _log.debug("GET %s", url)
        try:
            resp = await client.get(url, headers=default_headers())
            resp.raise_for_status()
            return resp.text
        except httpx.HTTPError as e:
            raise AsyncHttpError(f"Failed to fetch {url}: {e}") from e
    finally:
        if close_client:
            await client.aclose()
