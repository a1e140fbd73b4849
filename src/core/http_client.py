"""Blocking HTTP GET used by the synchronous pipeline.

Separated from parsing so it can be swapped (e.g. for ``core.async_http``).
"""

from __future__ import annotations

import logging
import urllib.error
import urllib.request
from typing import Optional

from config import settings

_log = logging.getLogger(__name__)


class HttpError(RuntimeError):
    pass


def fetch(
    url: str,
    *,
    user_agent: Optional[str] = None,
    timeout: Optional[int] = None,
) -> str:
    """Single GET attempt; any transport error or non-2xx status raises ``HttpError``."""
    ua = user_agent or settings.DEFAULT_USER_AGENT
    timeout = timeout or settings.DEFAULT_TIMEOUT
    req = urllib.request.Request(url, headers={"User-Agent": ua})
    _log.debug("GET %s", url)
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            status = getattr(resp, "status", 200)
            if not 200 <= status < 300:
                raise HttpError(f"Unexpected status {status} for {url}")
            content_bytes = resp.read()
            return content_bytes.decode("utf-8", errors="replace")
    except HttpError:
        raise
    except (urllib.error.HTTPError, urllib.error.URLError) as e:
        raise HttpError(f"Failed to fetch {url}: {e}") from e
    except Exception as e:  # noqa: BLE001
        raise HttpError(f"Unexpected error for {url}: {e}") from e
