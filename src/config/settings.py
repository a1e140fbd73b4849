"""Global configuration and constants for the ranking scraper."""

from __future__ import annotations

import os
from typing import Final

SOURCE_URL: Final = os.environ.get("LANGRANK_SOURCE_URL", "https://www.tiobe.com/tiobe-index/")
HISTORY_QUERY: Final = "?page=index&year={year}&month={month}"
# The upstream site rejects script-identified clients
DEFAULT_USER_AGENT: Final = os.environ.get(
    "LANGRANK_USER_AGENT",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0 Safari/537.36",
)
DEFAULT_TIMEOUT: Final = int(os.environ.get("LANGRANK_TIMEOUT", "15"))  # seconds

# html.parser does not insert an implicit <tbody>
TABLE_ROW_SELECTOR: Final = "table#top20 > tbody > tr, table#top20 > tr"
MIN_ROW_CELLS: Final = 5
MISSING_VALUE: Final = "N/A"
