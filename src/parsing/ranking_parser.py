"""Parsing of the language ranking table page (BeautifulSoup)."""

from __future__ import annotations

import logging
from typing import List

from bs4 import BeautifulSoup

from config import settings
from domain.models import LanguageRanking
from utils import html_utils

_log = logging.getLogger(__name__)


def _cell_text(cell) -> str:
    return html_utils.clean_cell(cell.get_text()) if cell else ""


def parse_rankings(html: str) -> List[LanguageRanking]:
    """Extract ranking rows from ``table#top20``, with or without an explicit ``<tbody>``.

    Columns are positional: rank, previous rank, (trend icon), name, rating, [change].
    Rows with fewer than five cells are skipped; non-numeric ranks become 0 and the
    row is dropped. Source order is kept as-is.
    """
    soup = BeautifulSoup(html, "html.parser")
    rankings: List[LanguageRanking] = []
    for tr in soup.select(settings.TABLE_ROW_SELECTOR):
        tds = tr.find_all("td")
        if len(tds) < settings.MIN_ROW_CELLS:
            continue
        clean = [_cell_text(td) for td in tds]
        rank = html_utils.parse_int(clean[0])
        name = clean[3]
        if not name or rank <= 0:
            continue
        rankings.append(
            LanguageRanking(
                rank=rank,
                prev_rank=html_utils.parse_int(clean[1]),
                name=name,
                rating=clean[4],
                change=clean[5] if len(clean) > 5 else settings.MISSING_VALUE,
            )
        )
    _log.debug("parsed %d ranking rows", len(rankings))
    return rankings
