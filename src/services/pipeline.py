"""High-level orchestration: fetch -> parse -> fallback.

``resolve_rankings`` reports which failure occurred. ``get_rankings`` never fails:
every failure category (future date, network, empty parse) is served the built-in
snapshot, so callers always receive data.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import httpx

from domain.fallback import fallback_rankings
from domain.models import DateSelector, LanguageDetail, LanguageRanking
from domain.results import FetchOutcome, ParseEmpty, RankingOutcome, Rankings
from parsing import ranking_parser
from scraping import ranking_scraper
from services import enrichment

_log = logging.getLogger(__name__)


def _to_rankings(fetched: FetchOutcome) -> RankingOutcome:
    if fetched.is_failure:
        return fetched
    items = ranking_parser.parse_rankings(fetched.text)
    if not items:
        _log.warning("no ranking rows parsed from %s", fetched.url)
        return ParseEmpty(url=fetched.url)
    return Rankings(url=fetched.url, items=items)


def rankings_or_fallback(outcome: RankingOutcome) -> List[LanguageRanking]:
    if outcome.is_failure:
        _log.warning("serving fallback rankings: %s", outcome.reason)
        return fallback_rankings()
    return list(outcome.items)


def resolve_rankings(selector: Optional[DateSelector] = None) -> RankingOutcome:
    return _to_rankings(ranking_scraper.fetch_document(selector or DateSelector.current()))


async def resolve_rankings_async(
    selector: Optional[DateSelector] = None, *, client: Optional[httpx.AsyncClient] = None
) -> RankingOutcome:
    fetched = await ranking_scraper.fetch_document_async(
        selector or DateSelector.current(), client=client
    )
    return _to_rankings(fetched)


def get_rankings(selector: Optional[DateSelector] = None) -> List[LanguageRanking]:
    return rankings_or_fallback(resolve_rankings(selector))


async def get_rankings_async(
    selector: Optional[DateSelector] = None, *, client: Optional[httpx.AsyncClient] = None
) -> List[LanguageRanking]:
    return rankings_or_fallback(await resolve_rankings_async(selector, client=client))


def get_language_detail(name: str, selector: Optional[DateSelector] = None) -> LanguageDetail:
    """Detail record for ``name``; there is no not-found outcome."""
    rankings = get_rankings(selector)
    return enrichment.enrich(name, enrichment.find_ranking(rankings, name))


async def get_language_detail_async(
    name: str,
    selector: Optional[DateSelector] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> LanguageDetail:
    rankings = await get_rankings_async(selector, client=client)
    return enrichment.enrich(name, enrichment.find_ranking(rankings, name))
