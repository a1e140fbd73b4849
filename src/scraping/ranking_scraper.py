"""Retrieval of the ranking page for a requested period."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Optional

import httpx

from config import settings
from core import async_http, http_client
from domain.models import DateSelector
from domain.results import FetchOutcome, FutureDateRejected, NetworkFailure, RawDocument

_log = logging.getLogger(__name__)


class FutureDateError(ValueError):
    def __init__(self, selector: DateSelector, today: date):
        super().__init__(f"{selector.year}-{selector.month} is in the future")
        self.selector = selector
        self.today = today


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def build_url(selector: DateSelector, *, today: Optional[date] = None) -> str:
    """Return the page URL for ``selector``.

    A partial selector (only year or only month) is treated as the current period.
    """
    if not selector.is_complete:
        if selector.is_partial:
            _log.debug("partial selector %s, using current period", selector)
        return settings.SOURCE_URL
    today = today or utc_today()
    if (selector.year, selector.month) > (today.year, today.month):
        raise FutureDateError(selector, today)
    return settings.SOURCE_URL + settings.HISTORY_QUERY.format(
        year=selector.year, month=selector.month
    )


def _rejected(exc: FutureDateError) -> FutureDateRejected:
    _log.warning("rejected future period %s-%s", exc.selector.year, exc.selector.month)
    return FutureDateRejected(year=exc.selector.year, month=exc.selector.month, today=exc.today)


def fetch_document(selector: DateSelector, *, today: Optional[date] = None) -> FetchOutcome:
    try:
        url = build_url(selector, today=today)
    except FutureDateError as e:
        return _rejected(e)
    try:
        return RawDocument(url=url, text=http_client.fetch(url))
    except http_client.HttpError as e:
        _log.warning("%s", e)
        return NetworkFailure(url=url, message=str(e))


async def fetch_document_async(
    selector: DateSelector,
    *,
    client: Optional[httpx.AsyncClient] = None,
    today: Optional[date] = None,
) -> FetchOutcome:
    try:
        url = build_url(selector, today=today)
    except FutureDateError as e:
        return _rejected(e)
    try:
        return RawDocument(url=url, text=await async_http.fetch(url, client=client))
    except async_http.AsyncHttpError as e:
        _log.warning("%s", e)
        return NetworkFailure(url=url, message=str(e))
