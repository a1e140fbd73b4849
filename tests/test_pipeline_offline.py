import asyncio

import httpx

from domain.fallback import FALLBACK_RANKINGS
from domain.models import DateSelector, LanguageRanking
from domain.results import FutureDateRejected, NetworkFailure, ParseEmpty, Rankings
from services import pipeline
from tests.factories import SAMPLE_PAGE, make_page, make_row


def test_live_rankings_are_returned(fake_fetch):
    fake_fetch(SAMPLE_PAGE)
    rankings = pipeline.get_rankings(DateSelector())
    assert [r.name for r in rankings] == ["Python", "C", "C++", "Java"]


def test_unreachable_network_serves_fallback(offline):
    assert pipeline.get_rankings(DateSelector()) == list(FALLBACK_RANKINGS)


def test_empty_parse_serves_fallback(fake_fetch):
    fake_fetch(make_page([make_row("1", "2")]))
    assert pipeline.get_rankings() == list(FALLBACK_RANKINGS)
    assert isinstance(pipeline.resolve_rankings(), ParseEmpty)


def test_future_period_serves_fallback_without_fetching(fake_fetch):
    fetcher = fake_fetch(SAMPLE_PAGE)
    assert pipeline.get_rankings(DateSelector(9999, 12)) == list(FALLBACK_RANKINGS)
    assert fetcher.urls == []


def test_resolve_distinguishes_failure_categories(fake_fetch, offline):
    assert isinstance(pipeline.resolve_rankings(DateSelector(9999, 1)), FutureDateRejected)
    assert isinstance(pipeline.resolve_rankings(DateSelector()), NetworkFailure)
    fake_fetch(SAMPLE_PAGE)
    outcome = pipeline.resolve_rankings(DateSelector())
    assert isinstance(outcome, Rankings)
    assert len(outcome.items) == 4


def test_fallback_is_not_shared_between_calls(offline):
    first = pipeline.get_rankings()
    first.clear()
    assert len(pipeline.get_rankings()) == 20


def test_repeated_calls_are_equal(fake_fetch):
    fake_fetch(SAMPLE_PAGE)
    assert pipeline.get_rankings(DateSelector(2024, 5)) == pipeline.get_rankings(
        DateSelector(2024, 5)
    )


def test_async_pipeline_matches_sync_contract():
    def handler(request):
        return httpx.Response(200, text=SAMPLE_PAGE)

    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await pipeline.get_rankings_async(DateSelector(), client=client)

    rankings = asyncio.run(run())
    assert rankings[0] == LanguageRanking(1, 1, "Python", "24.45%", "+2.55%")


def test_async_pipeline_falls_back_on_error_status():
    async def run():
        transport = httpx.MockTransport(lambda request: httpx.Response(502))
        async with httpx.AsyncClient(transport=transport) as client:
            return await pipeline.get_rankings_async(client=client)

    assert asyncio.run(run()) == list(FALLBACK_RANKINGS)
