import pytest

from core import http_client
from scraping import ranking_scraper


class RecordingFetch:
    """Stand-in for ``http_client.fetch`` returning canned HTML or raising."""

    def __init__(self, content: str | None = None, error: Exception | None = None):
        self.content = content
        self.error = error
        self.urls: list[str] = []

    def __call__(self, url, **kwargs):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.content


@pytest.fixture
def fake_fetch(monkeypatch):
    def install(content: str | None = None, error: Exception | None = None) -> RecordingFetch:
        fetcher = RecordingFetch(content, error)
        monkeypatch.setattr(ranking_scraper.http_client, "fetch", fetcher)
        return fetcher

    return install


@pytest.fixture
def offline(fake_fetch):
    return fake_fetch(error=http_client.HttpError("Failed to fetch: connection refused"))
