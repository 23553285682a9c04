"""
Shared fixtures for the news pipeline tests
"""

from collections.abc import Callable

import httpx
import pytest

from app.news.models import Asset
from app.news.schemas import NewsRecord
from app.news.sources.base import SourceAdapter


def make_record(
    url: str,
    title: str = "Bitcoin update",
    snippet: str | None = None,
    source: str = "Test",
) -> NewsRecord:
    return NewsRecord(
        title=title,
        url=url,
        source=source,
        published_at="2026-10-01T12:00:00+00:00",
        snippet=snippet if snippet is not None else title,
    )


def rss_document(items: list[dict]) -> bytes:
    """Build a minimal RSS 2.0 document from dicts with title/link/description/pubDate."""
    parts = []
    for item in items:
        fields = "".join(
            f"<{key}>{value}</{key}>" for key, value in item.items() if value is not None
        )
        parts.append(f"<item>{fields}</item>")
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0"><channel><title>Test feed</title>'
        '<link>https://example.com</link><description>Feed</description>'
        f"{''.join(parts)}</channel></rss>"
    ).encode()


class StaticAdapter(SourceAdapter):
    """Adapter that returns canned records without touching the network."""

    def __init__(self, name: str, records: list[NewsRecord], query_scoped: bool = True) -> None:
        self.name = name
        self.query_scoped = query_scoped
        self._records = records
        self.calls = 0

    async def fetch(self, client: httpx.AsyncClient, asset: Asset) -> list[NewsRecord]:
        self.calls += 1
        return list(self._records)


class FailingAdapter(SourceAdapter):
    name = "failing"

    async def fetch(self, client: httpx.AsyncClient, asset: Asset) -> list[NewsRecord]:
        raise httpx.ConnectError("connection refused")


@pytest.fixture
def asset() -> Asset:
    return Asset(name="Bitcoin", symbol="BTC")


@pytest.fixture
def mock_client_factory() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
def offline_client_factory() -> Callable[[], httpx.AsyncClient]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    return lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler))
