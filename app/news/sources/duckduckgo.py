import asyncio
from urllib.parse import urlparse

import httpx
import structlog

from app.news.models import Asset
from app.news.schemas import NewsRecord
from app.news.sources.base import SourceAdapter, clean_text, utc_now_iso

logger = structlog.get_logger()

TOPICS_PER_QUERY = 5
TITLE_LIMIT = 150
SNIPPET_LIMIT = 200

_QUERY_TEMPLATES = (
    "{name} {symbol} news federal reserve SEC",
    "{name} {symbol} government regulation policy",
    "{name} {symbol} institutional investment adoption",
    "{name} {symbol} market analysis price prediction",
    "{name} {symbol} technology development partnership",
)


def host_label(url: str) -> str:
    host = urlparse(url).hostname or ""
    return host.removeprefix("www.") or "DuckDuckGo"


class DuckDuckGoAdapter(SourceAdapter):
    """Instant-answer related topics for a handful of topical queries."""

    name = "duckduckgo"
    query_scoped = True

    def __init__(self, url: str) -> None:
        self._url = url

    async def fetch(self, client: httpx.AsyncClient, asset: Asset) -> list[NewsRecord]:
        queries = [t.format(name=asset.name, symbol=asset.symbol) for t in _QUERY_TEMPLATES]
        results = await asyncio.gather(
            *(self._search(client, query) for query in queries), return_exceptions=True
        )

        records: list[NewsRecord] = []
        for query, result in zip(queries, results, strict=True):
            if isinstance(result, Exception):
                logger.warning("duckduckgo_query_failed", query=query, error=str(result))
                continue
            records.extend(result)
        return records

    async def _search(self, client: httpx.AsyncClient, query: str) -> list[NewsRecord]:
        response = await client.get(
            self._url, params={"q": query, "format": "json", "no_html": "1"}
        )
        response.raise_for_status()
        topics = response.json().get("RelatedTopics") or []

        records: list[NewsRecord] = []
        for topic in topics[:TOPICS_PER_QUERY]:
            url = topic.get("FirstURL")
            text = clean_text(topic.get("Text"))
            if not url or not text:
                continue
            records.append(
                NewsRecord(
                    title=text[:TITLE_LIMIT],
                    url=url,
                    source=host_label(url),
                    published_at=utc_now_iso(),
                    snippet=text[:SNIPPET_LIMIT],
                )
            )
        return records
