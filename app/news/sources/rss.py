import asyncio
from datetime import UTC, datetime

import feedparser
import httpx
import structlog

from app.exceptions import SourceError
from app.news.models import Asset
from app.news.schemas import NewsRecord
from app.news.sources.base import SourceAdapter, clean_text, utc_now_iso

logger = structlog.get_logger()

TITLE_LIMIT = 200
SNIPPET_LIMIT = 300


def _published_iso(entry) -> str:
    parsed = entry.get("published_parsed") or entry.get("updated_parsed")
    if not parsed:
        return utc_now_iso()
    try:
        return datetime(*parsed[:6], tzinfo=UTC).isoformat()
    except (TypeError, ValueError):
        return utc_now_iso()


class RSSAdapter(SourceAdapter):
    """Shared fetch and field mapping for RSS/Atom feeds."""

    source_label: str = "RSS"
    max_items: int = 20

    def __init__(self, url: str) -> None:
        self._url = url

    def build_params(self, asset: Asset) -> dict[str, str] | None:
        return None

    async def fetch(self, client: httpx.AsyncClient, asset: Asset) -> list[NewsRecord]:
        response = await client.get(self._url, params=self.build_params(asset))
        response.raise_for_status()

        feed = await asyncio.to_thread(feedparser.parse, response.content)
        if feed.bozo and not feed.entries:
            raise SourceError(self.name, f"unparsable feed: {feed.get('bozo_exception')}")

        records: list[NewsRecord] = []
        for entry in feed.entries[: self.max_items]:
            record = self.entry_to_record(entry)
            if record is not None:
                records.append(record)
        return records

    def entry_to_record(self, entry) -> NewsRecord | None:
        title = clean_text(entry.get("title"), TITLE_LIMIT)
        url = entry.get("link") or ""
        if not title or not url:
            logger.debug("rss_entry_skipped", source=self.name, reason="missing title or link")
            return None

        description = clean_text(
            entry.get("summary") or entry.get("description"), SNIPPET_LIMIT
        )
        return NewsRecord(
            title=title,
            url=url,
            source=self.source_label,
            published_at=_published_iso(entry),
            snippet=description or title,
        )


class GoogleNewsAdapter(RSSAdapter):
    """Google News RSS search scoped to the asset."""

    name = "google_news"
    source_label = "Google News"
    max_items = 20
    query_scoped = True

    def build_params(self, asset: Asset) -> dict[str, str]:
        return {
            "q": f"{asset.name} {asset.symbol} cryptocurrency",
            "hl": "en-US",
            "gl": "US",
            "ceid": "US:en",
        }


class CoinDeskAdapter(RSSAdapter):
    """CoinDesk's outlet-wide feed; not asset specific."""

    name = "coindesk"
    source_label = "CoinDesk"
    max_items = 15
    query_scoped = False
