import asyncio
import html
import re
from abc import ABC, abstractmethod
from datetime import UTC, datetime

import httpx
import structlog

from app.news.models import Asset
from app.news.schemas import NewsRecord

logger = structlog.get_logger()

_TAG_RE = re.compile(r"<[^>]+>")
_SPACE_RE = re.compile(r"\s+")


def utc_now_iso() -> str:
    return datetime.now(UTC).isoformat()


def clean_text(text: str | None, limit: int | None = None) -> str:
    """Strip markup and collapse whitespace, optionally truncating to ``limit`` chars."""
    if not text:
        return ""
    cleaned = _SPACE_RE.sub(" ", html.unescape(_TAG_RE.sub(" ", text))).strip()
    return cleaned[:limit] if limit is not None else cleaned


class SourceAdapter(ABC):
    """One external news feed, normalized into ``NewsRecord`` items."""

    name: str = "source"
    # False when the upstream query is not asset specific and results need filtering
    query_scoped: bool = True

    @abstractmethod
    async def fetch(self, client: httpx.AsyncClient, asset: Asset) -> list[NewsRecord]:
        """Fetch and normalize the feed. May raise on network or payload errors."""
        ...

    async def collect(
        self, client: httpx.AsyncClient, asset: Asset, timeout: float
    ) -> list[NewsRecord]:
        """Run ``fetch`` under a deadline; any failure yields an empty list."""
        try:
            records = await asyncio.wait_for(self.fetch(client, asset), timeout=timeout)
        except TimeoutError:
            logger.warning("news_source_timeout", source=self.name, timeout=timeout)
            return []
        except Exception as exc:
            logger.warning(
                "news_source_failed",
                source=self.name,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return []

        logger.info("news_source_fetched", source=self.name, count=len(records))
        return records
