import httpx
import structlog

from app.exceptions import SourceError
from app.news.models import Asset
from app.news.schemas import NewsRecord
from app.news.sources.base import SourceAdapter, clean_text, utc_now_iso

logger = structlog.get_logger()

MAX_ITEMS = 25


class CryptoPanicAdapter(SourceAdapter):
    """Curated community posts filtered by currency ticker."""

    name = "cryptopanic"
    query_scoped = True

    def __init__(self, url: str, auth_token: str = "free") -> None:
        self._url = url
        self._auth_token = auth_token

    async def fetch(self, client: httpx.AsyncClient, asset: Asset) -> list[NewsRecord]:
        params = {
            "auth_token": self._auth_token,
            "currencies": asset.symbol.upper(),
            "public": "true",
        }
        response = await client.get(self._url, params=params)
        response.raise_for_status()

        try:
            payload = response.json()
        except ValueError as exc:
            raise SourceError(self.name, "response is not valid JSON") from exc

        results = payload.get("results") if isinstance(payload, dict) else None
        if not isinstance(results, list):
            raise SourceError(self.name, "payload has no results list")

        records: list[NewsRecord] = []
        for item in results[:MAX_ITEMS]:
            record = self._to_record(item)
            if record is not None:
                records.append(record)
        return records

    def _to_record(self, item: object) -> NewsRecord | None:
        if not isinstance(item, dict):
            return None
        title = clean_text(item.get("title"))
        url = item.get("url") or ""
        if not title or not url:
            logger.debug("cryptopanic_item_skipped", reason="missing title or url")
            return None

        source = item.get("source")
        label = source.get("title") if isinstance(source, dict) else None

        return NewsRecord(
            title=title,
            url=url,
            source=label or "CryptoPanic",
            published_at=item.get("published_at") or item.get("created_at") or utc_now_iso(),
            snippet=title,
        )
