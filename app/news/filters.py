from collections.abc import Iterable

from app.news.models import Asset
from app.news.schemas import NewsRecord


def is_relevant(record: NewsRecord, asset: Asset) -> bool:
    text = f"{record.title} {record.snippet}".lower()
    return any(term in text for term in asset.search_terms)


def filter_relevant(records: Iterable[NewsRecord], asset: Asset) -> list[NewsRecord]:
    """Keep records that mention the asset by name, symbol or USD pair."""
    return [record for record in records if is_relevant(record, asset)]


def deduplicate(records: Iterable[NewsRecord]) -> list[NewsRecord]:
    """Collapse records sharing a url, keeping the first occurrence in input order."""
    seen: set[str] = set()
    unique: list[NewsRecord] = []
    for record in records:
        if record.url in seen:
            continue
        seen.add(record.url)
        unique.append(record)
    return unique
