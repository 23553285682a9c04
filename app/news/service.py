import asyncio
from collections.abc import Callable, Sequence

import httpx
import structlog

from app.exceptions import ValidationError
from app.news.aggregator import MAX_SOURCES, aggregate
from app.news.filters import deduplicate, filter_relevant
from app.news.models import Asset
from app.news.schemas import AggregateReport, NewsRecord
from app.news.scorer import SentimentScorer
from app.news.sources.base import SourceAdapter

logger = structlog.get_logger()


class NewsAnalysisService:
    def __init__(
        self,
        adapters: Sequence[SourceAdapter],
        scorer: SentimentScorer,
        client_factory: Callable[[], httpx.AsyncClient],
        source_timeout: float = 10.0,
        max_sources: int = MAX_SOURCES,
    ) -> None:
        self._adapters = list(adapters)
        self._scorer = scorer
        self._client_factory = client_factory
        self._source_timeout = source_timeout
        self._max_sources = max_sources

    async def analyze(self, coin_name: str | None, coin_symbol: str | None) -> AggregateReport:
        name = (coin_name or "").strip()
        symbol = (coin_symbol or "").strip()
        if not name or not symbol:
            raise ValidationError("coinName and coinSymbol are required")

        asset = Asset(name=name, symbol=symbol)
        logger.info("news_analyze", coin_name=name, coin_symbol=symbol)

        records = await self.gather_records(asset)
        report = self.build_report(records)

        logger.info(
            "news_analysis_complete",
            coin_symbol=symbol,
            overall=report.overall,
            signal=report.signal,
            confidence=report.confidence,
            bullish=report.bullish_count,
            bearish=report.bearish_count,
            neutral=report.neutral_count,
        )
        return report

    async def gather_records(self, asset: Asset) -> list[NewsRecord]:
        """Fan out to every adapter, then merge, filter and dedupe in declaration order."""
        async with self._client_factory() as client:
            batches = await asyncio.gather(
                *(
                    adapter.collect(client, asset, self._source_timeout)
                    for adapter in self._adapters
                )
            )

        merged: list[NewsRecord] = []
        for adapter, batch in zip(self._adapters, batches, strict=True):
            if not adapter.query_scoped:
                relevant = filter_relevant(batch, asset)
                logger.debug(
                    "news_relevance_filtered",
                    source=adapter.name,
                    kept=len(relevant),
                    dropped=len(batch) - len(relevant),
                )
                batch = relevant
            merged.extend(batch)

        unique = deduplicate(merged)
        logger.info("news_records_merged", total=len(merged), unique=len(unique))
        return unique

    def build_report(self, records: Sequence[NewsRecord]) -> AggregateReport:
        scored = [self._scorer.score_record(record) for record in records]
        return aggregate(scored, records, max_sources=self._max_sources)
