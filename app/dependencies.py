from typing import Annotated

import httpx
from fastapi import Depends

from app.config import settings
from app.news.lexicon import DEFAULT_LEXICON
from app.news.scorer import SentimentScorer
from app.news.service import NewsAnalysisService
from app.news.sources import (
    CoinDeskAdapter,
    CryptoPanicAdapter,
    DuckDuckGoAdapter,
    GoogleNewsAdapter,
    SourceAdapter,
)

_scorer = SentimentScorer(DEFAULT_LEXICON)


def get_news_adapters() -> list[SourceAdapter]:
    adapters: list[SourceAdapter] = [
        CryptoPanicAdapter(settings.cryptopanic_url, settings.cryptopanic_auth_token),
        GoogleNewsAdapter(settings.google_news_url),
        CoinDeskAdapter(settings.coindesk_feed_url),
    ]
    if settings.enable_duckduckgo:
        adapters.append(DuckDuckGoAdapter(settings.duckduckgo_url))
    return adapters


def create_http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        headers={"User-Agent": settings.user_agent},
        follow_redirects=True,
        timeout=settings.source_timeout_seconds,
    )


def get_news_service() -> NewsAnalysisService:
    return NewsAnalysisService(
        adapters=get_news_adapters(),
        scorer=_scorer,
        client_factory=create_http_client,
        source_timeout=settings.source_timeout_seconds,
        max_sources=settings.max_sources,
    )


NewsServiceDep = Annotated[NewsAnalysisService, Depends(get_news_service)]
