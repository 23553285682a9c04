from app.news.sources.base import SourceAdapter
from app.news.sources.cryptopanic import CryptoPanicAdapter
from app.news.sources.duckduckgo import DuckDuckGoAdapter
from app.news.sources.rss import CoinDeskAdapter, GoogleNewsAdapter, RSSAdapter

__all__ = [
    "CoinDeskAdapter",
    "CryptoPanicAdapter",
    "DuckDuckGoAdapter",
    "GoogleNewsAdapter",
    "RSSAdapter",
    "SourceAdapter",
]
