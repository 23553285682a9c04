from pydantic import BaseModel, ConfigDict, Field

from app.news.models import SentimentLabel, Signal


class NewsRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str = Field(min_length=1)
    url: str = Field(min_length=1)
    source: str
    published_at: str = Field(alias="date")  # ISO-8601
    snippet: str


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    coin_name: str | None = Field(default=None, alias="coinName")
    coin_symbol: str | None = Field(default=None, alias="coinSymbol")


class AggregateReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    overall: SentimentLabel
    confidence: int = Field(ge=0, le=100)
    signal: Signal
    bullish_count: int = Field(alias="bullishCount", ge=0)
    bearish_count: int = Field(alias="bearishCount", ge=0)
    neutral_count: int = Field(alias="neutralCount", ge=0)
    sources: list[NewsRecord]
