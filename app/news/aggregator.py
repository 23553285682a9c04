import math
from collections.abc import Sequence

from app.news.models import SIGNAL_FOR_LABEL, SentimentLabel
from app.news.schemas import AggregateReport, NewsRecord
from app.news.scorer import ScoredSentiment

MAX_SOURCES = 30

# Decision ladder thresholds
_STRONG_SHARE = 40
_WEAK_SHARE = 35
_MIN_AVG_WEIGHT = 0.5
_STRONG_CAP = 95
_WEAK_CAP = 85
_NEUTRAL_FLOOR = 50
_NEUTRAL_CAP = 70


def _round(value: float) -> int:
    """Round half up, so 52.5 becomes 53 rather than Python's banker's 52."""
    return math.floor(value + 0.5)


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def neutral_report() -> AggregateReport:
    """Report for a run where no record survived fetching and filtering."""
    return AggregateReport(
        overall=SentimentLabel.NEUTRAL,
        confidence=_NEUTRAL_FLOOR,
        signal=SIGNAL_FOR_LABEL[SentimentLabel.NEUTRAL],
        bullish_count=0,
        bearish_count=0,
        neutral_count=0,
        sources=[],
    )


def decide(
    bullish_count: int,
    bearish_count: int,
    neutral_count: int,
    avg_bullish_weight: float,
    avg_bearish_weight: float,
) -> tuple[SentimentLabel, int]:
    """Map label counts and average weights to an overall label and a confidence."""
    total = bullish_count + bearish_count + neutral_count
    if total == 0:
        return SentimentLabel.NEUTRAL, _NEUTRAL_FLOOR

    bullish_pct = bullish_count / total * 100
    bearish_pct = bearish_count / total * 100
    neutral_pct = neutral_count / total * 100

    if bullish_pct > _STRONG_SHARE and avg_bullish_weight > _MIN_AVG_WEIGHT:
        return SentimentLabel.BULLISH, min(
            _STRONG_CAP, _round(bullish_pct * (1 + avg_bullish_weight) / 2)
        )
    if bearish_pct > _STRONG_SHARE and avg_bearish_weight > _MIN_AVG_WEIGHT:
        return SentimentLabel.BEARISH, min(
            _STRONG_CAP, _round(bearish_pct * (1 + avg_bearish_weight) / 2)
        )
    if bullish_pct > bearish_pct and bullish_pct > _WEAK_SHARE:
        return SentimentLabel.BULLISH, min(_WEAK_CAP, _round(bullish_pct + 10))
    if bearish_pct > bullish_pct and bearish_pct > _WEAK_SHARE:
        return SentimentLabel.BEARISH, min(_WEAK_CAP, _round(bearish_pct + 10))
    return SentimentLabel.NEUTRAL, max(
        _NEUTRAL_FLOOR, min(_NEUTRAL_CAP, _round(neutral_pct + 20))
    )


def aggregate(
    scored: Sequence[ScoredSentiment],
    records: Sequence[NewsRecord],
    max_sources: int = MAX_SOURCES,
) -> AggregateReport:
    if len(scored) != len(records):
        raise ValueError("scored and records must be the same length")
    if not records:
        return neutral_report()

    bullish = [s.score for s in scored if s.label == SentimentLabel.BULLISH]
    bearish = [s.score for s in scored if s.label == SentimentLabel.BEARISH]
    neutral_count = len(scored) - len(bullish) - len(bearish)

    overall, confidence = decide(
        len(bullish), len(bearish), neutral_count, _mean(bullish), _mean(bearish)
    )

    return AggregateReport(
        overall=overall,
        confidence=confidence,
        signal=SIGNAL_FOR_LABEL[overall],
        bullish_count=len(bullish),
        bearish_count=len(bearish),
        neutral_count=neutral_count,
        sources=list(records[:max_sources]),
    )
