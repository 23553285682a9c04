import re
from dataclasses import dataclass

from app.news.lexicon import DEFAULT_LEXICON, SentimentLexicon
from app.news.models import SentimentLabel
from app.news.schemas import NewsRecord


@dataclass(frozen=True)
class ScoredSentiment:
    label: SentimentLabel
    score: float  # 0.5 when there is no signal or a tie
    bullish_score: float = 0.0
    bearish_score: float = 0.0


def classify(bullish_score: float, bearish_score: float, hysteresis: float = 1.3) -> SentimentLabel:
    """Pick a label, requiring the winning side to lead by the hysteresis factor."""
    if bullish_score > bearish_score * hysteresis:
        return SentimentLabel.BULLISH
    if bearish_score > bullish_score * hysteresis:
        return SentimentLabel.BEARISH
    return SentimentLabel.NEUTRAL


def _compile(terms: tuple[str, ...]) -> list[tuple[re.Pattern[str], str]]:
    return [(re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE), term) for term in terms]


class SentimentScorer:
    """Weighted keyword scorer. Patterns are compiled once per lexicon."""

    def __init__(self, lexicon: SentimentLexicon = DEFAULT_LEXICON) -> None:
        self._lexicon = lexicon
        self._bullish = _compile(lexicon.bullish_terms)
        self._bearish = _compile(lexicon.bearish_terms)

    @property
    def lexicon(self) -> SentimentLexicon:
        return self._lexicon

    def score(self, text: str) -> ScoredSentiment:
        bullish_score = self._weighted_matches(self._bullish, text)
        bearish_score = self._weighted_matches(self._bearish, text)

        total = bullish_score + bearish_score
        score = 0.5 if total == 0 else max(bullish_score, bearish_score) / total

        return ScoredSentiment(
            label=classify(bullish_score, bearish_score, self._lexicon.hysteresis),
            score=score,
            bullish_score=bullish_score,
            bearish_score=bearish_score,
        )

    def score_record(self, record: NewsRecord) -> ScoredSentiment:
        return self.score(f"{record.title} {record.snippet}")

    def _weighted_matches(self, patterns: list[tuple[re.Pattern[str], str]], text: str) -> int:
        return sum(
            len(pattern.findall(text)) * self._lexicon.weight_of(term)
            for pattern, term in patterns
        )
