from dataclasses import dataclass


@dataclass(frozen=True)
class SentimentLexicon:
    """Keyword lists and tuning values used to score news text.

    Terms longer than ``compound_term_length`` characters are phrases or
    compounds and weigh ``compound_weight`` per match. A label is only
    assigned when one side outscores the other by more than ``hysteresis``.
    """

    bullish_terms: tuple[str, ...]
    bearish_terms: tuple[str, ...]
    compound_term_length: int = 10
    compound_weight: int = 2
    hysteresis: float = 1.3

    def weight_of(self, term: str) -> int:
        return self.compound_weight if len(term) > self.compound_term_length else 1


DEFAULT_LEXICON = SentimentLexicon(
    bullish_terms=(
        "surge", "surges", "surging", "rally", "rallies", "gain", "gains", "bullish",
        "up", "high", "higher", "rise", "rises", "soar", "soars", "moon", "breakout",
        "breakthrough", "adoption", "approval", "approved", "positive", "growth",
        "profit", "increase", "boost", "optimistic", "upgrade", "partnership",
        "success", "innovation", "investment", "outperform", "momentum", "strength",
        "institutional", "etf", "accumulation", "record high", "all-time high",
        "golden cross", "buy signal", "inflows",
    ),
    bearish_terms=(
        "crash", "crashes", "drop", "drops", "fall", "falls", "bearish", "down",
        "low", "lower", "plunge", "plunges", "dump", "decline", "loss", "losses",
        "negative", "concern", "worry", "risk", "threat", "decrease", "weak",
        "pessimistic", "downgrade", "lawsuit", "scam", "hack", "hacked", "exploit",
        "fraud", "regulation", "ban", "crackdown", "investigation", "sell-off",
        "liquidation", "liquidations", "outflows", "death cross", "capitulation",
        "bankruptcy",
    ),
)
