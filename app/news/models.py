from dataclasses import dataclass
from enum import StrEnum


class SentimentLabel(StrEnum):
    BULLISH = "BULLISH"
    BEARISH = "BEARISH"
    NEUTRAL = "NEUTRAL"


class Signal(StrEnum):
    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"


SIGNAL_FOR_LABEL = {
    SentimentLabel.BULLISH: Signal.BUY,
    SentimentLabel.BEARISH: Signal.SELL,
    SentimentLabel.NEUTRAL: Signal.HOLD,
}


@dataclass(frozen=True)
class Asset:
    name: str
    symbol: str

    @property
    def search_terms(self) -> tuple[str, ...]:
        """Lower-cased strings whose presence marks a text as being about this asset."""
        symbol = self.symbol.lower()
        return (self.name.lower(), symbol, f"{symbol}/usd", f"{symbol}usd")
