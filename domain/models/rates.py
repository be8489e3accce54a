from dataclasses import dataclass, field
from enum import Enum

BASE_CURRENCY = "USD"

# Output order of every rates response.
TOP_CURRENCIES: tuple[str, ...] = ("EUR", "CNY", "JPY", "GBP", "AUD")


class Tone(str, Enum):
    NEUTRAL = "neutral"
    OPTIMISTIC = "optimistic"
    CAUTIOUS = "cautious"


@dataclass(frozen=True)
class RateEntry:
    currency: str
    rate: float


@dataclass(frozen=True)
class RatesResult:
    rates: dict[str, float]
    updated_at: str | None
    provider: str  # Which adapter produced the data


@dataclass(frozen=True)
class UsdRates:
    rates: list[RateEntry]
    updated_at: str
    provider: str
    base: str = BASE_CURRENCY


@dataclass(frozen=True)
class MarketSummary:
    summary: str
    highlights: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SummaryResult:
    summary: str
    highlights: list[str]
    data_provider: str
    rates: UsdRates
