import logging
from datetime import UTC, datetime

from domain.exceptions.rates import AllProvidersFailed, ProviderError, RateNormalizationError
from domain.models.rates import TOP_CURRENCIES, RateEntry, RatesResult, UsdRates
from infrastructure.providers.base import RatesProvider, is_valid_rate

logger = logging.getLogger(__name__)


def normalize_rates(result: RatesResult) -> list[RateEntry]:
    """Project provider rates onto the fixed currency order.

    Values are re-checked here; a gap fails the whole result instead of
    producing a sparse list.
    """
    entries = []
    for currency in TOP_CURRENCIES:
        rate = result.rates.get(currency)
        if not is_valid_rate(rate):
            raise RateNormalizationError(f"Missing rate for {currency}.")
        entries.append(RateEntry(currency=currency, rate=float(rate)))
    return entries


class RateService:
    def __init__(self, primary_provider: RatesProvider, secondary_provider: RatesProvider):
        self.primary_provider = primary_provider
        self.secondary_provider = secondary_provider

    async def fetch_with_fallback(self) -> RatesResult:
        try:
            return await self.primary_provider.fetch()
        except ProviderError as e:
            primary_error = str(e)
            logger.warning(
                f"Primary provider {self.primary_provider.name} failed, "
                f"falling back to {self.secondary_provider.name}: {primary_error}"
            )

        try:
            return await self.secondary_provider.fetch()
        except ProviderError as e:
            secondary_error = str(e)

        message = (
            "All rate providers failed. "
            f"primary ({self.primary_provider.name}): {primary_error}; "
            f"secondary ({self.secondary_provider.name}): {secondary_error}"
        )
        logger.error(message)
        raise AllProvidersFailed(
            message,
            errors={
                self.primary_provider.name: primary_error,
                self.secondary_provider.name: secondary_error,
            },
        )

    async def get_usd_rates(self) -> UsdRates:
        result = await self.fetch_with_fallback()
        return UsdRates(
            rates=normalize_rates(result),
            updated_at=result.updated_at or datetime.now(UTC).isoformat(),
            provider=result.provider,
        )
