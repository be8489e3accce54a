from domain.exceptions.rates import MalformedResponse
from domain.models.rates import BASE_CURRENCY

from .base import BaseRatesProvider


class CurrencyApiProvider(BaseRatesProvider):
    """fawazahmed0 currency-api, served from the jsDelivr CDN.

    Rates are nested under the lower-case base code and keyed by lower-case
    currency codes: ``{"date": "2024-03-06", "usd": {"eur": 0.92, ...}}``.
    """

    URL = "https://cdn.jsdelivr.net/npm/@fawazahmed0/currency-api@latest/v1/currencies/usd.json"

    @property
    def name(self) -> str:
        return "currency-api"

    def _extract_rates(self, data: dict) -> dict:
        rates = data.get(BASE_CURRENCY.lower())
        if not isinstance(rates, dict):
            raise MalformedResponse(
                f"{self.name} response did not contain a '{BASE_CURRENCY.lower()}' rates object"
            )
        return rates

    def _lookup_key(self, currency: str) -> str:
        return currency.lower()
