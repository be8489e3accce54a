from domain.exceptions.rates import MalformedResponse
from domain.models.rates import BASE_CURRENCY, TOP_CURRENCIES

from .base import BaseRatesProvider


class ExchangerateHostProvider(BaseRatesProvider):
    URL = "https://api.exchangerate.host/latest"

    @property
    def name(self) -> str:
        return "exchangerate.host"

    def _params(self) -> dict:
        return {"base": BASE_CURRENCY, "symbols": ",".join(TOP_CURRENCIES)}

    def _extract_rates(self, data: dict) -> dict:
        if "success" not in data:
            raise MalformedResponse(f"{self.name} response is missing the success marker")

        if data["success"] is not True:
            info = "Unknown error"
            if isinstance(data.get("error"), dict):
                info = data["error"].get("info", info)
            raise MalformedResponse(f"{self.name} API error: {info}")

        rates = data.get("rates")
        if not isinstance(rates, dict):
            raise MalformedResponse(f"{self.name} response did not contain rate information")
        return rates
