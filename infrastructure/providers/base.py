import math
from abc import ABC, abstractmethod
from typing import Any, Protocol

import httpx

from domain.exceptions.rates import (
    MalformedResponse,
    MissingCurrencyData,
    TransportFailure,
    UnexpectedStatus,
)
from domain.models.rates import TOP_CURRENCIES, RatesResult


class RatesProvider(Protocol):
    @property
    def name(self) -> str: ...

    async def fetch(self) -> RatesResult: ...

    async def close(self) -> None: ...


def is_valid_rate(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value) and value > 0
    except OverflowError:
        return False


class BaseRatesProvider(ABC):
    """Shared HTTP handling for USD rate providers.

    Subclasses point at a fixed endpoint and know where their rates live in
    the response body; everything else (transport, status, JSON decoding and
    currency validation) happens here. One GET per ``fetch()``, no retries.
    """

    URL: str = ""

    def __init__(
        self,
        url: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10,
    ):
        self.url = url or self.URL
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    def _params(self) -> dict | None:
        return None

    @abstractmethod
    def _extract_rates(self, data: dict) -> dict:
        """Return the rates container, raising MalformedResponse if absent."""
        ...

    def _lookup_key(self, currency: str) -> str:
        return currency

    async def _request(self) -> dict:
        try:
            response = await self._client.get(self.url, params=self._params())
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise UnexpectedStatus(
                f"{self.name} HTTP error {e.response.status_code}: {e.response.text[:200]}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            raise TransportFailure(
                f"{self.name} request failed: {e.__class__.__name__}: {e}"
            ) from e

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponse(f"{self.name} response parsing error: {e}") from e

        if not isinstance(data, dict):
            raise MalformedResponse(f"{self.name} response is not a JSON object")
        return data

    def _collect_rates(self, container: dict) -> dict[str, float]:
        rates: dict[str, float] = {}
        for currency in TOP_CURRENCIES:
            value = container.get(self._lookup_key(currency))
            if not is_valid_rate(value):
                raise MissingCurrencyData(f"{self.name}: Missing rate for {currency}")
            rates[currency] = float(value)
        return rates

    async def fetch(self) -> RatesResult:
        data = await self._request()
        container = self._extract_rates(data)
        date = data.get("date")
        return RatesResult(
            rates=self._collect_rates(container),
            updated_at=date if isinstance(date, str) else None,
            provider=self.name,
        )

    async def close(self) -> None:
        await self._client.aclose()
