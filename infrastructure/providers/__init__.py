from .base import BaseRatesProvider, RatesProvider
from .currency_api import CurrencyApiProvider
from .exchangerate_host import ExchangerateHostProvider

__all__ = ['BaseRatesProvider', 'CurrencyApiProvider', 'ExchangerateHostProvider', 'RatesProvider']
