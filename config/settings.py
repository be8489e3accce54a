from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# Application
	APP_NAME: str = 'USD Rates Agent'
	AGENT_NAME: str = 'usd-conversions-agent'
	AGENT_VERSION: str = '0.0.1'
	AGENT_DESCRIPTION: str = (
		'Fetch the latest USD conversion rates for five globally traded currencies: '
		'EUR, CNY, JPY, GBP, and AUD.'
	)
	DEBUG: bool = False
	HOST: str = '0.0.0.0'
	PORT: int = 8787

	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	# Rate providers, tried in this order
	PRIMARY_RATES_URL: str = 'https://api.exchangerate.host/latest'
	SECONDARY_RATES_URL: str = (
		'https://cdn.jsdelivr.net/npm/@fawazahmed0/currency-api@latest/v1/currencies/usd.json'
	)
	PROVIDER_TIMEOUT: float = 10.0

	# Text generation
	OPENAI_API_KEY: str = ''
	OPENAI_BASE_URL: str | None = None
	OPENAI_MODEL: str = 'gpt-4o-mini'
	OPENAI_TEMPERATURE: float = 0.2
	SUMMARY_ENABLED: bool = True

	# Payments, published in the manifest as-is
	FACILITATOR_URL: str = 'https://facilitator.daydreams.systems'
	PAY_TO: str = '0xb308ed39d67D0d4BAe5BC2FAEF60c66BBb6AE429'
	NETWORK: str = 'base'
	DEFAULT_PRICE: str = '1000'
	RATES_PRICE: str = '0.002'
	SUMMARY_PRICE: str = '0.01'

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
