import logging
from typing import Annotated

from fastapi import Depends, Request

from application.services import RateService, SummaryService
from config.settings import Settings
from infrastructure.llm import OpenAITextGenerator
from infrastructure.providers import (
	CurrencyApiProvider,
	ExchangerateHostProvider,
	RatesProvider,
)

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	primary_provider: RatesProvider | None = None
	secondary_provider: RatesProvider | None = None
	generator: OpenAITextGenerator | None = None


deps = AppDependencies()


def init_dependencies(settings: Settings) -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')

	deps.primary_provider = ExchangerateHostProvider(
		url=settings.PRIMARY_RATES_URL, timeout=settings.PROVIDER_TIMEOUT
	)
	deps.secondary_provider = CurrencyApiProvider(
		url=settings.SECONDARY_RATES_URL, timeout=settings.PROVIDER_TIMEOUT
	)
	deps.generator = OpenAITextGenerator(
		api_key=settings.OPENAI_API_KEY,
		model=settings.OPENAI_MODEL,
		temperature=settings.OPENAI_TEMPERATURE,
		base_url=settings.OPENAI_BASE_URL,
	)

	if not deps.generator.is_configured():
		logger.warning('OPENAI_API_KEY is not set; the market summary entrypoint will be unavailable')
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	for provider in (deps.primary_provider, deps.secondary_provider):
		if provider:
			await provider.close()
	if deps.generator:
		await deps.generator.close()

	deps.primary_provider = deps.secondary_provider = deps.generator = None
	logger.info('Cleanup complete')


def get_generator() -> OpenAITextGenerator:
	if deps.generator is None:
		raise RuntimeError('Text generator not initialized')
	return deps.generator


def get_rate_service() -> RateService:
	if deps.primary_provider is None or deps.secondary_provider is None:
		raise RuntimeError('Providers not initialized')
	return RateService(
		primary_provider=deps.primary_provider,
		secondary_provider=deps.secondary_provider,
	)


def get_summary_service(
	rate_service: Annotated[RateService, Depends(get_rate_service)],
	generator: Annotated[OpenAITextGenerator, Depends(get_generator)],
) -> SummaryService:
	return SummaryService(rate_service=rate_service, generator=generator)


def get_app_settings(request: Request) -> Settings:
	return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
