import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.rates import (
	GeneratorEmptyResponse,
	GeneratorRequestFailed,
	GeneratorUnavailable,
	ProviderError,
	RateNormalizationError,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(ProviderError)
	async def provider_error_handler(request: Request, exc: ProviderError):
		logger.error(f'Provider error: {exc}')
		return JSONResponse(
			status_code=503,
			content={'error': 'rates_unavailable', 'detail': str(exc)},
		)

	@app.exception_handler(RateNormalizationError)
	async def normalization_error_handler(request: Request, exc: RateNormalizationError):
		logger.error(f'Rate normalization failed: {exc}')
		return JSONResponse(status_code=502, content={'error': 'invalid_rates', 'detail': str(exc)})

	@app.exception_handler(GeneratorUnavailable)
	async def generator_unavailable_handler(request: Request, exc: GeneratorUnavailable):
		logger.warning(f'Summary requested without a generator: {exc}')
		return JSONResponse(
			status_code=503,
			content={'error': 'generator_unavailable', 'detail': str(exc)},
		)

	@app.exception_handler(GeneratorEmptyResponse)
	async def generator_empty_handler(request: Request, exc: GeneratorEmptyResponse):
		logger.error(f'Generator returned nothing: {exc}')
		return JSONResponse(status_code=502, content={'error': 'generator_empty', 'detail': str(exc)})

	@app.exception_handler(GeneratorRequestFailed)
	async def generator_request_failed_handler(request: Request, exc: GeneratorRequestFailed):
		logger.error(f'Generator request failed: {exc}')
		return JSONResponse(status_code=502, content={'error': 'generator_failed', 'detail': str(exc)})

	@app.exception_handler(Exception)
	async def global_exception_handler(request: Request, exc: Exception):
		logger.error(f'Unhandled exception: {exc}', exc_info=True)
		return JSONResponse(status_code=500, content={'detail': 'Internal server error'})
