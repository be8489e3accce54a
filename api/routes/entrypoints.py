from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_rate_service, get_summary_service
from api.schemas import (
	RateEntryResponse,
	RatesInvokeRequest,
	RatesInvokeResponse,
	RatesOutput,
	SummaryInvokeRequest,
	SummaryInvokeResponse,
	SummaryOutput,
)
from application.services import RateService, SummaryService
from domain.models.rates import UsdRates

RATES_ENTRYPOINT = 'usd-conversions'
SUMMARY_ENTRYPOINT = 'usd-market-summary'

RATES_DESCRIPTION = 'Fetch the latest USD conversion rates for five globally traded currencies.'
SUMMARY_DESCRIPTION = (
	'Fetch the latest USD conversion rates and generate a short market brief with highlights.'
)

rates_router = APIRouter(prefix='/entrypoints', tags=['entrypoints'])
summary_router = APIRouter(prefix='/entrypoints', tags=['entrypoints'])


def _rates_output(usd_rates: UsdRates) -> dict:
	return {
		'base': usd_rates.base,
		'rates': [RateEntryResponse(currency=e.currency, rate=e.rate) for e in usd_rates.rates],
		'updatedAt': usd_rates.updated_at,
	}


@rates_router.post(
	f'/{RATES_ENTRYPOINT}/invoke',
	response_model=RatesInvokeResponse,
	status_code=status.HTTP_200_OK,
	summary=RATES_DESCRIPTION,
)
async def invoke_usd_conversions(
	service: Annotated[RateService, Depends(get_rate_service)],
	body: RatesInvokeRequest | None = None,
) -> RatesInvokeResponse:
	usd_rates = await service.get_usd_rates()
	return RatesInvokeResponse(output=RatesOutput(**_rates_output(usd_rates)), model=usd_rates.provider)


@summary_router.post(
	f'/{SUMMARY_ENTRYPOINT}/invoke',
	response_model=SummaryInvokeResponse,
	status_code=status.HTTP_200_OK,
	summary=SUMMARY_DESCRIPTION,
)
async def invoke_usd_market_summary(
	service: Annotated[SummaryService, Depends(get_summary_service)],
	body: SummaryInvokeRequest | None = None,
) -> SummaryInvokeResponse:
	body = body or SummaryInvokeRequest()
	result = await service.generate(focus=body.input.focus, tone=body.input.tone)
	return SummaryInvokeResponse(
		output=SummaryOutput(
			**_rates_output(result.rates),
			summary=result.summary,
			highlights=result.highlights,
			dataProvider=result.data_provider,
		),
		model=service.model,
	)
