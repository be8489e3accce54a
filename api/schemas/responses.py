from typing import Literal

from pydantic import BaseModel, Field


class RateEntryResponse(BaseModel):
	currency: str = Field(..., description='Quote currency code')
	rate: float = Field(..., description='Units of the currency per 1 USD')


class RatesOutput(BaseModel):
	base: Literal['USD'] = 'USD'
	rates: list[RateEntryResponse] = Field(..., description='Rates in fixed EUR, CNY, JPY, GBP, AUD order')
	updatedAt: str = Field(..., description='When the provider last updated the rates')

	model_config = {
		'json_schema_extra': {
			'example': {
				'base': 'USD',
				'rates': [{'currency': 'EUR', 'rate': 0.9213}, {'currency': 'CNY', 'rate': 7.1934}],
				'updatedAt': '2025-09-27',
			}
		}
	}


class SummaryOutput(RatesOutput):
	summary: str = Field(..., description='Generated market brief')
	highlights: list[str] = Field(default_factory=list)
	dataProvider: str = Field(..., description='Rate provider that supplied the data')


class RatesInvokeResponse(BaseModel):
	output: RatesOutput
	model: str = Field(..., description='Rate provider that served the request')


class SummaryInvokeResponse(BaseModel):
	output: SummaryOutput
	model: str = Field(..., description='Text-generation model used')


class EntrypointManifest(BaseModel):
	key: str
	description: str
	price: str
	available: bool = True


class PaymentsManifest(BaseModel):
	facilitator_url: str
	pay_to: str
	network: str
	default_price: str


class AgentManifest(BaseModel):
	name: str
	version: str
	description: str
	entrypoints: list[EntrypointManifest]
	payments: PaymentsManifest


class HealthResponse(BaseModel):
	status: str
	app: str
	version: str
	summary_available: bool
