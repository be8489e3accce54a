from .requests import RatesInput, RatesInvokeRequest, SummaryInput, SummaryInvokeRequest
from .responses import (
	AgentManifest,
	EntrypointManifest,
	HealthResponse,
	PaymentsManifest,
	RateEntryResponse,
	RatesInvokeResponse,
	RatesOutput,
	SummaryInvokeResponse,
	SummaryOutput,
)

__all__ = [
	'AgentManifest',
	'EntrypointManifest',
	'HealthResponse',
	'PaymentsManifest',
	'RateEntryResponse',
	'RatesInput',
	'RatesInvokeRequest',
	'RatesInvokeResponse',
	'RatesOutput',
	'SummaryInput',
	'SummaryInvokeRequest',
	'SummaryInvokeResponse',
	'SummaryOutput',
]
