from typing import Annotated

from fastapi import APIRouter, Depends

from api.dependencies import SettingsDep, get_generator
from api.routes.entrypoints import (
	RATES_DESCRIPTION,
	RATES_ENTRYPOINT,
	SUMMARY_DESCRIPTION,
	SUMMARY_ENTRYPOINT,
)
from api.schemas import AgentManifest, EntrypointManifest, HealthResponse, PaymentsManifest
from infrastructure.llm import OpenAITextGenerator

router = APIRouter(tags=['agent'])


@router.get('/.well-known/agent.json', response_model=AgentManifest, summary='Agent manifest')
async def get_manifest(
	settings: SettingsDep,
	generator: Annotated[OpenAITextGenerator, Depends(get_generator)],
) -> AgentManifest:
	entrypoints = [
		EntrypointManifest(
			key=RATES_ENTRYPOINT, description=RATES_DESCRIPTION, price=settings.RATES_PRICE
		)
	]
	if settings.SUMMARY_ENABLED:
		entrypoints.append(
			EntrypointManifest(
				key=SUMMARY_ENTRYPOINT,
				description=SUMMARY_DESCRIPTION,
				price=settings.SUMMARY_PRICE,
				available=generator.is_configured(),
			)
		)

	return AgentManifest(
		name=settings.AGENT_NAME,
		version=settings.AGENT_VERSION,
		description=settings.AGENT_DESCRIPTION,
		entrypoints=entrypoints,
		payments=PaymentsManifest(
			facilitator_url=settings.FACILITATOR_URL,
			pay_to=settings.PAY_TO,
			network=settings.NETWORK,
			default_price=settings.DEFAULT_PRICE,
		),
	)


@router.get('/health', response_model=HealthResponse, summary='Service health check')
async def health_check(
	settings: SettingsDep,
	generator: Annotated[OpenAITextGenerator, Depends(get_generator)],
) -> HealthResponse:
	return HealthResponse(
		status='ok',
		app=settings.APP_NAME,
		version=settings.AGENT_VERSION,
		summary_available=settings.SUMMARY_ENABLED and generator.is_configured(),
	)
