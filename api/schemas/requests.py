from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.models.rates import Tone


class RatesInput(BaseModel):
	model_config = ConfigDict(extra='forbid')


class SummaryInput(BaseModel):
	focus: str | None = Field(None, max_length=240, description='Optional angle for the brief')
	tone: Tone = Field(Tone.NEUTRAL, description='One of neutral, optimistic, cautious')

	model_config = ConfigDict(
		extra='forbid',
		json_schema_extra={'example': {'focus': 'Asian currencies', 'tone': 'cautious'}},
	)

	@field_validator('focus')
	@classmethod
	def strip_focus(cls, v: str | None):
		if v is None:
			return None
		return v.strip() or None


class RatesInvokeRequest(BaseModel):
	input: RatesInput = Field(default_factory=RatesInput)


class SummaryInvokeRequest(BaseModel):
	input: SummaryInput = Field(default_factory=SummaryInput)
