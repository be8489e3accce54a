import json
import logging
import re

from domain.exceptions.rates import GeneratorEmptyResponse, GeneratorUnavailable
from domain.models.rates import (
    BASE_CURRENCY,
    MarketSummary,
    RateEntry,
    SummaryResult,
    Tone,
)
from infrastructure.llm.openai_generator import OpenAITextGenerator

from .rate_service import RateService

logger = logging.getLogger(__name__)

MAX_FOCUS_LENGTH = 240
MAX_HIGHLIGHTS = 3

SYSTEM_PROMPT = (
    "You are a concise foreign-exchange market analyst. "
    "Answer only with the JSON object you are asked for."
)

_BULLET_RE = re.compile(r"^\s*(?:[-*•]+|\d+[.)])\s*")
_FENCE_RE = re.compile(r"^```[a-zA-Z]*\s*|\s*```$")


def build_prompt(rates: list[RateEntry], focus: str | None = None, tone: Tone = Tone.NEUTRAL) -> str:
    table = "\n".join(f"{BASE_CURRENCY}/{entry.currency}: {entry.rate:.4f}" for entry in rates)
    lines = [
        f"Latest {BASE_CURRENCY} exchange rates:",
        table,
        "",
        f"Tone: {Tone(tone).value}",
    ]

    focus = (focus or "").strip()[:MAX_FOCUS_LENGTH]
    if focus:
        lines.append(f"Focus: {focus}")

    lines += [
        "",
        "Write a short market brief (two sentences at most) about these rates "
        f"and up to {MAX_HIGHLIGHTS} short highlights.",
        'Respond with JSON only: {"summary": "<brief>", "highlights": ["<highlight>", ...]}',
    ]
    return "\n".join(lines)


def _strip_bullet(line: str) -> str:
    return _BULLET_RE.sub("", line).strip()


def _parse_json(text: str) -> MarketSummary | None:
    try:
        data = json.loads(_FENCE_RE.sub("", text))
    except ValueError:
        return None

    if not isinstance(data, dict):
        return None
    summary = data.get("summary")
    if not isinstance(summary, str) or not summary.strip():
        return None

    raw_highlights = data.get("highlights")
    highlights = []
    if isinstance(raw_highlights, list):
        highlights = [h.strip() for h in raw_highlights if isinstance(h, str) and h.strip()]
    return MarketSummary(summary=summary.strip(), highlights=highlights[:MAX_HIGHLIGHTS])


def parse_generator_response(text: str) -> MarketSummary:
    """Best-effort extraction of a summary from generator output.

    Strict JSON first; otherwise the first non-empty line is the summary and
    the following lines (bullets and numbering stripped) are highlights.
    """
    text = text.strip()
    parsed = _parse_json(text)
    if parsed is not None:
        return parsed

    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        return MarketSummary(summary="")

    highlights = [_strip_bullet(line) for line in lines[1 : 1 + MAX_HIGHLIGHTS]]
    return MarketSummary(summary=lines[0], highlights=[h for h in highlights if h])


def synthesize_highlights(rates: list[RateEntry]) -> list[str]:
    return [f"{BASE_CURRENCY}/{entry.currency} at {entry.rate:.4f}" for entry in rates[:MAX_HIGHLIGHTS]]


class SummaryService:
    def __init__(self, rate_service: RateService, generator: OpenAITextGenerator):
        self.rate_service = rate_service
        self.generator = generator

    @property
    def model(self) -> str:
        return self.generator.model

    async def generate(self, focus: str | None = None, tone: Tone = Tone.NEUTRAL) -> SummaryResult:
        if not self.generator.is_configured():
            raise GeneratorUnavailable(
                "Market summary is unavailable: no text-generation provider is configured"
            )

        usd_rates = await self.rate_service.get_usd_rates()
        prompt = build_prompt(usd_rates.rates, focus=focus, tone=tone)

        content = await self.generator.complete(SYSTEM_PROMPT, prompt)
        if not content or not content.strip():
            raise GeneratorEmptyResponse(f"Text generator ({self.model}) returned no content")

        parsed = parse_generator_response(content)
        if not parsed.summary:
            raise GeneratorEmptyResponse(f"Text generator ({self.model}) returned no usable summary")

        highlights = parsed.highlights
        if not highlights:
            logger.info("Generator returned no highlights, deriving them from the rate table")
            highlights = synthesize_highlights(usd_rates.rates)

        return SummaryResult(
            summary=parsed.summary,
            highlights=highlights,
            data_provider=usd_rates.provider,
            rates=usd_rates,
        )
