import logging

import openai
from openai import AsyncOpenAI

from domain.exceptions.rates import GeneratorRequestFailed, GeneratorUnavailable

logger = logging.getLogger(__name__)


class OpenAITextGenerator:
    """Thin wrapper over the OpenAI chat completions API.

    The client is only built when an API key is present; without one the
    generator reports itself as unconfigured and refuses to run.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str = "gpt-4o-mini",
        temperature: float = 0.2,
        base_url: str | None = None,
        client: AsyncOpenAI | None = None,
    ):
        self.model = model
        self.temperature = temperature
        self._client = client
        if self._client is None and api_key:
            self._client = AsyncOpenAI(api_key=api_key, base_url=base_url)

    def is_configured(self) -> bool:
        return self._client is not None

    async def complete(self, system: str, prompt: str) -> str | None:
        if self._client is None:
            raise GeneratorUnavailable("Text generation is not configured (OPENAI_API_KEY is unset)")

        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                temperature=self.temperature,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": prompt},
                ],
            )
        except openai.APIError as e:
            logger.error(f"OpenAI completion with {self.model} failed: {e}")
            raise GeneratorRequestFailed(
                f"Text generator ({self.model}) request failed: {e.__class__.__name__}: {e}"
            ) from e
        if not response.choices:
            return None
        return response.choices[0].message.content

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
