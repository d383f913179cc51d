"""LLM-backed sketch generator.

Turns a natural-language goal plus the current workbench circuit into
wiring instructions and an Arduino sketch using an OpenAI-compatible
chat model. The client is always passed in; its lifetime belongs to the
caller (the FastAPI lifespan in production, a fake in tests).
"""

from __future__ import annotations

import logging
from typing import Sequence

from openai import AsyncOpenAI, APIError

from workbench.ai.parsing import extract_code, parse_solution
from workbench.ai.prompts import retry_prompt, sketch_generation_prompts
from workbench.config import Settings
from workbench.schemas.circuit import Component, Wire
from workbench.schemas.generation import GeneratedSolution

logger = logging.getLogger(__name__)

MAX_RETRIES = 3


class GenerationError(Exception):
    """Raised when the model API call fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


def create_client(settings: Settings) -> AsyncOpenAI:
    """Create an OpenAI-compatible async client.

    Works with the OpenAI API, Azure OpenAI, and local servers exposing
    the same API (LM Studio, Ollama, vLLM).
    """
    return AsyncOpenAI(
        api_key=settings.llm_api_key,
        base_url=settings.llm_base_url or None,
        timeout=settings.llm_timeout,
    )


class SketchGenerator:
    def __init__(
        self,
        client: AsyncOpenAI,
        model: str = "gpt-4o-mini",
        temperature: float = 0.1,
        max_retries: int = MAX_RETRIES,
    ):
        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_retries = max_retries

    @classmethod
    def from_settings(cls, client: AsyncOpenAI, settings: Settings) -> SketchGenerator:
        return cls(client, model=settings.llm_model, temperature=settings.llm_temperature)

    async def _llm_call(self, system_prompt: str, user_prompt: str) -> str:
        """Make a single LLM call and return the raw text response."""
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=self.temperature,
            )
        except APIError as e:
            logger.error("LLM API error: %s", e)
            raise GenerationError(f"LLM API error: {e}", cause=e) from e
        return response.choices[0].message.content or ""

    async def generate(
        self,
        goal: str,
        components: Sequence[Component],
        wires: Sequence[Wire],
    ) -> GeneratedSolution:
        """Ask the model for wiring steps and a sketch.

        Answers without any code block are retried with a format reminder.
        If every attempt lacks one, the last answer is returned with
        placeholder code.
        """
        system, user = sketch_generation_prompts(goal, components, wires)
        raw_output = ""

        for attempt in range(self.max_retries):
            if attempt > 0:
                system, user = retry_prompt(raw_output)

            raw_output = await self._llm_call(system, user)
            if extract_code(raw_output) is not None:
                logger.info(
                    "[sketch] Success on attempt %d/%d", attempt + 1, self.max_retries
                )
                return parse_solution(raw_output)

            logger.warning(
                "[sketch] Attempt %d: no code block in model output", attempt + 1
            )

        logger.warning(
            "[sketch] Giving up after %d attempts; returning placeholder code",
            self.max_retries,
        )
        return parse_solution(raw_output)
