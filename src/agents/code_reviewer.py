"""Code review agent using Pydantic AI and Google Gemini."""

import logging
from typing import Protocol

from pydantic_ai import Agent
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.providers.google import GoogleProvider

from src.config.settings import Settings, require_gemini_key
from src.prompts.code_reviewer_prompt import SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    """Anything that turns a user prompt into generated text."""

    async def generate(self, prompt: str) -> str | None: ...


def build_code_review_agent(config: Settings) -> Agent[None, str]:
    """Create the Gemini-backed review agent.

    Args:
        config: Application settings holding the credential and model name

    Returns:
        Agent configured with the reviewer system prompt

    Raises:
        MissingCredentialError: If GOOGLE_GEMINI_KEY is not set
    """
    api_key = require_gemini_key(config)
    model = GoogleModel(config.gemini_model, provider=GoogleProvider(api_key=api_key))

    logger.info(f"Code review agent configured with model {config.gemini_model}")
    return Agent(
        model=model,
        output_type=str,
        system_prompt=SYSTEM_PROMPT,
    )


class GeminiTextGenerator:
    """TextGenerator backed by a pydantic-ai agent."""

    def __init__(self, agent: Agent[None, str]) -> None:
        self._agent = agent

    @property
    def agent(self) -> Agent[None, str]:
        return self._agent

    async def generate(self, prompt: str) -> str | None:
        result = await self._agent.run(prompt)
        return result.output
