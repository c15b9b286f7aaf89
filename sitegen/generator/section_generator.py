"""Section generator facade and the strategy factory."""

from __future__ import annotations

from ..config import Config
from ..exceptions import InvalidInputError
from ..llm_client import LLMClient
from ..models import GenerationOutcome, Section
from .strategies import GenerationStrategy, RemoteModelStrategy, RuleBasedStrategy


class SectionGenerator:
    """Turns an idea into an ordered list of website sections.

    The backend is chosen once, at construction; the generator itself holds
    no other state and is safe to reuse across ideas.
    """

    def __init__(self, strategy: GenerationStrategy | None = None) -> None:
        self.strategy = strategy or RuleBasedStrategy()

    async def generate_outcome(self, idea: str) -> GenerationOutcome:
        """Generate sections and report which strategy produced them.

        Raises:
            InvalidInputError: If ``idea`` is empty or whitespace only.
        """
        if not idea or not idea.strip():
            raise InvalidInputError("Website idea is required")
        return await self.strategy.generate(idea)

    async def generate(self, idea: str) -> list[Section]:
        """Generate exactly three sections for ``idea``."""
        outcome = await self.generate_outcome(idea)
        return outcome.sections


def create_generator(config: Config) -> SectionGenerator:
    """Build a generator whose strategy follows the configured feature flag.

    Model generation is used only when ``config.is_ai_enabled()``; it always
    falls back to the rule table on failure.
    """
    if config.is_ai_enabled():
        client = LLMClient(config.model)
        return SectionGenerator(RemoteModelStrategy(client, fallback=RuleBasedStrategy()))
    return SectionGenerator(RuleBasedStrategy())
