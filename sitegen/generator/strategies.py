"""Pluggable generation backends.

Two strategies share one interface:

1. :class:`RuleBasedStrategy` -- the deterministic rule table (always works).
2. :class:`RemoteModelStrategy` -- asks a language model for the sections and
   falls back to the rule table on any failure.

Both produce :class:`~sitegen.models.GenerationOutcome` instances consumed by
:class:`~sitegen.generator.section_generator.SectionGenerator`.
"""

from __future__ import annotations

import json
import re
import textwrap
from typing import Any, Optional

from pydantic import ValidationError

from ..exceptions import GenerationFailure, InvalidInputError
from ..llm_client import LLMClient
from ..models import GenerationOutcome, Section
from ..utils import console, print_warning
from .rules import GENERATED_SECTION_COUNT, SECTION_TEMPLATES, generate_sections

# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

SYSTEM_PROMPT = (
    "You are a professional web designer and copywriter. "
    "Generate website sections based on user ideas."
)

_SECTIONS_PROMPT = textwrap.dedent("""\
    Create 3 website sections for: "{idea}"

    Requirements:
    - Generate exactly 3 sections
    - Choose appropriate section types (Hero, About, Services, Contact, Menu, Portfolio, etc.)
    - Write compelling, professional content for each section
    - Keep content concise but engaging (2-3 sentences per section)
    - Make it specific to the business idea provided

    Format your response as JSON:
    {{
      "sections": [
        {{"name": "SectionName", "content": "Section content here..."}},
        {{"name": "SectionName", "content": "Section content here..."}},
        {{"name": "SectionName", "content": "Section content here..."}}
      ]
    }}
""")

KNOWN_SECTION_NAMES: tuple[str, ...] = tuple(
    dict.fromkeys([t.name for t in SECTION_TEMPLATES if t.name != "Custom"] + ["Menu", "Products"])
)


def build_prompt(idea: str) -> str:
    """Return the user prompt asking the model for three sections."""
    return _SECTIONS_PROMPT.format(idea=idea).strip()


# ---------------------------------------------------------------------------
# Response parsing
# ---------------------------------------------------------------------------

def _parse_json_response(raw: str) -> Optional[dict[str, Any]]:
    """Best-effort extraction of the first JSON object from *raw*.

    Model replies sometimes include markdown fences or preamble text; this
    helper strips those away before parsing. Returns ``None`` if nothing
    parses to a JSON object.
    """
    cleaned = re.sub(r"```(?:json)?\s*", "", raw)
    cleaned = cleaned.strip().rstrip("`").strip()

    candidates = [cleaned]
    match = re.search(r"\{[\s\S]*\}", cleaned)
    if match:
        candidates.append(match.group(0))

    for candidate in candidates:
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(data, dict):
            return data
    return None


def _parse_text_response(raw: str) -> list[dict[str, str]]:
    """Parse ``Name: content`` blocks for known section names.

    A line containing a colon and a known section name starts a new section;
    following lines are appended to its content until the next header.
    """
    sections: list[dict[str, str]] = []
    current_name: Optional[str] = None
    current_content: list[str] = []

    for line in (ln.strip() for ln in raw.splitlines()):
        if not line:
            continue
        head, sep, rest = line.partition(":")
        if sep and any(name in head for name in KNOWN_SECTION_NAMES):
            if current_name:
                sections.append({"name": current_name, "content": " ".join(current_content)})
            current_name = head.strip(" -*#0123456789.").strip()
            current_content = [rest.strip()] if rest.strip() else []
        elif current_name:
            current_content.append(line)

    if current_name:
        sections.append({"name": current_name, "content": " ".join(current_content)})
    return sections


def parse_sections(raw: str) -> list[Section]:
    """Turn a model reply into exactly three sections.

    Tries the JSON format first and the line-oriented text format second.
    Extra sections beyond the third are dropped.

    Raises:
        GenerationFailure: If fewer than three valid sections can be read.
    """
    data = _parse_json_response(raw)
    if data is not None and isinstance(data.get("sections"), list):
        items = data["sections"]
    else:
        items = _parse_text_response(raw)

    items = items[:GENERATED_SECTION_COUNT]
    if len(items) < GENERATED_SECTION_COUNT:
        raise GenerationFailure(
            f"Model returned {len(items)} section(s), expected {GENERATED_SECTION_COUNT}",
            strategy="model",
        )

    try:
        return [Section.model_validate(item) for item in items]
    except ValidationError as exc:
        raise GenerationFailure(f"Model returned an invalid section: {exc}", strategy="model") from exc


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

class GenerationStrategy:
    """Interface for generation backends."""

    name = "base"

    async def generate(self, idea: str) -> GenerationOutcome:
        raise NotImplementedError


class RuleBasedStrategy(GenerationStrategy):
    """Deterministic generation from the static rule table."""

    name = "rules"

    async def generate(self, idea: str) -> GenerationOutcome:
        return GenerationOutcome(sections=generate_sections(idea), strategy=self.name)


class RemoteModelStrategy(GenerationStrategy):
    """Model-backed generation with an unconditional rule-based fallback.

    Any failure of the backend -- transport, HTTP status, unparseable or
    incomplete reply -- is wrapped as :class:`GenerationFailure`, reported on
    the console, and replaced by the fallback strategy's result. Invalid
    input is not a backend failure and propagates.
    """

    name = "model"

    def __init__(
        self,
        client: LLMClient,
        fallback: GenerationStrategy | None = None,
    ) -> None:
        self.client = client
        self.fallback = fallback or RuleBasedStrategy()

    async def _generate_remote(self, idea: str) -> list[Section]:
        try:
            response = await self.client.generate(build_prompt(idea), system=SYSTEM_PROMPT)
        except Exception as exc:  # noqa: BLE001
            raise GenerationFailure(f"Model backend raised: {exc}", strategy=self.name) from exc

        if not response.success:
            raise GenerationFailure(response.error or "Model backend failed", strategy=self.name)

        return parse_sections(response.text)

    async def generate(self, idea: str) -> GenerationOutcome:
        if not idea or not idea.strip():
            raise InvalidInputError("Website idea is required")

        try:
            sections = await self._generate_remote(idea)
        except GenerationFailure as exc:
            print_warning(f"Model generation failed ({exc}). Using {self.fallback.name} generation.")
            outcome = await self.fallback.generate(idea)
            return outcome.model_copy(update={"fell_back": True, "error": str(exc)})

        console.print(
            f"[dim]Generated {len(sections)} sections with {self.client.provider} "
            f"({self.client.config.model_name()})[/dim]"
        )
        return GenerationOutcome(sections=sections, strategy=self.name)
