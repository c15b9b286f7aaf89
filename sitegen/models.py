"""Pydantic v2 models shared across sitegen.

Sections are frozen so that list edits always produce new instances. A
persisted ``GenerationResult`` holds the idea, its sections, the creation
timestamp, and the strategy that produced it.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

class Section(BaseModel):
    """A named block of text representing one region of a generated website."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Human-readable label, e.g. 'Hero'")
    content: str = Field(..., description="Free text shown in the section")

    @field_validator("name", "content")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value


class SectionTemplate(BaseModel):
    """An entry of the add-section catalog."""

    model_config = ConfigDict(frozen=True)

    name: str
    placeholder: str


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------

class GenerationRequest(BaseModel):
    """Transient request wrapper; the idea is stripped on construction."""

    idea: str = Field(..., description="Free-text business idea")

    @field_validator("idea")
    @classmethod
    def _strip_idea(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Website idea is required")
        return value


class GenerationOutcome(BaseModel):
    """In-process result of a generation call."""

    sections: list[Section] = Field(default_factory=list)
    strategy: str = Field(default="rules", description="Strategy that produced the sections")
    fell_back: bool = Field(default=False, description="Whether the rule-based fallback was used")
    error: Optional[str] = Field(default=None, description="Why the fallback was needed")


class GenerationResult(BaseModel):
    """A persisted generation: the idea and the sections produced for it."""

    id: str = Field(default="", description="Assigned by the store on save")
    idea: str
    sections: list[Section] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    generated_by: str = Field(default="rules")


class ApiResponse(BaseModel):
    """Envelope returned by the service boundary."""

    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None
