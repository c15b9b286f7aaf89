"""Shared pytest fixtures for the sitegen test suite.

Provides reusable fixtures for:
- Sample section lists
- Configurations with and without model generation
- Mocked httpx clients for the model backend
- In-memory and file-backed stores
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from sitegen.config import Config, ModelConfig
from sitegen.models import Section
from sitegen.store import InMemoryWebsiteStore, JsonWebsiteStore


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_sections() -> list[Section]:
    """A four-section page in a known order."""
    return [
        Section(name="Hero", content="Welcome to Crumbs! Fresh bread daily."),
        Section(name="About", content="Family-run since 1990."),
        Section(name="Menu", content="Sourdough, croissants, and rye."),
        Section(name="Contact", content="Call us any time."),
    ]


@pytest.fixture
def model_sections_json() -> str:
    """A well-formed model reply in the requested JSON format."""
    return json.dumps(
        {
            "sections": [
                {"name": "Hero", "content": "Handmade pottery for your home."},
                {"name": "Gallery", "content": "Browse bowls, mugs, and vases."},
                {"name": "Contact", "content": "Visit the studio on Main Street."},
            ]
        }
    )


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def rules_config(tmp_path: Path) -> Config:
    """Configuration with model generation switched off."""
    return Config(store_path=tmp_path / "websites.json")


@pytest.fixture
def ai_config(tmp_path: Path) -> Config:
    """Configuration with model generation on and an OpenAI key present."""
    return Config(
        use_ai_generation=True,
        model=ModelConfig(provider="openai", openai_api_key="sk-test"),
        store_path=tmp_path / "websites.json",
    )


# ---------------------------------------------------------------------------
# httpx mocks
# ---------------------------------------------------------------------------

def make_http_client(
    json_body: dict[str, Any] | None = None,
    side_effect: BaseException | None = None,
) -> AsyncMock:
    """Build an ``httpx.AsyncClient`` stand-in usable as an async context manager."""
    mock_response = MagicMock()
    mock_response.json.return_value = json_body or {}
    mock_response.raise_for_status = MagicMock()

    mock_client = AsyncMock()
    if side_effect is not None:
        mock_client.post = AsyncMock(side_effect=side_effect)
    else:
        mock_client.post = AsyncMock(return_value=mock_response)
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client


@pytest.fixture
def http_client_factory():
    """Factory fixture returning ``make_http_client``."""
    return make_http_client


# ---------------------------------------------------------------------------
# Stores
# ---------------------------------------------------------------------------

@pytest.fixture
def memory_store() -> InMemoryWebsiteStore:
    return InMemoryWebsiteStore()


@pytest.fixture
def json_store(tmp_path: Path) -> JsonWebsiteStore:
    return JsonWebsiteStore(tmp_path / "store" / "websites.json")
