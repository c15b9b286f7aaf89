"""sitegen configuration.

Typed configuration for generation and persistence. All settings use
Pydantic v2 models so they are validated at construction time and can be
serialised to/from JSON or read from environment variables. The AI feature
flag lives here and is handed to the generator factory explicitly; nothing
else in the package reads the process environment.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field

Provider = Literal["openai", "anthropic", "ollama"]


class ModelConfig(BaseModel):
    """Settings for the remote model backend."""

    provider: Provider = Field(default="openai")
    openai_api_key: str | None = Field(default=None)
    anthropic_api_key: str | None = Field(default=None)
    openai_model: str = Field(default="gpt-4")
    anthropic_model: str = Field(default="claude-3-sonnet-20240229")
    ollama_url: str = Field(default="http://localhost:11434")
    ollama_model: str = Field(default="llama3.1:8b")
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    max_tokens: int = Field(default=1000, ge=1)
    timeout: int = Field(default=60, ge=1, description="Per-request timeout in seconds")

    def model_name(self) -> str:
        """Return the model tag for the selected provider."""
        return {
            "openai": self.openai_model,
            "anthropic": self.anthropic_model,
            "ollama": self.ollama_model,
        }[self.provider]

    def api_key(self) -> str | None:
        """Return the credential for the selected provider, if any."""
        if self.provider == "openai":
            return self.openai_api_key
        if self.provider == "anthropic":
            return self.anthropic_api_key
        return None


class Config(BaseModel):
    """Global sitegen configuration.

    Created once by the CLI (usually via :meth:`from_env`) and passed to
    :class:`~sitegen.service.WebsiteService` and the generator factory.
    """

    use_ai_generation: bool = Field(default=False)
    model: ModelConfig = Field(default_factory=ModelConfig)
    store_path: Path = Field(default=Path("./.sitegen/websites.json"))

    # ------------------------------------------------------------------
    # Feature flag helpers
    # ------------------------------------------------------------------

    def available_providers(self) -> list[str]:
        """Providers that can be used right now.

        Hosted providers need an API key; a local Ollama server needs none
        and is always listed last.
        """
        providers: list[str] = []
        if self.model.openai_api_key:
            providers.append("openai")
        if self.model.anthropic_api_key:
            providers.append("anthropic")
        providers.append("ollama")
        return providers

    def is_ai_enabled(self) -> bool:
        """Return ``True`` if model generation is switched on and usable."""
        return self.use_ai_generation and self.model.provider in self.available_providers()

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Parent directories are created.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            USE_AI_GENERATION ("true" enables), OPENAI_API_KEY,
            ANTHROPIC_API_KEY, SITEGEN_PROVIDER, SITEGEN_OLLAMA_URL,
            SITEGEN_OLLAMA_MODEL, SITEGEN_TIMEOUT, SITEGEN_STORE_PATH.
        """
        model_kwargs: dict[str, Any] = {}
        if os.environ.get("OPENAI_API_KEY"):
            model_kwargs["openai_api_key"] = os.environ["OPENAI_API_KEY"]
        if os.environ.get("ANTHROPIC_API_KEY"):
            model_kwargs["anthropic_api_key"] = os.environ["ANTHROPIC_API_KEY"]
        if os.environ.get("SITEGEN_PROVIDER"):
            model_kwargs["provider"] = os.environ["SITEGEN_PROVIDER"]
        if os.environ.get("SITEGEN_OLLAMA_URL"):
            model_kwargs["ollama_url"] = os.environ["SITEGEN_OLLAMA_URL"]
        if os.environ.get("SITEGEN_OLLAMA_MODEL"):
            model_kwargs["ollama_model"] = os.environ["SITEGEN_OLLAMA_MODEL"]
        if os.environ.get("SITEGEN_TIMEOUT"):
            model_kwargs["timeout"] = int(os.environ["SITEGEN_TIMEOUT"])

        kwargs: dict[str, Any] = {
            "use_ai_generation": os.environ.get("USE_AI_GENERATION") == "true",
            "model": ModelConfig(**model_kwargs),
        }
        if os.environ.get("SITEGEN_STORE_PATH"):
            kwargs["store_path"] = Path(os.environ["SITEGEN_STORE_PATH"])

        return cls(**kwargs)
