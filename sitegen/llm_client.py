"""Async client for hosted and local language-model APIs.

Wraps three chat-style HTTP APIs behind one ``generate`` call:

* OpenAI ``/v1/chat/completions``
* Anthropic ``/v1/messages``
* Ollama ``/api/generate`` (local, no key)

Transport failures never raise; they come back as an ``LLMResponse`` with
``success=False`` and a readable error, so callers decide how to recover.

Typical usage::

    client = LLMClient(ModelConfig(provider="ollama"))
    resp = await client.generate("Create 3 website sections for a bakery")
    if resp.success:
        print(resp.text)
"""

from __future__ import annotations

import time
from typing import Any

import httpx
from pydantic import BaseModel, Field

from .config import ModelConfig

OPENAI_BASE_URL = "https://api.openai.com"
ANTHROPIC_BASE_URL = "https://api.anthropic.com"
ANTHROPIC_VERSION = "2023-06-01"


class LLMResponse(BaseModel):
    """Structured response from a model generation call."""

    text: str = Field(default="", description="Generated text")
    model: str = Field(default="", description="Model that produced the response")
    provider: str = Field(default="", description="Provider that served the request")
    duration_ms: float = Field(default=0.0, description="Client-side round-trip time in ms")
    success: bool = Field(default=True, description="Whether the request succeeded")
    error: str | None = Field(default=None, description="Error message on failure")


class LLMClient:
    """Async client for the provider selected in a :class:`ModelConfig`.

    A fresh ``httpx.AsyncClient`` is opened per request so the client holds
    no connection state between generations.
    """

    def __init__(self, config: ModelConfig | None = None) -> None:
        self.config = config or ModelConfig()

    @property
    def provider(self) -> str:
        return self.config.provider

    @property
    def base_url(self) -> str:
        if self.provider == "openai":
            return OPENAI_BASE_URL
        if self.provider == "anthropic":
            return ANTHROPIC_BASE_URL
        return self.config.ollama_url.rstrip("/")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _client(self) -> httpx.AsyncClient:
        """Return a fresh ``AsyncClient`` configured with our base URL and timeout."""
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.config.timeout, connect=10.0),
        )

    def _request(self, prompt: str, system: str) -> tuple[str, dict[str, str], dict[str, Any]]:
        """Build ``(path, headers, payload)`` for the configured provider."""
        model = self.config.model_name()
        if self.provider == "openai":
            messages = []
            if system:
                messages.append({"role": "system", "content": system})
            messages.append({"role": "user", "content": prompt})
            return (
                "/v1/chat/completions",
                {"Authorization": f"Bearer {self.config.openai_api_key}"},
                {
                    "model": model,
                    "messages": messages,
                    "temperature": self.config.temperature,
                    "max_tokens": self.config.max_tokens,
                },
            )
        if self.provider == "anthropic":
            payload: dict[str, Any] = {
                "model": model,
                "max_tokens": self.config.max_tokens,
                "messages": [{"role": "user", "content": prompt}],
            }
            if system:
                payload["system"] = system
            return (
                "/v1/messages",
                {
                    "x-api-key": self.config.anthropic_api_key or "",
                    "anthropic-version": ANTHROPIC_VERSION,
                },
                payload,
            )

        payload = {
            "model": model,
            "prompt": prompt,
            "stream": False,
            "options": {"temperature": self.config.temperature},
        }
        if system:
            payload["system"] = system
        return "/api/generate", {}, payload

    @staticmethod
    def _extract_text(provider: str, data: dict) -> str:
        """Pull the generated text out of a provider's JSON response."""
        if provider == "openai":
            choices = data.get("choices") or [{}]
            return (choices[0].get("message") or {}).get("content") or ""
        if provider == "anthropic":
            blocks = data.get("content") or []
            return "".join(b.get("text", "") for b in blocks if b.get("type") == "text")
        return data.get("response", "")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def generate(self, prompt: str, system: str = "") -> LLMResponse:
        """Generate text from a prompt.

        Args:
            prompt: The user prompt.
            system: Optional system prompt.

        Returns:
            An ``LLMResponse`` with the generated text or an error.
        """
        model = self.config.model_name()
        path, headers, payload = self._request(prompt, system)
        start = time.monotonic()

        try:
            async with self._client() as client:
                response = await client.post(path, json=payload, headers=headers)
                response.raise_for_status()
                data = response.json()
                return LLMResponse(
                    text=self._extract_text(self.provider, data),
                    model=data.get("model", model),
                    provider=self.provider,
                    duration_ms=(time.monotonic() - start) * 1000.0,
                    success=True,
                )
        except httpx.ConnectError:
            return LLMResponse(
                model=model,
                provider=self.provider,
                success=False,
                error=f"Cannot connect to {self.provider} at {self.base_url}.",
            )
        except httpx.TimeoutException:
            return LLMResponse(
                model=model,
                provider=self.provider,
                success=False,
                error=f"Request to {self.provider} timed out after {self.config.timeout}s.",
            )
        except httpx.HTTPStatusError as exc:
            return LLMResponse(
                model=model,
                provider=self.provider,
                success=False,
                error=(
                    f"{self.provider} returned HTTP {exc.response.status_code}: "
                    f"{exc.response.text[:500]}"
                ),
            )
        except Exception as exc:  # noqa: BLE001
            return LLMResponse(
                model=model,
                provider=self.provider,
                success=False,
                error=f"Unexpected error during {self.provider} generate: {exc}",
            )
