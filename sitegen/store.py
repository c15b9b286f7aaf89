"""Persistence gateway for generation results.

Two implementations share the same async interface:

* :class:`InMemoryWebsiteStore` -- process-local, used by tests and one-off runs.
* :class:`JsonWebsiteStore` -- all results in a single JSON document on disk.

Stored results are never updated or deleted.
"""

from __future__ import annotations

import json
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .exceptions import StoreError
from .models import GenerationResult
from .utils import load_json, print_warning, save_json


class WebsiteStore:
    """Interface for storing generation results."""

    async def save(self, result: GenerationResult) -> GenerationResult:
        raise NotImplementedError

    async def list_all(self) -> list[GenerationResult]:
        raise NotImplementedError

    async def get_by_id(self, website_id: str) -> Optional[GenerationResult]:
        raise NotImplementedError


class InMemoryWebsiteStore(WebsiteStore):
    """Keeps results in a dict keyed by id."""

    def __init__(self) -> None:
        self._results: dict[str, GenerationResult] = {}

    @staticmethod
    def _stamp(result: GenerationResult) -> GenerationResult:
        """Return a copy with a fresh id and creation time."""
        return result.model_copy(
            update={"id": uuid.uuid4().hex, "created_at": datetime.now(timezone.utc)}
        )

    async def save(self, result: GenerationResult) -> GenerationResult:
        stored = self._stamp(result)
        self._results[stored.id] = stored
        return stored

    async def list_all(self) -> list[GenerationResult]:
        """Return every result, newest first.

        Results sharing a timestamp keep save order, most recent first.
        """
        ordered = list(enumerate(self._results.values()))
        ordered.sort(key=lambda item: (item[1].created_at, item[0]), reverse=True)
        return [result for _, result in ordered]

    async def get_by_id(self, website_id: str) -> Optional[GenerationResult]:
        return self._results.get(website_id)


class JsonWebsiteStore(InMemoryWebsiteStore):
    """Stores results in one JSON file: ``{"websites": [...]}``.

    The file is read lazily on first access. A missing file is an empty
    store; a corrupted one is reported and treated as empty so the next save
    rewrites it.
    """

    def __init__(self, path: str | Path) -> None:
        super().__init__()
        self.path = Path(path)
        self._loaded = False

    def _load(self) -> None:
        if self._loaded:
            return
        self._loaded = True
        if not self.path.exists():
            return
        try:
            data = load_json(self.path)
            for raw in data.get("websites", []):
                result = GenerationResult.model_validate(raw)
                self._results[result.id] = result
        except (
            json.JSONDecodeError,
            UnicodeDecodeError,
            ValidationError,
            AttributeError,
            TypeError,
        ) as exc:
            print_warning(f"Ignoring unreadable website store {self.path}: {exc}")
            self._results.clear()
        except OSError as exc:
            self._loaded = False
            raise StoreError(f"Could not read website store {self.path}: {exc}") from exc

    async def _flush(self) -> None:
        payload = {"websites": [r.model_dump(mode="json") for r in self._results.values()]}
        try:
            await save_json(payload, self.path)
        except OSError as exc:
            raise StoreError(f"Could not write website store {self.path}: {exc}") from exc

    async def save(self, result: GenerationResult) -> GenerationResult:
        self._load()
        stored = await super().save(result)
        await self._flush()
        return stored

    async def list_all(self) -> list[GenerationResult]:
        self._load()
        return await super().list_all()

    async def get_by_id(self, website_id: str) -> Optional[GenerationResult]:
        self._load()
        return await super().get_by_id(website_id)
