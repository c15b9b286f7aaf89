"""Website service: generate, persist, and fetch generation results.

Also hosts the request/response boundary (``handle_*``) that wraps every
call in an :class:`~sitegen.models.ApiResponse` envelope, so a front end
never has to catch exceptions.
"""

from __future__ import annotations

from typing import Any, Optional

from .config import Config
from .exceptions import InvalidInputError, NotFoundError
from .generator import SectionGenerator, create_generator
from .models import ApiResponse, GenerationRequest, GenerationResult
from .store import InMemoryWebsiteStore, WebsiteStore
from .utils import print_error

IDEA_REQUIRED = "Website idea is required"
GENERATE_FAILED = "Failed to generate website"
LIST_FAILED = "Failed to fetch websites"
NOT_FOUND = "Website not found"
FETCH_FAILED = "Failed to fetch website"


class WebsiteService:
    """Coordinates the section generator and the website store.

    Attributes:
        config: Global configuration.
        store: Persistence gateway for generation results.
        generator: Section generator built from ``config`` unless injected.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        store: Optional[WebsiteStore] = None,
        generator: Optional[SectionGenerator] = None,
    ) -> None:
        self.config = config or Config()
        self.store = store if store is not None else InMemoryWebsiteStore()
        self.generator = generator or create_generator(self.config)

    # ------------------------------------------------------------------
    # Service operations
    # ------------------------------------------------------------------

    async def generate_website(self, idea: str) -> GenerationResult:
        """Generate sections for ``idea`` and store the result.

        Raises:
            InvalidInputError: If ``idea`` is blank.
        """
        if not idea or not idea.strip():
            raise InvalidInputError(IDEA_REQUIRED)
        request = GenerationRequest(idea=idea)

        outcome = await self.generator.generate_outcome(request.idea)
        result = GenerationResult(
            idea=request.idea,
            sections=outcome.sections,
            generated_by=outcome.strategy,
        )
        return await self.store.save(result)

    async def list_websites(self) -> list[GenerationResult]:
        """Return every stored result, newest first."""
        return await self.store.list_all()

    async def get_website(self, website_id: str) -> GenerationResult:
        """Return one stored result.

        Raises:
            NotFoundError: If no result has ``website_id``.
        """
        result = await self.store.get_by_id(website_id)
        if result is None:
            raise NotFoundError(website_id)
        return result

    # ------------------------------------------------------------------
    # Request/response boundary
    # ------------------------------------------------------------------

    async def handle_generate(self, payload: dict[str, Any]) -> ApiResponse:
        """Handle a ``{"idea": ...}`` generation request."""
        idea = payload.get("idea")
        if not isinstance(idea, str) or not idea.strip():
            return ApiResponse(success=False, error=IDEA_REQUIRED)

        try:
            website = await self.generate_website(idea.strip())
        except Exception as exc:  # noqa: BLE001
            print_error(f"{GENERATE_FAILED}: {exc}")
            return ApiResponse(success=False, error=GENERATE_FAILED)
        return ApiResponse(success=True, data=website.model_dump(mode="json"))

    async def handle_list(self) -> ApiResponse:
        try:
            websites = await self.list_websites()
        except Exception as exc:  # noqa: BLE001
            print_error(f"{LIST_FAILED}: {exc}")
            return ApiResponse(success=False, error=LIST_FAILED)
        return ApiResponse(success=True, data=[w.model_dump(mode="json") for w in websites])

    async def handle_get(self, website_id: str) -> ApiResponse:
        try:
            website = await self.get_website(website_id)
        except NotFoundError:
            return ApiResponse(success=False, error=NOT_FOUND)
        except Exception as exc:  # noqa: BLE001
            print_error(f"{FETCH_FAILED}: {exc}")
            return ApiResponse(success=False, error=FETCH_FAILED)
        return ApiResponse(success=True, data=website.model_dump(mode="json"))
