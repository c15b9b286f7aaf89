"""sitegen: turn a short business idea into editable website sections."""

from sitegen.config import Config, ModelConfig
from sitegen.exceptions import (
    BoundaryError,
    EditorError,
    EmptyContentError,
    GenerationFailure,
    IndexOutOfRangeError,
    InvalidInputError,
    LastSectionError,
    NotFoundError,
    SiteGenError,
    StoreError,
)
from sitegen.generator import SectionGenerator, create_generator, generate_sections
from sitegen.models import ApiResponse, GenerationResult, Section
from sitegen.service import WebsiteService

__all__ = [
    "ApiResponse",
    "BoundaryError",
    "Config",
    "EditorError",
    "EmptyContentError",
    "GenerationFailure",
    "GenerationResult",
    "IndexOutOfRangeError",
    "InvalidInputError",
    "LastSectionError",
    "ModelConfig",
    "NotFoundError",
    "Section",
    "SectionGenerator",
    "SiteGenError",
    "StoreError",
    "WebsiteService",
    "create_generator",
    "generate_sections",
]
