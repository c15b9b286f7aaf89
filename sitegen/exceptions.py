"""Exception hierarchy for sitegen.

Generation failures are recoverable (the rule-based generator stands in for
any failed backend). Editor errors indicate a caller bug and always propagate.
"""


class SiteGenError(Exception):
    """Base exception for sitegen operations."""


class InvalidInputError(SiteGenError, ValueError):
    """The idea text is empty or whitespace only."""


class EditorError(SiteGenError):
    """Base class for section list editor failures."""


class IndexOutOfRangeError(EditorError, IndexError):
    """An editor operation referenced a position outside the list."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"Section index {index} is out of range for a list of {length}")


class BoundaryError(EditorError):
    """A move would push a section past the start or end of the list."""


class LastSectionError(EditorError):
    """Removing the section would leave fewer sections than the caller allows."""


class EmptyContentError(EditorError, ValueError):
    """New section content is blank after stripping."""


class GenerationFailure(SiteGenError):
    """A generation backend failed; always recoverable via the rule-based path."""

    def __init__(self, message: str, strategy: str = "") -> None:
        self.strategy = strategy
        super().__init__(message)


class NotFoundError(SiteGenError):
    """No stored generation result has the requested id."""

    def __init__(self, website_id: str) -> None:
        self.website_id = website_id
        super().__init__(f"Website not found: {website_id}")


class StoreError(SiteGenError):
    """The persistence gateway could not read or write its backing file."""
