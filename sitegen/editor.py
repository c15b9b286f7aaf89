"""Section list editor.

Pure operations over a caller-owned list of sections. Every function returns
a new list and leaves its input untouched, so a session can keep the previous
list around (for undo or comparison) without copying.

Indices are positions in the list as shown to the user: ``0 .. len - 1``.
Negative indices are rejected rather than counted from the end.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .exceptions import (
    BoundaryError,
    EmptyContentError,
    IndexOutOfRangeError,
    InvalidInputError,
    LastSectionError,
)
from .generator.rules import SECTION_TEMPLATES, find_template
from .models import Section
from .utils import slugify

CUSTOM_TEMPLATE = "Custom"


def _check_index(sections: Sequence[Section], index: int) -> None:
    if not 0 <= index < len(sections):
        raise IndexOutOfRangeError(index, len(sections))


# ---------------------------------------------------------------------------
# Structural operations
# ---------------------------------------------------------------------------

def append(sections: Sequence[Section], section: Section) -> list[Section]:
    """Add ``section`` to the end. Names are not required to be unique."""
    return [*sections, section]


def insert(sections: Sequence[Section], index: int, section: Section) -> list[Section]:
    """Insert ``section`` before position ``index`` (``len`` appends)."""
    if not 0 <= index <= len(sections):
        raise IndexOutOfRangeError(index, len(sections))
    result = list(sections)
    result.insert(index, section)
    return result


def remove(
    sections: Sequence[Section],
    index: int,
    *,
    min_sections: int = 0,
) -> list[Section]:
    """Remove the section at ``index``.

    Args:
        sections: Current list.
        index: Position to remove.
        min_sections: Smallest length the caller accepts afterwards. Pass 1
            to keep at least one section on the page.

    Raises:
        IndexOutOfRangeError: If ``index`` is not a valid position.
        LastSectionError: If removal would leave fewer than ``min_sections``.
    """
    _check_index(sections, index)
    if len(sections) - 1 < min_sections:
        raise LastSectionError(
            f"Cannot remove section {index}: at least {min_sections} section(s) must remain"
        )
    return [s for i, s in enumerate(sections) if i != index]


def move(sections: Sequence[Section], from_index: int, to_index: int) -> list[Section]:
    """Relocate the section at ``from_index`` so it ends up at ``to_index``."""
    _check_index(sections, from_index)
    _check_index(sections, to_index)
    result = list(sections)
    moved = result.pop(from_index)
    result.insert(to_index, moved)
    return result


def move_up(sections: Sequence[Section], index: int, *, strict: bool = False) -> list[Section]:
    """Swap the section at ``index`` with the one before it.

    At the first position this is a no-op, or raises ``BoundaryError`` when
    ``strict`` is set.
    """
    _check_index(sections, index)
    if index == 0:
        if strict:
            raise BoundaryError("The first section cannot move up")
        return list(sections)
    return move(sections, index, index - 1)


def move_down(sections: Sequence[Section], index: int, *, strict: bool = False) -> list[Section]:
    """Swap the section at ``index`` with the one after it.

    At the last position this is a no-op, or raises ``BoundaryError`` when
    ``strict`` is set.
    """
    _check_index(sections, index)
    if index == len(sections) - 1:
        if strict:
            raise BoundaryError("The last section cannot move down")
        return list(sections)
    return move(sections, index, index + 1)


def update_content(sections: Sequence[Section], index: int, new_content: str) -> list[Section]:
    """Replace the content of one section; its name and position stay put.

    Raises:
        IndexOutOfRangeError: If ``index`` is not a valid position.
        EmptyContentError: If ``new_content`` is blank.
    """
    _check_index(sections, index)
    if not new_content or not new_content.strip():
        raise EmptyContentError(f"Content for section {index} must not be empty")
    result = list(sections)
    result[index] = result[index].model_copy(update={"content": new_content})
    return result


# ---------------------------------------------------------------------------
# Templates & navigation
# ---------------------------------------------------------------------------

def template_names() -> list[str]:
    """Names offered when adding a section, in catalog order."""
    return [template.name for template in SECTION_TEMPLATES]


def section_from_template(
    template_name: str,
    content: Optional[str] = None,
    custom_name: Optional[str] = None,
) -> Section:
    """Build a new section from the add-section catalog.

    Content defaults to the template placeholder. The ``Custom`` template
    takes its name from ``custom_name``.

    Raises:
        InvalidInputError: Unknown template, or a blank name or content.
    """
    template = find_template(template_name)
    if template is None:
        raise InvalidInputError(f"Unknown section template: {template_name}")

    if template.name == CUSTOM_TEMPLATE:
        name = (custom_name or "").strip()
    else:
        name = template.name
    body = (template.placeholder if content is None else content).strip()

    if not name or not body:
        raise InvalidInputError("Section name and content are required")
    return Section(name=name, content=body)


def section_anchor(section: Section) -> str:
    """Anchor id for a section in the mock-site navigation."""
    return slugify(section.name)


def navigation(sections: Sequence[Section]) -> list[tuple[str, str]]:
    """``(label, href)`` pairs for a navigation bar, in section order."""
    return [(section.name, f"#{section_anchor(section)}") for section in sections]
