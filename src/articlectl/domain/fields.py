"""Field schema inference from annotated frontmatter.

Templates declare their schema with comment headings that open a section::

    # [BLOG] Required fields:
    title: "Example"
    tags:
      - example

    # [BLOG] Optional fields:
    links:
      - {text: Home, url: https://example.com}

Every ``key:`` line inside a section becomes a :class:`FieldInfo`. The
field type is inferred from the first non-blank line that follows the
declaration.

INVARIANT: A field's type is fixed once at parse time. It governs both
prompt formatting and value coercion.
"""

from __future__ import annotations

import re
from enum import StrEnum

from pydantic import BaseModel

LINKS_FIELD = "links"

_FIELD_DECLARATION = re.compile(r"^(\s*)(\w+):")


class FieldType(StrEnum):
    """Shape of a frontmatter value."""

    SCALAR = "scalar"
    LIST = "list"
    LINK_LIST = "link-list"


class Section(StrEnum):
    """Frontmatter section a declaration belongs to."""

    REQUIRED = "required"
    OPTIONAL = "optional"


class FieldInfo(BaseModel):
    """One inferred frontmatter field."""

    model_config = {"frozen": True}

    name: str
    required: bool
    type: FieldType


class Link(BaseModel):
    """A ``{text, url}`` pair stored in a link-list field."""

    model_config = {"frozen": True}

    text: str
    url: str


def section_marker(line: str) -> Section | None:
    """Return the section a ``# [TYPE] ... fields:`` heading opens, if any."""
    if "# [" not in line:
        return None
    if "] Required fields:" in line:
        return Section.REQUIRED
    if "] Optional fields:" in line:
        return Section.OPTIONAL
    return None


def determine_field_type(field_name: str, lines: list[str], index: int) -> FieldType:
    """Classify the field declared at ``lines[index]``.

    ``links`` is always a link-list. For any other field only the first
    non-blank line after the declaration is inspected: a ``-`` item with
    both ``text:`` and ``url:`` makes a link-list, any other ``-`` item a
    list, and anything else (comment, next key, end of block) a scalar.
    """
    if field_name == LINKS_FIELD:
        return FieldType.LINK_LIST

    for line in lines[index + 1 :]:
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.startswith("#"):
            break
        if stripped.startswith("-"):
            if "text:" in stripped and "url:" in stripped:
                return FieldType.LINK_LIST
            return FieldType.LIST
        break

    return FieldType.SCALAR


def parse_field_definitions(lines: list[str]) -> list[FieldInfo]:
    """Scan frontmatter lines and emit field descriptors in document order.

    Declarations that appear before any section heading are dropped.
    """
    fields: list[FieldInfo] = []
    section: Section | None = None

    for index, line in enumerate(lines):
        marker = section_marker(line)
        if marker is not None:
            section = marker
            continue

        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        match = _FIELD_DECLARATION.match(line)
        if match is None or section is None:
            continue

        name = match.group(2)
        fields.append(
            FieldInfo(
                name=name,
                required=section is Section.REQUIRED,
                type=determine_field_type(name, lines, index),
            )
        )

    return fields
