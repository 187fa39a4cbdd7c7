"""Template parsing: frontmatter block, field schema, and defaults.

A template is a markdown document whose frontmatter is bounded by two
``---`` lines. Pure parsing lives here; reading the template from disk is
handled by :mod:`articlectl.infrastructure.templates`.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, Field
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from articlectl.domain.fields import FieldInfo, parse_field_definitions

FRONTMATTER_DELIMITER = "---"

_BARE_COMMENT = re.compile(r"^#\s*$")


class TemplateError(ValueError):
    """A template cannot be used to scaffold an article."""


class MissingDelimiterError(TemplateError):
    """The frontmatter block is not bounded by two ``---`` lines."""


class TemplateNotFoundError(TemplateError):
    """The template path does not resolve to a readable file."""


class TemplateData(BaseModel):
    """A parsed template.

    Attributes:
        frontmatter: Raw text between the delimiters.
        body: Everything after the closing delimiter.
        fields: Inferred field descriptors, in document order.
        defaults: Values loaded from the comment-stripped frontmatter.
        warnings: Non-fatal issues found while parsing.
    """

    model_config = {"frozen": True}

    frontmatter: str
    body: str
    fields: list[FieldInfo] = Field(default_factory=list)
    defaults: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)

    @property
    def required_fields(self) -> list[FieldInfo]:
        return [f for f in self.fields if f.required]

    @property
    def optional_fields(self) -> list[FieldInfo]:
        return [f for f in self.fields if not f.required]


def find_frontmatter_delimiters(lines: list[str]) -> tuple[int, int]:
    """Return the zero-based indices of the opening and closing ``---`` lines.

    Raises:
        MissingDelimiterError: If either delimiter is absent.
    """
    opening = _find_delimiter(lines, 0)
    if opening is None:
        msg = "Template file does not contain frontmatter delimiters (---)"
        raise MissingDelimiterError(msg)

    closing = _find_delimiter(lines, opening + 1)
    if closing is None:
        msg = "Template file does not contain closing frontmatter delimiter (---)"
        raise MissingDelimiterError(msg)

    return opening, closing


def _find_delimiter(lines: list[str], start: int) -> int | None:
    for i in range(start, len(lines)):
        if lines[i].strip() == FRONTMATTER_DELIMITER:
            return i
    return None


def clean_frontmatter(lines: list[str]) -> str:
    """Drop section headings, blank lines, and bare ``#`` lines.

    Other comment lines are kept; the YAML loader ignores them.
    """
    kept: list[str] = []
    for line in lines:
        stripped = line.strip()
        if stripped.startswith("# ["):
            continue
        if not stripped or _BARE_COMMENT.match(stripped):
            continue
        kept.append(line)
    return "\n".join(kept)


def load_defaults(text: str) -> dict[str, Any]:
    """Load default values from cleaned frontmatter text.

    Anything other than a mapping yields ``{}``.

    Raises:
        YAMLError: If the text is not valid YAML.
    """
    loaded = YAML(typ="safe", pure=True).load(text)
    if not isinstance(loaded, dict):
        return {}
    return dict(loaded)


def split_template(content: str) -> TemplateData:
    """Parse template *content* into frontmatter, body, fields, and defaults.

    A malformed defaults block is tolerated: defaults fall back to ``{}``
    and a warning is recorded on the result.

    Raises:
        MissingDelimiterError: If the frontmatter block is not closed.
    """
    lines = content.split("\n")
    opening, closing = find_frontmatter_delimiters(lines)

    fm_lines = lines[opening + 1 : closing]
    body = "\n".join(lines[closing + 1 :])
    fields = parse_field_definitions(fm_lines)

    warnings: list[str] = []
    try:
        defaults = load_defaults(clean_frontmatter(fm_lines))
    except YAMLError as exc:
        defaults = {}
        warnings.append(f"Could not parse defaults from template: {exc}")

    return TemplateData(
        frontmatter="\n".join(fm_lines),
        body=body,
        fields=fields,
        defaults=defaults,
        warnings=warnings,
    )
