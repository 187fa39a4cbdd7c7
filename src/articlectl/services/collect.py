"""Field value collection: interactive prompts and headless defaults.

Fields are visited in a fixed order: required fields (except ``date``,
which the formatter fills in), then optional fields. Each answer is
coerced into the storage shape of the field's inferred type.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from articlectl.domain.fields import FieldInfo, FieldType
from articlectl.domain.frontmatter import DATE_FIELD
from articlectl.domain.template import TemplateData
from articlectl.domain.values import coerce_answer, coerce_default, render_default

logger = logging.getLogger(__name__)

AUTHOR_FIELD = "author"
REQUIRED_NOTICE = "This field is required. Please provide a value."

AskFn = Callable[[str], str]
EchoFn = Callable[[str], None]


class MissingFieldValueError(ValueError):
    """A required field has no answer and no default."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"Required field {field_name!r} has no default value")
        self.field_name = field_name


def collection_order(template: TemplateData) -> list[FieldInfo]:
    """Required fields except ``date``, then optional fields."""
    required = [f for f in template.required_fields if f.name != DATE_FIELD]
    return required + template.optional_fields


def build_prompt(field: FieldInfo, shown_default: str | None) -> str:
    """Prompt text for *field*, e.g. ``tags (required) [default: a, b] - comma-separated values: ``."""
    text = field.name
    text += " (required)" if field.required else " (optional, press Enter to skip)"
    if shown_default:
        text += f" [default: {shown_default}]"

    if field.type is FieldType.LIST:
        return text + " - comma-separated values: "
    if field.type is FieldType.LINK_LIST:
        return text + ' - format: "text:url,text:url": '
    return text + ": "


class FieldCollector:
    """Collects values for a template's fields.

    Args:
        ask: Reads one line of input for a prompt. Blocks until answered.
        author_default: Default for the reserved ``author`` field.
        echo: Prints notices (re-prompt messages).
    """

    def __init__(self, ask: AskFn, *, author_default: str, echo: EchoFn) -> None:
        self._ask = ask
        self._echo = echo
        self.author_default = author_default

    def raw_default(self, field: FieldInfo, defaults: dict[str, Any]) -> Any:
        """The unrendered default for *field*, or None."""
        if field.name == AUTHOR_FIELD:
            return self.author_default
        return defaults.get(field.name)

    def collect(self, template: TemplateData) -> dict[str, Any]:
        """Prompt for every field and return the collected values."""
        collected: dict[str, Any] = {}
        for field in collection_order(template):
            answered, value = self.prompt_for_field(field, template.defaults)
            if answered:
                collected[field.name] = value
        return collected

    def prompt_for_field(self, field: FieldInfo, defaults: dict[str, Any]) -> tuple[bool, Any]:
        """Ask for one field until it is satisfied.

        Returns ``(answered, value)``. An optional field skipped without a
        default returns ``(False, None)`` and is left out of the output.
        Required fields without a default are asked again, indefinitely.
        """
        raw = self.raw_default(field, defaults)
        shown = render_default(field.type, raw) if raw is not None else None
        prompt = build_prompt(field, shown)

        while True:
            answer = self._ask(prompt).strip()
            if answer:
                return True, coerce_answer(field.type, answer)
            if raw is not None:
                return True, coerce_default(field.type, raw)
            if not field.required:
                return False, None
            self._echo(REQUIRED_NOTICE)

    def collect_defaults(self, template: TemplateData) -> dict[str, Any]:
        """Headless collection: every field takes its default.

        Raises:
            MissingFieldValueError: If a required field has no default.
        """
        collected: dict[str, Any] = {}
        for field in collection_order(template):
            raw = self.raw_default(field, template.defaults)
            if raw is None:
                if field.required:
                    raise MissingFieldValueError(field.name)
                continue
            collected[field.name] = coerce_default(field.type, raw)
        logger.debug("Collected %d defaults without prompting", len(collected))
        return collected
