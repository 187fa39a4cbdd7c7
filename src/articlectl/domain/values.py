"""Value coercion between prompt answers, template defaults, and storage.

Storage shapes per :class:`FieldType`:

- scalar: the value as given (usually ``str``)
- list: ``list[str]``
- link-list: ``list[dict]`` with ``text`` and ``url`` keys
"""

from __future__ import annotations

from typing import Any

from articlectl.domain.fields import FieldType, Link


def split_list(raw: str) -> list[str]:
    """Split a comma-separated answer, trimming items and dropping blanks."""
    return [item.strip() for item in raw.split(",") if item.strip()]


def parse_links(raw: str) -> list[Link]:
    """Parse ``text:url,text:url`` into links.

    Each pair is split at its first colon so URLs keep their scheme and
    port. Pairs without a colon, or with an empty side, are discarded.
    """
    links: list[Link] = []
    for pair in raw.split(","):
        text, sep, url = pair.strip().partition(":")
        if not sep:
            continue
        text, url = text.strip(), url.strip()
        if text and url:
            links.append(Link(text=text, url=url))
    return links


def coerce_answer(field_type: FieldType, answer: str) -> Any:
    """Convert a non-empty, trimmed answer into the field's storage shape."""
    if field_type is FieldType.LIST:
        return split_list(answer)
    if field_type is FieldType.LINK_LIST:
        return [link.model_dump() for link in parse_links(answer)]
    return answer


def coerce_default(field_type: FieldType, raw: Any) -> Any:
    """Convert a template default into the field's storage shape.

    A link-list default that is not already a list becomes ``[]``.
    """
    if field_type is FieldType.LIST:
        if isinstance(raw, list):
            return raw
        return split_list(str(raw))
    if field_type is FieldType.LINK_LIST:
        if isinstance(raw, list):
            return raw
        return []
    return raw


def render_default(field_type: FieldType, raw: Any) -> str:
    """Render a default for display inside a prompt."""
    if field_type is FieldType.LIST and isinstance(raw, list):
        return ", ".join(_render_scalar(item) for item in raw)
    if field_type is FieldType.LINK_LIST and isinstance(raw, list):
        return ", ".join(_render_link(item) for item in raw)
    return _render_scalar(raw)


def _render_scalar(value: Any) -> str:
    # YAML spelling for booleans, not Python's
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _render_link(item: Any) -> str:
    if isinstance(item, dict):
        return f"{item.get('text')}:{item.get('url')}"
    return str(item)
