"""Frontmatter rendering for generated articles.

Collected values are dumped as block-style YAML. Strings stay plain unless
a plain rendering would be read back as something else (a date, a number,
a flow collection) or they contain whitespace; those are double-quoted.
"""

from __future__ import annotations

from datetime import date
from io import StringIO
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from ruamel.yaml.scalarstring import DoubleQuotedScalarString

DATE_FIELD = "date"
DEFAULT_LINE_WIDTH = 80


def _new_yaml(width: int) -> YAML:
    """Create a fresh dumper; ruamel's YAML object keeps emitter state."""
    y = YAML()
    y.default_flow_style = False
    y.width = width
    y.indent(mapping=2, sequence=4, offset=2)
    y.representer.ignore_aliases = lambda *_args: True
    return y


def generate_date_string(today: date | None = None) -> str:
    """Local date as YYYY-MM-DD."""
    return (today or date.today()).strftime("%Y-%m-%d")


def needs_quotes(value: str) -> bool:
    """Return True when *value* cannot be emitted as a plain scalar."""
    if not value or any(ch.isspace() for ch in value):
        return True
    try:
        loaded = YAML(typ="safe", pure=True).load(value)
    except YAMLError:
        return True
    return not (isinstance(loaded, str) and loaded == value)


def _quote_strings(value: Any) -> Any:
    if isinstance(value, str):
        return DoubleQuotedScalarString(value) if needs_quotes(value) else value
    if isinstance(value, dict):
        return {k: _quote_strings(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_quote_strings(item) for item in value]
    return value


def format_frontmatter(
    data: dict[str, Any],
    *,
    today: date | None = None,
    width: int = DEFAULT_LINE_WIDTH,
) -> str:
    """Render collected values as a YAML block (without delimiters).

    Injects today's date when *data* has no ``date``. *data* itself is
    never modified.
    """
    values = dict(data)
    if not values.get(DATE_FIELD):
        values[DATE_FIELD] = generate_date_string(today)

    buf = StringIO()
    _new_yaml(width).dump(_quote_strings(values), buf)
    return buf.getvalue().rstrip()
