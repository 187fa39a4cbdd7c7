"""Template loading from disk.

Pure parsing lives in :mod:`articlectl.domain.template`. This module
resolves template files and reads them.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from articlectl.domain.template import TemplateData, TemplateNotFoundError, split_template

log = structlog.get_logger(__name__)


def parse_template(path: Path) -> TemplateData:
    """Read and parse the template at *path*.

    Raises:
        TemplateNotFoundError: If *path* is not a file.
        MissingDelimiterError: If the frontmatter block is incomplete.
    """
    if not path.is_file():
        msg = f"Template file not found: {path}"
        raise TemplateNotFoundError(msg)

    # Undecodable bytes become U+FFFD instead of failing the run
    template = split_template(path.read_text(encoding="utf-8", errors="replace"))
    for warning in template.warnings:
        log.debug("template warning", warning=warning, template=str(path))
    log.debug(
        "template parsed",
        template=str(path),
        fields=[f.name for f in template.fields],
        defaults=sorted(template.defaults),
    )
    return template
