"""Article file output.

INVARIANT: An existing article is never overwritten. A name collision
gets an epoch-seconds suffix instead.
"""

from __future__ import annotations

import time
from pathlib import Path

import structlog

from articlectl.domain.filenames import ARTICLE_EXTENSION, collision_name, with_extension
from articlectl.domain.template import FRONTMATTER_DELIMITER

log = structlog.get_logger(__name__)


def _epoch_seconds() -> int:
    return int(time.time())


def generate_filename(
    base_name: str,
    directory: Path,
    *,
    extension: str = ARTICLE_EXTENSION,
) -> str:
    """Return a file name for *base_name* that is free in *directory*.

    Best effort: two calls in the same second against an already
    colliding name can still produce the same result.
    """
    filename = with_extension(base_name, extension)
    if not (directory / filename).exists():
        return filename

    unique = collision_name(filename, _epoch_seconds(), extension)
    log.debug("file already exists", existing=filename, filename=unique)
    return unique


def render_article(frontmatter: str, body: str) -> str:
    """Join a rendered frontmatter block and a template body."""
    return f"{FRONTMATTER_DELIMITER}\n{frontmatter}\n{FRONTMATTER_DELIMITER}\n{body}"


def write_article(
    directory: Path,
    filename: str,
    frontmatter: str,
    body: str,
    *,
    extension: str = ARTICLE_EXTENSION,
) -> Path:
    """Write a new article under *directory* and return its path.

    Creates *directory* if it doesn't exist.
    """
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / generate_filename(filename, directory, extension=extension)
    path.write_text(render_article(frontmatter, body), encoding="utf-8")
    log.debug("article written", path=str(path))
    return path
