"""Article filename rules."""

from __future__ import annotations

import re

ARTICLE_EXTENSION = ".md"

_INVALID_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*]')


def sanitize_filename(filename: str) -> str:
    """Replace each of ``< > : " / \\ | ? *`` with a dash."""
    return _INVALID_FILENAME_CHARS.sub("-", filename)


def with_extension(name: str, extension: str = ARTICLE_EXTENSION) -> str:
    """Append *extension* unless *name* already ends with it."""
    return name if name.endswith(extension) else f"{name}{extension}"


def collision_name(name: str, epoch: int, extension: str = ARTICLE_EXTENSION) -> str:
    """Build ``<stem>-<epoch><extension>`` for a name that is already taken."""
    stem = name.removesuffix(extension)
    return f"{stem}-{epoch}{extension}"
