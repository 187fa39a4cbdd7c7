"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, articlectl.toml only contains
overrides. A project with the stock BLOG.md/PROJECT.md layout needs no
config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel


class AuthorConfig(BaseModel):
    """[author] section."""

    model_config = {"frozen": True}

    default: str = "Brandon Shoop"


class TemplatesConfig(BaseModel):
    """[templates] section: template file per article type."""

    model_config = {"frozen": True}

    blog: str = "BLOG.md"
    project: str = "PROJECT.md"

    def filename_for(self, article_type: str) -> str:
        """Template file name for *article_type* (``blog`` or ``project``)."""
        return self.blog if article_type == "blog" else self.project


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    directory: str = "articles"
    extension: str = ".md"
    yaml_width: int = 80

