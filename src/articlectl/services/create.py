"""ArticleService: article creation pipeline.

Pipeline: PARSE TEMPLATE → COLLECT → FORMAT → NAME → WRITE → RESPOND

Nothing is written unless every earlier stage succeeds.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from articlectl.domain.filenames import sanitize_filename, with_extension
from articlectl.domain.frontmatter import format_frontmatter
from articlectl.domain.template import TemplateData, TemplateError
from articlectl.infrastructure.filesystem import write_article
from articlectl.infrastructure.templates import parse_template
from articlectl.services.collect import MissingFieldValueError
from articlectl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from articlectl.config.settings import ArticleSettings

logger = logging.getLogger(__name__)

ARTICLE_TYPES: tuple[str, ...] = ("blog", "project")

CollectFn = Callable[[TemplateData], dict[str, Any]]


class ArticleService:
    """Creates articles from the project's templates."""

    def __init__(self, settings: ArticleSettings) -> None:
        self._settings = settings

    def create_article(self, article_type: str, name: str, *, collect: CollectFn) -> ServiceResult:
        """Scaffold a new article of *article_type* named *name*.

        *collect* turns the parsed template into field values, either by
        prompting or from defaults.
        """
        op = "create_article"
        article_type = article_type.lower()
        if article_type not in ARTICLE_TYPES:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_TYPE",
                    message=f"Invalid type: {article_type}. Must be 'blog' or 'project'.",
                ),
            )

        template_path = self._settings.template_path(article_type)
        try:
            template = parse_template(template_path)
        except TemplateError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="TEMPLATE_ERROR",
                    message=str(exc),
                    detail={"template": str(template_path)},
                ),
            )

        try:
            values = collect(template)
        except MissingFieldValueError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="MISSING_VALUE",
                    message=str(exc),
                    detail={"field": exc.field_name},
                ),
            )

        output = self._settings.output
        frontmatter = format_frontmatter(values, width=output.yaml_width)
        requested = with_extension(sanitize_filename(name), output.extension)
        try:
            path = write_article(
                self._settings.articles_dir,
                requested,
                frontmatter,
                template.body,
                extension=output.extension,
            )
        except OSError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="WRITE_ERROR",
                    message=f"Could not write article: {exc}",
                    detail={"directory": str(self._settings.articles_dir)},
                ),
            )

        warnings = list(template.warnings)
        if path.name != requested:
            warnings.append(f"File already exists. Using filename: {path.name}")

        logger.debug("Created %s article at %s", article_type, path)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(path),
                "type": article_type,
                "template": str(template_path),
                "fields": sorted(values),
            },
            warnings=warnings,
        )
