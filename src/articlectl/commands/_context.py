"""AppContext: per-invocation state for the articlectl command.

Owns the settings, configures logging once, and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from articlectl.output.formatters import format_result

if TYPE_CHECKING:
    from articlectl.config.settings import ArticleSettings
    from articlectl.services.result import ServiceResult


class AppContext:
    """Shared context for one CLI invocation."""

    def __init__(self, settings: ArticleSettings) -> None:
        self.settings = settings

        from articlectl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def interactive(self) -> bool:
        """True unless running headless."""
        return not self.settings.headless

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
