"""articlectl entry point: scaffold a new article from BLOG.md or PROJECT.md."""

from __future__ import annotations

import signal
from types import FrameType

import click

from articlectl import __version__
from articlectl.commands._base import ArticleCommand
from articlectl.commands._context import AppContext
from articlectl.config.settings import ArticleSettings
from articlectl.output.formatters import format_type_menu
from articlectl.services.collect import FieldCollector
from articlectl.services.create import ARTICLE_TYPES, ArticleService

_EXAMPLES = """\
  articlectl
  articlectl --type blog --name "My First Post"
  articlectl -T project -N toolkit
  articlectl -H -T blog -N release-notes"""


def ask(prompt: str) -> str:
    """Read one line for *prompt*; an empty answer returns ``""``."""
    return click.prompt(prompt, default="", show_default=False, prompt_suffix="")


def choose_type() -> str:
    """Show the type menu until the user picks a valid entry."""
    click.echo(format_type_menu(ARTICLE_TYPES))
    while True:
        answer = ask(f"Enter choice (1-{len(ARTICLE_TYPES)}): ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(ARTICLE_TYPES):
            return ARTICLE_TYPES[int(answer) - 1]
        click.echo(f"Invalid choice. Please enter a number from 1 to {len(ARTICLE_TYPES)}.")


def choose_name() -> str:
    answer = ask("Enter filename (without .md extension): ").strip()
    if not answer:
        raise click.ClickException("Filename cannot be empty.")
    return answer


def _terminate(_signum: int, _frame: FrameType | None) -> None:
    raise KeyboardInterrupt


@click.command(
    cls=ArticleCommand,
    examples=_EXAMPLES,
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
@click.version_option(version=__version__, prog_name="articlectl")
@click.option(
    "-T",
    "--type",
    "article_type",
    type=click.Choice(ARTICLE_TYPES, case_sensitive=False),
    default=None,
    help="Article type (prompted for when omitted).",
)
@click.option("-N", "--name", default=None, help="Output file name (prompted for when omitted).")
@click.option("-H", "--headless", is_flag=True, help="No prompts; use template defaults.")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    article_type: str | None,
    name: str | None,
    headless: bool,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Create a new article in ./articles from a frontmatter template."""
    settings = ArticleSettings.from_cli(
        config_path=config_path,
        headless=headless,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)

    if not app.interactive and not (article_type and name):
        raise click.UsageError("--type and --name are required in headless mode.")

    collector = FieldCollector(ask, author_default=settings.author.default, echo=click.echo)
    collect = collector.collect if app.interactive else collector.collect_defaults

    signal.signal(signal.SIGTERM, _terminate)
    try:
        article_type = article_type or choose_type()
        name = name or choose_name()
        result = ArticleService(settings).create_article(article_type, name, collect=collect)
    except (click.Abort, KeyboardInterrupt):
        click.echo("", err=True)
        ctx.exit(0)

    app.emit(result)