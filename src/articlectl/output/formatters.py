"""Result and menu rendering.

The CLI renders a ServiceResult for humans (Rich markup) or machines
(``--json``). Everything here returns a string; the caller decides which
stream it goes to.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape

from articlectl.output.console import create_console, get_output

if TYPE_CHECKING:
    from articlectl.services.result import ServiceResult


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    """Format a ServiceResult for display."""
    if json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        console.print(
            f"[article.error]Error:[/article.error] {escape(message)}",
            soft_wrap=True,
        )
    else:
        path = escape(str(result.data.get("path", "")))
        console.print(
            f"\n[article.ok]Article created:[/article.ok] [article.path]{path}[/]",
            soft_wrap=True,
        )
    return get_output(console).rstrip("\n")


def format_type_menu(choices: tuple[str, ...]) -> str:
    """Numbered article-type menu shown when ``--type`` is omitted."""
    console = create_console()
    console.print("\nSelect template type:")
    for number, choice in enumerate(choices, start=1):
        console.print(f"[article.choice]{number}.[/article.choice] {choice.capitalize()}")
    return get_output(console).rstrip("\n")
