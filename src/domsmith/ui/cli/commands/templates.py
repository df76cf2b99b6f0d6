"""CLI helper listing the templates of a document."""

from __future__ import annotations

from bs4.element import Tag
import click
from rich import box
from rich.table import Table
import typer

from domsmith.core.documents import load_document, read_source
from domsmith.core.exceptions import TemplateCompilationError
from domsmith.core.templates import TemplateDefinition, enumerate_templates

from .._options import ConfigOption, DebugOption, InputPathArgument, ParserOption, VerboseOption
from ..diagnostics import CliEmitter
from ..state import debug_enabled, set_cli_state
from .build import resolve_config


def _count_elements(definition: TemplateDefinition) -> int:
    return sum(1 for _ in definition.element.find_all(True))


def _top_level_tags(definition: TemplateDefinition) -> str:
    names = [child.name for child in definition.element.children if isinstance(child, Tag)]
    return ", ".join(names) if names else "-"


def templates(
    input_path: InputPathArgument = None,
    config_path: ConfigOption = None,
    parser: ParserOption = None,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
) -> None:
    """Print a table of the templates found in INPUT."""
    ctx = click.get_current_context(silent=True)
    state = set_cli_state(ctx=ctx, verbosity=verbose, debug=debug)
    emitter = CliEmitter(state)

    try:
        config = resolve_config(input_path=input_path, config_path=config_path, parser=parser)
        document = load_document(
            read_source(config.input_path),
            parser=config.parser,
            emitter=emitter,
        )
        definitions = enumerate_templates(document)
    except TemplateCompilationError as exc:
        emitter.error(str(exc), exc)
        if debug_enabled():
            raise
        raise typer.Exit(code=1) from exc

    table = Table(
        title=f"Templates in {config.input_path.name}",
        box=box.SQUARE,
        show_edge=True,
        header_style="bold cyan",
    )
    table.add_column("Id", style="magenta")
    table.add_column("Function", style="green")
    table.add_column("Top-level")
    table.add_column("Elements", justify="right")

    if not definitions:
        table.add_row("-", "-", "No templates found", "0")
    for definition in definitions:
        table.add_row(
            definition.identifier,
            definition.function_name,
            _top_level_tags(definition),
            str(_count_elements(definition)),
        )

    state.console.print(table)


__all__ = ["templates"]
