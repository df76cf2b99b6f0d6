"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


INPUTS_PANEL = "Input Handling"
OUTPUT_PANEL = "Output"
DIAGNOSTICS_PANEL = "Diagnostics"

InputPathArgument = Annotated[
    Path | None,
    typer.Argument(
        metavar="INPUT",
        help="HTML document holding <template id=...> elements (default: templates.html).",
        dir_okay=False,
        rich_help_panel=INPUTS_PANEL,
        show_default=False,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="YAML file providing compiler settings; command-line options take precedence.",
        exists=True,
        dir_okay=False,
        readable=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

ParserOption = Annotated[
    str | None,
    typer.Option(
        "--parser",
        help="BeautifulSoup parser backend (html5lib keeps SVG namespaces).",
        rich_help_panel=INPUTS_PANEL,
    ),
]

OutputPathOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Generated module path (default: components.py or components.js beside INPUT).",
        dir_okay=False,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

TargetOption = Annotated[
    str | None,
    typer.Option(
        "--target",
        "-t",
        help="Language of the generated module: python or javascript.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

CheckOption = Annotated[
    bool,
    typer.Option(
        "--check",
        help="Do not write anything; exit with status 1 when the output is stale.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase diagnostic verbosity (repeat for more detail).",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]
