"""Implementation of the `domsmith build` command."""

from __future__ import annotations

from pathlib import Path

import click
import typer

from domsmith.core.config import CompilerConfig, load_config
from domsmith.core.exceptions import TemplateCompilationError
from domsmith.core.pipeline import build as run_build

from .._options import (
    CheckOption,
    ConfigOption,
    DebugOption,
    InputPathArgument,
    OutputPathOption,
    ParserOption,
    TargetOption,
    VerboseOption,
)
from ..diagnostics import CliEmitter
from ..state import debug_enabled, emit_error, set_cli_state


def resolve_config(
    *,
    input_path: Path | None = None,
    config_path: Path | None = None,
    output: Path | None = None,
    target: str | None = None,
    parser: str | None = None,
) -> CompilerConfig:
    """Merge the optional YAML configuration with command-line overrides."""
    base = load_config(config_path) if config_path is not None else CompilerConfig()
    return base.with_overrides(
        input_path=input_path,
        output_path=output,
        target=target.lower() if target else None,
        parser=parser,
    )


def build(
    input_path: InputPathArgument = None,
    config_path: ConfigOption = None,
    output: OutputPathOption = None,
    target: TargetOption = None,
    parser: ParserOption = None,
    check: CheckOption = False,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
) -> None:
    """Compile the <template> elements of INPUT into a component module."""
    ctx = click.get_current_context(silent=True)
    state = set_cli_state(ctx=ctx, verbosity=verbose, debug=debug)
    emitter = CliEmitter(state)

    try:
        config = resolve_config(
            input_path=input_path,
            config_path=config_path,
            output=output,
            target=target,
            parser=parser,
        )
        result = run_build(config, emitter=emitter, check=check)
    except TemplateCompilationError as exc:
        emitter.error(str(exc), exc)
        if debug_enabled():
            raise
        raise typer.Exit(code=1) from exc

    if check and result.changed:
        emit_error(f"{result.output_path} is out of date; run 'domsmith build' to regenerate it.")
        raise typer.Exit(code=1)


__all__ = ["build", "resolve_config"]
