"""Assembly and persistence of the generated component module."""

from __future__ import annotations

from collections.abc import Sequence
import os
from pathlib import Path
import tempfile
from typing import TYPE_CHECKING

from .compiler import CompiledTemplate
from .exceptions import OutputWriteError


if TYPE_CHECKING:  # pragma: no cover - typing only
    from domsmith.adapters.dialects import CodeDialect


def render_module(
    compiled_templates: Sequence[CompiledTemplate],
    dialect: CodeDialect,
    *,
    source_name: str | None = None,
) -> str:
    """Concatenate header, component functions and dispatcher into one module."""
    identifiers = [compiled.identifier for compiled in compiled_templates]
    blocks = [dialect.render_header(identifiers, source_name)]
    blocks.extend(
        compiled.source or dialect.render_function(compiled) for compiled in compiled_templates
    )
    blocks.append(dialect.render_dispatcher(compiled_templates))
    return dialect.block_separator.join(blocks) + "\n"


def write_module(target: Path, content: str) -> None:
    """Replace ``target`` with ``content`` in a single atomic write."""
    temp_path: Path | None = None
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="\n",
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            temp_path = Path(handle.name)
            handle.write(content)
        os.replace(temp_path, target)
    except OSError as exc:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise OutputWriteError(f"Failed to write generated module to '{target}': {exc}") from exc


def is_up_to_date(target: Path, content: str) -> bool:
    """Return True when ``target`` already holds exactly ``content``."""
    try:
        with target.open(encoding="utf-8", newline="") as handle:
            return handle.read() == content
    except (OSError, UnicodeDecodeError):
        return False


__all__ = ["is_up_to_date", "render_module", "write_module"]
