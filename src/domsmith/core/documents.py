"""Loading of template documents into BeautifulSoup trees."""

from __future__ import annotations

from pathlib import Path

from bs4 import BeautifulSoup, FeatureNotFound

from .debug import record_event
from .diagnostics import DiagnosticEmitter
from .exceptions import TemplateSourceError


FALLBACK_PARSER = "html.parser"


def read_source(path: Path) -> str:
    """Read the template document as UTF-8 text."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise TemplateSourceError(f"Template document '{path}' does not exist.") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateSourceError(f"Unable to read template document '{path}': {exc}") from exc


def load_document(
    html: str,
    *,
    parser: str = "html5lib",
    emitter: DiagnosticEmitter | None = None,
) -> BeautifulSoup:
    """Parse ``html`` keeping every attribute value as a plain string."""
    try:
        return BeautifulSoup(html, parser, multi_valued_attributes=None)
    except FeatureNotFound:
        if parser == FALLBACK_PARSER:
            raise
        # Fall back to the built-in parser when the preferred backend is missing.
        record_event(
            emitter,
            "parser_fallback",
            {"preferred": parser, "fallback": FALLBACK_PARSER},
        )
        return BeautifulSoup(html, FALLBACK_PARSER, multi_valued_attributes=None)


__all__ = ["FALLBACK_PARSER", "load_document", "read_source"]
