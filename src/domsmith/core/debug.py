"""Debug and diagnostic helpers used throughout the compilation pipeline."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NoReturn

from .diagnostics import DiagnosticEmitter, NullEmitter
from .exceptions import TemplateCompilationError, exception_hint


def ensure_emitter(emitter: DiagnosticEmitter | None) -> DiagnosticEmitter:
    """Return a usable emitter, defaulting to the null implementation."""
    return emitter if emitter is not None else NullEmitter()


def report_error(emitter: DiagnosticEmitter | None, error: TemplateCompilationError) -> NoReturn:
    """Emit an error diagnostic, flag the exception as logged, then raise it."""
    ensure_emitter(emitter).error(str(error), error)
    error._domsmith_logged = True  # type: ignore[attr-defined]  # noqa: SLF001
    raise error


def record_event(
    emitter: DiagnosticEmitter | None,
    event: str,
    payload: Mapping[str, Any],
) -> None:
    """Forward a structured diagnostic event."""
    ensure_emitter(emitter).event(event, payload)


def format_user_friendly_error(error: BaseException) -> str:
    """Return a one-line failure summary suitable for end users.

    The message of the underlying cause, when there is one, is appended so
    that e.g. the operating system's reason for an unreadable file shows up
    without a traceback.
    """
    summary = str(error).strip().rstrip(".") or type(error).__name__
    cause = error.__cause__
    hint = exception_hint(cause) if cause is not None else None
    if hint and hint.rstrip(".") not in summary:
        summary = f"{summary}: {hint.rstrip('.')}"
    return f"{summary}. Re-run with --debug for technical details."


__all__ = ["ensure_emitter", "format_user_friendly_error", "record_event", "report_error"]
