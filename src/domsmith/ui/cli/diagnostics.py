"""Diagnostic emitter bridging the core pipeline with CLI rendering utilities."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from domsmith.core.debug import format_user_friendly_error
from domsmith.core.diagnostics import DiagnosticEmitter, format_event_message

from .state import CLIState, emit_error, emit_warning, get_cli_state, render_message


# Events that signal a degraded run rather than progress.
WARNING_EVENTS = frozenset({"parser_fallback"})


class CliEmitter(DiagnosticEmitter):
    """Emit diagnostics using the rich-enabled CLI helpers."""

    def __init__(self, state: CLIState | None = None) -> None:
        self._state = state or get_cli_state()
        self.debug_enabled = self._state.show_tracebacks

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        emit_warning(message, exception=exc)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        if exc is not None and not self.debug_enabled:
            message = format_user_friendly_error(exc)
        emit_error(message, exception=exc)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        data = dict(payload)
        if name == "template_compiled":
            if self._state.verbosity >= 1:
                render_message(
                    "info",
                    f"Compiled {data.get('id')} -> {data.get('function')} "
                    f"({data.get('statements')} statements)",
                )
            return
        message = format_event_message(name, data)
        if message is None:
            return
        if name in WARNING_EVENTS:
            self.warning(message)
        else:
            render_message("info", message)


__all__ = ["CliEmitter", "WARNING_EVENTS"]
