"""Custom exception hierarchy for the template compilation pipeline."""

from __future__ import annotations


class TemplateCompilationError(RuntimeError):
    """Base exception for template compilation failures."""


class TemplateSourceError(TemplateCompilationError):
    """Raised when the template document cannot be read."""


class MissingTemplateIdError(TemplateCompilationError):
    """Raised when a ``<template>`` element has no identifier."""


class DuplicateTemplateIdError(TemplateCompilationError):
    """Raised when two templates share the same identifier."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Duplicate template id '{identifier}'.")
        self.identifier = identifier


class ConflictingTemplateIdError(TemplateCompilationError):
    """Raised when two identifiers derive the same generated function name."""

    def __init__(self, identifier: str, existing: str, function_name: str) -> None:
        super().__init__(
            f"Template ids '{existing}' and '{identifier}' both produce "
            f"the function name '{function_name}'."
        )
        self.identifier = identifier
        self.existing = existing
        self.function_name = function_name


class InvalidTemplateIdError(TemplateCompilationError):
    """Raised when an identifier cannot be turned into a function name."""

    def __init__(self, identifier: str, function_name: str) -> None:
        super().__init__(
            f"Template id '{identifier}' produces an invalid function name '{function_name}'."
        )
        self.identifier = identifier
        self.function_name = function_name


class ConfigurationError(TemplateCompilationError):
    """Raised when the compiler configuration cannot be loaded or validated."""


class OutputWriteError(TemplateCompilationError):
    """Raised when the generated module cannot be persisted."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None


__all__ = [
    "ConfigurationError",
    "ConflictingTemplateIdError",
    "DuplicateTemplateIdError",
    "InvalidTemplateIdError",
    "MissingTemplateIdError",
    "OutputWriteError",
    "TemplateCompilationError",
    "TemplateSourceError",
    "exception_hint",
    "exception_messages",
]
