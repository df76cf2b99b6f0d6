"""Shared scaffolding for source code dialects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from domsmith.core.compiler import (
    AppendChildren,
    Child,
    CompiledTemplate,
    CreateElement,
    CreateFragment,
    ReturnFragment,
    SetAttribute,
    Statement,
    TextLiteral,
)
from domsmith.core.config import CompilerConfig
from domsmith.core.exceptions import TemplateCompilationError


class CodeDialect(ABC):
    """Render compiled statements as source text for one target language."""

    name: str = ""
    indent: str = "    "
    argument_separator: str = ", "
    block_separator: str = "\n\n"

    def __init__(self, config: CompilerConfig | None = None) -> None:
        self.config = config or CompilerConfig(target=self.name or "python")

    @abstractmethod
    def literal(self, value: str) -> str:
        """Return a source literal that evaluates to ``value``."""

    def arguments(self, values: Iterable[str]) -> str:
        return self.argument_separator.join(self.literal(value) for value in values)

    def child(self, child: Child) -> str:
        if isinstance(child, TextLiteral):
            return self.literal(child.text)
        return child.name

    def render_statement(self, statement: Statement) -> str:
        if isinstance(statement, CreateFragment):
            return self.create_fragment(statement)
        if isinstance(statement, CreateElement):
            return self.create_element(statement)
        if isinstance(statement, SetAttribute):
            return self.set_attribute(statement)
        if isinstance(statement, AppendChildren):
            return self.append_children(statement)
        if isinstance(statement, ReturnFragment):
            return self.return_fragment(statement)
        raise TemplateCompilationError(f"Unsupported statement {statement!r}")

    def render_body(self, statements: Sequence[Statement]) -> str:
        return "\n".join(f"{self.indent}{self.render_statement(s)}" for s in statements)

    @abstractmethod
    def create_fragment(self, statement: CreateFragment) -> str: ...

    @abstractmethod
    def create_element(self, statement: CreateElement) -> str: ...

    @abstractmethod
    def set_attribute(self, statement: SetAttribute) -> str: ...

    @abstractmethod
    def append_children(self, statement: AppendChildren) -> str: ...

    @abstractmethod
    def return_fragment(self, statement: ReturnFragment) -> str: ...

    @abstractmethod
    def render_function(self, compiled: CompiledTemplate) -> str:
        """Wrap the compiled statements in a single-parameter function."""

    @abstractmethod
    def render_dispatcher(self, compiled_templates: Sequence[CompiledTemplate]) -> str:
        """Return the exported function routing an identifier to its builder."""

    @abstractmethod
    def render_header(self, identifiers: Sequence[str], source_name: str | None) -> str:
        """Return the module preamble including the identifier type alias."""


__all__ = ["CodeDialect"]
