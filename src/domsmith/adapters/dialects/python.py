"""Python source dialect driving a :class:`~domsmith.runtime.DOMFactory`."""

from __future__ import annotations

from collections.abc import Sequence

from domsmith.core.compiler import (
    AppendChildren,
    CompiledTemplate,
    CreateElement,
    CreateFragment,
    ReturnFragment,
    SetAttribute,
)

from .base import CodeDialect


DISPATCHER_NAME = "create_component"
FACTORY_TABLE = "_COMPONENT_FACTORIES"


class PythonDialect(CodeDialect):
    name = "python"
    indent = "    "
    argument_separator = ", "
    block_separator = "\n\n\n"

    def literal(self, value: str) -> str:
        return repr(value)

    def create_fragment(self, statement: CreateFragment) -> str:
        return f"{statement.target} = dom.create_fragment()"

    def create_element(self, statement: CreateElement) -> str:
        method = "create_element_ns" if statement.namespace else "create_element"
        return f"{statement.target} = dom.{method}({self.arguments(statement.arguments)})"

    def set_attribute(self, statement: SetAttribute) -> str:
        return (
            f"{statement.target}.set_attribute("
            f"{self.literal(statement.name)}, {self.literal(statement.value)})"
        )

    def append_children(self, statement: AppendChildren) -> str:
        children = ", ".join(self.child(child) for child in statement.children)
        return f"{statement.target}.append({children})"

    def return_fragment(self, statement: ReturnFragment) -> str:
        return f"return {statement.target}"

    def render_function(self, compiled: CompiledTemplate) -> str:
        docstring = f'{self.indent}"""Build the {compiled.identifier!r} component."""'
        return "\n".join(
            (
                f"def {compiled.function_name}(dom: DOMFactory) -> DOMNode:",
                docstring,
                self.render_body(compiled.statements),
            )
        )

    def render_dispatcher(self, compiled_templates: Sequence[CompiledTemplate]) -> str:
        lines = [f"{FACTORY_TABLE} = {{"]
        for compiled in compiled_templates:
            key = self.literal(compiled.identifier)
            lines.append(f"{self.indent}{key}: {compiled.function_name},")
        lines.append("}")
        lines.append("")
        lines.append("")
        lines.append(
            f"def {DISPATCHER_NAME}(dom: DOMFactory, component_name: ComponentName) -> DOMNode:"
        )
        lines.append(f'{self.indent}"""Build the component registered under ``component_name``."""')
        lines.append(f"{self.indent}factory = {FACTORY_TABLE}.get(component_name)")
        lines.append(f"{self.indent}if factory is None:")
        lines.append(
            f'{self.indent * 2}raise ValueError(f"unexpected component: {{component_name}}")'
        )
        lines.append(f"{self.indent}return factory(dom)")
        return "\n".join(lines)

    def render_header(self, identifiers: Sequence[str], source_name: str | None) -> str:
        origin = f" from {source_name}" if source_name else ""
        if identifiers:
            alias = "Literal[" + ", ".join(self.literal(i) for i in identifiers) + "]"
            typing_import = "from typing import TYPE_CHECKING, Literal"
        else:
            alias = "str"
            typing_import = "from typing import TYPE_CHECKING"
        return "\n".join(
            (
                f"# auto-generated by domsmith{origin}",
                "# ruff: noqa: E501, N802",
                "",
                "from __future__ import annotations",
                "",
                typing_import,
                "",
                "",
                "if TYPE_CHECKING:",
                f"{self.indent}from domsmith.runtime import DOMFactory, DOMNode",
                "",
                f"ComponentName = {alias}",
                "",
                f'__all__ = ["ComponentName", "{DISPATCHER_NAME}"]',
            )
        )


__all__ = ["DISPATCHER_NAME", "PythonDialect"]
