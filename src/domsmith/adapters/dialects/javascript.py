"""JavaScript dialect targeting the report renderer ``DOM`` helper."""

from __future__ import annotations

from collections.abc import Sequence
import json

from domsmith.core.compiler import (
    AppendChildren,
    CompiledTemplate,
    CreateElement,
    CreateFragment,
    ReturnFragment,
    SetAttribute,
)

from .base import CodeDialect


DISPATCHER_NAME = "createComponent"


class JavaScriptDialect(CodeDialect):
    name = "javascript"
    indent = "  "
    argument_separator = ","
    block_separator = "\n\n"

    def literal(self, value: str) -> str:
        return json.dumps(value, ensure_ascii=False)

    def create_fragment(self, statement: CreateFragment) -> str:
        return f"const {statement.target} = dom.document().createDocumentFragment();"

    def create_element(self, statement: CreateElement) -> str:
        method = "createElementNS" if statement.namespace else "createElement"
        return f"const {statement.target} = dom.{method}({self.arguments(statement.arguments)});"

    def set_attribute(self, statement: SetAttribute) -> str:
        return (
            f"{statement.target}.setAttribute("
            f"{self.literal(statement.name)}, {self.literal(statement.value)});"
        )

    def append_children(self, statement: AppendChildren) -> str:
        children = ",".join(self.child(child) for child in statement.children)
        return f"{statement.target}.append({children});"

    def return_fragment(self, statement: ReturnFragment) -> str:
        return f"return {statement.target};"

    def render_function(self, compiled: CompiledTemplate) -> str:
        return "\n".join(
            (
                "/**",
                " * @param {DOM} dom",
                " */",
                f"function {compiled.function_name}(dom) {{",
                self.render_body(compiled.statements),
                "}",
            )
        )

    def render_dispatcher(self, compiled_templates: Sequence[CompiledTemplate]) -> str:
        lines = [
            "/**",
            " * @param {DOM} dom",
            " * @param {ComponentName} componentName",
            " * @return {DocumentFragment}",
            " */",
            f"export function {DISPATCHER_NAME}(dom, componentName) {{",
            f"{self.indent}switch (componentName) {{",
        ]
        for compiled in compiled_templates:
            lines.append(
                f"{self.indent * 2}case {self.literal(compiled.identifier)}: "
                f"return {compiled.function_name}(dom);"
            )
        lines.append(f"{self.indent}}}")
        lines.append(f"{self.indent}throw new Error('unexpected component: ' + componentName);")
        lines.append("}")
        return "\n".join(lines)

    def render_header(self, identifiers: Sequence[str], source_name: str | None) -> str:
        origin = f" from {source_name}" if source_name else ""
        alias = "|".join(self.literal(i) for i in identifiers) or "never"
        dom_module = self.literal(self.config.dom_module)
        return "\n".join(
            (
                "'use strict';",
                "",
                f"// auto-generated by domsmith{origin}",
                "",
                f"/** @typedef {{import({dom_module}).DOM}} DOM */",
                f"/** @typedef {{{alias}}} ComponentName */",
                "",
                "/* eslint-disable max-len */",
            )
        )


__all__ = ["DISPATCHER_NAME", "JavaScriptDialect"]
