"""Translation of template content trees into DOM construction statements.

The compiler walks a :class:`~domsmith.core.templates.TemplateDefinition`
depth-first and records a flat list of dialect-neutral statements. Dialects
(:mod:`domsmith.adapters.dialects`) turn those statements into source text.

Statement model

`CreateFragment`
: bind a new, empty document fragment to a variable.

`CreateElement`
: bind a new element to a variable. SVG elements carry their namespace and
  are created through the namespaced factory call. The class list is folded
  into the creation call rather than set as an attribute.

`SetAttribute`
: set one attribute (never ``class``) on an element variable.

`AppendChildren`
: append text literals and previously created variables, in source order.

`ReturnFragment`
: return the fragment variable from the generated function.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import re
from typing import TYPE_CHECKING, Any

from bs4.element import NavigableString, PreformattedString, Tag

from .config import CompilerConfig
from .templates import TemplateDefinition


if TYPE_CHECKING:  # pragma: no cover - typing only
    from domsmith.adapters.dialects import CodeDialect


_WHITESPACE_RUN = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class VariableRef:
    """Reference to a previously created node variable."""

    name: str


@dataclass(frozen=True, slots=True)
class TextLiteral:
    """Literal text appended as a text node."""

    text: str


Child = VariableRef | TextLiteral


@dataclass(frozen=True, slots=True)
class CreateFragment:
    target: str


@dataclass(frozen=True, slots=True)
class CreateElement:
    target: str
    tag: str
    namespace: str | None = None
    class_name: str | None = None

    @property
    def arguments(self) -> tuple[str, ...]:
        """Creation arguments in call order: ``namespace?, tag, class?``."""
        args: list[str] = [self.tag]
        if self.class_name:
            args.append(self.class_name)
        if self.namespace:
            args.insert(0, self.namespace)
        return tuple(args)


@dataclass(frozen=True, slots=True)
class SetAttribute:
    target: str
    name: str
    value: str


@dataclass(frozen=True, slots=True)
class AppendChildren:
    target: str
    children: tuple[Child, ...]


@dataclass(frozen=True, slots=True)
class ReturnFragment:
    target: str


Statement = CreateFragment | CreateElement | SetAttribute | AppendChildren | ReturnFragment


@dataclass(frozen=True, slots=True)
class CompiledTemplate:
    """Compilation result for a single template."""

    identifier: str
    function_name: str
    statements: tuple[Statement, ...]
    source: str = ""


class VariableTable:
    """Identity keyed table assigning ``v0``, ``v1``, ... to visited nodes."""

    def __init__(self, prefix: str = "v") -> None:
        self._prefix = prefix
        self._names: dict[int, str] = {}
        # Keeps nodes alive so their ids cannot be recycled during the pass.
        self._nodes: list[Any] = []

    def __len__(self) -> int:
        return len(self._names)

    def get(self, node: Any) -> str | None:
        return self._names.get(id(node))

    def name_for(self, node: Any) -> str:
        """Return the variable bound to ``node``, allocating one on first use."""
        key = id(node)
        name = self._names.get(key)
        if name is None:
            name = f"{self._prefix}{len(self._names)}"
            self._names[key] = name
            self._nodes.append(node)
        return name


def class_tokens(element: Tag) -> list[str]:
    value = element.get("class")
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    return [token for item in value for token in str(item).split()]


def iter_attributes(element: Any) -> list[tuple[str, str]]:
    """Return ``(name, value)`` pairs in declaration order.

    Nodes that do not expose attributes yield an empty list.
    """
    attrs = getattr(element, "attrs", None) or {}
    pairs: list[tuple[str, str]] = []
    for name, value in attrs.items():
        if isinstance(value, (list, tuple)):
            value = " ".join(str(item) for item in value)
        pairs.append((str(name), "" if value is None else str(value)))
    return pairs


def _tag_name(node: Any) -> str:
    return (getattr(node, "name", None) or "").lower()


class _CompilationPass:
    """State for compiling one template; discarded once the template is done."""

    def __init__(self, config: CompilerConfig) -> None:
        self.config = config
        self.variables = VariableTable()
        self.statements: list[Statement] = []
        self._spacing_tags = frozenset(config.spacing_tags)
        self._verbatim_tags = frozenset(config.verbatim_tags)

    def run(self, definition: TemplateDefinition) -> list[Statement]:
        fragment = self.variables.name_for(definition.element)
        self.statements.append(CreateFragment(fragment))

        for child in definition.element.children:
            if not isinstance(child, Tag):
                continue
            self.visit_element(child)
            self.statements.append(
                AppendChildren(fragment, (VariableRef(self.variables.name_for(child)),))
            )

        self.statements.append(ReturnFragment(fragment))
        return self.statements

    def svg_namespace(self, element: Tag) -> str | None:
        namespace = getattr(element, "namespace", None)
        if namespace and namespace.endswith(self.config.svg_namespace_suffix):
            return namespace
        return None

    def visit_element(self, element: Tag) -> str:
        target = self.variables.name_for(element)
        self.statements.append(
            CreateElement(
                target=target,
                tag=element.name,
                namespace=self.svg_namespace(element),
                class_name=" ".join(class_tokens(element)) or None,
            )
        )

        for name, value in iter_attributes(element):
            if name == "class":
                continue
            self.statements.append(SetAttribute(target, name, value))

        children: list[Child] = []
        for child in element.children:
            if isinstance(child, Tag):
                self.visit_element(child)
                children.append(VariableRef(self.variables.name_for(child)))
                continue
            if isinstance(child, PreformattedString) or not isinstance(child, NavigableString):
                # Comments, doctypes and processing instructions never render.
                continue
            text = self.text_literal(child, element)
            if text is not None:
                children.append(TextLiteral(text))

        if children:
            self.statements.append(AppendChildren(target, tuple(children)))
        return target

    def keeps_spacing(self, node: NavigableString) -> bool:
        """Whitespace between two elements matters when one of them is inline."""
        previous = node.previous_sibling
        following = node.next_sibling
        if not isinstance(previous, Tag) or not isinstance(following, Tag):
            return False
        return bool({_tag_name(previous), _tag_name(following)} & self._spacing_tags)

    def text_literal(self, node: NavigableString, parent: Tag) -> str | None:
        text = str(node)
        if not text:
            return None
        if not text.strip() and not self.keeps_spacing(node):
            return None
        if _tag_name(parent) not in self._verbatim_tags:
            text = _WHITESPACE_RUN.sub(" ", text)
        return text


class TemplateCompiler:
    """Compile template definitions into statements and function source."""

    def __init__(
        self,
        config: CompilerConfig | None = None,
        dialect: CodeDialect | None = None,
    ) -> None:
        self.config = config or CompilerConfig()
        if dialect is None:
            from domsmith.adapters.dialects import get_dialect

            dialect = get_dialect(self.config.target, config=self.config)
        self.dialect = dialect

    def compile_statements(self, definition: TemplateDefinition) -> tuple[Statement, ...]:
        return tuple(_CompilationPass(self.config).run(definition))

    def compile(self, definition: TemplateDefinition) -> CompiledTemplate:
        statements = self.compile_statements(definition)
        compiled = CompiledTemplate(
            identifier=definition.identifier,
            function_name=definition.function_name,
            statements=statements,
        )
        return replace(compiled, source=self.dialect.render_function(compiled))


__all__ = [
    "AppendChildren",
    "Child",
    "CompiledTemplate",
    "CreateElement",
    "CreateFragment",
    "ReturnFragment",
    "SetAttribute",
    "Statement",
    "TemplateCompiler",
    "TextLiteral",
    "VariableRef",
    "VariableTable",
    "class_tokens",
    "iter_attributes",
]
