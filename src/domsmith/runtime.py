"""DOM factory interface consumed by generated Python modules.

Generated component functions only rely on the small protocol below. The
BeautifulSoup backed :class:`SoupDOM` implements it so components can be
materialised as ``bs4`` trees, e.g. for server-side rendering or tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from bs4 import BeautifulSoup
from bs4.element import NavigableString, Tag


@runtime_checkable
class DOMNode(Protocol):
    """Element or fragment returned by a :class:`DOMFactory`."""

    def set_attribute(self, name: str, value: str) -> None: ...

    def append(self, *children: DOMNode | str) -> None: ...


@runtime_checkable
class DOMFactory(Protocol):
    """Capabilities generated code needs to rebuild a template fragment."""

    def create_fragment(self) -> DOMNode: ...

    def create_element(self, tag: str, class_name: str | None = None) -> DOMNode: ...

    def create_element_ns(
        self, namespace: str, tag: str, class_name: str | None = None
    ) -> DOMNode: ...


class SoupNode:
    """Wrap a ``bs4`` tag behind the :class:`DOMNode` interface."""

    __slots__ = ("tag",)

    def __init__(self, tag: Tag) -> None:
        self.tag = tag

    def __repr__(self) -> str:
        return f"SoupNode({self.tag.name!r})"

    def __str__(self) -> str:
        return self.tag.decode()

    def set_attribute(self, name: str, value: str) -> None:
        self.tag[name] = value

    def append(self, *children: DOMNode | str) -> None:
        for child in children:
            if isinstance(child, SoupNode):
                self.tag.append(child.tag)
            elif isinstance(child, str):
                self.tag.append(NavigableString(child))
            else:
                raise TypeError(f"Cannot append {type(child).__name__} to a SoupNode.")


class SoupDOM:
    """:class:`DOMFactory` producing BeautifulSoup nodes."""

    def __init__(self, soup: BeautifulSoup | None = None) -> None:
        self.soup = soup if soup is not None else BeautifulSoup("", "html.parser")

    def create_fragment(self) -> SoupNode:
        return SoupNode(BeautifulSoup("", "html.parser"))

    def create_element(self, tag: str, class_name: str | None = None) -> SoupNode:
        element = self.soup.new_tag(tag)
        if class_name:
            element["class"] = class_name
        return SoupNode(element)

    def create_element_ns(
        self, namespace: str, tag: str, class_name: str | None = None
    ) -> SoupNode:
        element = self.soup.new_tag(tag, namespace=namespace)
        if class_name:
            element["class"] = class_name
        return SoupNode(element)


__all__ = ["DOMFactory", "DOMNode", "SoupDOM", "SoupNode"]
