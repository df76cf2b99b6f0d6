"""Discovery of ``<template>`` definitions inside a parsed document."""

from __future__ import annotations

from dataclasses import dataclass
import keyword

from bs4.element import Tag

from .exceptions import (
    ConflictingTemplateIdError,
    DuplicateTemplateIdError,
    InvalidTemplateIdError,
    MissingTemplateIdError,
)


FUNCTION_PREFIX = "create"
FUNCTION_SUFFIX = "Component"


@dataclass(frozen=True, slots=True)
class TemplateDefinition:
    """A named ``<template>`` element whose children form the content tree."""

    identifier: str
    element: Tag

    @property
    def function_name(self) -> str:
        return component_function_name(self.identifier)


def upper_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def component_function_name(identifier: str) -> str:
    """Return the generated function name for a template identifier.

    ``audit`` becomes ``createAuditComponent``.
    """
    return f"{FUNCTION_PREFIX}{upper_first(identifier)}{FUNCTION_SUFFIX}"


def _describe_location(element: Tag) -> str:
    line = getattr(element, "sourceline", None)
    return f" (line {line})" if line else ""


def enumerate_templates(document: Tag) -> list[TemplateDefinition]:
    """Collect every top-level ``<template>`` sorted by identifier.

    Templates nested inside another template belong to that template's content
    and are not compiled on their own.

    Identifiers must be unique and must derive distinct function names, so
    no generated function or dispatch entry can shadow another.
    """
    definitions: dict[str, TemplateDefinition] = {}
    owners: dict[str, str] = {}

    for element in document.find_all("template"):
        if element.find_parent("template") is not None:
            continue

        identifier = element.get("id")
        if not isinstance(identifier, str) or not identifier.strip():
            raise MissingTemplateIdError(
                f"<template> element{_describe_location(element)} is missing an 'id' attribute."
            )
        if identifier in definitions:
            raise DuplicateTemplateIdError(identifier)

        function_name = component_function_name(identifier)
        if not function_name.isidentifier() or keyword.iskeyword(function_name):
            raise InvalidTemplateIdError(identifier, function_name)
        if function_name in owners:
            raise ConflictingTemplateIdError(identifier, owners[function_name], function_name)

        owners[function_name] = identifier
        definitions[identifier] = TemplateDefinition(identifier=identifier, element=element)

    return [definitions[identifier] for identifier in sorted(definitions)]


__all__ = [
    "FUNCTION_PREFIX",
    "FUNCTION_SUFFIX",
    "TemplateDefinition",
    "component_function_name",
    "enumerate_templates",
    "upper_first",
]
