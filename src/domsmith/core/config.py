"""Configuration model used by the template compiler.

CompilerConfig

`input_path` (`Path`)
: HTML document holding the ``<template id="...">`` definitions. Defaults to
  ``templates.html`` in the working directory.

`output_path` (`Path | None`)
: Destination of the generated module. When omitted the module is written next
  to the input as ``components.py`` or ``components.js`` depending on `target`.

`target` (`"python" | "javascript"`)
: Dialect of the generated source.

`parser` (`str`)
: BeautifulSoup tree builder used to parse the document. ``html5lib`` follows
  the HTML5 tree construction rules and records element namespaces, which SVG
  detection relies on.

`svg_namespace_suffix` (`str`)
: Elements whose namespace URI ends with this suffix are created through the
  namespaced factory call.

`spacing_tags` (`tuple[str, ...]`)
: Inline tags whose neighbouring whitespace-only text nodes are kept because
  dropping them would change the rendered spacing.

`verbatim_tags` (`tuple[str, ...]`)
: Tags whose text content is emitted byte for byte instead of having runs of
  whitespace collapsed.

`dom_module` (`str`)
: Module path referenced by the JavaScript ``DOM`` typedef import.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
import yaml

from .exceptions import ConfigurationError


Target = Literal["python", "javascript"]

DEFAULT_INPUT = Path("templates.html")
OUTPUT_SUFFIXES: dict[str, str] = {"python": ".py", "javascript": ".js"}


class CompilerConfig(BaseModel):
    """Settings driving a single compilation run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_path: Path = DEFAULT_INPUT
    output_path: Path | None = None
    target: Target = "python"
    parser: str = "html5lib"
    svg_namespace_suffix: str = "/svg"
    spacing_tags: tuple[str, ...] = ("span",)
    verbatim_tags: tuple[str, ...] = ("pre", "style")
    dom_module: str = "./dom.js"

    @field_validator("spacing_tags", "verbatim_tags", mode="before")
    @classmethod
    def _normalise_tags(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.replace(",", " ").split()
        if isinstance(value, (list, tuple, set, frozenset)):
            return tuple(str(tag).strip().lower() for tag in value if str(tag).strip())
        return value

    def resolved_output_path(self) -> Path:
        """Return the output path, deriving it from the input when unset."""
        if self.output_path is not None:
            return self.output_path
        return self.input_path.with_name(f"components{OUTPUT_SUFFIXES[self.target]}")

    def with_overrides(self, **overrides: Any) -> CompilerConfig:
        """Return a validated copy with ``None`` overrides ignored."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        payload = self.model_dump()
        payload.update(updates)
        try:
            return CompilerConfig.model_validate(payload)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid compiler option: {exc}") from exc


def load_config(path: Path) -> CompilerConfig:
    """Load a YAML configuration file, resolving paths relative to it."""
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Unable to read configuration '{path}': {exc}") from exc

    try:
        payload = yaml.safe_load(raw_text) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in '{path}': {exc}") from exc

    if not isinstance(payload, dict):
        raise ConfigurationError(f"Configuration '{path}' must contain a mapping.")

    base = path.parent
    for key in ("input_path", "output_path"):
        value = payload.get(key)
        if isinstance(value, str) and value and not Path(value).is_absolute():
            payload[key] = base / value

    try:
        return CompilerConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration in '{path}': {exc}") from exc


__all__ = ["DEFAULT_INPUT", "OUTPUT_SUFFIXES", "CompilerConfig", "Target", "load_config"]
