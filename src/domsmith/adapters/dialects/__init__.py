"""Source code dialects available to the template compiler."""

from __future__ import annotations

from domsmith.core.config import CompilerConfig
from domsmith.core.exceptions import ConfigurationError

from .base import CodeDialect
from .javascript import JavaScriptDialect
from .python import PythonDialect


DIALECTS: dict[str, type[CodeDialect]] = {
    PythonDialect.name: PythonDialect,
    JavaScriptDialect.name: JavaScriptDialect,
}


def get_dialect(name: str, *, config: CompilerConfig | None = None) -> CodeDialect:
    """Instantiate the dialect registered under ``name``."""
    try:
        dialect_cls = DIALECTS[name]
    except KeyError as exc:
        choices = ", ".join(sorted(DIALECTS))
        raise ConfigurationError(f"Unknown target '{name}'. Expected one of: {choices}.") from exc
    return dialect_cls(config)


__all__ = ["DIALECTS", "CodeDialect", "JavaScriptDialect", "PythonDialect", "get_dialect"]
