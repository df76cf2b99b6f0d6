"""CLI command implementations exposed via `domsmith.ui.cli`."""

from __future__ import annotations

from .build import build
from .templates import templates


__all__ = ["build", "templates"]
