"""Compile HTML ``<template>`` elements into DOM construction code."""

from __future__ import annotations

from domsmith.core import (
    BuildResult,
    CompiledTemplate,
    CompilerConfig,
    ConfigurationError,
    ConflictingTemplateIdError,
    DuplicateTemplateIdError,
    GeneratedModule,
    InvalidTemplateIdError,
    MissingTemplateIdError,
    OutputWriteError,
    TemplateCompilationError,
    TemplateCompiler,
    TemplateDefinition,
    TemplateSourceError,
    build,
    compile_document,
    enumerate_templates,
    load_config,
)
from domsmith.runtime import DOMFactory, DOMNode, SoupDOM
from domsmith.version import get_version


__version__ = get_version()

__all__ = [
    "BuildResult",
    "CompiledTemplate",
    "CompilerConfig",
    "ConfigurationError",
    "ConflictingTemplateIdError",
    "DOMFactory",
    "DOMNode",
    "DuplicateTemplateIdError",
    "GeneratedModule",
    "InvalidTemplateIdError",
    "MissingTemplateIdError",
    "OutputWriteError",
    "SoupDOM",
    "TemplateCompilationError",
    "TemplateCompiler",
    "TemplateDefinition",
    "TemplateSourceError",
    "__version__",
    "build",
    "compile_document",
    "enumerate_templates",
    "load_config",
]
