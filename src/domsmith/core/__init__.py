"""Core template compilation pipeline."""

from __future__ import annotations

from .compiler import CompiledTemplate, TemplateCompiler, VariableTable
from .config import CompilerConfig, load_config
from .diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from .exceptions import (
    ConfigurationError,
    ConflictingTemplateIdError,
    DuplicateTemplateIdError,
    InvalidTemplateIdError,
    MissingTemplateIdError,
    OutputWriteError,
    TemplateCompilationError,
    TemplateSourceError,
)
from .pipeline import BuildResult, GeneratedModule, build, compile_document
from .templates import TemplateDefinition, component_function_name, enumerate_templates


__all__ = [
    "BuildResult",
    "CompiledTemplate",
    "CompilerConfig",
    "ConfigurationError",
    "ConflictingTemplateIdError",
    "DiagnosticEmitter",
    "DuplicateTemplateIdError",
    "GeneratedModule",
    "InvalidTemplateIdError",
    "LoggingEmitter",
    "MissingTemplateIdError",
    "NullEmitter",
    "OutputWriteError",
    "TemplateCompilationError",
    "TemplateCompiler",
    "TemplateDefinition",
    "TemplateSourceError",
    "VariableTable",
    "build",
    "compile_document",
    "component_function_name",
    "enumerate_templates",
    "load_config",
]
