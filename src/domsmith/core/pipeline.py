"""End-to-end orchestration: load, enumerate, compile, assemble and emit."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .compiler import CompiledTemplate, TemplateCompiler
from .config import CompilerConfig
from .debug import record_event, report_error
from .diagnostics import DiagnosticEmitter
from .documents import load_document, read_source
from .emitter import is_up_to_date, render_module, write_module
from .exceptions import TemplateCompilationError
from .templates import enumerate_templates


@dataclass(frozen=True, slots=True)
class GeneratedModule:
    """Source text of a generated module and the templates it contains."""

    text: str
    templates: tuple[CompiledTemplate, ...]

    @property
    def identifiers(self) -> list[str]:
        return [compiled.identifier for compiled in self.templates]


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Outcome of :func:`build`."""

    output_path: Path
    module: GeneratedModule
    changed: bool
    written: bool


def compile_document(
    html: str,
    config: CompilerConfig | None = None,
    *,
    source_name: str | None = None,
    emitter: DiagnosticEmitter | None = None,
) -> GeneratedModule:
    """Compile every template of ``html`` into a single module.

    The result only depends on ``html``, ``config`` and ``source_name``, so
    compiling the same document twice yields byte-identical text.
    """
    from domsmith.adapters.dialects import get_dialect

    config = config or CompilerConfig()
    dialect = get_dialect(config.target, config=config)
    document = load_document(html, parser=config.parser, emitter=emitter)
    definitions = enumerate_templates(document)
    record_event(
        emitter,
        "templates_discovered",
        {"count": len(definitions), "source": source_name},
    )

    compiler = TemplateCompiler(config, dialect)
    compiled_templates: list[CompiledTemplate] = []
    for definition in definitions:
        compiled = compiler.compile(definition)
        record_event(
            emitter,
            "template_compiled",
            {
                "id": compiled.identifier,
                "function": compiled.function_name,
                "statements": len(compiled.statements),
            },
        )
        compiled_templates.append(compiled)

    text = render_module(compiled_templates, dialect, source_name=source_name)
    return GeneratedModule(text=text, templates=tuple(compiled_templates))


def build(
    config: CompilerConfig,
    *,
    emitter: DiagnosticEmitter | None = None,
    check: bool = False,
) -> BuildResult:
    """Compile ``config.input_path`` and write the generated module.

    With ``check`` enabled nothing is written; ``changed`` reports whether the
    existing output is stale.
    """
    target = config.resolved_output_path()
    try:
        html = read_source(config.input_path)
        module = compile_document(
            html,
            config,
            source_name=config.input_path.name,
            emitter=emitter,
        )
        if is_up_to_date(target, module.text):
            record_event(emitter, "output_unchanged", {"path": str(target)})
            return BuildResult(output_path=target, module=module, changed=False, written=False)
        if check:
            return BuildResult(output_path=target, module=module, changed=True, written=False)
        write_module(target, module.text)
    except TemplateCompilationError as exc:
        report_error(emitter, exc)

    record_event(
        emitter,
        "output_written",
        {"path": str(target), "templates": len(module.templates)},
    )
    return BuildResult(output_path=target, module=module, changed=True, written=True)


__all__ = ["BuildResult", "GeneratedModule", "build", "compile_document"]
