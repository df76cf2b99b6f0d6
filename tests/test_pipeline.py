from __future__ import annotations

import ast
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from bs4 import BeautifulSoup
from bs4.element import Comment, NavigableString, Tag
import pytest

from domsmith.core.config import CompilerConfig
from domsmith.core.documents import load_document
from domsmith.core.exceptions import (
    ConflictingTemplateIdError,
    MissingTemplateIdError,
    OutputWriteError,
    TemplateSourceError,
)
from domsmith.core.pipeline import build, compile_document
from domsmith.core.templates import enumerate_templates
from domsmith.runtime import SoupDOM


class RecordingEmitter:
    debug_enabled = False

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []
        self.errors: list[tuple[str, BaseException | None]] = []

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        return

    def error(self, message: str, exc: BaseException | None = None) -> None:
        self.errors.append((message, exc))

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        self.events.append((name, dict(payload)))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]


def _describe(node: Tag) -> list[tuple]:
    """Structural summary ignoring comments and insignificant whitespace."""
    summary: list[tuple] = []
    for child in node.children:
        if isinstance(child, Tag):
            namespace = child.namespace or ""
            attrs = {key: value for key, value in child.attrs.items() if key != "class"}
            classes = child.get("class") or ""
            if isinstance(classes, list):
                classes = " ".join(classes)
            summary.append(
                (
                    child.name,
                    namespace.endswith("/svg"),
                    attrs,
                    " ".join(classes.split()),
                    _describe(child),
                )
            )
        elif isinstance(child, Comment):
            continue
        elif isinstance(child, NavigableString) and child.strip():
            summary.append(("#text", " ".join(child.split())))
    return summary


def _write_templates(tmp_path: Path, html: str) -> Path:
    source = tmp_path / "templates.html"
    source.write_text(html, encoding="utf-8")
    return source


def test_compilation_is_deterministic(sample_html: str) -> None:
    first = compile_document(sample_html, source_name="templates.html")
    second = compile_document(sample_html, source_name="templates.html")

    assert first.text == second.text


def test_functions_follow_identifier_order(sample_html: str) -> None:
    module = compile_document(sample_html)

    assert module.identifiers == ["audit", "snippet"]
    assert module.text.index("def createAuditComponent") < module.text.index(
        "def createSnippetComponent"
    )
    assert module.text.index("def createSnippetComponent") < module.text.index(
        "def create_component"
    )


def test_generated_python_parses(sample_html: str) -> None:
    module = compile_document(sample_html)

    tree = ast.parse(module.text)
    functions = [node.name for node in tree.body if isinstance(node, ast.FunctionDef)]
    assert functions == ["createAuditComponent", "createSnippetComponent", "create_component"]


def test_generated_python_rebuilds_templates(
    sample_html: str, load_generated: Callable[[str], dict[str, Any]]
) -> None:
    module = compile_document(sample_html)
    namespace = load_generated(module.text)
    document = load_document(sample_html)

    for definition in enumerate_templates(document):
        fragment = namespace["create_component"](SoupDOM(), definition.identifier)
        expected = [entry for entry in _describe(definition.element) if entry[0] != "#text"]
        assert _describe(fragment.tag) == expected


def test_generated_python_preserves_literal_values(
    sample_html: str, load_generated: Callable[[str], dict[str, Any]]
) -> None:
    namespace = load_generated(compile_document(sample_html).text)

    audit = namespace["createAuditComponent"](SoupDOM()).tag
    link = audit.find("a")
    assert link["href"] == "https://example.com/?a=1&b='2'"
    assert link["title"] == 'say "hi"'
    assert audit.find("div", class_="lh-audit__header").string == "Title text"

    snippet = namespace["createSnippetComponent"](SoupDOM()).tag
    assert snippet.find("pre").string == "  keep   this\n  spacing"
    spans = snippet.find_all("span")
    assert isinstance(spans[0].next_sibling, NavigableString)
    assert str(spans[0].next_sibling) == " "


def test_unknown_component_names_are_rejected(
    sample_html: str, load_generated: Callable[[str], dict[str, Any]]
) -> None:
    namespace = load_generated(compile_document(sample_html).text)

    with pytest.raises(ValueError, match="unexpected component: gauge"):
        namespace["create_component"](SoupDOM(), "gauge")


def test_javascript_target(sample_html: str) -> None:
    module = compile_document(sample_html, CompilerConfig(target="javascript"))

    assert module.text.startswith("'use strict';\n")
    assert "function createAuditComponent(dom) {" in module.text
    assert 'case "snippet": return createSnippetComponent(dom);' in module.text
    assert "dom.createElementNS(\"http://www.w3.org/2000/svg\",\"svg\",\"lh-icon\")" in module.text


def test_compile_events_are_recorded(sample_html: str) -> None:
    emitter = RecordingEmitter()

    compile_document(sample_html, source_name="templates.html", emitter=emitter)

    assert emitter.names() == ["templates_discovered", "template_compiled", "template_compiled"]
    assert emitter.events[0][1] == {"count": 2, "source": "templates.html"}
    assert emitter.events[1][1]["function"] == "createAuditComponent"


def test_missing_parser_falls_back(sample_html: str) -> None:
    emitter = RecordingEmitter()

    module = compile_document(
        sample_html, CompilerConfig(parser="no-such-parser"), emitter=emitter
    )

    assert emitter.events[0] == (
        "parser_fallback",
        {"preferred": "no-such-parser", "fallback": "html.parser"},
    )
    assert module.identifiers == ["audit", "snippet"]


def test_build_writes_output_next_to_input(tmp_path: Path, sample_html: str) -> None:
    source = _write_templates(tmp_path, sample_html)
    emitter = RecordingEmitter()

    result = build(CompilerConfig(input_path=source), emitter=emitter)

    target = tmp_path / "components.py"
    assert result.output_path == target
    assert result.written and result.changed
    assert target.read_text(encoding="utf-8") == result.module.text
    assert "# auto-generated by domsmith from templates.html" in result.module.text
    assert emitter.names()[-1] == "output_written"


def test_build_overwrites_previous_output(tmp_path: Path, sample_html: str) -> None:
    source = _write_templates(tmp_path, sample_html)
    target = tmp_path / "out" / "components.js"
    target.parent.mkdir()
    target.write_text("stale content that is much longer than nothing\n" * 500, encoding="utf-8")

    result = build(CompilerConfig(input_path=source, output_path=target, target="javascript"))

    assert target.read_text(encoding="utf-8") == result.module.text
    assert not list(target.parent.glob("*.tmp"))


def test_build_skips_unchanged_output(tmp_path: Path, sample_html: str) -> None:
    source = _write_templates(tmp_path, sample_html)
    config = CompilerConfig(input_path=source)
    build(config)
    emitter = RecordingEmitter()

    result = build(config, emitter=emitter)

    assert not result.changed and not result.written
    assert emitter.names()[-1] == "output_unchanged"


def test_check_mode_reports_stale_output_without_writing(
    tmp_path: Path, sample_html: str
) -> None:
    source = _write_templates(tmp_path, sample_html)
    target = tmp_path / "components.py"
    target.write_text("# outdated\n", encoding="utf-8")

    result = build(CompilerConfig(input_path=source), check=True)

    assert result.changed and not result.written
    assert target.read_text(encoding="utf-8") == "# outdated\n"


def test_invalid_template_aborts_without_output(tmp_path: Path) -> None:
    source = _write_templates(tmp_path, "<template><p>anonymous</p></template>")
    emitter = RecordingEmitter()

    with pytest.raises(MissingTemplateIdError) as excinfo:
        build(CompilerConfig(input_path=source), emitter=emitter)

    assert not (tmp_path / "components.py").exists()
    assert getattr(excinfo.value, "_domsmith_logged", False) is True
    assert emitter.errors and emitter.errors[0][1] is excinfo.value


@pytest.mark.parametrize("target", ["python", "javascript"])
def test_function_name_collisions_abort_without_output(tmp_path: Path, target: str) -> None:
    source = _write_templates(
        tmp_path,
        '<template id="audit"><p>lower</p></template><template id="Audit"><b>upper</b></template>',
    )
    config = CompilerConfig(input_path=source, target=target)

    with pytest.raises(ConflictingTemplateIdError, match="createAuditComponent"):
        build(config)

    assert not config.resolved_output_path().exists()


def test_missing_input_is_reported(tmp_path: Path) -> None:
    with pytest.raises(TemplateSourceError, match="does not exist"):
        build(CompilerConfig(input_path=tmp_path / "absent.html"))


def test_write_failures_are_wrapped(tmp_path: Path, sample_html: str) -> None:
    source = _write_templates(tmp_path, sample_html)
    occupied = tmp_path / "occupied"
    occupied.mkdir()

    with pytest.raises(OutputWriteError, match="Failed to write generated module"):
        build(CompilerConfig(input_path=source, output_path=occupied))

    assert not list(tmp_path.glob(".occupied.*"))


def test_describe_helper_ignores_comments() -> None:
    soup = BeautifulSoup("<div><!-- c --><p>x</p>  </div>", "html.parser")

    assert _describe(soup) == [("div", False, {}, "", [("p", False, {}, "", [("#text", "x")])])]
