from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest


SAMPLE_TEMPLATES = """<!doctype html>
<html>
<head><title>components</title></head>
<body>
<template id="snippet">
  <!-- rendered by the snippet renderer -->
  <div class="lh-snippet  lh-snippet--compact" data-kind="code">
    <span class="lh-snippet__line">A</span> <span>B</span>
    <pre>  keep   this
  spacing</pre>
  </div>
</template>
<template id="audit">
  <div class="lh-audit" id="audit-root">
    <div class="lh-audit__header">Title   text</div>
    <a href="https://example.com/?a=1&amp;b='2'" title='say "hi"'>link</a>
    <svg class="lh-icon" viewBox="0 0 8 8"><path d="M0 0h8v8H0z" fill="red"></path></svg>
  </div>
</template>
</body>
</html>
"""


@pytest.fixture
def sample_html() -> str:
    return SAMPLE_TEMPLATES


@pytest.fixture
def load_generated() -> Callable[[str], dict[str, Any]]:
    """Execute a generated Python module and return its namespace."""

    def _load(text: str) -> dict[str, Any]:
        namespace: dict[str, Any] = {"__name__": "generated_components"}
        exec(compile(text, "components.py", "exec"), namespace)  # noqa: S102
        return namespace

    return _load
