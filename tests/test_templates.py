import pytest

from domsmith.core.documents import load_document
from domsmith.core.exceptions import (
    ConflictingTemplateIdError,
    DuplicateTemplateIdError,
    InvalidTemplateIdError,
    MissingTemplateIdError,
)
from domsmith.core.templates import component_function_name, enumerate_templates


def _identifiers(html: str) -> list[str]:
    return [definition.identifier for definition in enumerate_templates(load_document(html))]


def test_templates_are_sorted_by_identifier() -> None:
    html = """
    <template id="zeta"><p>z</p></template>
    <div><template id="alpha"><p>a</p></template></div>
    <template id="Mid"><p>m</p></template>
    """

    assert _identifiers(html) == ["Mid", "alpha", "zeta"]


def test_document_without_templates_yields_nothing() -> None:
    assert _identifiers("<p>no templates here</p>") == []


def test_nested_templates_belong_to_their_parent() -> None:
    html = """
    <template id="outer">
      <div><template id="inner"><p>x</p></template></div>
    </template>
    """

    assert _identifiers(html) == ["outer"]


@pytest.mark.parametrize(
    "html",
    [
        "<template><p>x</p></template>",
        '<template id=""><p>x</p></template>',
        '<template id="   "><p>x</p></template>',
    ],
)
def test_missing_identifier_is_fatal(html: str) -> None:
    with pytest.raises(MissingTemplateIdError, match="missing an 'id'"):
        enumerate_templates(load_document(html))


def test_duplicate_identifier_is_fatal() -> None:
    html = '<template id="dup"><p>1</p></template><template id="dup"><p>2</p></template>'

    with pytest.raises(DuplicateTemplateIdError) as excinfo:
        enumerate_templates(load_document(html))

    assert excinfo.value.identifier == "dup"


def test_identifiers_deriving_one_function_name_are_fatal() -> None:
    html = (
        '<template id="audit"><p>lower</p></template>'
        '<template id="Audit"><b>upper</b></template>'
    )

    with pytest.raises(ConflictingTemplateIdError) as excinfo:
        enumerate_templates(load_document(html))

    error = excinfo.value
    assert (error.existing, error.identifier) == ("audit", "Audit")
    assert error.function_name == "createAuditComponent"
    assert "'audit' and 'Audit'" in str(error)


def test_identifier_must_form_a_function_name() -> None:
    with pytest.raises(InvalidTemplateIdError) as excinfo:
        enumerate_templates(load_document('<template id="lh-gauge"><p>x</p></template>'))

    assert excinfo.value.function_name == "createLh-gaugeComponent"


@pytest.mark.parametrize(
    ("identifier", "expected"),
    [
        ("audit", "createAuditComponent"),
        ("crcChain", "createCrcChainComponent"),
        ("3pFilter", "create3pFilterComponent"),
        ("Already", "createAlreadyComponent"),
    ],
)
def test_component_function_name(identifier: str, expected: str) -> None:
    assert component_function_name(identifier) == expected


def test_definition_exposes_function_name() -> None:
    (definition,) = enumerate_templates(load_document('<template id="gauge"><p>x</p></template>'))

    assert definition.function_name == "createGaugeComponent"
    assert definition.element.name == "template"
