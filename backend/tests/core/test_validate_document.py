"""Document Validation — tests for pure shape/type/size checks and escaping.

Tests cover:
    - Missing or null text/css → MissingFieldsError
    - Non-string values → InvalidTypeError
    - Byte limits on text and css, including multi-byte characters
    - Check order: presence before type before size
    - HTML escaping of text (ENT_QUOTES entity set), css untouched
    - Extra keys dropped from the draft
"""

import pytest

from glitchstore.core.domain_types import DocumentLimits
from glitchstore.core.errors import (
    CssTooLongError,
    InvalidTypeError,
    MissingFieldsError,
    TextTooLongError,
)
from glitchstore.core.validate_document import escape_html, validate_document


# ─── Presence ────────────────────────────────────────────────────

def test_missing_css_raises_missing_fields():
    with pytest.raises(MissingFieldsError) as exc_info:
        validate_document({"text": "hello"})
    assert exc_info.value.field == "css"
    assert exc_info.value.code == "MISSING_FIELDS"


def test_null_field_counts_as_missing():
    with pytest.raises(MissingFieldsError):
        validate_document({"text": None, "css": ""})


@pytest.mark.parametrize("raw", [None, [], "text", 42])
def test_non_object_raises_missing_fields(raw):
    with pytest.raises(MissingFieldsError):
        validate_document(raw)


def test_presence_checked_before_type():
    with pytest.raises(MissingFieldsError):
        validate_document({"text": 5})


# ─── Types ───────────────────────────────────────────────────────

@pytest.mark.parametrize("value", [1, 1.5, True, ["a"], {"a": 1}])
def test_non_string_text_raises_invalid_type(value):
    with pytest.raises(InvalidTypeError) as exc_info:
        validate_document({"text": value, "css": ""})
    assert exc_info.value.field == "text"


def test_non_string_css_raises_invalid_type():
    with pytest.raises(InvalidTypeError) as exc_info:
        validate_document({"text": "", "css": 0})
    assert exc_info.value.field == "css"


def test_type_checked_before_size():
    with pytest.raises(InvalidTypeError):
        validate_document({"text": "x" * 5000, "css": 1})


# ─── Sizes ───────────────────────────────────────────────────────

def test_text_at_limit_is_accepted():
    draft = validate_document({"text": "a" * 1000, "css": ""})
    assert len(draft.text) == 1000


def test_text_over_limit_rejected():
    with pytest.raises(TextTooLongError):
        validate_document({"text": "a" * 1001, "css": ""})


def test_text_limit_counts_utf8_bytes():
    # 501 two-byte characters = 1002 bytes
    with pytest.raises(TextTooLongError):
        validate_document({"text": "ї" * 501, "css": ""})


def test_text_limit_measured_before_escaping():
    draft = validate_document({"text": "<" * 1000, "css": ""})
    assert draft.text == "&lt;" * 1000


def test_css_at_limit_is_accepted():
    draft = validate_document({"text": "", "css": "a" * 50_000})
    assert len(draft.css) == 50_000


def test_css_over_limit_rejected():
    with pytest.raises(CssTooLongError):
        validate_document({"text": "", "css": "a" * 50_001})


def test_custom_limits_respected():
    limits = DocumentLimits(max_text_length=3, max_css_length=3)
    with pytest.raises(TextTooLongError):
        validate_document({"text": "abcd", "css": ""}, limits)
    with pytest.raises(CssTooLongError):
        validate_document({"text": "abc", "css": "abcd"}, limits)


# ─── Sanitizing ──────────────────────────────────────────────────

def test_escape_html_uses_quote_entities():
    assert escape_html("""&"'<>""") == "&amp;&quot;&#039;&lt;&gt;"


def test_escape_html_leaves_other_text_alone():
    assert escape_html("Привіт, glitch!") == "Привіт, glitch!"


def test_script_tag_escaped_in_text_not_css():
    payload = "<script>alert(1)</script>"
    draft = validate_document({"text": payload, "css": payload})
    assert draft.text == "&lt;script&gt;alert(1)&lt;/script&gt;"
    assert draft.css == payload


def test_extra_keys_dropped():
    draft = validate_document({
        "text": "a", "css": "b", "timestamp": 1, "admin": True,
    })
    assert draft.model_dump() == {"text": "a", "css": "b"}


def test_empty_strings_are_valid():
    draft = validate_document({"text": "", "css": ""})
    assert draft.text == ""
    assert draft.css == ""
