"""Tests for relaxed JSON loading."""

import pytest

from msgschema.errors import NormalizationError
from msgschema._internal.relaxed_json import load_relaxed_json


def test_strict_json_parses():
    """Test that strict JSON loads unchanged."""
    text = '{"a": [1, 2, {"b": "c"}], "d": null}'
    assert load_relaxed_json(text) == {"a": [1, 2, {"b": "c"}], "d": None}


def test_line_comments_ignored():
    """Test // comments at the start of a line and after a value."""
    text = '// header\n{\n  "a": 1 // trailing\n}\n'
    assert load_relaxed_json(text) == {"a": 1}


def test_block_comments_ignored():
    """Test /* */ comments, including multi-line ones."""
    text = '{ /* one */ "a": /* two\n lines */ 1 }'
    assert load_relaxed_json(text) == {"a": 1}


def test_trailing_commas_accepted():
    """Test trailing commas before ] and } are accepted."""
    text = '{"a": [1, 2, ], "b": {"c": 3,},}'
    assert load_relaxed_json(text) == {"a": [1, 2], "b": {"c": 3}}


def test_trailing_comma_before_comment():
    """Test a trailing comma followed by a comment is still accepted."""
    text = '{\n  "a": 1, // last one\n}'
    assert load_relaxed_json(text) == {"a": 1}


def test_comma_without_element_rejected():
    """Test that a comma with nothing before it is a syntax error."""
    for text in ("[,]", "{,}", '{"a": [,]}', '{"fields": [ , ]}', "[1,,]"):
        with pytest.raises(NormalizationError):
            load_relaxed_json(text)


def test_comment_markers_inside_strings_kept():
    """Test that string contents are never rewritten."""
    text = '{"url": "http://example.com/*x*/", "s": "a,]", "q": "say \\"//hi\\""}'
    assert load_relaxed_json(text) == {
        "url": "http://example.com/*x*/",
        "s": "a,]",
        "q": 'say "//hi"',
    }


def test_unterminated_block_comment():
    """Test an unterminated block comment is rejected."""
    with pytest.raises(NormalizationError):
        load_relaxed_json('{\n  /* never closed\n}')


def test_unterminated_string():
    """Test an unterminated string literal is rejected."""
    with pytest.raises(NormalizationError):
        load_relaxed_json('{"a": "oops}')


def test_syntax_error_keeps_cause_and_location():
    """Test syntax errors become NormalizationError with the parser error chained."""
    with pytest.raises(NormalizationError) as excinfo:
        load_relaxed_json('// c\n{"a": }')
    assert isinstance(excinfo.value.__cause__, ValueError)
    assert excinfo.value.message
    if excinfo.value.line is not None:
        assert excinfo.value.line == 2
        assert excinfo.value.column >= 1


def test_excessive_nesting_is_normalization_error():
    """Test that nesting past the parser's depth limit is reported, not raised raw."""
    depth = 5000
    with pytest.raises(NormalizationError):
        load_relaxed_json("[" * depth + "]" * depth)


def test_load_relaxed_json_document():
    """Test a commented schema-like document parses."""
    text = """
    // License header
    {
      "apiKey": 18,
      /* inline */ "validVersions": "0-4",
      "fields": [
        { "name": "A", "versions": "3+" },
      ],
    }
    """
    assert load_relaxed_json(text) == {
        "apiKey": 18,
        "validVersions": "0-4",
        "fields": [{"name": "A", "versions": "3+"}],
    }
