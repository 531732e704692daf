"""
Tests for the fish syntax validator.

Tests:
- Function rule: document-global `function ... end` check
- Variable rule: per-line `set <name> "<value>"` check
- Ordering and purity of the diagnostic list
"""

import re
import time

import pytest
from lsprotocol.types import DiagnosticSeverity

from fishls.analysis.validator import (
    INVALID_FUNCTION_DECLARATION,
    INVALID_VARIABLE_DECLARATION,
    document_lines,
    has_function_block,
    validate,
)


def _codes(diagnostics):
    return [d.code for d in diagnostics]


# ============================================================================
# Function rule
# ============================================================================


@pytest.mark.parametrize(
    "text",
    [
        "",
        "echo hello",
        "set name \"Alice\"\necho $name",
        "  function indented\nend",
        "functions -q foo",
    ],
)
def test_no_function_lines_no_function_errors(text):
    assert INVALID_FUNCTION_DECLARATION not in _codes(validate(text))


def test_well_formed_function_block():
    assert validate("function greet\n\techo hi\nend") == []


def test_unterminated_function_reported_on_full_line():
    diagnostics = validate("function greet\n\techo hi")

    assert len(diagnostics) == 1
    diagnostic = diagnostics[0]
    assert diagnostic.code == INVALID_FUNCTION_DECLARATION
    assert diagnostic.severity == DiagnosticSeverity.Error
    assert diagnostic.source == "fish-lsp"
    assert diagnostic.range.start.line == 0
    assert diagnostic.range.start.character == 0
    assert diagnostic.range.end.line == 0
    assert diagnostic.range.end.character == len("function greet")


def test_every_function_line_reported_without_any_block():
    text = "function a\n\techo a\nfunction b\n\techo b"

    diagnostics = validate(text)

    assert _codes(diagnostics) == [INVALID_FUNCTION_DECLARATION] * 2
    assert [d.range.start.line for d in diagnostics] == [0, 2]


def test_one_block_suppresses_unrelated_function_lines():
    text = "function stray\n\techo never closed\n\nfunction ok\n\techo ok\nend"

    assert validate(text) == []


def test_stray_function_after_block_is_also_suppressed():
    text = "function ok\nend\nfunction stray"

    assert validate(text) == []


def test_end_must_stand_alone():
    diagnostics = validate("function greet\n\techo hi; end")

    assert _codes(diagnostics) == [INVALID_FUNCTION_DECLARATION]


# ============================================================================
# Variable rule
# ============================================================================


@pytest.mark.parametrize(
    "line",
    [
        'set X "value"',
        'set X',
        'set X "a" "b"  "c"',
        'set X ""',
        'set   X   "spaced"   ',
    ],
)
def test_valid_variable_declarations(line):
    assert validate(line) == []


def test_unquoted_value_reported_on_full_line():
    diagnostics = validate("set X value")

    assert len(diagnostics) == 1
    diagnostic = diagnostics[0]
    assert diagnostic.code == INVALID_VARIABLE_DECLARATION
    assert diagnostic.severity == DiagnosticSeverity.Error
    assert diagnostic.range.start.character == 0
    assert diagnostic.range.end.character == len("set X value")


@pytest.mark.parametrize(
    "line",
    [
        'set X "unterminated',
        'set X "a"b',
        "set -x PATH /usr/bin",
        "set X 'single'",
    ],
)
def test_malformed_variable_declarations(line):
    assert _codes(validate(line)) == [INVALID_VARIABLE_DECLARATION]


def test_only_lines_starting_with_set_are_checked():
    assert validate("\tset X value\nset_color red\necho set X value") == []


# ============================================================================
# Combined behaviour
# ============================================================================


def test_function_diagnostics_come_before_variable_diagnostics():
    text = "set a b\nfunction f\nset c d"

    diagnostics = validate(text)

    assert _codes(diagnostics) == [
        INVALID_FUNCTION_DECLARATION,
        INVALID_VARIABLE_DECLARATION,
        INVALID_VARIABLE_DECLARATION,
    ]
    assert [d.range.start.line for d in diagnostics] == [1, 0, 2]


def test_validation_is_idempotent():
    text = "function f\nset a b\nset c \"d\"\nfunction g\n"

    assert validate(text) == validate(text)


# ============================================================================
# Function block scan
# ============================================================================

# Whole-document form of the function block rule; the line scan must agree
# with it on every input.
FUNCTION_BLOCK_REGEX = re.compile(
    r"^function\s+\w+\s*(?:\n.*)*?\nend\s*$", re.MULTILINE
)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "function greet\n\techo hi\nend",
        "function greet\n\techo hi",
        "function a\nend",
        "function greet\n\n\n\n\nend",
        "function greet\nend  \t",
        "function greet\nendless",
        "function greet\n\techo hi; end",
        "function greet extra\nend",
        "functiongreet\nend",
        "  function greet\nend",
        "function\ngreet\nend",
        "function\n\n  greet  \n\techo\nend  ",
        "function\nend",
        "function\nend\nend",
        "function\nfunction\nend",
        "function  \n  \n\tgreet\n end",
        "echo\nfunction\n   \nfoo bar\nfunction baz\nend",
        "function greet\r\n\techo\r\nend\r\n",
        "function\x0cgreet\nend",
        "end\nfunction greet",
        "function stray\n\techo never closed\n\nfunction ok\n\techo ok\nend",
    ],
)
def test_block_scan_agrees_with_block_regex(text):
    expected = FUNCTION_BLOCK_REGEX.search(text) is not None

    assert has_function_block(document_lines(text)) is expected


@pytest.mark.parametrize(
    "text",
    [
        ("function f\n" + "echo a\n" * 5) * 3000,
        "function f\n" + "\n" * 20000 + "x",
        "function f" + " \n" * 20000,
        "function \n" + "  \n" * 20000 + "set x y",
    ],
)
def test_large_unterminated_documents_validate_quickly(text):
    start = time.perf_counter()

    diagnostics = validate(text)

    assert time.perf_counter() - start < 1.0
    assert any(d.code == INVALID_FUNCTION_DECLARATION for d in diagnostics)


# ============================================================================
# Line and column numbering
# ============================================================================


@pytest.mark.parametrize(
    "separator", ["\x0b", "\x0c", "\x1c", "\x85", "\u2028", "\u2029"]
)
def test_only_newlines_end_lines(separator):
    diagnostics = validate(f'set a "x{separator}y"\nset b c')

    assert [d.range.start.line for d in diagnostics] == [1]
    assert diagnostics[0].code == INVALID_VARIABLE_DECLARATION


def test_crlf_line_endings():
    diagnostics = validate('set a "1"\r\nset b c\r\n')

    assert [d.range.start.line for d in diagnostics] == [1]
    assert diagnostics[0].range.end.character == len("set b c")


def test_end_column_counts_utf16_code_units():
    diagnostics = validate("function 🐟\nset X 🐟")

    assert [d.range.end.character for d in diagnostics] == [11, 8]


def test_document_lines_splits_on_newlines_only():
    assert document_lines("a\r\nb\x0cc\nd e") == ["a", "b\x0cc", "d e"]
