"""
Syntax validation for fish scripts.

Two pattern-based rules run over the full text:

- Function rule: if the document contains no `function <name> ... end`
  block anywhere, every line opening a function is an error. A single
  well-formed block suppresses the error for every function line in the
  document, matched or not.
- Variable rule: every `set` line must look like `set <name> "<value>"...`.

Results are plain lsprotocol diagnostics, function errors first. Lines end
only at `\n` or `\r\n`, the way LSP clients count them, and columns are
UTF-16 code units.
"""

from __future__ import annotations

from lsprotocol.types import Diagnostic, DiagnosticSeverity, Position, Range

from fishls.analysis.patterns import (
    BLOCK_END_KEYWORD,
    FUNCTION_HEADER_NAME,
    FUNCTION_KEYWORD,
    FUNCTION_LINE_PREFIX,
    FUNCTION_NAME_LINE,
    VARIABLE_LINE,
    VARIABLE_LINE_PREFIX,
    WHITESPACE,
)

DIAGNOSTIC_SOURCE = "fish-lsp"

INVALID_FUNCTION_DECLARATION = "INVALID_FUNCTION_DECLARATION"
INVALID_VARIABLE_DECLARATION = "INVALID_VARIABLE_DECLARATION"

FUNCTION_MESSAGE = (
    "Functions must be declared as `function <name>` followed by `end`"
)
VARIABLE_MESSAGE = 'Variables must be declared as `set <name> "<value>"`'


def document_lines(text: str) -> list[str]:
    """Split text into LSP lines, breaking only at `\\n` and `\\r\\n`."""
    return [line.removesuffix("\r") for line in text.split("\n")]


def utf16_length(line: str) -> int:
    return len(line.encode("utf-16-le")) // 2


def _line_diagnostic(line_number: int, line: str, code: str, message: str) -> Diagnostic:
    """Build an error diagnostic covering the whole line."""
    return Diagnostic(
        range=Range(
            start=Position(line=line_number, character=0),
            end=Position(line=line_number, character=utf16_length(line)),
        ),
        severity=DiagnosticSeverity.Error,
        code=code,
        source=DIAGNOSTIC_SOURCE,
        message=message,
    )


def _is_block_end(line: str) -> bool:
    return line.startswith(BLOCK_END_KEYWORD) and bool(
        WHITESPACE.fullmatch(line, len(BLOCK_END_KEYWORD))
    )


def has_function_block(lines: list[str]) -> bool:
    """
    Check whether any `function <name>` header is followed by an `end` line.

    A header is a line starting with `function`, then whitespace and a
    name, then only whitespace. The whitespace may span lines, so a bare
    `function` line can take its name from the next non-blank line. The
    block is closed by any later line that is `end` plus optional
    whitespace. One pass, no backtracking across lines.
    """
    header_found = False
    awaiting_name = False

    for line in lines:
        if header_found:
            if _is_block_end(line):
                return True
            continue

        if awaiting_name:
            if WHITESPACE.fullmatch(line):
                continue
            awaiting_name = False
            if FUNCTION_NAME_LINE.fullmatch(line):
                header_found = True
                continue

        if line.startswith(FUNCTION_KEYWORD):
            rest_start = len(FUNCTION_KEYWORD)
            if WHITESPACE.fullmatch(line, rest_start):
                awaiting_name = True
            elif FUNCTION_HEADER_NAME.fullmatch(line, rest_start):
                header_found = True

    return False


def check_function_blocks(lines: list[str]) -> list[Diagnostic]:
    if has_function_block(lines):
        return []

    return [
        _line_diagnostic(
            i, line, INVALID_FUNCTION_DECLARATION, FUNCTION_MESSAGE
        )
        for i, line in enumerate(lines)
        if line.startswith(FUNCTION_LINE_PREFIX)
    ]


def check_variable_declarations(lines: list[str]) -> list[Diagnostic]:
    return [
        _line_diagnostic(
            i, line, INVALID_VARIABLE_DECLARATION, VARIABLE_MESSAGE
        )
        for i, line in enumerate(lines)
        if line.startswith(VARIABLE_LINE_PREFIX)
        and not VARIABLE_LINE.fullmatch(line)
    ]


def validate(text: str) -> list[Diagnostic]:
    """
    Run every syntax rule against the document text.

    Args:
        text: Full document text

    Returns:
        Diagnostics for the whole document. The list replaces whatever was
        published before for this document.
    """
    lines = document_lines(text)

    diagnostics = check_function_blocks(lines)
    diagnostics.extend(check_variable_declarations(lines))
    return diagnostics
