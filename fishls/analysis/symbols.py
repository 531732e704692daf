"""
Symbol extraction.

Collects the names of user-defined functions and variables from the full
document text. Every declaration counts, so a name declared twice shows up
twice.
"""

from __future__ import annotations

from fishls.analysis.patterns import FUNCTION_DECLARATION, VARIABLE_DECLARATION
from fishls.workspace.document_state import DocumentSymbols


def extract_function_names(text: str) -> list[str]:
    return [match.group(1) for match in FUNCTION_DECLARATION.finditer(text)]


def extract_variable_names(text: str) -> list[str]:
    return [match.group(1) for match in VARIABLE_DECLARATION.finditer(text)]


def extract_symbols(text: str) -> DocumentSymbols:
    """
    Extract all function and variable declarations from a document.

    Args:
        text: Full document text

    Returns:
        A DocumentSymbols snapshot, ready to replace the current state
    """
    return DocumentSymbols(
        custom_functions=tuple(extract_function_names(text)),
        custom_variables=tuple(extract_variable_names(text)),
    )
