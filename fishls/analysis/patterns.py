"""
Pattern catalog for fish scripts.

All recognizers operate on raw document text. They are compiled once at
import time, so a broken pattern fails the server at startup instead of on
the first keystroke. Validation patterns are applied to one line at a time
and contain no nested repetition, so matching stays linear in line length.
"""

import re

FUNCTION_KEYWORD = "function"
VARIABLE_KEYWORD = "set"
BLOCK_END_KEYWORD = "end"
VARIABLE_SIGIL = "$"

# Line prefixes that make a line subject to validation
FUNCTION_LINE_PREFIX = f"{FUNCTION_KEYWORD} "
VARIABLE_LINE_PREFIX = f"{VARIABLE_KEYWORD} "

# Symbol extraction (whole document, one match per declaration)
FUNCTION_DECLARATION = re.compile(r"^function\s+(\w+)", re.MULTILINE)
VARIABLE_DECLARATION = re.compile(r"^set\s+(\w+)\s+", re.MULTILINE)

# Function block validation, matched against the rest of a line.
# "function foo" names the function on the same line ...
FUNCTION_HEADER_NAME = re.compile(r"\s+\w+\s*")
# ... while a bare "function" takes the name from the next non-blank line
FUNCTION_NAME_LINE = re.compile(r"\s*\w+\s*")
WHITESPACE = re.compile(r"\s*")

VARIABLE_LINE = re.compile(r'set\s+\w+(?:\s+"[^"]*")*\s*')
