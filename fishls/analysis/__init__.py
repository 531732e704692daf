"""Document analysis for fish scripts."""
from .completions import BUILTIN_COMPLETIONS, build_completion_items
from .symbols import extract_symbols
from .validator import validate

__all__ = ['BUILTIN_COMPLETIONS', 'build_completion_items', 'extract_symbols', 'validate']
