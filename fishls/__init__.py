"""fishls: a minimal language server for fish shell scripts."""

SERVER_NAME = "fish-lsp"
__version__ = "1.0"
