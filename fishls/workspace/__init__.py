"""Document state management for fishls."""
from .document_state import DocumentState, DocumentSymbols

__all__ = ['DocumentState', 'DocumentSymbols']
