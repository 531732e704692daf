"""
Document State for fishls

Holds the symbols extracted from the most recently analyzed document.

Design Principles:
1. Single document (the server tracks one open script)
2. Full replacement (each analysis pass swaps the whole snapshot)
3. Consistent reads (functions and variables always come from the same pass)
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentSymbols:
    """Symbols found in one analysis pass, in document order."""

    custom_functions: tuple[str, ...] = ()
    custom_variables: tuple[str, ...] = ()


class DocumentState:
    """
    Lock-guarded symbol cache shared by all LSP handlers.

    Writers serialize on an asyncio lock and publish a new immutable
    DocumentSymbols in a single assignment. Readers never wait on each other
    and always get one complete snapshot.

    Usage:
        state = DocumentState()

        # Analysis pass
        await state.replace(extract_symbols(text))

        # Completion request
        symbols = await state.snapshot()
    """

    def __init__(self, symbols: DocumentSymbols | None = None) -> None:
        self._symbols = symbols or DocumentSymbols()
        self._write_lock = asyncio.Lock()

    async def replace(self, symbols: DocumentSymbols) -> None:
        """Replace the current symbols with the result of a new pass."""
        async with self._write_lock:
            self._symbols = symbols

    async def snapshot(self) -> DocumentSymbols:
        """Return the symbols of the latest completed pass."""
        return self._symbols

    @property
    def custom_functions(self) -> tuple[str, ...]:
        return self._symbols.custom_functions

    @property
    def custom_variables(self) -> tuple[str, ...]:
        return self._symbols.custom_variables
