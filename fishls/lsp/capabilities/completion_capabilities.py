"""
Completion capability for fish scripts.

Returns the full catalog on every request regardless of cursor position.
"""

from lsprotocol.types import CompletionList, CompletionParams

from fishls.analysis.completions import build_completion_items
from fishls.lsp.capabilities.capabilities import CompletionCapability


class FishCompletionCapability(CompletionCapability):
    """Provides builtin commands plus the document's own functions and variables."""

    @property
    def name(self) -> str:
        return "fish_completion"

    @property
    def description(self) -> str:
        return "Autocomplete fish builtins and user-defined functions and variables"

    async def can_handle(self, params: CompletionParams) -> bool:
        return True

    async def complete(self, params: CompletionParams) -> CompletionList:
        symbols = await self.document_state.snapshot()
        return CompletionList(
            is_incomplete=False, items=build_completion_items(symbols)
        )
