"""
Analysis capabilities.

Both run on every open and change notification, in this order:
the syntax check publishes diagnostics, then the symbol index refreshes
the document state used by completion. The regex work runs in a worker
thread so completion requests are not held up on the event loop.
"""

import asyncio
import logging

from lsprotocol.types import PublishDiagnosticsParams

from fishls.analysis.symbols import extract_symbols
from fishls.analysis.validator import validate
from fishls.lsp.capabilities.capabilities import AnalysisCapability

logger = logging.getLogger(__name__)

# All diagnostics are published under one fixed document identifier
DIAGNOSTICS_URI = "file://dummy.fish"


class SyntaxDiagnosticsCapability(AnalysisCapability):
    """Validates fish syntax rules and publishes the diagnostics."""

    @property
    def name(self) -> str:
        return "syntax_diagnostics"

    @property
    def description(self) -> str:
        return "Report malformed function blocks and variable declarations"

    async def analyze(self, text: str) -> None:
        try:
            diagnostics = await asyncio.to_thread(validate, text)
        except Exception:
            logger.exception("Syntax validation failed, clearing diagnostics")
            diagnostics = []

        logger.debug("Publishing %d diagnostics", len(diagnostics))
        self.server.text_document_publish_diagnostics(
            PublishDiagnosticsParams(uri=DIAGNOSTICS_URI, diagnostics=diagnostics)
        )


class SymbolIndexCapability(AnalysisCapability):
    """Keeps the document state in sync with declared functions and variables."""

    @property
    def name(self) -> str:
        return "symbol_index"

    @property
    def description(self) -> str:
        return "Index user-defined functions and variables for completion"

    async def analyze(self, text: str) -> None:
        try:
            symbols = await asyncio.to_thread(extract_symbols, text)
        except Exception:
            # Keep the symbols from the previous pass
            logger.exception("Symbol extraction failed, keeping previous symbols")
            return

        await self.document_state.replace(symbols)
        logger.debug(
            "Indexed %d functions and %d variables",
            len(symbols.custom_functions),
            len(symbols.custom_variables),
        )
