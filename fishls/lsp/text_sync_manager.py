"""
Text Synchronization Manager

Manages LSP text sync events and provides hook extension points
for capabilities to analyze the full document text on every edit.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Awaitable, Callable

from lsprotocol.types import (
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    LogMessageParams,
    MessageType,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
)

if TYPE_CHECKING:
    from fishls.lsp.fish_language_server import FishLanguageServer

logger = logging.getLogger(__name__)

# Hooks receive the complete current document text
TextHook = Callable[[str], Awaitable[None]]


def full_text_from_change(params: DidChangeTextDocumentParams) -> str:
    """
    Return the replacement text of a full-sync change notification.

    The server advertises full document sync, so the first change event
    carries the whole document. No change events means an empty document.
    """
    for change in params.content_changes:
        return change.text
    return ""


class TextSyncManager:
    """
    Manages text document synchronization and hook broadcasting.

    Open and change notifications are reduced to the full document text and
    handed to every registered hook.

    Design Principles:
    - Text sync is infrastructure, NOT a capability
    - Provides extension points via hooks
    - Errors are isolated (one hook failure doesn't affect others)
    - Hooks run in registration order
    - No return values (notifications, not requests)

    Usage:
        # During server initialization (before capabilities)
        text_sync = TextSyncManager(server)
        text_sync.register_handlers()
        server.text_sync_manager = text_sync

        # Capabilities register hooks to analyze the text
        class SyntaxDiagnosticsCapability(Capability):
            def register(self):
                self.server.text_sync_manager.add_on_text_hook(self._run)
    """

    def __init__(self, server: FishLanguageServer) -> None:
        """
        Initialize TextSyncManager.

        Args:
            server: The FishLanguageServer instance
        """
        self.server = server
        self._on_text_hooks: list[TextHook] = []
        # asyncio.Lock wakes waiters in FIFO order
        self._pass_lock = asyncio.Lock()

    def add_on_text_hook(self, hook: TextHook) -> None:
        """
        Register a hook for document open and change events.

        The hook is called with the full document text after EVERY edit,
        so each call is one complete analysis pass.

        Args:
            hook: Async function taking the document text

        Example:
            async def on_text(text: str):
                await state.replace(extract_symbols(text))

            text_sync.add_on_text_hook(on_text)
        """
        self._on_text_hooks.append(hook)

    async def _broadcast_text(self, text: str) -> None:
        """
        Broadcast the document text to all registered hooks.

        Hooks are called in registration order. Errors are caught
        and logged to prevent one hook from breaking others.

        Passes do not overlap: a newer text waits until every hook has
        finished with the previous one, so the last notification always
        produces the final document state.

        Args:
            text: Full document text
        """
        async with self._pass_lock:
            for hook in self._on_text_hooks:
                try:
                    await hook(text)
                except Exception as e:
                    logger.exception("Text hook %s failed", hook.__name__)
                    self.server.window_log_message(
                        LogMessageParams(
                            type=MessageType.Error,
                            message=f"Error in text hook {hook.__name__}: "
                                    f"{type(e).__name__}: {e}"
                        )
                    )

    def register_handlers(self) -> None:
        """
        Register LSP text synchronization handlers with the server.

        This should be called once during server initialization,
        BEFORE capabilities are registered (so they can add hooks).

        Registers handlers for:
        - textDocument/didOpen
        - textDocument/didChange
        """

        @self.server.feature(TEXT_DOCUMENT_DID_OPEN)
        async def did_open(
            ls: FishLanguageServer,
            params: DidOpenTextDocumentParams,
        ) -> None:
            """Analyze the document as soon as the editor opens it."""
            ls.window_log_message(
                LogMessageParams(
                    type=MessageType.Info,
                    message=f"Document opened: {params.text_document.uri}"
                )
            )

            await self._broadcast_text(params.text_document.text)

        @self.server.feature(TEXT_DOCUMENT_DID_CHANGE)
        async def did_change(
            ls: FishLanguageServer,
            params: DidChangeTextDocumentParams,
        ) -> None:
            """
            Handle document changed notification.

            Called on EVERY keystroke in the editor. The whole document is
            re-analyzed each time.
            """
            ls.window_log_message(
                LogMessageParams(
                    type=MessageType.Info,
                    message=f"Document changed: {params.text_document.uri}"
                )
            )

            await self._broadcast_text(full_text_from_change(params))
