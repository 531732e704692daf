"""
LSP Capabilities Manager

This module manages LSP feature handlers (completion, diagnostics) using
a plugin architecture.

Design Principles:
1. Plugin-based (add capabilities without modifying core)
2. Type-safe (abstract base class)
3. Composable (multiple handlers for same feature)
4. Testable (isolated capability handlers)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from lsprotocol.types import CompletionList, CompletionParams


if TYPE_CHECKING:
    from fishls.lsp.fish_language_server import FishLanguageServer


class Capability(ABC):
    """
    Base class for all LSP capability handlers.

    Each capability handles one LSP feature and decides whether it can
    handle a specific request.
    """

    def __init__(self, server: FishLanguageServer) -> None:
        self.server = server
        self.document_state = server.document_state

    def register(self) -> None:
        """
        Register hooks with the server.

        This is called once during server initialization, after the
        text sync manager exists.
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name for this capability."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what this capability does."""
        pass


class CompletionCapability(Capability):
    """Base class for completion capabilities."""

    @abstractmethod
    async def can_handle(self, params: CompletionParams) -> bool:
        """
        Check if this capability can handle the completion request.

        Returns True if this capability should provide completions
        for the current context.
        """
        pass

    @abstractmethod
    async def complete(self, params: CompletionParams) -> CompletionList:
        """
        Provide completion items.

        Only called if can_handle() returns True.
        """
        pass


class AnalysisCapability(Capability):
    """Base class for capabilities that run on every full-text update."""

    def register(self) -> None:
        text_sync = self.server.text_sync_manager
        if text_sync is None:
            raise RuntimeError(
                f"{self.name} requires the text sync manager to be registered first"
            )
        text_sync.add_on_text_hook(self.analyze)

    @abstractmethod
    async def analyze(self, text: str) -> None:
        """Run one analysis pass over the full document text."""
        pass


class CapabilityManager:
    """
    Central manager for all LSP capabilities.

    Analysis capabilities run in registration order, so the syntax check
    always precedes symbol indexing for the same text.

    Usage:
        # In server initialization
        manager = CapabilityManager(server)
        manager.register_all()
    """

    def __init__(
        self,
        server: FishLanguageServer,
        capabilities: dict[str, Capability] | None = None,
    ):
        self.server = server

        # Default capabilities
        if capabilities is None:
            from fishls.lsp.capabilities.completion_capabilities import (
                FishCompletionCapability,
            )
            from fishls.lsp.capabilities.analysis_capabilities import (
                SymbolIndexCapability,
                SyntaxDiagnosticsCapability,
            )

            capabilities = {
                "syntax_diagnostics": SyntaxDiagnosticsCapability(server),
                "symbol_index": SymbolIndexCapability(server),
                "fish_completion": FishCompletionCapability(server),
            }

        self.capabilities = capabilities
        self._registered = False

    def register_all(self) -> None:
        """Register all capabilities with the server."""
        if self._registered:
            return

        for capability in self.capabilities.values():
            capability.register()

        self._registered = True

    def get_capability(self, name: str) -> Capability | None:
        """Get a specific capability by name"""
        return self.capabilities.get(name)

    def get_capabilities_by_type(self, capability_type: type) -> list[Capability]:
        """Get all capabilities of a specific type (e.g., all CompletionCapability)."""
        return [
            cap
            for cap in self.capabilities.values()
            if isinstance(cap, capability_type)
        ]

    async def handle_completion(self, params: CompletionParams) -> CompletionList:
        """
        Handle completion requests by delegating to capable handlers.

        This aggregates results from all completion capabilities that
        can handle the request.
        """
        all_items = []

        for capability in self.get_capabilities_by_type(CompletionCapability):
            if await capability.can_handle(params):  # pyright: ignore
                result = await capability.complete(params)  # pyright: ignore
                all_items.extend(result.items)

        return CompletionList(is_incomplete=False, items=all_items)
