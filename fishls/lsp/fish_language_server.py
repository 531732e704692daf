from lsprotocol.types import TextDocumentSyncKind
from pygls.lsp.server import LanguageServer

from fishls.lsp.capabilities.capabilities import CapabilityManager
from fishls.lsp.text_sync_manager import TextSyncManager
from fishls.workspace.document_state import DocumentState


class FishLanguageServer(LanguageServer):
    """
    Custom Language Server with fish-specific attributes.

    Attributes:
        document_state: Symbols of the most recently analyzed document
    """

    def __init__(self, name: str, version: str):
        super().__init__(
            name, version, text_document_sync_kind=TextDocumentSyncKind.Full
        )

        self.document_state = DocumentState()
        self.capability_manager: CapabilityManager | None = None
        self.text_sync_manager: TextSyncManager | None = None
