from lsprotocol.types import (
    INITIALIZED,
    TEXT_DOCUMENT_COMPLETION,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    InitializedParams,
    LogMessageParams,
    MessageType,
)

from fishls import SERVER_NAME, __version__
from fishls.lsp.capabilities.capabilities import CapabilityManager
from fishls.lsp.fish_language_server import FishLanguageServer
from fishls.lsp.text_sync_manager import TextSyncManager

# Completion is triggered on "." in addition to identifier characters
COMPLETION_OPTIONS = CompletionOptions(
    trigger_characters=["."],
    resolve_provider=False,
)


def create_server() -> FishLanguageServer:
    """
    Creates and returns a configured Language Server instance.

    The LanguageServer class from pygls handles:
    - JSON-RPC communication with clients (editors)
    - Request/response lifecycle, including initialize and shutdown
    - Notifications and event handling

    Text sync is registered before the capabilities so that the analysis
    capabilities can add their hooks to it.
    """
    server = FishLanguageServer(SERVER_NAME, __version__)

    server.text_sync_manager = TextSyncManager(server)
    server.text_sync_manager.register_handlers()

    server.capability_manager = CapabilityManager(server)
    server.capability_manager.register_all()

    @server.feature(INITIALIZED)
    def initialized(ls: FishLanguageServer, params: InitializedParams):
        ls.window_log_message(
            LogMessageParams(
                MessageType.Info, "Fish Language Server initialized!"
            )
        )

    @server.feature(TEXT_DOCUMENT_COMPLETION, COMPLETION_OPTIONS)
    async def completion(ls: FishLanguageServer, params: CompletionParams):
        if ls.capability_manager:
            return await ls.capability_manager.handle_completion(params)
        return CompletionList(is_incomplete=False, items=[])

    return server
