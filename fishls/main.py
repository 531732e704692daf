"""
Main entry point for the fish Language Server.

This file is executed when running: python -m fishls

The server communicates with editors via stdin/stdout using JSON-RPC,
so all logging goes to stderr.
"""
import argparse
import logging

from fishls import SERVER_NAME, __version__
from fishls.lsp.server import create_server

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def build_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=SERVER_NAME, description="Fish Language Server Protocol"
    )
    parser.add_argument(
        "-l",
        "--log-level",
        default="info",
        type=str.lower,
        choices=LOG_LEVELS,
        help="logging level (default: info)",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"{SERVER_NAME} {__version__}"
    )
    return parser


def configure_logging(log_level: str) -> None:
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT)


def main(argv: list[str] | None = None):
    """Start the language server on stdin/stdout."""
    args = build_argparser().parse_args(argv)
    configure_logging(args.log_level)

    server = create_server()
    logging.getLogger(__name__).info("Starting %s %s on stdio", SERVER_NAME, __version__)

    # Start the server - it will listen on stdin/stdout for LSP messages
    # from the editor client
    server.start_io()


if __name__ == "__main__":
    main()
