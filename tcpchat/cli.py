"""Command-line entry point that starts the chat server."""

from __future__ import annotations

import asyncio
import sys

from .logfile import setup_log_file
from .server import ChatServer

DEFAULT_PORT = "8989"
USAGE = "[USAGE]: ./TCPChat $port"


def parse_address(argv: list[str]) -> str:
    """Return the listen address for the arguments: none (default port) or one port."""
    if len(argv) > 1:
        raise ValueError(USAGE)
    port = argv[0] if argv else DEFAULT_PORT
    return ":" + port


def main(argv: list[str] | None = None) -> int:
    """Start the chat server; return a non-zero status on bad usage or failure."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        addr = parse_address(argv)
    except ValueError as err:
        print(err)
        return 1

    server = ChatServer(addr, setup_log_file(addr))
    print("Server online...")
    try:
        asyncio.run(server.start())
    except (OSError, ValueError) as err:
        print(f"Server error: {err}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    finally:
        server.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())