"""Opening the per-port chat log file."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO


def log_file_name(listen_addr: str) -> Path:
    """Return the log path for a listen address such as ':8989' (logs/log8989)."""
    port = listen_addr[1:] if listen_addr.startswith(":") else listen_addr
    return Path("logs") / f"log{port}"


def setup_log_file(listen_addr: str) -> TextIO | None:
    """Open the log file for appending; print the error and return None on failure."""
    file_name = log_file_name(listen_addr)
    try:
        return open(file_name, "a", encoding="utf-8")
    except OSError as err:
        print("Error opening log file", file_name, ":", err)
        return None