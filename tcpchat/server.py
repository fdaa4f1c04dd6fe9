"""The chat server: connection handling, broadcasting and chat history."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TextIO

from .commands import help_command, name_command, whisper_command
from .messages import MAX_CLIENTS, WELCOME_BANNER, is_message_valid, timestamp

logger = logging.getLogger(__name__)

_ERASE_ECHO = b"\x1b[1A\r\x1b[K"


@dataclass(eq=False)
class Client:
    """A connected chat user and the queue of lines waiting to be sent to it."""

    name: str
    writer: asyncio.StreamWriter | None
    out: asyncio.Queue = field(default_factory=asyncio.Queue)

    def send(self, message: str | None) -> None:
        """Queue a message for delivery; None tells the writer to stop."""
        self.out.put_nowait(message)


class ChatServer:
    """Holds the connected clients, the chat history and the optional log file."""

    def __init__(self, listen_addr: str, log_file: TextIO | None = None) -> None:
        self.listen_addr = listen_addr
        self.log_file = log_file
        self.clients: dict[str, Client] = {}
        self.history: list[str] = []
        self._listener: asyncio.AbstractServer | None = None

    async def start(self) -> None:
        """Listen on the configured address and serve connections until cancelled."""
        host, _, port_text = self.listen_addr.rpartition(":")
        try:
            port = int(port_text)
        except ValueError:
            raise ValueError(f"invalid port {port_text!r}") from None
        if not 0 <= port <= 65535:
            raise ValueError(f"invalid port {port_text!r}")

        self._listener = await asyncio.start_server(
            self.handle_connection, host or None, port
        )
        print(f"Listening on the port :{self.listen_addr[1:]}")
        async with self._listener:
            await self._listener.serve_forever()

    async def handle_connection(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        """Run the name handshake and then the message loop for one connection."""
        print("New connection: ", writer.get_extra_info("peername"))
        client = await self._register(reader, writer)
        if client is None:
            await self._close_writer(writer)
            return

        for message in self.get_history():
            client.send(message)

        join_msg = f"[{timestamp()}][SERVER]: {client.name} joined our chat..."
        self.add_history(join_msg)
        self.broadcast(join_msg, None)

        sender = asyncio.create_task(self._client_writer(client))
        try:
            await self._read_loop(reader, writer, client)
        finally:
            self.clients.pop(client.name, None)
            leave_msg = f"[{timestamp()}][SERVER]: {client.name} left our chat..."
            self.add_history(leave_msg)
            self.broadcast(leave_msg, None)
            client.send(None)
            await sender
            await self._close_writer(writer)

    async def _register(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> Client | None:
        """Ask for a name until a valid, free one arrives; None if the peer is lost or refused."""
        writer.write(WELCOME_BANNER.encode())
        while True:
            try:
                await writer.drain()
                line = await reader.readline()
            except (OSError, ValueError) as err:
                logger.warning("Error reading name: %s", err)
                return None
            if not line.endswith(b"\n"):
                logger.warning("Error reading name: EOF")
                return None

            name = line.decode("utf-8", errors="replace").strip()
            if not is_message_valid(name):
                writer.write(b"Invalid name. Please try again.\n")
                continue
            if len(self.clients) >= MAX_CLIENTS:
                writer.write(
                    b"Server full. Please try again later.\nConnection to server lost.\n"
                )
                return None
            if name in self.clients:
                writer.write(b"Name already taken. Please choose a different name.\n")
                continue

            client = Client(name=name, writer=writer)
            self.clients[name] = client
            return client

    async def _read_loop(
        self,
        reader: asyncio.StreamReader,
        writer: asyncio.StreamWriter,
        client: Client,
    ) -> None:
        while True:
            try:
                line = await reader.readline()
            except (OSError, ValueError) as err:
                logger.warning("Read error from %s: %s", client.name, err)
                return
            if not line.endswith(b"\n"):
                return

            text = line.decode("utf-8", errors="replace").strip()
            if not is_message_valid(text):
                continue

            if text.startswith("-"):
                handled = (
                    whisper_command(text, self, client)
                    or help_command(text, client)
                    or name_command(text, self, client)
                )
                if not handled:
                    client.send(f"{text} is not a chat command\n try -h for help")
                continue

            formatted = f"[{timestamp()}][{client.name}]: {text}"
            self.add_history(formatted)
            self.broadcast(formatted, None)
            writer.write(_ERASE_ECHO)

    async def _client_writer(self, client: Client) -> None:
        """Write queued messages to the client until told to stop or the write fails."""
        while True:
            message = await client.out.get()
            if message is None or client.writer is None:
                return
            try:
                client.writer.write((message + "\n").encode())
                await client.writer.drain()
            except OSError:
                return

    @staticmethod
    async def _close_writer(writer: asyncio.StreamWriter) -> None:
        writer.close()
        try:
            await writer.wait_closed()
        except OSError:
            pass

    def broadcast(self, message: str, target: str | None = None) -> None:
        """Send to every client, or only to the named target when one is given."""
        if target:
            client = self.clients.get(target)
            if client is not None:
                client.send(message)
            return
        for client in list(self.clients.values()):
            client.send(message)

    def add_history(self, message: str) -> None:
        """Record a message, echo it on the console and append it to the log file."""
        self.history.append(message)
        print(message)
        if self.log_file is not None:
            try:
                self.log_file.write(message + "\n")
                self.log_file.flush()
            except (OSError, ValueError) as err:
                print("Error writing to log file:", err)

    def get_history(self) -> list[str]:
        """Return a copy of the chat history."""
        return list(self.history)

    def has_client(self, name: str) -> bool:
        """Return True if a client with this name is connected."""
        return name in self.clients

    def rename(self, client: Client, new_name: str) -> str:
        """Give a client a new name and return the old one."""
        if new_name in self.clients:
            raise ValueError(f"name {new_name!r} is already taken")
        old_name = client.name
        self.clients.pop(old_name, None)
        client.name = new_name
        self.clients[new_name] = client
        return old_name

    def close(self) -> None:
        """Stop listening and close the log file."""
        if self._listener is not None:
            self._listener.close()
            self._listener = None
        if self.log_file is not None:
            self.log_file.close()
            self.log_file = None