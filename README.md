# tcpchat

A small group-chat server that speaks plain text over TCP. Anyone with a
line-based TCP client (such as `nc`) can connect, pick a nickname and start
talking.

## Installation

```
pip install .
```

## Running the server

```
tcpchat          # listens on port 8989
tcpchat 2525     # listens on port 2525
```

The same entry point is `tcpchat.cli.main`, so `python -m tcpchat.cli`
works as well.

Passing more than one argument prints a usage line and exits with status 1.
If the port is not a number from 0 to 65535, or the address cannot be
bound, a `Server error: ...` line is printed and the exit status is 1.
Ctrl + C stops the server.

Every chat line, join, leave and nickname change is printed on the server
console and appended to a log file named after the port, for example
`logs/log8989`. Create the `logs` directory beforehand if you want the log
kept; without it the server still runs and only reports that the file could
not be opened. Private messages are neither logged nor kept in the history.

## Joining a chat

```
nc localhost 8989
```

You are greeted with a banner and asked for a name. Names must contain at
least one non-blank character and must be unique; otherwise you are asked
again. The server accepts at most 10 users at a time; a later arrival is
told the server is full and disconnected.

On joining you receive the whole conversation so far, and everyone is told
that you have arrived. Chat lines look like
`[2024-01-31 12:00:00][alice]: hello`.

## Commands

| Command                         | Effect                                  |
|---------------------------------|-----------------------------------------|
| `<message>`                     | Send a message to everyone.             |
| `-n <name>`, `-name <name>`     | Change your nickname.                   |
| `-w <user> <text>`, `-whisper <user> <text>` | Send a private message to one user. |
| `-h`, `-help`                   | Show the manual.                        |

`-n` or `-w` given without enough arguments answers with a short usage
text. Any other line starting with `-` is answered with a hint to try `-h`.
Lines made only of whitespace are ignored. Close your client (for example
with Ctrl + C) to leave; the others are told that you left.

## Using it from Python

```python
import asyncio
from tcpchat.logfile import setup_log_file
from tcpchat.server import ChatServer

server = ChatServer(":8989", setup_log_file(":8989"))
try:
    asyncio.run(server.start())
finally:
    server.close()
```

`ChatServer` also offers `broadcast(message, target)`, `add_history`,
`get_history`, `has_client` and `rename`. The command handlers live in
`tcpchat.commands` (`help_command`, `name_command`, `whisper_command`) and
the fixed texts and helpers in `tcpchat.messages`.

## What it does not do

The chat history is held in memory only: it starts empty each time the
server starts, and the log file is written but never read back. There is no
encryption, no password or account system, and no client program; any plain
TCP client serves.

## Running the tests

```
pip install ".[test]"
pytest
```