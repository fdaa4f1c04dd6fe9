"""Handlers for the dash-prefixed chat commands.

Each handler returns True when it consumed the command and False when the
caller should go on to the next handler.
"""

from __future__ import annotations

from .messages import get_manual, is_message_valid, name_prompt, timestamp, whisper_prompt


def help_command(command, client) -> bool:
    """Send the manual for '-h' or '-help'."""
    if command.strip() not in ("-h", "-help"):
        return False
    client.send(get_manual())
    return True


def name_command(command, server, client) -> bool:
    """Change the client's nickname for '-n <name>' or '-name <name>'."""
    if not command.startswith("-n"):
        return False

    tokens = command.split()
    if len(tokens) < 2:
        if tokens and tokens[0] == "-n":
            client.send(name_prompt())
            return True
        return False

    new_name = tokens[1]
    if not is_message_valid(new_name):
        client.send("[SERVER]: Invalid new name. Please try again.")
        return True

    if server.has_client(new_name):
        client.send("[SERVER]: Name already taken. Please choose a different name.")
        return True

    old_name = server.rename(client, new_name)
    notice = f"[{timestamp()}][SERVER]: {old_name} changed their name to {new_name}"
    server.add_history(notice)
    server.broadcast(notice, None)
    return True


def whisper_command(command, server, client) -> bool:
    """Send a private message for '-w <recipient> <message>'."""
    if not command.startswith("-w"):
        return False

    tokens = command.split()
    if len(tokens) < 3:
        if tokens and tokens[0] == "-w":
            client.send(whisper_prompt())
            return True
        return False

    target = tokens[1]
    if not server.has_client(target):
        client.send(f"{target} is not online or does not exist.")
        return True

    body = " ".join(tokens[2:])
    server.broadcast(f"[{timestamp()}][{client.name}] whispers: {body}", target)
    return True