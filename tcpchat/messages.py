"""Fixed texts shown to chat users and small helpers for message text."""

from __future__ import annotations

from datetime import datetime

MAX_CLIENTS = 10

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

WELCOME_BANNER = (
    "Welcome to TCP-Chat!\n"
    "         _nnnn_\n"
    "        dGGGGMMb\n"
    "       @p~qp~~qMb\n"
    "       M|@||@) M|\n"
    "       @,----.JM|\n"
    "      JS^\\__/  qKL\n"
    "     dZP        qKRb\n"
    "    dZP          qKKb\n"
    "   fZP            SMMb\n"
    "   HZM            MMMM\n"
    "   FqM            MMMM\n"
    " __| \".        |\\dS\"qML\n"
    " |    `.       | `' \\Zq\n"
    "_)      \\.___.,|     .'\n"
    "\\____   )MMMMMP|   .'\n"
    "     `-'       `--\n"
    "[ENTER YOUR NAME]: "
)

_CLEAR_SCREEN = "\033[H\033[2J"


def is_message_valid(data: str | bytes) -> bool:
    """Return True if the name or message holds at least one non-whitespace character."""
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8", errors="replace")
    return bool(data.strip())


def get_manual() -> str:
    """Return the help manual, prefixed with a clear-screen sequence."""
    return "".join(
        [
            _CLEAR_SCREEN,
            "\n",
            "Netcat (TCP-Chat) Manual\n",
            "--------------------------\n",
            "Commands:\n",
            "  <message>            \tSend a chat message to everyone.\n",
            "  -n, -name\t\tChange your nickname.\n",
            "  -w, -whisper\t\tSend a private message.\n",
            "  -h, -help            \tShow this help manual.\n",
            "\n",
            "\n",
            "  To leave the server, press: \033[1mCtrl + C\033[0m\n",
            "\n",
            "Enjoy chatting!\n",
        ]
    )


def name_prompt() -> str:
    """Return the usage text for the nickname command."""
    return "\nUsage:\n-name <new-name>\nor -n <new-name>"


def whisper_prompt() -> str:
    """Return the usage text for the whisper command."""
    return "\nUsage:\n-w [recipient] [message]\n"


def timestamp(moment: datetime | None = None) -> str:
    """Format a moment (default: now) the way chat lines carry it."""
    if moment is None:
        moment = datetime.now()
    return moment.strftime(TIME_FORMAT)