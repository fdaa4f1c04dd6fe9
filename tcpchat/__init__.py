"""A multi-user TCP chat server with nicknames, private messages and a shared history."""

__version__ = "0.1.0"