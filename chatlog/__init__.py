"""chatlog: chat session, message and prompt storage service."""

__version__ = "0.1.0"
