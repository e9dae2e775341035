"""
Exceptions raised while handling client commands.
"""


class ChatError(Exception):
    """Base class for errors surfaced to the transport layer."""


class MalformedCommandError(ChatError):
    """Inbound payload could not be parsed into a command."""


class UnknownCommandError(MalformedCommandError):
    """Inbound payload named a command type that does not exist."""

    def __init__(self, command_type):
        self.command_type = command_type
        super().__init__(f"bad message: {command_type}")


class NotJoinedError(ChatError):
    """A command other than join arrived before the connection joined."""
