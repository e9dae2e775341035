"""
Base class and data structures for command system.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from config import DEFAULT_JOKE
from models import CommandType

if TYPE_CHECKING:
    from chat_user import ChatUser
    from room import Room


@dataclass
class CommandContext:
    """Context passed to commands during execution."""
    user: "ChatUser"
    room: "Room"
    joke_text: str = DEFAULT_JOKE


class CommandBase(ABC):
    """Abstract base class for all commands."""

    # Everything except join needs a display name to act on
    requires_join: bool = True

    @property
    @abstractmethod
    def name(self) -> CommandType:
        """Command kind, matching the ``type`` field of inbound messages."""
        pass

    @abstractmethod
    async def execute(self, context: CommandContext, request) -> None:
        """
        Execute the command.

        Args:
            context: Command execution context
            request: Validated inbound request for this command kind
        """
        pass
