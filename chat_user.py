"""
Per-connection protocol handler.

A ChatUser wraps one client connection: it parses the JSON commands the
client sends, runs them against the room the connection is bound to, and
delivers outbound messages through the connection's send function.
"""

import logging
from typing import Awaitable, Callable, Optional

from command import CommandContext, CommandFactory, CommandParser
from config import DEFAULT_JOKE
from errors import NotJoinedError
from models import OutboundMessage
from room import Room

logger = logging.getLogger(__name__)

SendChannel = Callable[[str], Awaitable[None]]


class ChatUser:
    """One client connection to a chat room."""

    def __init__(self, send: SendChannel, room: Room, joke_text: str = DEFAULT_JOKE):
        """
        Args:
            send: Coroutine function delivering one text frame to this client
            room: Room this connection is bound to for its lifetime
            joke_text: Text returned by the joke command
        """
        self._send = send
        self.room = room
        self.name: Optional[str] = None
        self.joke_text = joke_text

        logger.info(f"Created chat user in room {room.name}")

    @property
    def joined(self) -> bool:
        return self.name is not None

    async def send(self, message: OutboundMessage) -> bool:
        """Deliver a message to this client; failures are logged and ignored."""
        try:
            await self._send(message.to_json())
            return True
        except Exception as e:
            logger.debug(f"Failed to send to {self.name!r} in room {self.room.name}: {e}")
            return False

    async def handle_message(self, raw: str | bytes) -> None:
        """
        Parse one inbound payload and run the matching command.

        Raises:
            MalformedCommandError: Payload is not a valid command
            UnknownCommandError: Payload names an unknown command type
            NotJoinedError: A non-join command arrived before join
        """
        request = CommandParser.parse(raw)
        command = CommandFactory.create(request.type)

        if command.requires_join and not self.joined:
            raise NotJoinedError(f"{request.type} command received before join")

        context = CommandContext(user=self, room=self.room, joke_text=self.joke_text)
        logger.debug(f"Handling {request.type} from {self.name!r} in room {self.room.name}")
        await command.execute(context, request)

    async def handle_close(self) -> None:
        """Connection closed: leave the room and tell the remaining members."""
        # only the close that actually removed the user announces it
        if not await self.room.leave(self) or not self.joined:
            return
        await self.room.broadcast(OutboundMessage.note(f"{self.name} left {self.room.name}."))

    def __repr__(self) -> str:
        return f"ChatUser(name={self.name!r}, room={self.room.name!r})"
