"""
Chat rooms: membership tracking and message fan-out.
"""

import asyncio
import logging
from typing import TYPE_CHECKING, Optional

from models import OutboundMessage

if TYPE_CHECKING:
    from chat_user import ChatUser

logger = logging.getLogger(__name__)


class Room:
    """A named group of connections sharing broadcasts and a member list.

    Members are kept in join order. Mutations and snapshots happen under
    ``_lock``; delivery always works on a snapshot so that a join or leave
    during a broadcast never affects the iteration in progress.
    """

    def __init__(self, name: str):
        self.name = name
        self.members: dict["ChatUser", None] = {}
        self._lock = asyncio.Lock()

    async def join(self, user: "ChatUser") -> None:
        async with self._lock:
            self.members[user] = None
        logger.info(f"{user.name!r} joined room {self.name} ({len(self.members)} members)")

    async def leave(self, user: "ChatUser") -> bool:
        """Remove a member; returns False if it was not in the room."""
        async with self._lock:
            if user not in self.members:
                return False
            del self.members[user]
        logger.info(f"{user.name!r} left room {self.name} ({len(self.members)} members)")
        return True

    async def snapshot(self) -> list["ChatUser"]:
        async with self._lock:
            return list(self.members)

    async def member_names(self) -> list[str]:
        """Display names in join order; unnamed members render as ''."""
        return [member.name or "" for member in await self.snapshot()]

    async def broadcast(self, message: OutboundMessage) -> int:
        """
        Deliver a message to every current member.

        Returns:
            Number of members the message could not be delivered to
        """
        recipients = await self.snapshot()
        failed = 0
        for member in recipients:
            if not await member.send(message):
                failed += 1

        if failed:
            logger.warning(
                f"Broadcast in room {self.name} failed for {failed}/{len(recipients)} members"
            )
        return failed

    async def private_msg(self, message: OutboundMessage, user: "ChatUser") -> bool:
        delivered = await user.send(message)
        if not delivered:
            logger.warning(f"Private message to {user.name!r} in room {self.name} was not delivered")
        return delivered

    def is_empty(self) -> bool:
        return len(self.members) == 0


class RoomRegistry:
    """Process-wide lookup of rooms by name, created once at startup."""

    def __init__(self):
        self._rooms: dict[str, Room] = {}

    def get(self, name: str) -> Room:
        """Return the room called ``name``, creating it on first use."""
        room = self._rooms.get(name)
        if room is None:
            room = Room(name)
            self._rooms[name] = room
            logger.info(f"Room {name} created")
        return room

    def get_room(self, name: str) -> Optional[Room]:
        return self._rooms.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._rooms

    def __len__(self) -> int:
        return len(self._rooms)

    async def rooms(self) -> dict[str, list[str]]:
        return {name: await room.member_names() for name, room in list(self._rooms.items())}
