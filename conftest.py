"""
Shared fixtures: fake send channels and users bound to a fresh room.
"""

import json

import pytest

from chat_user import ChatUser
from room import RoomRegistry


class FakeChannel:
    """Send channel that records decoded payloads, or fails on demand."""

    def __init__(self, fail: bool = False):
        self.sent: list[dict] = []
        self.fail = fail
        self.attempts = 0

    async def __call__(self, payload: str) -> None:
        self.attempts += 1
        if self.fail:
            raise ConnectionError("connection closed")
        self.sent.append(json.loads(payload))

    def clear(self) -> None:
        self.sent.clear()


@pytest.fixture
def registry():
    return RoomRegistry()


@pytest.fixture
def room(registry):
    return registry.get("lobby")


@pytest.fixture
def connect(room):
    """Factory returning (user, channel) pairs bound to the lobby."""

    def _connect(fail: bool = False, target_room=None):
        channel = FakeChannel(fail=fail)
        user = ChatUser(channel, target_room or room, joke_text="bad joke")
        return user, channel

    return _connect
