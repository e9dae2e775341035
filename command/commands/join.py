"""
Join command - register in the room and announce arrival.
"""

from command.base import CommandBase, CommandContext
from models import CommandType, JoinRequest, OutboundMessage


class JoinCommand(CommandBase):
    """Take a display name, enter the room and tell everyone."""

    requires_join = False

    @property
    def name(self) -> CommandType:
        return CommandType.JOIN

    async def execute(self, context: CommandContext, request: JoinRequest) -> None:
        user, room = context.user, context.room
        user.name = request.name
        # register first so the joiner also receives its own notice
        await room.join(user)
        await room.broadcast(OutboundMessage.note(f'{user.name} joined "{room.name}".'))
