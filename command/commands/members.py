"""
Members command implementation.
"""

from command.base import CommandBase, CommandContext
from models import CommandType, MembersRequest, OutboundMessage

MEMBERS_LIST = "Members list"


class MembersCommand(CommandBase):
    """Send the requester the names of everyone in the room."""

    @property
    def name(self) -> CommandType:
        return CommandType.MEMBERS

    async def execute(self, context: CommandContext, request: MembersRequest) -> None:
        names = await context.room.member_names()
        await context.room.private_msg(
            OutboundMessage(name=MEMBERS_LIST, type="members", text=", ".join(names)),
            context.user,
        )
