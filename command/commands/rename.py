"""
Rename command implementation.
"""

from command.base import CommandBase, CommandContext
from command.router import CommandParser
from errors import MalformedCommandError
from models import CommandType, NameRequest, OutboundMessage


class RenameCommand(CommandBase):
    """Change the sender's display name, announcing it under the old one."""

    @property
    def name(self) -> CommandType:
        return CommandType.NAME

    async def execute(self, context: CommandContext, request: NameRequest) -> None:
        args = CommandParser.split_args(request.text)
        if len(args) < 2:
            raise MalformedCommandError("name command requires a new name")

        user = context.user
        new_name = args[1]
        # the announcement must go out before the name changes
        await context.room.broadcast(
            OutboundMessage(
                name="announcement",
                type="chat",
                text=f"{user.name} has decided to change their name to {new_name}",
            )
        )
        user.name = new_name
