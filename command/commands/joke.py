"""
Joke command implementation.
"""

from command.base import CommandBase, CommandContext
from models import CommandType, JokeRequest, OutboundMessage

JOKE_BOT = "JokeBot"


class JokeCommand(CommandBase):
    """Send the requester a joke, privately."""

    @property
    def name(self) -> CommandType:
        return CommandType.JOKE

    async def execute(self, context: CommandContext, request: JokeRequest) -> None:
        await context.room.private_msg(
            OutboundMessage(name=JOKE_BOT, type="joke", text=context.joke_text),
            context.user,
        )
