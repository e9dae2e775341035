"""
Chat command implementation.
"""

from command.base import CommandBase, CommandContext
from models import ChatRequest, CommandType, OutboundMessage


class ChatCommand(CommandBase):
    """Broadcast a chat line to the whole room, sender included."""

    @property
    def name(self) -> CommandType:
        return CommandType.CHAT

    async def execute(self, context: CommandContext, request: ChatRequest) -> None:
        await context.room.broadcast(
            OutboundMessage(name=context.user.name, type="chat", text=request.text)
        )
