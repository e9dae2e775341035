"""
Private message command implementation.
"""

import logging

from command.base import CommandBase, CommandContext
from command.router import CommandParser
from models import CommandType, OutboundMessage, PrivRequest

logger = logging.getLogger(__name__)


class PrivCommand(CommandBase):
    """Send a private message to every member with a given name.

    The text looks like ``"/priv <target> <message...>"``; the first token is
    ignored. Duplicate names all receive the message, and an unknown target is
    silently ignored.
    """

    @property
    def name(self) -> CommandType:
        return CommandType.PRIV

    async def execute(self, context: CommandContext, request: PrivRequest) -> None:
        args = CommandParser.split_args(request.text)
        if len(args) < 2:
            logger.debug(f"priv from {context.user.name!r} has no target, ignoring")
            return

        target = args[1]
        message = OutboundMessage(
            name=f"private message from {context.user.name}",
            type="priv",
            text=" ".join(args[2:]),
        )

        delivered = 0
        for member in await context.room.snapshot():
            if member.name == target:
                await context.room.private_msg(message, member)
                delivered += 1

        logger.debug(f"priv from {context.user.name!r} to {target!r} matched {delivered} members")
