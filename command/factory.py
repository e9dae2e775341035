"""
Command factory for registering and creating commands.
"""

from typing import Type

from command.base import CommandBase
from errors import UnknownCommandError


class CommandFactory:
    """Factory for creating and managing commands."""

    _commands: dict[str, Type[CommandBase]] = {}

    @classmethod
    def register(cls, command_class: Type[CommandBase]) -> None:
        """Register a command class."""
        instance = command_class()
        cls._commands[instance.name.value] = command_class

    @classmethod
    def create(cls, command_name: str) -> CommandBase:
        """
        Create a command instance by name.

        Args:
            command_name: Command kind, as found in the ``type`` field

        Returns:
            Command instance

        Raises:
            UnknownCommandError: If command not found
        """
        if command_name not in cls._commands:
            raise UnknownCommandError(command_name)
        return cls._commands[command_name]()


def register_builtin_commands():
    """Register built-in commands with lazy imports to avoid circular imports."""
    from command.commands.chat import ChatCommand
    from command.commands.join import JoinCommand
    from command.commands.joke import JokeCommand
    from command.commands.members import MembersCommand
    from command.commands.priv import PrivCommand
    from command.commands.rename import RenameCommand

    CommandFactory.register(JoinCommand)
    CommandFactory.register(ChatCommand)
    CommandFactory.register(JokeCommand)
    CommandFactory.register(MembersCommand)
    CommandFactory.register(PrivCommand)
    CommandFactory.register(RenameCommand)
