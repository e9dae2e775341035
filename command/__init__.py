"""
Command system for the chat server.
Provides the base command class, the parser, the factory and the
built-in command implementations.
"""

from command.base import CommandBase, CommandContext
from command.factory import CommandFactory, register_builtin_commands
from command.router import CommandParser

__all__ = ['CommandBase', 'CommandContext', 'CommandFactory', 'CommandParser', 'register_builtin_commands']

register_builtin_commands()
