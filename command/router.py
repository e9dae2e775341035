"""
Command parser for inbound client messages.
"""

import json

from pydantic import TypeAdapter, ValidationError

from errors import MalformedCommandError, UnknownCommandError
from models import CommandRequest, CommandType

_request_adapter = TypeAdapter(CommandRequest)
_known_types = {kind.value for kind in CommandType}


class CommandParser:
    """Parse raw client payloads into typed command requests."""

    @staticmethod
    def parse(raw: str | bytes) -> CommandRequest:
        """
        Decode a JSON payload into one of the command request models.

        Example:
            '{"type": "chat", "text": "hi"}' -> ChatRequest(type="chat", text="hi")

        Raises:
            MalformedCommandError: If the payload is not a valid JSON object
                or is missing fields required by its command type
            UnknownCommandError: If the ``type`` field names no known command
        """
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedCommandError(f"invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise MalformedCommandError(f"expected a JSON object, got {type(data).__name__}")

        command_type = data.get("type")
        if not isinstance(command_type, str) or command_type not in _known_types:
            raise UnknownCommandError(command_type)

        try:
            return _request_adapter.validate_python(data)
        except ValidationError as e:
            raise MalformedCommandError(f"invalid {command_type} command: {e}") from e

    @staticmethod
    def split_args(text: str) -> list[str]:
        """
        Split command text on whitespace, dropping empty tokens.

        Example:
            "/priv  alice hello   there" -> ["/priv", "alice", "hello", "there"]
        """
        return text.split()
