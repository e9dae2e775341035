"""
Server configuration loaded from environment variables.
"""

import os
from dataclasses import dataclass


DEFAULT_JOKE = "bad joke"


@dataclass
class ServerConfig:
    """Configuration for the chat server."""

    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    joke_text: str = DEFAULT_JOKE
    reload: bool = False

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Build a config from CHAT_* / LOG_LEVEL environment variables."""
        return cls(
            host=os.getenv("CHAT_HOST", cls.host),
            port=int(os.getenv("CHAT_PORT", cls.port)),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            joke_text=os.getenv("CHAT_JOKE_TEXT", cls.joke_text),
            reload=os.getenv("CHAT_RELOAD", "").lower() in ("1", "true", "yes"),
        )
