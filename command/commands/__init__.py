"""Built-in chat commands."""
