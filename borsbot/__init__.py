"""Parse merge-bot commands from pull request comments and render bot replies."""

__version__ = "0.1.0"

__all__ = ["commands", "comment", "parts", "parser"]