# errors.py
from __future__ import annotations


class GameCrafterError(RuntimeError):
    """Base error for the game page pipeline."""


class SandboxError(GameCrafterError):
    """A sandbox primitive (read, list, exec) failed."""


class PageServiceError(GameCrafterError):
    """The page storage / build service rejected a request."""
