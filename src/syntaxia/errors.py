from __future__ import annotations

from typing import List, Optional

import discord


class SyntaxiaError(Exception):
    """Base class for every error raised by the bot."""


class ReconcileError(SyntaxiaError):
    """A reconciliation pass could not complete."""


class GuildNotFoundError(ReconcileError):
    def __init__(self, guild_id: int) -> None:
        super().__init__(f"Guild {guild_id} not found")
        self.guild_id = guild_id


class PlatformError(ReconcileError):
    """A Discord API call failed. The original exception is kept on ``cause``."""

    def __init__(self, operation: str, cause: Optional[discord.HTTPException] = None) -> None:
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Discord API error during {operation}{detail}")
        self.operation = operation
        self.cause = cause


class ConfigValidationError(SyntaxiaError):
    def __init__(self, problems: List[str]) -> None:
        super().__init__("Invalid configuration: " + "; ".join(problems))
        self.problems = problems


class UserCommandError(SyntaxiaError):
    """Error whose message is meant to be shown to the invoking user."""
