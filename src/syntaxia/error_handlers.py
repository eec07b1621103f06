from __future__ import annotations

import logging

from discord.ext import commands

log = logging.getLogger("syntaxia.error_handlers")


class ErrorHandler(commands.Cog):
    """Centralized error handling for prefix commands."""

    def __init__(self, bot: commands.Bot) -> None:
        self.bot = bot

    @commands.Cog.listener()
    async def on_command_error(self, ctx: commands.Context, error: commands.CommandError) -> None:
        if isinstance(error, commands.CommandNotFound):
            return  # Ignore unknown commands

        if isinstance(error, commands.CommandOnCooldown):
            await ctx.send(f"This command is on cooldown. Try again in {error.retry_after:.1f}s")
            return

        if isinstance(error, commands.NoPrivateMessage):
            await ctx.send(str(error))
            return

        # System errors are logged, never echoed to the channel.
        original = getattr(error, "original", error)
        log.error("Unexpected error in command %s: %s", ctx.command, original, exc_info=original)


async def setup_error_handlers(bot: commands.Bot) -> None:
    await bot.add_cog(ErrorHandler(bot))
