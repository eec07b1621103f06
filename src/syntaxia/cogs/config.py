"""
Config Cog

The ``set`` prefix command: reads a YAML server description from the message
and applies it to the guild the message was sent in.
"""

from __future__ import annotations

import logging
from typing import Optional

from discord.ext import commands

from ..constants import MSG_CONFIGURING, MSG_FAILED, MSG_FINISHED, MSG_GUILD_ONLY, MSG_INVALID_YAML
from ..errors import ConfigValidationError, ReconcileError, UserCommandError
from ..reconcile import DiscordPlatform, PlatformClient, reconcile
from ..reconcile.desired import DesiredConfig
from ..schema import extract_yaml, load_config
from ..utils import truncate_text

log = logging.getLogger("syntaxia.cogs.config")


def _set_cooldown(ctx: commands.Context) -> Optional[commands.Cooldown]:
    seconds = getattr(getattr(ctx.bot, "settings", None), "set_cooldown_seconds", 0)
    if not seconds:
        return None
    return commands.Cooldown(1, float(seconds))


def parse_set_content(content: str) -> DesiredConfig:
    """Extract and validate the configuration posted with the command."""
    try:
        return load_config(extract_yaml(content))
    except ConfigValidationError as e:
        log.info("Invalid configuration posted: %s", "; ".join(e.problems))
        raise UserCommandError(MSG_INVALID_YAML) from e


class ConfigCog(commands.Cog):
    """Configuration-as-code commands."""

    def __init__(self, bot: commands.Bot, platform: Optional[PlatformClient] = None) -> None:
        self.bot = bot
        settings = getattr(bot, "settings", None)
        self.platform = platform or DiscordPlatform(bot, reason=getattr(settings, "audit_reason", None))

    @commands.command(name="set")
    @commands.dynamic_cooldown(_set_cooldown, commands.BucketType.guild)
    async def set_config(self, ctx: commands.Context, *, content: str = "") -> None:
        try:
            await self.apply(ctx, content)
        except UserCommandError as e:
            await ctx.send(str(e))

    async def apply(self, ctx: commands.Context, content: str) -> None:
        if ctx.guild is None:
            raise UserCommandError(MSG_GUILD_ONLY)

        config = parse_set_content(content)
        await ctx.send(MSG_CONFIGURING)

        try:
            report = await reconcile(config, ctx.guild.id, self.platform)
        except ReconcileError as e:
            log.warning("Configuring guild %s failed: %s", ctx.guild.id, e, exc_info=e)
            await ctx.send(truncate_text(MSG_FAILED.format(error=e)))
            return

        log.info("Configured guild %s for %s: %s", ctx.guild.id, ctx.author, report.summary())
        await ctx.send(MSG_FINISHED)
