from __future__ import annotations

import logging

import discord
from discord.ext import commands

from .cogs.config import ConfigCog
from .config import Settings
from .error_handlers import setup_error_handlers

log = logging.getLogger("syntaxia.bot")


class SyntaxiaBot(commands.Bot):
    def __init__(self, settings: Settings) -> None:
        intents = discord.Intents.default()
        intents.guild_messages = True
        intents.message_content = bool(settings.message_content_intent)

        log.info("INTENTS: guilds=%s guild_messages=%s message_content=%s", intents.guilds, intents.guild_messages, intents.message_content)
        if not intents.message_content:
            log.warning("MESSAGE_CONTENT_INTENT is disabled; the set command will not see YAML content")

        super().__init__(
            command_prefix=settings.command_prefix,
            intents=intents,
            allowed_mentions=discord.AllowedMentions.none(),
            help_command=None,
        )
        self.settings = settings

    async def setup_hook(self) -> None:
        await setup_error_handlers(self)
        await self.add_cog(ConfigCog(self))
        log.info("Loaded cogs: %s", ", ".join(self.cogs))

    async def on_ready(self) -> None:
        log.info("The bot is ready as %s (prefix %r)", self.user, self.settings.command_prefix)
