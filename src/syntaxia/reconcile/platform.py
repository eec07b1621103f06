"""
Platform Client

The reconciler talks to Discord only through ``PlatformClient``. The Discord
implementation converts every ``discord.HTTPException`` into the bot's own
error types so the engine never sees library exceptions.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol, runtime_checkable

import discord

from ..errors import GuildNotFoundError, PlatformError
from .diff import ChannelCreate, ChannelEdit, GuildEdit
from .observed import ObservedResource, ResourceKind

log = logging.getLogger("syntaxia.reconcile.platform")


@runtime_checkable
class PlatformClient(Protocol):
    """Operations the reconciler needs from the chat platform."""

    async def fetch_guild(self, guild_id: int) -> Any:
        """Return an opaque guild handle.

        Raises GuildNotFoundError when the guild is unknown or not visible to
        the bot, and PlatformError for any other API failure.
        """
        ...

    def guild_name(self, guild: Any) -> str:
        ...

    def guild_icon_url(self, guild: Any) -> Optional[str]:
        ...

    async def fetch_channels(self, guild: Any) -> Dict[int, ObservedResource]:
        ...

    async def edit_guild(self, guild: Any, edit: GuildEdit) -> None:
        ...

    async def create_channel(self, guild: Any, create: ChannelCreate) -> ObservedResource:
        ...

    async def edit_channel(self, channel_id: int, edit: ChannelEdit) -> None:
        ...


_KIND_TO_TYPE = {
    ResourceKind.CATEGORY: discord.ChannelType.category,
    ResourceKind.TEXT: discord.ChannelType.text,
}

_TYPE_TO_KIND = {channel_type.value: kind for kind, channel_type in _KIND_TO_TYPE.items()}


def resource_from_channel(channel: discord.abc.GuildChannel) -> ObservedResource:
    return ObservedResource(
        id=channel.id,
        kind=_TYPE_TO_KIND.get(channel.type.value, ResourceKind.OTHER),
        name=channel.name,
        parent_id=getattr(channel, "category_id", None),
    )


def resource_from_payload(data: Dict[str, Any]) -> ObservedResource:
    """Build a resource from a raw channel payload returned by the REST API."""
    parent = data.get("parent_id")
    return ObservedResource(
        id=int(data["id"]),
        kind=_TYPE_TO_KIND.get(int(data["type"]), ResourceKind.OTHER),
        name=data["name"],
        parent_id=int(parent) if parent is not None else None,
    )


class DiscordPlatform:
    """PlatformClient backed by a discord.py client.

    Channel create/edit go through ``client.http`` because the high level
    ``CategoryChannel`` helpers do not accept ``topic``.
    """

    def __init__(self, client: discord.Client, *, reason: Optional[str] = None) -> None:
        self.client = client
        self.reason = reason

    async def fetch_guild(self, guild_id: int) -> discord.Guild:
        try:
            return await self.client.fetch_guild(guild_id)
        except (discord.NotFound, discord.Forbidden) as e:
            log.debug("fetch_guild(%s) failed: %s", guild_id, e)
            raise GuildNotFoundError(guild_id) from e
        except discord.HTTPException as e:
            raise PlatformError("fetch guild", e) from e

    def guild_name(self, guild: discord.Guild) -> str:
        return guild.name

    def guild_icon_url(self, guild: discord.Guild) -> Optional[str]:
        return guild.icon.url if guild.icon else None

    async def fetch_channels(self, guild: discord.Guild) -> Dict[int, ObservedResource]:
        try:
            channels = await guild.fetch_channels()
        except discord.HTTPException as e:
            raise PlatformError("fetch channels", e) from e
        return {channel.id: resource_from_channel(channel) for channel in channels}

    async def edit_guild(self, guild: discord.Guild, edit: GuildEdit) -> None:
        try:
            await guild.edit(name=edit.name, reason=self.reason)
        except discord.HTTPException as e:
            raise PlatformError("edit guild", e) from e

    async def create_channel(self, guild: discord.Guild, create: ChannelCreate) -> ObservedResource:
        channel_type = _KIND_TO_TYPE[create.kind]
        try:
            data = await self.client.http.create_channel(
                guild.id,
                channel_type.value,
                reason=self.reason,
                name=create.name,
                **create.fields(),
            )
        except discord.HTTPException as e:
            raise PlatformError(f"create {create.kind.value} '{create.name}'", e) from e
        return resource_from_payload(data)

    async def edit_channel(self, channel_id: int, edit: ChannelEdit) -> None:
        try:
            await self.client.http.edit_channel(channel_id, reason=self.reason, **edit.fields())
        except discord.HTTPException as e:
            raise PlatformError(f"edit channel {channel_id}", e) from e
