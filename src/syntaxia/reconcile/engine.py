from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List

from .desired import DesiredCategory, DesiredChannel, DesiredConfig
from .diff import category_create, category_edit, channel_create, channel_edit, guild_edit
from .matcher import find_category, find_channel
from .observed import ObservedGuildState
from .platform import PlatformClient

log = logging.getLogger("syntaxia.reconcile.engine")


@dataclass
class ReconcileReport:
    guild_updated: bool = False
    categories_created: List[str] = field(default_factory=list)
    categories_updated: List[str] = field(default_factory=list)
    categories_unchanged: List[str] = field(default_factory=list)
    channels_created: List[str] = field(default_factory=list)
    channels_updated: List[str] = field(default_factory=list)

    @property
    def creates(self) -> int:
        return len(self.categories_created) + len(self.channels_created)

    @property
    def updates(self) -> int:
        return len(self.categories_updated) + len(self.channels_updated) + int(self.guild_updated)

    def summary(self) -> str:
        return (
            f"guild {'updated' if self.guild_updated else 'unchanged'}, "
            f"categories: {len(self.categories_created)} created / {len(self.categories_updated)} updated, "
            f"channels: {len(self.channels_created)} created / {len(self.channels_updated)} updated"
        )


class Reconciler:
    """Drives one reconciliation pass against a single guild.

    Every platform call is awaited before the next one starts. The first
    failure propagates unchanged; whatever was applied before it stays applied.
    """

    def __init__(self, platform: PlatformClient) -> None:
        self.platform = platform

    async def reconcile(self, config: DesiredConfig, guild_id: int) -> ReconcileReport:
        log.info("Reconciling guild %s against %s", guild_id, config.summary())

        guild = await self.platform.fetch_guild(guild_id)
        observed = ObservedGuildState(
            name=self.platform.guild_name(guild),
            icon_url=self.platform.guild_icon_url(guild),
            resources=await self.platform.fetch_channels(guild),
        )
        log.debug("Observed %d channels in guild %s", len(observed), guild_id)

        report = ReconcileReport()
        await self.sync_guild(config, guild, observed, report)

        for category_name, category in config.categories.items():
            category_id = await self.reconcile_category(guild, category_name, category, observed, report)
            for channel in category.channels.values():
                await self.reconcile_channel(guild, channel, category_id, observed, report)

        log.info("Reconciled guild %s: %s", guild_id, report.summary())
        return report

    async def sync_guild(
        self,
        config: DesiredConfig,
        guild: Any,
        observed: ObservedGuildState,
        report: ReconcileReport,
    ) -> None:
        edit = guild_edit(config, observed)
        if edit is None:
            return
        await self.platform.edit_guild(guild, edit)
        log.info("Renamed guild '%s' -> '%s'", observed.name, edit.name)
        observed.name = config.server_name
        report.guild_updated = True

    async def reconcile_category(
        self,
        guild: Any,
        name: str,
        category: DesiredCategory,
        observed: ObservedGuildState,
        report: ReconcileReport,
    ) -> int:
        """Create or update one category and return its id."""
        category_id = find_category(name, observed)

        if category_id is None:
            created = await self.platform.create_channel(guild, category_create(name, category))
            observed.record(created)
            report.categories_created.append(name)
            log.info("Created category '%s' (%s)", name, created.id)
            return created.id

        edit = category_edit(category)
        if edit is None:
            report.categories_unchanged.append(name)
            log.debug("Category '%s' (%s) has no attributes to apply", name, category_id)
        else:
            await self.platform.edit_channel(category_id, edit)
            report.categories_updated.append(name)
            log.info("Updated category '%s' (%s)", name, category_id)
        return category_id

    async def reconcile_channel(
        self,
        guild: Any,
        channel: DesiredChannel,
        category_id: int,
        observed: ObservedGuildState,
        report: ReconcileReport,
    ) -> None:
        channel_id = find_channel(channel.name, category_id, observed)

        if channel_id is None:
            created = await self.platform.create_channel(guild, channel_create(channel, category_id))
            observed.record(created)
            report.channels_created.append(channel.name)
            log.info("Created channel #%s (%s) in category %s", channel.name, created.id, category_id)
            return

        await self.platform.edit_channel(channel_id, channel_edit(channel))
        report.channels_updated.append(channel.name)
        log.info("Updated channel #%s (%s)", channel.name, channel_id)


async def reconcile(config: DesiredConfig, guild_id: int, platform: PlatformClient) -> ReconcileReport:
    """Converge guild ``guild_id`` towards ``config`` in a single pass."""
    return await Reconciler(platform).reconcile(config, guild_id)
