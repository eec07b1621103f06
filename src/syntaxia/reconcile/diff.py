"""
Diff Evaluation

Turns desired attributes into the payloads sent to the platform. Only fields
the operator actually set are carried; absent fields never overwrite remote
values.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .desired import DesiredCategory, DesiredChannel, DesiredConfig
from .observed import ObservedGuildState, ResourceKind

log = logging.getLogger("syntaxia.reconcile.diff")


@dataclass(frozen=True)
class GuildEdit:
    """Guild attributes to change. Only the name is ever sent."""

    name: Optional[str] = None

    def is_empty(self) -> bool:
        """True when there is nothing to send."""
        return self.name is None


@dataclass(frozen=True)
class ChannelEdit:
    """Partial update for an existing category or text channel."""

    name: Optional[str] = None
    topic: Optional[str] = None
    nsfw: Optional[bool] = None
    position: Optional[int] = None

    def fields(self) -> Dict[str, Any]:
        """Attributes that were set, keyed by their Discord name."""
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass(frozen=True)
class ChannelCreate:
    """New category or text channel. ``kind`` and ``name`` are always sent."""

    kind: ResourceKind
    name: str
    topic: Optional[str] = None
    nsfw: Optional[bool] = None
    position: Optional[int] = None
    parent_id: Optional[int] = None

    def fields(self) -> Dict[str, Any]:
        """Optional attributes that were set, keyed by their Discord name."""
        return {
            k: v
            for k, v in (("topic", self.topic), ("nsfw", self.nsfw), ("position", self.position), ("parent_id", self.parent_id))
            if v is not None
        }


def guild_edit(config: DesiredConfig, observed: ObservedGuildState) -> Optional[GuildEdit]:
    """Return the guild edit to apply, or None when nothing will be sent.

    A differing icon counts as drift but the icon itself is never uploaded,
    so an icon-only difference is logged and yields no edit.
    """
    name_differs = observed.name != config.server_name
    icon_differs = observed.icon_url != config.server_icon_url
    if not (name_differs or icon_differs):
        return None

    if icon_differs:
        log.warning(
            "Guild icon differs (current=%s desired=%s); icon sync is not supported, leaving it unchanged",
            observed.icon_url,
            config.server_icon_url,
        )
    if not name_differs:
        return None
    return GuildEdit(name=config.server_name)


def category_edit(category: DesiredCategory) -> Optional[ChannelEdit]:
    """Update for a matched category, or None when neither description nor nsfw is set.

    Presence, not inequality, triggers the update.
    """
    if category.description is None and category.nsfw is None:
        return None
    return ChannelEdit(topic=category.description, nsfw=category.nsfw)


def category_create(name: str, category: DesiredCategory) -> ChannelCreate:
    """Create payload for a category named after its config key."""
    return ChannelCreate(
        kind=ResourceKind.CATEGORY,
        name=name,
        topic=category.description,
        nsfw=category.nsfw,
    )


def channel_edit(channel: DesiredChannel) -> ChannelEdit:
    """Update for a matched channel. Always carries the name."""
    return ChannelEdit(
        name=channel.name,
        topic=channel.topic,
        nsfw=channel.nsfw,
        position=channel.position,
    )


def channel_create(channel: DesiredChannel, category_id: int) -> ChannelCreate:
    """Create payload for a text channel under ``category_id``."""
    return ChannelCreate(
        kind=ResourceKind.TEXT,
        name=channel.name,
        topic=channel.topic,
        nsfw=channel.nsfw,
        position=channel.position,
        parent_id=category_id,
    )
