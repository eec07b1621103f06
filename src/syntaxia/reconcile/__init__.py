"""
Reconcile Package

Converges a guild's categories and channels towards a declarative
configuration. Additive only: nothing absent from the configuration is
deleted.
"""

from .desired import DesiredCategory, DesiredChannel, DesiredConfig
from .diff import ChannelCreate, ChannelEdit, GuildEdit
from .engine import ReconcileReport, Reconciler, reconcile
from .matcher import find_category, find_channel
from .observed import ObservedGuildState, ObservedResource, ResourceKind
from .platform import DiscordPlatform, PlatformClient

__all__ = [
    "DesiredCategory",
    "DesiredChannel",
    "DesiredConfig",
    "ChannelCreate",
    "ChannelEdit",
    "GuildEdit",
    "ReconcileReport",
    "Reconciler",
    "reconcile",
    "find_category",
    "find_channel",
    "ObservedGuildState",
    "ObservedResource",
    "ResourceKind",
    "DiscordPlatform",
    "PlatformClient",
]
