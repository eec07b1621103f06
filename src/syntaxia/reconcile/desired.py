"""
Desired State

The configuration as authored by the operator. Built once per invocation by
the config loader and only read afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional


@dataclass(frozen=True)
class DesiredChannel:
    """A text channel nested under a category."""
    name: str
    topic: Optional[str] = None
    nsfw: Optional[bool] = None
    position: Optional[int] = None
    # Accepted in the YAML but never consulted: a channel always belongs to
    # the category it is nested under.
    parent_category: Optional[str] = None


@dataclass(frozen=True)
class DesiredCategory:
    channels: Mapping[str, DesiredChannel] = field(default_factory=dict)
    description: Optional[str] = None
    nsfw: Optional[bool] = None


@dataclass(frozen=True)
class DesiredConfig:
    server_name: str
    categories: Mapping[str, DesiredCategory] = field(default_factory=dict)
    server_description: Optional[str] = None
    server_icon_url: Optional[str] = None

    def summary(self) -> str:
        channels = sum(len(c.channels) for c in self.categories.values())
        return f"'{self.server_name}': {len(self.categories)} categories, {channels} channels"
