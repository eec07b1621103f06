from __future__ import annotations

import logging

import pytest

from syntaxia.reconcile.observed import ResourceKind
from syntaxia.testing.fakes import FakeGuild, FakePlatform

logging.basicConfig(level=logging.CRITICAL)


@pytest.fixture
def guild() -> FakeGuild:
    return FakeGuild(id=1, name="Old")


@pytest.fixture
def platform(guild: FakeGuild) -> FakePlatform:
    return FakePlatform(guild)


@pytest.fixture
def populated(guild: FakeGuild, platform: FakePlatform):
    """Guild with categories A and B, each holding a #general text channel."""
    a = platform.add_channel(guild, ResourceKind.CATEGORY, "A", id=10)
    b = platform.add_channel(guild, ResourceKind.CATEGORY, "B", id=20)
    platform.add_channel(guild, ResourceKind.TEXT, "general", a, id=11)
    platform.add_channel(guild, ResourceKind.TEXT, "general", b, id=21)
    return guild
