from __future__ import annotations

import logging

from syntaxia.reconcile import diff
from syntaxia.reconcile.desired import DesiredCategory, DesiredChannel, DesiredConfig
from syntaxia.reconcile.observed import ObservedGuildState, ResourceKind


def test_guild_edit_when_name_differs():
    config = DesiredConfig(server_name="New")
    edit = diff.guild_edit(config, ObservedGuildState(name="Old"))
    assert edit == diff.GuildEdit(name="New")


def test_guild_edit_none_when_in_sync():
    config = DesiredConfig(server_name="Same", server_icon_url="https://x/icon.png")
    observed = ObservedGuildState(name="Same", icon_url="https://x/icon.png")
    assert diff.guild_edit(config, observed) is None


def test_guild_icon_only_difference_is_flagged_not_sent(caplog):
    config = DesiredConfig(server_name="Same", server_icon_url="https://x/new.png")
    observed = ObservedGuildState(name="Same", icon_url="https://x/old.png")
    with caplog.at_level(logging.WARNING, logger="syntaxia.reconcile.diff"):
        assert diff.guild_edit(config, observed) is None
    assert "icon sync is not supported" in caplog.text


def test_guild_edit_never_carries_icon():
    config = DesiredConfig(server_name="New", server_icon_url="https://x/new.png")
    edit = diff.guild_edit(config, ObservedGuildState(name="Old"))
    assert edit == diff.GuildEdit(name="New")


def test_category_edit_triggered_by_presence():
    assert diff.category_edit(DesiredCategory()) is None
    assert diff.category_edit(DesiredCategory(nsfw=False)) == diff.ChannelEdit(nsfw=False)
    edit = diff.category_edit(DesiredCategory(description="About"))
    assert edit.fields() == {"topic": "About"}


def test_category_create_maps_description_to_topic():
    create = diff.category_create("Cat", DesiredCategory(description="d", nsfw=True))
    assert create.kind is ResourceKind.CATEGORY
    assert create.name == "Cat"
    assert create.fields() == {"topic": "d", "nsfw": True}


def test_channel_edit_always_sends_name():
    edit = diff.channel_edit(DesiredChannel(name="general"))
    assert edit.fields() == {"name": "general"}

    edit = diff.channel_edit(DesiredChannel(name="general", topic="t", nsfw=False, position=0))
    assert edit.fields() == {"name": "general", "topic": "t", "nsfw": False, "position": 0}


def test_channel_create_is_parented():
    create = diff.channel_create(DesiredChannel(name="x", position=3), 77)
    assert create.kind is ResourceKind.TEXT
    assert create.fields() == {"position": 3, "parent_id": 77}


def test_parent_category_is_not_sent():
    channel = DesiredChannel(name="x", parent_category="Elsewhere")
    assert diff.channel_edit(channel).fields() == {"name": "x"}
    assert diff.channel_create(channel, 1).fields() == {"parent_id": 1}


def test_payload_helpers_skip_unset_attributes():
    assert diff.GuildEdit().is_empty()
    assert not diff.GuildEdit(name="New").is_empty()
    assert diff.ChannelEdit().fields() == {}
    assert diff.ChannelEdit(nsfw=False, position=0).fields() == {"nsfw": False, "position": 0}
    assert diff.ChannelCreate(kind=ResourceKind.CATEGORY, name="A").fields() == {}
