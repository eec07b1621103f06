from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from syntaxia.cogs.config import ConfigCog, _set_cooldown
from syntaxia.constants import MAX_MESSAGE_LENGTH, MSG_CONFIGURING, MSG_FINISHED, MSG_GUILD_ONLY, MSG_INVALID_YAML
from syntaxia.errors import PlatformError
from syntaxia.testing.fakes import FakeContext, FakeGuild, FakePlatform

CONFIG_MESSAGE = """```yaml
server:
  name: New
  categories:
    A:
      channels:
        x:
          name: x
```"""


def _cog(platform) -> ConfigCog:
    bot = SimpleNamespace(settings=SimpleNamespace(set_cooldown_seconds=0, audit_reason="r"))
    return ConfigCog(bot, platform=platform)


async def _invoke(cog: ConfigCog, ctx: FakeContext, content: str) -> None:
    await ConfigCog.set_config.callback(cog, ctx, content=content)


@pytest.mark.asyncio
async def test_set_applies_configuration(guild, platform):
    ctx = FakeContext(guild=guild)

    await _invoke(_cog(platform), ctx, CONFIG_MESSAGE)

    assert ctx.sent == [MSG_CONFIGURING, MSG_FINISHED]
    assert guild.name == "New"
    assert [c.name for c in guild.categories()] == ["A"]


@pytest.mark.asyncio
async def test_set_outside_guild(platform):
    ctx = FakeContext(guild=None)

    await _invoke(_cog(platform), ctx, CONFIG_MESSAGE)

    assert ctx.sent == [MSG_GUILD_ONLY]
    assert platform.calls == []


@pytest.mark.asyncio
async def test_set_with_invalid_yaml(guild, platform):
    ctx = FakeContext(guild=guild)

    await _invoke(_cog(platform), ctx, "```yaml\nserver: {name: X}\n```")

    assert ctx.sent == [MSG_INVALID_YAML]
    assert platform.calls == []


@pytest.mark.asyncio
async def test_set_reports_platform_failure(guild):
    platform = FakePlatform(guild, fail_on_create=1)
    ctx = FakeContext(guild=guild)

    await _invoke(_cog(platform), ctx, CONFIG_MESSAGE)

    assert ctx.sent[0] == MSG_CONFIGURING
    assert ctx.sent[1].startswith("Could not complete the setup. Discord API error during create category 'A'")


@pytest.mark.asyncio
async def test_set_reports_unknown_guild(platform):
    ctx = FakeContext(guild=FakeGuild(id=404))

    await _invoke(_cog(platform), ctx, CONFIG_MESSAGE)

    assert ctx.sent == [MSG_CONFIGURING, "Could not complete the setup. Guild 404 not found"]


@pytest.mark.asyncio
async def test_set_failure_reply_fits_in_one_message(guild):
    long_name = "c" * 2100
    content = f"""```yaml
server:
  name: New
  categories:
    {long_name}:
      channels: {{}}
```"""
    platform = FakePlatform(guild, fail_on_create=1)
    ctx = FakeContext(guild=guild)

    await _invoke(_cog(platform), ctx, content)

    assert len(ctx.sent) == 2
    assert len(ctx.sent[1]) <= MAX_MESSAGE_LENGTH
    assert ctx.sent[1].startswith("Could not complete the setup. Discord API error during create category")
    assert ctx.sent[1].endswith("…")


@pytest.mark.asyncio
async def test_set_failure_is_logged_with_traceback(guild, caplog):
    platform = FakePlatform(guild, fail_on_create=1)
    ctx = FakeContext(guild=guild)

    with caplog.at_level(logging.WARNING, logger="syntaxia.cogs.config"):
        await _invoke(_cog(platform), ctx, CONFIG_MESSAGE)

    records = [r for r in caplog.records if r.name == "syntaxia.cogs.config"]
    assert len(records) == 1
    assert records[0].levelno == logging.WARNING
    assert records[0].exc_info is not None
    assert records[0].exc_info[0] is PlatformError


def test_cooldown_follows_settings():
    disabled = SimpleNamespace(bot=SimpleNamespace(settings=SimpleNamespace(set_cooldown_seconds=0)))
    enabled = SimpleNamespace(bot=SimpleNamespace(settings=SimpleNamespace(set_cooldown_seconds=30)))

    assert _set_cooldown(disabled) is None
    cooldown = _set_cooldown(enabled)
    assert (cooldown.rate, cooldown.per) == (1, 30.0)
