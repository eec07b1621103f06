from __future__ import annotations

import os
from dataclasses import dataclass

from .constants import DEFAULT_AUDIT_REASON, DEFAULT_PREFIX


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "y", "on"}


def _get_str(name: str, default: str) -> str:
    return os.getenv(name, default).strip() or default


@dataclass(frozen=True)
class Settings:
    token: str
    command_prefix: str
    log_level: str
    # The set command reads YAML out of the message body, so the bot cannot
    # work without the privileged message content intent.
    message_content_intent: bool = True
    # Shown in the guild audit log for every create/edit.
    audit_reason: str = DEFAULT_AUDIT_REASON
    # 0 disables the per-guild cooldown on the set command.
    set_cooldown_seconds: int = 10


def load_settings() -> Settings:
    token = os.getenv("DISCORD_TOKEN", "").strip()
    if not token:
        raise RuntimeError("DISCORD_TOKEN is required")
    return Settings(
        token=token,
        command_prefix=_get_str("COMMAND_PREFIX", DEFAULT_PREFIX),
        log_level=_get_str("LOG_LEVEL", "INFO"),
        message_content_intent=_get_bool("MESSAGE_CONTENT_INTENT", True),
        audit_reason=_get_str("AUDIT_REASON", DEFAULT_AUDIT_REASON),
        set_cooldown_seconds=max(0, _get_int("SET_COOLDOWN_SECONDS", 10)),
    )
