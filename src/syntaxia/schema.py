"""
Configuration schema

Parses the YAML posted with the set command into the immutable desired-state
model. Every problem in the document is reported at once.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Mapping, Optional

import yaml

from .errors import ConfigValidationError
from .reconcile.desired import DesiredCategory, DesiredChannel, DesiredConfig
from .validation import ValidationResult

log = logging.getLogger("syntaxia.schema")

_YAML_BLOCK_RE = re.compile(r"```yaml\n([\s\S]*?)\n```")
_WHITESPACE_RE = re.compile(r"\s+")


def normalized_channel_name(name: str) -> str:
    """The name Discord stores for a text channel created as ``name``."""
    return _WHITESPACE_RE.sub("-", name.strip().lower())


def extract_yaml(content: str) -> str:
    """Return the body of the first ```yaml fenced block, or the whole content."""
    match = _YAML_BLOCK_RE.search(content)
    if match:
        return match.group(1)
    return content


def load_config(text: str) -> DesiredConfig:
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigValidationError([f"YAML syntax error: {e}"]) from e

    result = ValidationResult()
    config = _parse_document(document, result)
    for warning in result.warnings:
        log.warning("Config warning: %s", warning)
    if not result.is_valid() or config is None:
        log.info("Rejected configuration: %s", result.get_summary())
        raise ConfigValidationError([str(issue) for issue in result.errors])
    return config


def _parse_document(document: Any, result: ValidationResult) -> Optional[DesiredConfig]:
    if not isinstance(document, Mapping):
        result.add_error("$", "document must be a mapping with a 'server' key")
        return None
    server = result.required_mapping(document, "server", "$")
    if server is None:
        return None

    path = "server"
    name = result.required_str(server, "name", path)
    description = result.optional_str(server, "description", path)
    icon_url = result.optional_str(server, "icon_url", path)

    categories: Dict[str, DesiredCategory] = {}
    raw_categories = result.required_mapping(server, "categories", path)
    for category_name, raw in (raw_categories or {}).items():
        category = _parse_category(str(category_name), raw, result)
        if category is not None:
            categories[str(category_name)] = category

    if name is None:
        return None
    return DesiredConfig(
        server_name=name,
        categories=categories,
        server_description=description,
        server_icon_url=icon_url,
    )


def _parse_category(name: str, raw: Any, result: ValidationResult) -> Optional[DesiredCategory]:
    path = f"server.categories.{name}"
    if not isinstance(raw, Mapping):
        result.add_error(path, "must be a mapping")
        return None

    channels: Dict[str, DesiredChannel] = {}
    for key, raw_channel in (result.required_mapping(raw, "channels", path) or {}).items():
        channel = _parse_channel(f"{path}.channels.{key}", raw_channel, result)
        if channel is not None:
            channels[str(key)] = channel

    return DesiredCategory(
        channels=channels,
        description=result.optional_str(raw, "description", path),
        nsfw=result.optional_bool(raw, "nsfw", path),
    )


def _parse_channel(path: str, raw: Any, result: ValidationResult) -> Optional[DesiredChannel]:
    if not isinstance(raw, Mapping):
        result.add_error(path, "must be a mapping")
        return None

    name = result.required_str(raw, "name", path)
    stored = normalized_channel_name(name) if name is not None else None
    if stored != name:
        result.add_warning(
            f"{path}.name",
            f"Discord stores this channel as '{stored}'; "
            f"'{name}' will never match it and is created again on every run",
        )
    parent_category = result.optional_str(raw, "parent_category", path)
    if parent_category is not None:
        result.add_warning(f"{path}.parent_category", "is ignored; channels belong to the category they are nested under")

    channel = DesiredChannel(
        name=name or "",
        topic=result.optional_str(raw, "topic", path),
        nsfw=result.optional_bool(raw, "nsfw", path),
        position=result.optional_position(raw, "position", path),
        parent_category=parent_category,
    )
    return channel if name is not None else None
