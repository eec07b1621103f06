from __future__ import annotations

from typing import Optional

from .observed import ObservedGuildState


def find_category(name: str, observed: ObservedGuildState) -> Optional[int]:
    """Return the id of the category named exactly ``name``.

    Candidates are scanned in ascending id order so that duplicate names
    always resolve to the oldest resource.
    """
    for resource in observed.in_id_order():
        if resource.is_category() and resource.name == name:
            return resource.id
    return None


def find_channel(name: str, category_id: int, observed: ObservedGuildState) -> Optional[int]:
    """Return the id of the text channel named ``name`` inside ``category_id``."""
    for resource in observed.in_id_order():
        if resource.is_text_channel() and resource.name == name and resource.parent_id == category_id:
            return resource.id
    return None
