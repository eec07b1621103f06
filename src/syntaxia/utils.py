from __future__ import annotations

from .constants import MAX_MESSAGE_LENGTH


def truncate_text(text: str, max_length: int = MAX_MESSAGE_LENGTH) -> str:
    """Cut text down to ``max_length`` characters, ending with an ellipsis."""
    if len(text) <= max_length:
        return text
    return text[:max_length - 1] + "…"
