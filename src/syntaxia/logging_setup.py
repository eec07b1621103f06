from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(level=resolved, format=_FORMAT)
    # discord.py is chatty at DEBUG (gateway payloads); keep it at INFO unless asked.
    logging.getLogger("discord").setLevel(max(resolved, logging.INFO))
    logging.getLogger("syntaxia.logging").debug("Logging configured at %s", logging.getLevelName(resolved))
