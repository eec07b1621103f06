from __future__ import annotations

from typing import Final

# Command surface
DEFAULT_PREFIX: Final[str] = "~"

# Replies
MSG_GUILD_ONLY: Final[str] = "Cannot run this outside of a Guild."
MSG_INVALID_YAML: Final[str] = "Invalid YAML structure for configuring the server."
MSG_CONFIGURING: Final[str] = "Configuring..."
MSG_FINISHED: Final[str] = "Finished..."
MSG_FAILED: Final[str] = "Could not complete the setup. {error}"

# Discord limits
MAX_MESSAGE_LENGTH: Final[int] = 2000
DEFAULT_AUDIT_REASON: Final[str] = "syntaxia configuration apply"
