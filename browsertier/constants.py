"""Constants used across pybrowsertier."""

from __future__ import annotations

from typing import Final


KEY_SEPARATOR: Final[str] = "-"

# Versions below this were never part of manual compatibility testing.
RECENT_BROWSER_VERSION_FLOOR: Final[int] = 25

TIER_ICON_MAP: Final[dict[str, str]] = {
    "fullysupported": "✅",
    "allowed": "◐",
    "unsupported": "❌",
}

TIER_LABEL_MAP: Final[dict[str, str]] = {
    "fullysupported": "Fully supported",
    "allowed": "Allowed",
    "unsupported": "Unsupported",
}

INERT_FIELD_HINT: Final[str] = (
    "Minimum allowed versions are recorded for audit only and do not affect resolution."
)

EMPTY_TABLE_HINT: Final[str] = "No rules configured; every client resolves as unsupported."

DEBUG_ENV_VAR: Final[str] = "BROWSERTIER_DEBUG"
