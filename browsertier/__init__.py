"""
Browser capability tier resolution.

Given a parsed user agent and an administrator-maintained table of
compatibility rules, decide whether the client gets the full feature set,
a degraded-but-allowed set, or nothing.
"""

from ._version import __version__
from .exceptions import BrowserTierError, SchemaValidationError
from .model import (
    Browser,
    BrowserInfo,
    ConfigEntry,
    ConfigKey,
    ConfigurationTable,
    OperatingSystem,
    OsInfo,
    SupportTier,
    UserAgent,
    derive_key,
    entry_key,
    key_label,
)
from .resolver import resolve_many, resolve_support_tier
from .schema import parse_config_entry, parse_table, parse_user_agent
from .table import EMPTY_TABLE, ConfigurationStore, build_table

__all__ = [
    "EMPTY_TABLE",
    "Browser",
    "BrowserInfo",
    "BrowserTierError",
    "ConfigEntry",
    "ConfigKey",
    "ConfigurationStore",
    "ConfigurationTable",
    "OperatingSystem",
    "OsInfo",
    "SchemaValidationError",
    "SupportTier",
    "UserAgent",
    "__version__",
    "build_table",
    "derive_key",
    "entry_key",
    "key_label",
    "parse_config_entry",
    "parse_table",
    "parse_user_agent",
    "resolve_many",
    "resolve_support_tier",
]
