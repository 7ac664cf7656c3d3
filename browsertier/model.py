"""Data models for user agents and compatibility rules."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from .constants import KEY_SEPARATOR


class Browser(str, Enum):
    FIREFOX = "Firefox"
    SAFARI = "Safari"
    CHROME = "Chrome"
    IE = "IE"
    EDGE = "Edge"


class OperatingSystem(str, Enum):
    WINDOWS = "Windows"
    OSX = "OSX"
    LINUX = "Linux"
    CHROMEOS = "ChromeOS"
    IOS = "iOS"
    ANDROID = "Android"


class SupportTier(str, Enum):
    UNSUPPORTED = "unsupported"
    ALLOWED = "allowed"
    FULLY_SUPPORTED = "fullysupported"


@dataclass(frozen=True)
class BrowserInfo:
    name: Browser
    version: int


@dataclass(frozen=True)
class OsInfo:
    name: OperatingSystem
    version: int


@dataclass(frozen=True)
class UserAgent:
    browser: BrowserInfo
    os: OsInfo


@dataclass(frozen=True)
class ConfigEntry:
    """One compatibility rule for a single browser/OS pair.

    ``support_level`` is the baseline tier for the pair. ``minimum_allowed_version``
    is kept for audit purposes and is not consulted during resolution.
    """

    browser_name: Browser
    os_name: OperatingSystem
    support_level: SupportTier
    minimum_allowed_version: int
    minimum_fully_supported_version: int


ConfigKey = tuple[Browser, OperatingSystem]
ConfigurationTable = Mapping[ConfigKey, ConfigEntry]


def derive_key(browser_name: Browser, os_name: OperatingSystem) -> ConfigKey:
    """Build the table key for a browser/OS pair."""
    return (browser_name, os_name)


def entry_key(entry: ConfigEntry) -> ConfigKey:
    """Return the key an entry is stored under, derived from its own fields."""
    return derive_key(entry.browser_name, entry.os_name)


def key_label(key: ConfigKey) -> str:
    """Human-readable form of a key, e.g. ``Chrome-Windows``."""
    browser_name, os_name = key
    return f"{browser_name.value}{KEY_SEPARATOR}{os_name.value}"
