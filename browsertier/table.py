"""Configuration table construction and live-table publication."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import threading
from types import MappingProxyType

from .model import (
    ConfigEntry,
    ConfigKey,
    ConfigurationTable,
    SupportTier,
    UserAgent,
    entry_key,
    key_label,
)
from .resolver import resolve_support_tier
from .util.debug import debug_log

EMPTY_TABLE: ConfigurationTable = MappingProxyType({})


def build_table(entries: Iterable[ConfigEntry]) -> ConfigurationTable:
    """Key entries by their derived key; later duplicates replace earlier ones."""
    rules: dict[ConfigKey, ConfigEntry] = {}
    for entry in entries:
        key = entry_key(entry)
        if key in rules:
            debug_log("Replacing rule for %s (last write wins)", key_label(key))
        rules[key] = entry
    return MappingProxyType(rules)


class ConfigurationStore:
    """Holds the live configuration table.

    Readers take whatever table reference is current without locking. A publish
    builds the complete replacement table first and swaps the reference in one
    assignment, so no reader ever observes a partially built table.
    """

    def __init__(self, entries: Iterable[ConfigEntry] | None = None) -> None:
        self._lock = threading.Lock()
        self._table: ConfigurationTable = EMPTY_TABLE
        if entries is not None:
            self.publish(entries)

    @property
    def current(self) -> ConfigurationTable:
        return self._table

    def publish(
        self, source: Iterable[ConfigEntry] | Mapping[ConfigKey, ConfigEntry]
    ) -> ConfigurationTable:
        """Replace the live table and return the newly published one."""
        if isinstance(source, Mapping):
            source = source.values()
        table = build_table(source)
        with self._lock:
            self._table = table
        debug_log("Published configuration table with %d rules", len(table))
        return table

    def resolve(self, agent: UserAgent) -> SupportTier:
        return resolve_support_tier(self._table, agent)
