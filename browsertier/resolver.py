"""Support tier resolution for parsed user agents."""

from __future__ import annotations

from collections.abc import Iterable

from .model import ConfigurationTable, SupportTier, UserAgent, derive_key


def resolve_support_tier(table: ConfigurationTable, agent: UserAgent) -> SupportTier:
    """Return the support tier for ``agent`` according to ``table``.

    Untested browser/OS pairs fail closed to ``UNSUPPORTED``. A browser in a
    fully supported family that is below the version floor is unsupported as
    well, not downgraded to ``ALLOWED``.
    """
    entry = table.get(derive_key(agent.browser.name, agent.os.name))
    if entry is None:
        return SupportTier.UNSUPPORTED
    if entry.support_level is SupportTier.UNSUPPORTED:
        return SupportTier.UNSUPPORTED
    if entry.support_level is SupportTier.ALLOWED:
        # minimum_allowed_version is not consulted here.
        return SupportTier.ALLOWED
    if agent.browser.version >= entry.minimum_fully_supported_version:
        return SupportTier.FULLY_SUPPORTED
    return SupportTier.UNSUPPORTED


def resolve_many(table: ConfigurationTable, agents: Iterable[UserAgent]) -> list[SupportTier]:
    """Resolve a batch of user agents against the same table."""
    return [resolve_support_tier(table, agent) for agent in agents]
