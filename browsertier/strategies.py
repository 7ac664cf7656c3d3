"""Hypothesis strategies for user agents and configuration tables.

Every generated value respects the closed browser/OS enumerations and the
non-negative version constraint, so the strategies can drive property tests
of the resolver directly.
"""

from __future__ import annotations

from typing import Any

from hypothesis import strategies as st

from .constants import RECENT_BROWSER_VERSION_FLOOR
from .model import (
    Browser,
    BrowserInfo,
    ConfigEntry,
    ConfigurationTable,
    OperatingSystem,
    OsInfo,
    SupportTier,
    UserAgent,
)
from .table import build_table


def browsers() -> st.SearchStrategy[Browser]:
    return st.sampled_from(Browser)


def operating_systems() -> st.SearchStrategy[OperatingSystem]:
    return st.sampled_from(OperatingSystem)


def support_tiers() -> st.SearchStrategy[SupportTier]:
    return st.sampled_from(SupportTier)


def versions(min_value: int = 0, max_value: int | None = None) -> st.SearchStrategy[int]:
    return st.integers(min_value=max(min_value, 0), max_value=max_value)


def recent_versions() -> st.SearchStrategy[int]:
    """Browser versions from the range that compatibility testing covered."""
    return versions(min_value=RECENT_BROWSER_VERSION_FLOOR)


def user_agents(
    browser_versions: st.SearchStrategy[int] | None = None,
) -> st.SearchStrategy[UserAgent]:
    return st.builds(
        UserAgent,
        browser=st.builds(
            BrowserInfo,
            name=browsers(),
            version=browser_versions if browser_versions is not None else versions(),
        ),
        os=st.builds(OsInfo, name=operating_systems(), version=versions()),
    )


def config_entries(
    support_levels: st.SearchStrategy[SupportTier] | None = None,
    fully_supported_versions: st.SearchStrategy[int] | None = None,
) -> st.SearchStrategy[ConfigEntry]:
    """Configuration entries; thresholds default to the recently tested range."""
    return st.builds(
        ConfigEntry,
        browser_name=browsers(),
        os_name=operating_systems(),
        support_level=support_levels if support_levels is not None else support_tiers(),
        minimum_allowed_version=recent_versions(),
        minimum_fully_supported_version=(
            fully_supported_versions if fully_supported_versions is not None else recent_versions()
        ),
    )


def configuration_tables(
    entries: st.SearchStrategy[ConfigEntry] | None = None,
) -> st.SearchStrategy[ConfigurationTable]:
    """Tables whose keys are always derived from the entries stored under them."""
    return st.lists(entries if entries is not None else config_entries()).map(build_table)


def user_agent_records() -> st.SearchStrategy[dict[str, Any]]:
    """Raw mapping form of user agents, as accepted by ``schema.parse_user_agent``."""
    return st.fixed_dictionaries(
        {
            "browser": st.fixed_dictionaries(
                {"name": st.sampled_from([b.value for b in Browser]), "version": versions()}
            ),
            "os": st.fixed_dictionaries(
                {
                    "name": st.sampled_from([o.value for o in OperatingSystem]),
                    "version": versions(),
                }
            ),
        }
    )


def config_records() -> st.SearchStrategy[dict[str, Any]]:
    """Raw mapping form of configuration entries."""
    return st.fixed_dictionaries(
        {
            "browser_name": st.sampled_from([b.value for b in Browser]),
            "os_name": st.sampled_from([o.value for o in OperatingSystem]),
            "support_level": st.sampled_from([t.value for t in SupportTier]),
            "minimum_allowed_version": recent_versions(),
            "minimum_fully_supported_version": recent_versions(),
        }
    )
