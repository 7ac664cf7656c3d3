from __future__ import annotations

from hypothesis import given

import browsertier
from browsertier import Browser, ConfigEntry, OperatingSystem, SupportTier, UserAgent
from browsertier.constants import RECENT_BROWSER_VERSION_FLOOR
from browsertier.strategies import config_entries, recent_versions, user_agents, versions


def test_version_is_exported() -> None:
    assert isinstance(browsertier.__version__, str)
    assert browsertier.__version__


def test_public_api_is_exported() -> None:
    for name in browsertier.__all__:
        assert hasattr(browsertier, name)


def test_enumeration_values() -> None:
    assert [member.value for member in Browser] == ["Firefox", "Safari", "Chrome", "IE", "Edge"]
    assert [member.value for member in OperatingSystem] == [
        "Windows",
        "OSX",
        "Linux",
        "ChromeOS",
        "iOS",
        "Android",
    ]
    assert [member.value for member in SupportTier] == ["unsupported", "allowed", "fullysupported"]


@given(user_agents())
def test_generated_user_agents_respect_schema(agent: UserAgent) -> None:
    assert isinstance(agent.browser.name, Browser)
    assert isinstance(agent.os.name, OperatingSystem)
    assert agent.browser.version >= 0
    assert agent.os.version >= 0


@given(user_agents(browser_versions=recent_versions()))
def test_generated_recent_user_agents(agent: UserAgent) -> None:
    assert agent.browser.version >= RECENT_BROWSER_VERSION_FLOOR


@given(config_entries())
def test_generated_config_entries_respect_schema(entry: ConfigEntry) -> None:
    assert isinstance(entry.support_level, SupportTier)
    assert entry.minimum_allowed_version >= RECENT_BROWSER_VERSION_FLOOR
    assert entry.minimum_fully_supported_version >= RECENT_BROWSER_VERSION_FLOOR


@given(
    config_entries(fully_supported_versions=versions(max_value=RECENT_BROWSER_VERSION_FLOOR - 1))
)
def test_generated_config_entries_accept_low_thresholds(entry: ConfigEntry) -> None:
    assert 0 <= entry.minimum_fully_supported_version < RECENT_BROWSER_VERSION_FLOOR
