"""Audit view of a configuration table."""

from __future__ import annotations

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from .constants import EMPTY_TABLE_HINT, INERT_FIELD_HINT, TIER_ICON_MAP, TIER_LABEL_MAP
from .model import ConfigurationTable, SupportTier, UserAgent, derive_key, key_label


def _tier_text(tier: SupportTier) -> str:
    return f"{TIER_ICON_MAP[tier.value]} {TIER_LABEL_MAP[tier.value]}"


def render_table(table: ConfigurationTable) -> Panel:
    """Render every rule in the table as a Rich panel, sorted by key label."""
    lines: list[Text] = []

    if not table:
        lines.append(Text(EMPTY_TABLE_HINT, style="dim"))

    for key, entry in sorted(table.items(), key=lambda item: key_label(item[0])):
        lines.append(Text(key_label(key), style="bold cyan"))
        lines.append(Text(f"  Baseline: {_tier_text(entry.support_level)}"))
        if entry.support_level is SupportTier.FULLY_SUPPORTED:
            lines.append(Text(f"  Fully supported from: {entry.minimum_fully_supported_version}"))
        lines.append(
            Text(f"  Minimum allowed (audit only): {entry.minimum_allowed_version}", style="dim")
        )

    lines.append(Text(""))
    lines.append(Text(INERT_FIELD_HINT, style="dim"))

    return Panel(Group(*lines), border_style="blue", title=f"{len(table)} rules")


def render_resolution(agent: UserAgent, tier: SupportTier) -> Text:
    """One-line summary of a resolved user agent."""
    label = key_label(derive_key(agent.browser.name, agent.os.name))
    return Text(
        f"{label} (browser {agent.browser.version}, OS {agent.os.version}): {_tier_text(tier)}"
    )
