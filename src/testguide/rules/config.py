# SPDX-License-Identifier: MIT
"""Gate profiles and catalog location for the rule engine."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from testguide.rules.base import Severity


@dataclass(frozen=True)
class ProfileConfig:
    """Configuration for a gate profile — controls which severities block."""

    name: str
    fail_on: Severity


PROFILES: dict[str, ProfileConfig] = {
    "lenient": ProfileConfig(name="lenient", fail_on=Severity.HIGH),
    "standard": ProfileConfig(name="standard", fail_on=Severity.MEDIUM),
    "strict": ProfileConfig(name="strict", fail_on=Severity.LOW),
}

DEFAULT_PROFILE = "standard"


def load_profile(cli_profile: str | None = None) -> ProfileConfig:
    """Load profile config with CLI > env > default priority.

    Args:
        cli_profile: Profile name from CLI --profile flag (highest priority).

    Returns:
        ProfileConfig for the resolved profile.

    Raises:
        ValueError: If the profile name is not recognized.
    """
    name = cli_profile or os.environ.get("TESTGUIDE_PROFILE", DEFAULT_PROFILE)
    if name not in PROFILES:
        msg = f"Unknown profile: {name!r}. Valid profiles: {sorted(PROFILES.keys())}"
        raise ValueError(msg)
    return PROFILES[name]


def resolve_catalog_path(cli_path: str | None = None) -> Path | None:
    """Return the custom catalog path (CLI > TESTGUIDE_CATALOG), or None for built-in rules."""
    raw = cli_path or os.environ.get("TESTGUIDE_CATALOG", "")
    return Path(raw) if raw else None
