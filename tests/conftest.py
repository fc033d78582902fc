"""
Root conftest.py for the pagefindex test suite.

Pytest plugin that enforces TRA (Test Responsibility Architecture) and Tier markers.
- Reports tests missing a TRA marker or a tier marker
- Applies tier timeouts when pytest-timeout is installed

Usage:
    @pytest.mark.tier(1)
    @pytest.mark.tra("UseCase.CommandResolver")
    def test_something():
        ...

Configuration:
    TRA_ENFORCE=1 / TIER_ENFORCE=1 fail collection instead of warning
    TRA_ENFORCE=0 / TIER_ENFORCE=0 disable the check
    TIER_TIMEOUT_MULTIPLIER scales tier timeouts (default 1.0)
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.nodes import Item


VALID_TRA_PREFIXES = frozenset(
    [
        "Domain.Invariant",
        "Domain.Policy",
        "UseCase",
        "Port",
        "Adapter",
        "Contract",
    ]
)

# Tier timeout limits in seconds (0 = no limit)
TIER_TIMEOUTS: dict[int, float] = {
    0: 0.1,
    1: 2.0,
    2: 30.0,
    3: 300.0,
    4: 0,
}


def pytest_configure(config: Config) -> None:
    """Register custom markers for TRA and Tier enforcement."""
    config.addinivalue_line(
        "markers",
        "tra(anchor): Test Responsibility Anchor - the single responsibility this test protects. "
        "Must start with one of: Domain.Invariant, Domain.Policy, UseCase, Port, Adapter, Contract",
    )
    config.addinivalue_line(
        "markers",
        "tier(level): Test tier (0=instant, 1=fast, 2=standard, 3=slow, 4=manual).",
    )
    config.addinivalue_line("markers", "property: Property-based tests using Hypothesis")


def _get_tier(item: Item) -> int | None:
    marker = item.get_closest_marker("tier")
    if marker is None or not marker.args:
        return None
    tier = marker.args[0]
    if isinstance(tier, int) and tier in TIER_TIMEOUTS:
        return tier
    return None


def _marker_errors(items: list[Item]) -> list[str]:
    errors: list[str] = []
    check_tra = os.environ.get("TRA_ENFORCE", "warn") != "0"
    check_tier = os.environ.get("TIER_ENFORCE", "warn") != "0"

    for item in items:
        if check_tra:
            marker = item.get_closest_marker("tra")
            if marker is None or not marker.args:
                errors.append(f"{item.nodeid}: Missing @pytest.mark.tra('...')")
            elif not any(str(marker.args[0]).startswith(p) for p in VALID_TRA_PREFIXES):
                errors.append(f"{item.nodeid}: Invalid TRA anchor {marker.args[0]!r}")
        if check_tier and _get_tier(item) is None:
            errors.append(f"{item.nodeid}: Missing or invalid @pytest.mark.tier()")

    return errors


def _apply_tier_timeouts(items: list[Item]) -> None:
    try:
        import pytest_timeout as _  # noqa: F401
    except ImportError:
        return

    multiplier = float(os.environ.get("TIER_TIMEOUT_MULTIPLIER", "1.0"))
    for item in items:
        tier = _get_tier(item)
        if tier is None or item.get_closest_marker("timeout") is not None:
            continue
        timeout = TIER_TIMEOUTS[tier]
        if timeout > 0:
            item.add_marker(pytest.mark.timeout(timeout * multiplier))


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config: Config, items: list[Item]) -> None:
    """Enforce TRA and Tier markers at collection time."""
    errors = _marker_errors(items)
    if errors:
        strict = "1" in (
            os.environ.get("TRA_ENFORCE", "warn"),
            os.environ.get("TIER_ENFORCE", "warn"),
        )
        if strict:
            pytest.fail(
                "TRA/Tier Enforcement Errors:\n" + "\n".join(f"  - {e}" for e in errors),
                pytrace=False,
            )
        print("\nTRA/Tier Enforcement Warnings:")
        for error in errors:
            print(f"  {error}")

    _apply_tier_timeouts(items)


@pytest.hookimpl(trylast=True)
def pytest_report_header(config: Config) -> str:
    """Add enforcement info to pytest header."""
    tra_enforce = os.environ.get("TRA_ENFORCE", "warn")
    tier_enforce = os.environ.get("TIER_ENFORCE", "warn")
    return f"TRA enforcement: {tra_enforce} | Tier enforcement: {tier_enforce}"
