"""
Root conftest.py for the galera-init test suite.

Pytest plugin that checks every test carries a responsibility anchor and a tier.
- Reports tests missing a @tra or @tier marker
- Applies a per-tier timeout when pytest-timeout is installed

Usage:
    @pytest.mark.tier(1)
    @pytest.mark.tra("UseCase.BootstrapDecisionEngine")
    def test_something():
        ...

Configuration:
    MARKER_ENFORCE=1 fails collection instead of printing warnings
    TIER_TIMEOUT_MULTIPLIER scales every tier timeout (slow CI runners)
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.nodes import Item


# Anchors name the layer a test protects
VALID_TRA_PREFIXES = frozenset(
    [
        "Domain.Invariant.",
        "Domain.Policy.",
        "UseCase.",
        "Port.",
        "Adapter.",
        "Contract.",
    ]
)

# Seconds; 0 means no limit
TIER_TIMEOUTS: dict[int, float] = {
    0: 0.1,
    1: 2.0,
    2: 30.0,
    3: 300.0,
    4: 0,
}


def pytest_configure(config: Config) -> None:
    """Register the tra and tier markers."""
    config.addinivalue_line(
        "markers",
        "tra(anchor): the single responsibility this test protects. "
        "Must start with one of: Domain.Invariant, Domain.Policy, UseCase, Port, Adapter, Contract",
    )
    config.addinivalue_line(
        "markers",
        "tier(level): 0=instant, 1=fast, 2=standard, 3=slow, 4=manual. "
        "Determines the timeout applied to the test.",
    )


def _get_tier(item: Item) -> int | None:
    """Extract tier level from item's markers."""
    for marker in item.iter_markers(name="tier"):
        if marker.args:
            tier = marker.args[0]
            if isinstance(tier, int) and tier in TIER_TIMEOUTS:
                return tier
    return None


def _marker_errors(items: list[Item]) -> list[str]:
    """Return one message per test with a missing or malformed marker."""
    errors = []
    for item in items:
        anchors = [m.args[0] for m in item.iter_markers(name="tra") if m.args]
        if not anchors:
            errors.append(f"{item.nodeid}: missing @pytest.mark.tra('...')")
        elif not any(anchors[0].startswith(p) for p in VALID_TRA_PREFIXES):
            errors.append(f"{item.nodeid}: invalid TRA anchor '{anchors[0]}'")

        if _get_tier(item) is None:
            errors.append(f"{item.nodeid}: missing or invalid @pytest.mark.tier()")
    return errors


def _apply_tier_timeouts(items: list[Item]) -> None:
    """Add a timeout marker per tier unless the test sets its own."""
    try:
        import pytest_timeout as _  # type: ignore[import-untyped]  # noqa: F401
    except ImportError:
        return

    multiplier = float(os.environ.get("TIER_TIMEOUT_MULTIPLIER", "1.0"))
    for item in items:
        tier = _get_tier(item)
        if tier is None or any(item.iter_markers(name="timeout")):
            continue
        timeout = TIER_TIMEOUTS[tier]
        if timeout > 0:
            item.add_marker(pytest.mark.timeout(timeout * multiplier))


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config: Config, items: list[Item]) -> None:
    """Check markers at collection time and apply tier timeouts."""
    errors = _marker_errors(items)
    if errors:
        if os.environ.get("MARKER_ENFORCE", "0") == "1":
            pytest.fail(
                "Marker errors:\n" + "\n".join(f"  - {e}" for e in errors),
                pytrace=False,
            )
        print("\nMarker warnings:")
        for error in errors:
            print(f"  {error}")

    _apply_tier_timeouts(items)


@pytest.hookimpl(trylast=True)
def pytest_report_header(config: Config) -> str:
    """Add enforcement mode to the pytest header."""
    mode = "strict" if os.environ.get("MARKER_ENFORCE", "0") == "1" else "warn"
    return f"Marker enforcement: {mode}"
