"""Shared fixtures for galera-init unit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from galera_init.domain.settings import InitSettings


@pytest.fixture
def make_settings(tmp_path: Path):
    """Factory building InitSettings rooted in tmp_path."""

    def _make(pod_name: str = "mariadb-galera-0", **overrides) -> InitSettings:
        values = dict(
            pod_name=pod_name,
            root_password="mariadb",
            mariadb_name="mariadb-galera",
            mariadb_namespace="default",
            config_dir=tmp_path / "config",
            state_dir=tmp_path / "state",
            poll_interval=0.01,
        )
        values.update(overrides)
        return InitSettings(**values)

    return _make
