# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from maid.domain.task import SchedulingConfig, TaskForest, TaskRecord, build_forest


@pytest.fixture()
def forest_of() -> Callable[..., TaskForest]:
    """Factory: forest_of(records, default_priority=0, priority_inheritance=False)."""

    def factory(
        records: list[TaskRecord],
        default_priority: int = 0,
        priority_inheritance: bool = False,
    ) -> TaskForest:
        config = SchedulingConfig(
            default_priority=default_priority,
            priority_inheritance=priority_inheritance,
        )
        return build_forest(records, config)

    return factory


@pytest.fixture()
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the settings file at a per-test directory."""
    directory = tmp_path / "maid-config"
    monkeypatch.setenv("MAID_CONFIG_DIR", str(directory))
    return directory
