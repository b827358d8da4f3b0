# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_board.cli.bootstrap import create_initial_state
from task_board.core.state import AppState
from task_board.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="task-board-test",
        log_level="DEBUG",
        console_enabled=False,
        data_dir=tmp_path / "data",
        seed_task_count=10,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired the same way the CLI does it (real seeded TaskStore)."""
    return create_initial_state(settings=settings)


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def valid_task() -> dict:
    """A valid full-record update for task-1 (seed: in-progress, order 1)."""
    return {"id": "task-1", "name": "Renamed", "status": "done", "order": 7}
