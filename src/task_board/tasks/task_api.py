# src/task_board/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from ..core.ports import TaskRepo
from .task_models import Task, TaskList

logger = logging.getLogger(__name__)


class TaskApi:
    """
    Async facade over a TaskRepo, for callers that expect awaitable results.

    Each coroutine runs the store call directly, with no await between
    validation and commit, so a call is atomic from the caller's point of view.
    Rejections propagate as TaskError.
    """

    def __init__(self, repo: TaskRepo) -> None:
        self._repo = repo

    async def read(self) -> TaskList:
        return self._repo.read()

    async def update(self, task: Task | Mapping[str, Any]) -> Task:
        return self._repo.update(task)

    async def batch_update(self, tasks: Sequence[Task | Mapping[str, Any]]) -> list[Task]:
        return self._repo.batch_update(tasks)
