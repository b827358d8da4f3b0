# tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from .task_errors import EmptyBatchError
from .task_models import Task, TaskList, seed_tasks
from .task_validator import candidate_fields, validate

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    Owns the ordered task collection. Callers never get references into it:
    - read() returns copies
    - writes store new Task objects built from the candidate

    Write semantics:
    - update: validate one candidate, replace the matching entry in place
    - batch_update: validate every candidate against the pre-batch collection,
      then apply all of them or none (last occurrence of an id wins)

    Rejections are raised as TaskError subclasses; the collection is untouched.
    No locking: one logical writer per call, sequenced by the caller.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        initial = seed_tasks() if tasks is None else list(tasks)

        seen: set[str] = set()
        for t in initial:
            if t.id in seen:
                raise ValueError(f"duplicate task id: {t.id}")
            seen.add(t.id)

        self._tasks: list[Task] = [t.copy() for t in initial]
        logger.info("TaskStore ready total=%s", len(self._tasks))

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def read(self) -> TaskList:
        return TaskList(tasks=[t.copy() for t in self._tasks])

    def update(self, candidate: Task | Mapping[str, Any]) -> Task:
        error = validate(candidate, self._tasks)
        if error is not None:
            raise error

        task = Task.from_mapping(candidate_fields(candidate))
        self._tasks = [task if t.id == task.id else t for t in self._tasks]
        logger.debug("Task updated id=%s status=%s order=%s", task.id, task.status, task.order)
        return task.copy()

    def batch_update(self, candidates: Sequence[Task | Mapping[str, Any]]) -> list[Task]:
        """
        Apply a batch of updates atomically.

        Every candidate is validated against the collection as it was before the
        batch, in input order; the first failure is raised and nothing is applied.
        Returns one accepted Task per input candidate, duplicates included.
        """
        if not isinstance(candidates, (list, tuple)) or not candidates:
            raise EmptyBatchError()

        snapshot = self._tasks
        for candidate in candidates:
            error = validate(candidate, snapshot)
            if error is not None:
                raise error

        accepted = [Task.from_mapping(candidate_fields(c)) for c in candidates]

        merged: dict[str, Task] = {}
        for task in accepted:
            merged[task.id] = task

        self._tasks = [merged.get(t.id, t) for t in snapshot]
        logger.debug(
            "Task batch applied size=%s distinct_ids=%s", len(accepted), len(merged)
        )
        return [t.copy() for t in accepted]
