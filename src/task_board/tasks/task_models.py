# tasks/task_models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Any


class TaskStatus(StrEnum):
    """
    Task status.

    Members compare equal to their raw string values, so payloads coming from
    callers ("waiting", "in-progress", "done") can be checked without conversion.
    """

    WAITING = "waiting"
    IN_PROGRESS = "in-progress"
    DONE = "done"


TASK_STATUSES: tuple[str, ...] = tuple(s.value for s in TaskStatus)
TASK_FIELDS: frozenset[str] = frozenset({"id", "name", "status", "order"})

DEFAULT_SEED_COUNT = 10


@dataclass(slots=True)
class Task:
    id: str
    name: str
    status: TaskStatus
    order: int | float

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "status": str(self.status),
            "order": self.order,
        }

    def copy(self) -> Task:
        return replace(self)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Task:
        """Build a Task from a mapping that already passed validation."""
        return cls(
            id=data["id"],
            name=data["name"],
            status=TaskStatus(data["status"]),
            order=data["order"],
        )


@dataclass(slots=True)
class TaskList:
    tasks: list[Task] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"tasks": [t.to_dict() for t in self.tasks]}


def create_task(index: int) -> Task:
    statuses = list(TaskStatus)
    return Task(
        id=f"task-{index}",
        name=f"Task name {index}",
        status=statuses[index % len(statuses)],
        order=index,
    )


def seed_tasks(count: int = DEFAULT_SEED_COUNT) -> list[Task]:
    """Deterministic startup collection: task-0 .. task-{count-1}."""
    return [create_task(i) for i in range(max(0, int(count)))]
