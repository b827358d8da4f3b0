# tasks/task_errors.py

from __future__ import annotations

from typing import Any

from .task_models import TASK_STATUSES


class TaskError(Exception):
    """
    Rejection raised by TaskStore writes.

    Carries a human-readable message and, where applicable, the id of the
    offending task. `to_dict()` gives the caller-facing shape:
      {"error": "...", "id": "..."}   (id omitted when not set)
    """

    kind = "TaskError"

    def __init__(self, message: str, *, id: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.id = id

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"error": self.message}
        if self.id is not None:
            out["id"] = self.id
        return out

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, id={self.id!r})"


class UnknownIdError(TaskError):
    kind = "UnknownId"

    def __init__(self, task_id: Any) -> None:
        super().__init__(f"Task with id:{task_id} doesn't exist", id=task_id)


class InvalidShapeError(TaskError):
    kind = "InvalidShape"

    def __init__(self, *, id: Any = None) -> None:
        super().__init__(
            'Task should contain only ["id", "name", "status", "order"] fields', id=id
        )


class InvalidTypeError(TaskError):
    kind = "InvalidType"

    _MESSAGES = {
        "name": "Name should be a string",
        "order": "Order should be a number",
    }

    def __init__(self, field: str, *, id: Any = None) -> None:
        super().__init__(self._MESSAGES.get(field, f"{field} has an invalid type"), id=id)
        self.field = field


class InvalidEnumError(TaskError):
    kind = "InvalidEnum"

    def __init__(self, field: str = "status", *, id: Any = None) -> None:
        super().__init__(f"{field} should be one of [{','.join(TASK_STATUSES)}]", id=id)
        self.field = field


class EmptyBatchError(TaskError):
    kind = "EmptyBatch"

    def __init__(self) -> None:
        super().__init__("Expected non-empty task list")
