# tasks/task_validator.py

"""
Validation rules for task writes.

A candidate may overwrite an existing task only if it passes every rule below,
checked in this order (the first failing rule is reported):

1. existence: a task with the same id is already in the collection
2. shape:     the field set is exactly {id, name, status, order}
3. name:      str
4. order:     int or float (bool is not a number here)
5. status:    one of TASK_STATUSES

There is no rule for the id's own type: the existence lookup already requires
it to match a present key.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .task_errors import (
    InvalidEnumError,
    InvalidShapeError,
    InvalidTypeError,
    TaskError,
    UnknownIdError,
)
from .task_models import TASK_FIELDS, TASK_STATUSES, Task


def candidate_fields(candidate: Any) -> Mapping[str, Any]:
    """Raw field view of a candidate; objects that are neither Task nor mapping have none."""
    if isinstance(candidate, Task):
        return candidate.to_dict()
    if isinstance(candidate, Mapping):
        return candidate
    return {}


def candidate_id(candidate: Any) -> Any:
    return candidate_fields(candidate).get("id")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_status(value: Any) -> bool:
    return isinstance(value, str) and value in TASK_STATUSES


def validate(candidate: Any, current: Iterable[Task]) -> TaskError | None:
    """Return the first rule violation for `candidate` against `current`, or None."""
    fields = candidate_fields(candidate)
    task_id = fields.get("id")

    if not any(t.id == task_id for t in current):
        return UnknownIdError(task_id)

    if set(fields.keys()) != TASK_FIELDS:
        return InvalidShapeError(id=task_id)

    if not isinstance(fields["name"], str):
        return InvalidTypeError("name", id=task_id)

    if not _is_number(fields["order"]):
        return InvalidTypeError("order", id=task_id)

    if not _is_status(fields["status"]):
        return InvalidEnumError("status", id=task_id)

    return None
