# tests/test_task_store.py

from __future__ import annotations

import pytest

from task_board.tasks.task_errors import (
    EmptyBatchError,
    InvalidEnumError,
    InvalidShapeError,
    InvalidTypeError,
    TaskError,
    UnknownIdError,
)
from task_board.tasks.task_models import Task, TaskStatus, create_task, seed_tasks
from task_board.tasks.task_store import TaskStore


def _dicts(store: TaskStore) -> list[dict]:
    return store.read().to_dict()["tasks"]


def test_store_seeds_ten_tasks_by_default(store: TaskStore) -> None:
    assert store.count_tasks() == 10
    assert store.read().tasks == seed_tasks()


def test_store_accepts_explicit_tasks_and_rejects_duplicates() -> None:
    store = TaskStore([create_task(0), create_task(5)])
    assert [t.id for t in store.read().tasks] == ["task-0", "task-5"]

    with pytest.raises(ValueError):
        TaskStore([create_task(1), create_task(1)])


def test_store_does_not_alias_initial_tasks() -> None:
    initial = seed_tasks(2)
    store = TaskStore(initial)
    initial[0].name = "mutated"
    assert store.read().tasks[0].name == "Task name 0"


def test_read_returns_independent_copies(store: TaskStore) -> None:
    first = store.read()
    first.tasks[0].name = "mutated"
    first.tasks.pop()
    first.tasks.append(Task(id="evil", name="x", status=TaskStatus.DONE, order=0))

    again = store.read()
    assert again.tasks == seed_tasks()


def test_update_replaces_exactly_one_entry(store: TaskStore, valid_task) -> None:
    before = _dicts(store)

    accepted = store.update(valid_task)

    assert accepted == Task(id="task-1", name="Renamed", status=TaskStatus.DONE, order=7)
    after = _dicts(store)
    assert after[1] == valid_task
    assert after[:1] == before[:1]
    assert after[2:] == before[2:]


def test_update_keeps_position_when_order_changes(store: TaskStore) -> None:
    store.update({"id": "task-0", "name": "Task name 0", "status": "waiting", "order": 100})
    tasks = store.read().tasks
    assert tasks[0].id == "task-0"
    assert tasks[0].order == 100
    assert [t.id for t in tasks] == [f"task-{i}" for i in range(10)]


def test_update_accepts_task_instance(store: TaskStore) -> None:
    store.update(Task(id="task-4", name="n", status=TaskStatus.WAITING, order=4.5))
    assert store.read().tasks[4].order == 4.5


def test_update_is_idempotent(store: TaskStore, valid_task) -> None:
    store.update(valid_task)
    once = _dicts(store)
    store.update(valid_task)
    assert _dicts(store) == once


def test_update_stores_its_own_copy(store: TaskStore, valid_task) -> None:
    accepted = store.update(valid_task)
    valid_task["name"] = "changed by caller"
    accepted.name = "changed via result"
    assert store.read().tasks[1].name == "Renamed"


@pytest.mark.parametrize(
    ("candidate", "error_type"),
    [
        ({"id": "task-10", "name": "x", "status": "done", "order": 1}, UnknownIdError),
        ({"id": "task-1", "name": "x", "status": "done"}, InvalidShapeError),
        ({"id": "task-1", "name": "x", "status": "done", "order": 1, "x": 1}, InvalidShapeError),
        ({"id": "task-1", "name": None, "status": "done", "order": 1}, InvalidTypeError),
        ({"id": "task-1", "name": "x", "status": "done", "order": "1"}, InvalidTypeError),
        ({"id": "task-1", "name": "x", "status": "blocked", "order": 1}, InvalidEnumError),
    ],
)
def test_rejected_update_leaves_collection_unchanged(store: TaskStore, candidate, error_type) -> None:
    before = _dicts(store)

    with pytest.raises(error_type) as exc_info:
        store.update(candidate)

    assert exc_info.value.id == candidate["id"]
    assert _dicts(store) == before


def test_unknown_id_rejection_payload(store: TaskStore) -> None:
    with pytest.raises(TaskError) as exc_info:
        store.update({"id": "missing", "name": "x", "status": "done", "order": 1})
    assert exc_info.value.to_dict() == {"error": "Task with id:missing doesn't exist", "id": "missing"}


@pytest.mark.parametrize("batch", [[], (), None, "task-1", {"id": "task-1"}, 3])
def test_batch_requires_non_empty_sequence(store: TaskStore, batch) -> None:
    before = _dicts(store)

    with pytest.raises(EmptyBatchError) as exc_info:
        store.batch_update(batch)

    assert exc_info.value.to_dict() == {"error": "Expected non-empty task list"}
    assert exc_info.value.id is None
    assert _dicts(store) == before


def test_batch_applies_all_and_returns_input_sequence(store: TaskStore) -> None:
    batch = [
        {"id": "task-2", "name": "two", "status": "waiting", "order": 20},
        {"id": "task-0", "name": "zero", "status": "done", "order": 0},
    ]

    accepted = store.batch_update(batch)

    assert [t.to_dict() for t in accepted] == batch
    tasks = _dicts(store)
    assert tasks[0] == batch[1]
    assert tasks[2] == batch[0]
    assert tasks[1] == create_task(1).to_dict()
    assert [t["id"] for t in tasks] == [f"task-{i}" for i in range(10)]


def test_batch_is_all_or_nothing(store: TaskStore) -> None:
    before = _dicts(store)
    batch = [
        {"id": "task-0", "name": "a", "status": "done", "order": 0},
        {"id": "task-1", "name": "b", "status": "nope", "order": 1},
        {"id": "task-2", "name": "c", "status": "done", "order": 2},
    ]

    with pytest.raises(InvalidEnumError) as exc_info:
        store.batch_update(batch)

    assert exc_info.value.id == "task-1"
    assert _dicts(store) == before


def test_batch_reports_first_failure_in_input_order(store: TaskStore) -> None:
    batch = [
        {"id": "task-0", "name": "a", "status": "done", "order": 0},
        {"id": "ghost", "name": "b", "status": "done", "order": 1},
        {"id": "task-2", "name": 5, "status": "done", "order": 2},
    ]

    with pytest.raises(UnknownIdError) as exc_info:
        store.batch_update(batch)

    assert exc_info.value.to_dict() == {"error": "Task with id:ghost doesn't exist", "id": "ghost"}


def test_batch_last_write_wins_for_repeated_id(store: TaskStore) -> None:
    batch = [
        {"id": "task-0", "name": "Task name 0", "status": "waiting", "order": 1},
        {"id": "task-0", "name": "Task name 0", "status": "waiting", "order": 2},
    ]

    accepted = store.batch_update(batch)

    assert [t.order for t in accepted] == [1, 2]
    assert store.read().tasks[0].order == 2
    assert store.count_tasks() == 10


def test_batch_repeated_id_each_occurrence_must_be_valid(store: TaskStore) -> None:
    before = _dicts(store)
    batch = [
        {"id": "task-0", "name": 0, "status": "waiting", "order": 1},
        {"id": "task-0", "name": "ok", "status": "waiting", "order": 2},
    ]

    with pytest.raises(InvalidTypeError):
        store.batch_update(batch)

    assert _dicts(store) == before


def test_batch_validates_against_pre_batch_collection() -> None:
    # A store missing task-1: a batch cannot "create" it for a later entry.
    store = TaskStore([create_task(0)])
    batch = [
        {"id": "task-0", "name": "a", "status": "done", "order": 0},
        {"id": "task-1", "name": "b", "status": "done", "order": 1},
    ]

    with pytest.raises(UnknownIdError):
        store.batch_update(batch)

    assert store.read().tasks == [create_task(0)]


def test_batch_accepts_tuple_of_tasks(store: TaskStore) -> None:
    accepted = store.batch_update(
        (Task(id="task-9", name="nine", status=TaskStatus.IN_PROGRESS, order=9),)
    )
    assert accepted[0].id == "task-9"
    assert store.read().tasks[9].name == "nine"
