# src/task_board/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the outer layers.

The async API and the console commands depend on this Protocol instead of the
concrete TaskStore, which keeps the store swappable and makes testing easier.
"""

from typing import Any, Mapping, Protocol, Sequence


class TaskRepo(Protocol):
    def count_tasks(self) -> int: ...

    # Snapshot read: independent copies, in collection order.
    def read(self) -> Any: ...

    # Writes raise TaskError on rejection and leave the collection unchanged.
    def update(self, candidate: Any | Mapping[str, Any]) -> Any: ...
    def batch_update(self, candidates: Sequence[Any | Mapping[str, Any]]) -> list[Any]: ...
