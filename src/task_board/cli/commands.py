# src/task_board/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import json
import logging
from collections.abc import Callable
from typing import Any, cast

from ..core.state import AppState
from ..tasks.task_errors import TaskError

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, str], str]
CommandHandler3 = Callable[[AppState, str, CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /tasks, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        The argument text is passed through unsplit: /update and /batch take JSON.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].strip().split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        arg_text = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, arg_text, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, arg_text)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _rejection(err: TaskError) -> str:
    return "Rejected: " + json.dumps(err.to_dict(), ensure_ascii=False)


def _parse_json(arg_text: str) -> Any:
    return json.loads(arg_text)


def cmd_help(state: AppState, arg_text: str) -> str:
    return registry.build_help()


def cmd_status(state: AppState, arg_text: str) -> str:
    app_name = str(getattr(state.settings, "app_name", "task-board"))
    return (
        "Status:\n"
        f"  App: {app_name}\n"
        f"  Tasks: {state.task_store.count_tasks()}"
    )


def cmd_tasks(state: AppState, arg_text: str) -> str:
    tasks = state.task_store.read().tasks
    if not tasks:
        return "No tasks."
    lines = [f"Tasks ({len(tasks)}):"]
    for t in tasks:
        lines.append(f"  {t.id} | {t.status} | {t.order} | {t.name}")
    return "\n".join(lines)


def cmd_update(
    state: AppState,
    arg_text: str,
    emit: CommandEmitter | None = None,
) -> str:
    """
    /update {"id": "task-1", "name": "...", "status": "done", "order": 1}
    """
    try:
        payload = _parse_json(arg_text)
    except ValueError:
        return 'Usage: /update {"id": ..., "name": ..., "status": ..., "order": ...}'

    try:
        task = state.task_store.update(payload)
    except TaskError as err:
        logger.debug("Update rejected: %r", err)
        return _rejection(err)

    if emit:
        with contextlib.suppress(Exception):
            emit(f"[TASKS] {task.id} updated.")
    return "Updated: " + json.dumps(task.to_dict(), ensure_ascii=False)


def cmd_batch(
    state: AppState,
    arg_text: str,
    emit: CommandEmitter | None = None,
) -> str:
    """
    /batch [{"id": ...}, {"id": ...}]
    """
    try:
        payload = _parse_json(arg_text)
    except ValueError:
        return "Usage: /batch [<task json>, <task json>, ...]"

    try:
        accepted = state.task_store.batch_update(payload)
    except TaskError as err:
        logger.debug("Batch rejected: %r", err)
        return _rejection(err)

    if emit:
        with contextlib.suppress(Exception):
            emit(f"[TASKS] batch of {len(accepted)} applied.")
    return f"Batch applied: {len(accepted)} task(s)."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show app name and task count.")
registry.register("tasks", cmd_tasks, help_text="List all tasks.", aliases=["ls"])
registry.register("update", cmd_update, help_text="Update one task: /update <json object>.")
registry.register("batch", cmd_batch, help_text="Update tasks atomically: /batch <json array>.")
