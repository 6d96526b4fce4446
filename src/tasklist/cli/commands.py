# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import Task

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._raw: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        raw_args: bool = False,
    ) -> None:
        """raw_args: pass the rest of the line untouched as a single argument."""
        aliases = aliases or []
        key = name.lower()
        names = [key, *(a.lower() for a in aliases)]
        for n in names:
            self._handlers[n] = handler
            if raw_args:
                self._raw.add(n)
        self._help[key] = help_text

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(None, 1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""
        if name in self._raw:
            args = [rest] if rest.strip() else []
        else:
            args = rest.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task(position: int, task: Task) -> str:
    mark = "x" if task.completed else " "
    return f"{position}. [{mark}] {task.text}  ({task.id})"


def resolve_task(state: AppState, ref: str) -> Task | None:
    """
    Find a task by 1-based list position or by id.
    Positions win when ref is all digits and in range.
    """
    tasks = state.task_store.get_tasks()
    if ref.isdigit():
        idx = int(ref) - 1
        if 0 <= idx < len(tasks):
            return tasks[idx]
    return state.task_store.get_task(ref)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help() + "\nPlain text (no leading /) adds a task."


def cmd_add(state: AppState, args: list[str]) -> str:
    task = state.task_store.add_task(" ".join(args))
    if task is None:
        return "Task text is empty. Usage: /add <text>"
    return f"Added: {task.text}"


def cmd_list(state: AppState, args: list[str]) -> str:
    tasks = state.task_store.get_tasks()
    if not tasks:
        return "No tasks."
    return "\n".join(format_task(i, t) for i, t in enumerate(tasks, start=1))


def cmd_toggle(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /toggle <number|id>"
    task = resolve_task(state, args[0])
    if task is None:
        return f"No task matches {args[0]!r}."
    updated = state.task_store.toggle_task_complete(task.id)
    if updated is None:
        return f"No task matches {args[0]!r}."
    status = "done" if updated.completed else "pending"
    return f"Marked {status}: {updated.text}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /del <number|id>"
    task = resolve_task(state, args[0])
    if task is None or not state.task_store.delete_task(task.id):
        return f"No task matches {args[0]!r}."
    return f"Deleted: {task.text}"


def cmd_clear(state: AppState, args: list[str]) -> str:
    removed = state.task_store.clear_completed_tasks()
    if removed == 0:
        return "No completed tasks to clear."
    return f"Cleared {removed} completed task(s)."


def cmd_count(state: AppState, args: list[str]) -> str:
    c = state.task_store.get_task_counts()
    return f"Total: {c.total}  Pending: {c.pending}  Completed: {c.completed}"


def cmd_save(state: AppState, args: list[str]) -> str:
    if state.task_store.save():
        return "Saved."
    return "Save failed; changes are kept in memory only. See the log for details."


def cmd_reload(state: AppState, args: list[str]) -> str:
    tasks = state.task_store.load()
    return f"Reloaded {len(tasks)} task(s) from storage."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add", cmd_add, help_text="Add a task: /add <text>.", aliases=["a"], raw_args=True
)
registry.register("list", cmd_list, help_text="List tasks in insertion order.", aliases=["ls", "l"])
registry.register(
    "toggle", cmd_toggle, help_text="Flip done/pending: /toggle <number|id>.", aliases=["done", "t"]
)
registry.register("del", cmd_delete, help_text="Delete a task: /del <number|id>.", aliases=["rm"])
registry.register("clear", cmd_clear, help_text="Remove all completed tasks.")
registry.register("count", cmd_count, help_text="Show total/pending/completed counts.")
registry.register("save", cmd_save, help_text="Write tasks to storage now.")
registry.register("reload", cmd_reload, help_text="Discard memory and reload tasks from storage.")
