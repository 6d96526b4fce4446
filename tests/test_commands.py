# tests/test_commands.py

from __future__ import annotations

from tasklist.cli.commands import CommandRegistry, registry


def test_command_registry_routes_and_aliases(state) -> None:
    reg = CommandRegistry()
    seen: list[list[str]] = []

    def handler(state, args):
        seen.append(args)
        return "ok"

    reg.register("go", handler, "go somewhere", aliases=["g"])

    assert reg.handle(state, "/go a b") == "ok"
    assert reg.handle(state, "/G c") == "ok"
    assert seen == [["a", "b"], ["c"]]
    assert "/go - go somewhere" in reg.build_help()


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_and_list(state) -> None:
    assert registry.handle(state, "/add Buy milk") == "Added: Buy milk"
    assert registry.handle(state, "/add   ") == "Task text is empty. Usage: /add <text>"
    registry.handle(state, "/a Walk dog")

    listing = registry.handle(state, "/list") or ""
    assert listing.splitlines() == ["1. [ ] Buy milk  (t1)", "2. [ ] Walk dog  (t2)"]


def test_add_keeps_inner_spacing(state) -> None:
    assert registry.handle(state, "/add a   b") == "Added: a   b"
    assert registry.handle(state, "/a  spaced  out ") == "Added: spaced  out"
    assert [t.text for t in state.task_store.get_tasks()] == ["a   b", "spaced  out"]


def test_list_empty(state) -> None:
    assert registry.handle(state, "/ls") == "No tasks."


def test_toggle_by_position_and_id(state) -> None:
    registry.handle(state, "/add one")
    registry.handle(state, "/add two")

    assert registry.handle(state, "/toggle 2") == "Marked done: two"
    assert registry.handle(state, "/done t2") == "Marked pending: two"
    assert registry.handle(state, "/toggle 9") == "No task matches '9'."
    assert registry.handle(state, "/toggle").startswith("Usage")  # type: ignore[union-attr]


def test_delete_by_position(state) -> None:
    registry.handle(state, "/add one")
    registry.handle(state, "/add two")

    assert registry.handle(state, "/del 1") == "Deleted: one"
    assert [t.text for t in state.task_store.get_tasks()] == ["two"]
    assert registry.handle(state, "/rm nope") == "No task matches 'nope'."


def test_clear_and_count(state) -> None:
    registry.handle(state, "/add one")
    registry.handle(state, "/add two")
    registry.handle(state, "/toggle 1")

    assert registry.handle(state, "/count") == "Total: 2  Pending: 1  Completed: 1"
    assert registry.handle(state, "/clear") == "Cleared 1 completed task(s)."
    assert registry.handle(state, "/clear") == "No completed tasks to clear."
    assert registry.handle(state, "/count") == "Total: 1  Pending: 1  Completed: 0"


def test_save_and_reload(state, kv) -> None:
    registry.handle(state, "/add keep")
    assert registry.handle(state, "/save") == "Saved."

    kv.fail_with = OSError("read-only")
    assert (registry.handle(state, "/save") or "").startswith("Save failed")

    kv.data.clear()
    assert registry.handle(state, "/reload") == "Reloaded 0 task(s) from storage."
    assert state.task_store.get_tasks() == []


def test_help_lists_commands(state) -> None:
    text = registry.handle(state, "/help") or ""
    for name in ("add", "list", "toggle", "del", "clear", "count"):
        assert f"/{name} - " in text
