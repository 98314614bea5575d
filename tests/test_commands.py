# tests/test_commands.py

from __future__ import annotations

from task_reporter.cli.commands import CommandRegistry, registry


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b")

    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/b y", emit=lambda _: None) == "h3"
    assert called["h2"] == 1
    assert called["h3"] == 1


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_help_lists_commands(state) -> None:
    out = registry.handle(state, "/help") or ""
    for name in ("/list", "/pending", "/report", "/add", "/status"):
        assert name in out
    assert registry.handle(state, "/?") == out


def test_list_and_pending(state) -> None:
    listed = registry.handle(state, "/list") or ""
    assert "1. Read Quran | Status done | Priority is high" in listed
    assert "3. Do laundry" in listed

    pending = registry.handle(state, "/pending") or ""
    assert "Read Quran" not in pending
    assert "1. Clean room" in pending
    assert "2. Do laundry" in pending


def test_report(state) -> None:
    out = registry.handle(state, "/report") or ""
    assert "Total tasks: 3" in out
    assert "Done: 1" in out
    assert "Pending: 2" in out
    assert "High priority pending: 1" in out
    assert "high: done=1 pending=1" in out
    assert "There are still high priority tasks pending." in out


def test_add_appends_then_reports(state) -> None:
    notes: list[str] = []
    out = registry.handle(state, "/add low pending Setup meetup with Abdul", emit=notes.append) or ""

    assert out.startswith("Task added: Setup meetup with Abdul")
    assert "Total tasks: 4" in out
    assert notes and "Creating task" in notes[0]
    last = state.task_store.snapshot()[-1]
    assert last.description == "Setup meetup with Abdul"
    assert last.priority.value == "low"


def test_add_forced_failure_keeps_store(state) -> None:
    out = registry.handle(state, "/add high done Something --fail") or ""
    assert out.startswith("Task creation failed: Something went wrong")
    assert state.task_store.count_tasks() == 3


def test_add_rejects_bad_input(state) -> None:
    assert (registry.handle(state, "/add high") or "").startswith("Usage:")
    out = registry.handle(state, "/add urgent pending Something") or ""
    assert out.startswith("Invalid task:")
    assert state.task_store.count_tasks() == 3


def test_status(state) -> None:
    out = registry.handle(state, "/status") or ""
    assert "task-reporter-test" in out
    assert "Tasks: 3" in out


def test_add_keeps_fail_token_inside_description(state) -> None:
    out = registry.handle(state, "/add low pending try --fail flag") or ""
    assert out.startswith("Task added: try --fail flag")
    assert state.task_store.snapshot()[-1].description == "try --fail flag"
