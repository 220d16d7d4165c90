# src/taskz/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from rich.markup import escape

from ..core.state import AppState
from ..tasks.task_api import mark_done, undo_last
from ..tasks.task_models import ListOrder, Task
from ..tasks.undo_buffer import UndoDataError
from . import installer

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

EDIT_SEPARATOR = "///"


class UsageError(Exception):
    """Bad or missing command arguments; the message is shown to the user."""


@dataclass(frozen=True, slots=True)
class Reply:
    """Rendered outcome of one command: rich markup plus the process exit code."""

    text: str
    exit_code: int = EXIT_OK

    @property
    def ok(self) -> bool:
        return self.exit_code == EXIT_OK


@dataclass(frozen=True, slots=True)
class _Command:
    handler: CommandHandler
    usage: str
    help_text: str
    failure_text: str
    failure_hint: str | None = None


def ok(text: str) -> str:
    return f"[green]{escape(text)}[/green]"


def fail(text: str) -> str:
    return f"[red]{escape(text)}[/red]"


def _task_line(task: Task) -> str:
    return f"[cyan]{escape(f'[{task.created_at}] {task.description}')}[/cyan]"


class CommandRegistry:
    """Maps the first CLI word (`add`, `list`, `-i`, ...) to a handler."""

    def __init__(self) -> None:
        self._commands: dict[str, _Command] = {}
        self._help_order: list[str] = []

    def register(
        self,
        name: str,
        handler: CommandHandler,
        *,
        usage: str,
        help_text: str,
        failure_text: str,
        failure_hint: str | None = None,
        aliases: list[str] | None = None,
    ) -> None:
        command = _Command(
            handler=handler,
            usage=usage,
            help_text=help_text,
            failure_text=failure_text,
            failure_hint=failure_hint,
        )
        self._commands[name] = command
        self._help_order.append(name)
        for alias in aliases or []:
            self._commands[alias] = command

    def handle(self, state: AppState, argv: list[str]) -> Reply:
        """
        Run one command line (without the program name).

        OSError from a handler becomes "failed to ..." with exit code 1;
        it is never raised out of here.
        """
        if not argv:
            return Reply(fail("no command provided. usage: taskz [options]"), EXIT_USAGE)

        name, args = argv[0], argv[1:]
        command = self._commands.get(name)
        if command is None:
            return Reply(fail("unknown command"), EXIT_USAGE)

        try:
            return Reply(command.handler(state, args))
        except UsageError as e:
            return Reply(fail(str(e)), EXIT_USAGE)
        except UndoDataError:
            logger.debug("Undo buffer unreadable.", exc_info=True)
            return Reply(fail("failed to parse undo data"), EXIT_FAILURE)
        except OSError as e:
            logger.debug("Command %r failed.", name, exc_info=True)
            lines = []
            if command.failure_hint:
                lines.append(fail(command.failure_hint))
            lines.append(fail(f"{command.failure_text}: {e}"))
            return Reply("\n".join(lines), EXIT_FAILURE)

    def build_help(self) -> str:
        lines = [
            "taskz - minimalistic todo list app",
            "",
            "usage:",
        ]
        for name in self._help_order:
            command = self._commands[name]
            lines.append(f"  taskz {command.usage:<22}{command.help_text}")
        return escape("\n".join(lines))


registry = CommandRegistry()


def _joined(args: list[str], missing: str) -> str:
    if not args:
        raise UsageError(missing)
    return " ".join(args)


def cmd_install(state: AppState, args: list[str]) -> str:
    target = installer.install(state.settings.install_path)
    return ok(f"installed successfully to {target}")


def cmd_uninstall(state: AppState, args: list[str]) -> str:
    target = state.settings.install_path
    if installer.uninstall(target):
        return ok(f"uninstalled successfully from {target}")
    return fail("no installation found")


def cmd_add(state: AppState, args: list[str]) -> str:
    description = _joined(args, "please provide a task description")
    state.task_store.add(description)
    return ok("task added")


def cmd_list(state: AppState, args: list[str]) -> str:
    order = ListOrder.ALPHABETICAL if "-a" in args else ListOrder.CREATED
    tasks = state.task_store.list_tasks(order)
    if not tasks:
        return fail("no tasks found")
    return "\n".join(_task_line(t) for t in tasks)


def cmd_search(state: AppState, args: list[str]) -> str:
    query = _joined(args, "please provide a search query")
    found = state.task_store.search(query)
    if not found:
        return fail(f'no tasks found matching "{query}"')
    return "\n".join(_task_line(t) for t in found)


def cmd_done(state: AppState, args: list[str]) -> str:
    query = _joined(args, "please provide the task to mark as done")
    removed = mark_done(state, query)
    if removed is None:
        return fail("no matching task found")
    return ok(f"task done and removed: {removed.description}")


def cmd_undo(state: AppState, args: list[str]) -> str:
    restored = undo_last(state)
    if restored is None:
        return fail("no undo available")
    return ok("undo successful: task restored")


def cmd_edit(state: AppState, args: list[str]) -> str:
    parts = [p.strip() for p in " ".join(args).split(EDIT_SEPARATOR)]
    if len(parts) != 2:
        raise UsageError(
            "please provide the edit command in format: "
            f"taskz edit <query> {EDIT_SEPARATOR} <new description>"
        )
    query, new_description = parts
    updated = state.task_store.edit(query, new_description)
    if updated is None:
        return fail("no matching task found")
    return ok(f"task updated to: {new_description}")


def cmd_clear(state: AppState, args: list[str]) -> str:
    state.task_store.clear()
    return ok("all tasks cleared")


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


registry.register(
    "-i",
    cmd_install,
    usage="-i",
    help_text="install the app globally",
    failure_text="installation failed",
    failure_hint="run as administrator",
)
registry.register(
    "-u",
    cmd_uninstall,
    usage="-u",
    help_text="uninstall the app",
    failure_text="uninstallation failed",
    failure_hint="run as administrator",
)
registry.register(
    "add", cmd_add, usage="add <task>", help_text="add a new task", failure_text="failed to add task"
)
registry.register(
    "list",
    cmd_list,
    usage="list [-a]",
    help_text="list tasks (use -a for alphabetical order)",
    failure_text="failed to list tasks",
)
registry.register(
    "search",
    cmd_search,
    usage="search <query>",
    help_text="search for tasks containing the query",
    failure_text="failed to search tasks",
)
registry.register(
    "done",
    cmd_done,
    usage="done <task>",
    help_text="mark the task as done (and remove it)",
    failure_text="failed to mark task as done",
)
registry.register(
    "undo", cmd_undo, usage="undo", help_text="undo the last removal", failure_text="failed to undo"
)
registry.register(
    "edit",
    cmd_edit,
    usage=f"edit <old> {EDIT_SEPARATOR} <new>",
    help_text="edit a task",
    failure_text="failed to edit task",
)
registry.register(
    "clear", cmd_clear, usage="clear", help_text="clear all tasks", failure_text="failed to clear tasks"
)
registry.register(
    "-h",
    cmd_help,
    usage="/? | -? | -h",
    help_text="show this help",
    failure_text="failed to show help",
    aliases=["-?", "/?"],
)
