# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_errors import TaskError

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /new, ...)."""

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

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args)
        except TaskError as e:
            logger.debug("Command /%s rejected: %s", name, e)
            return f"Error {e.code}: {e}."
        except ValueError as e:
            return f"Invalid input: {e}."

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_task_id(args: list[str], usage: str) -> int:
    if len(args) != 1:
        raise ValueError(usage)
    try:
        task_id = int(args[0])
    except ValueError:
        raise ValueError(f"task id must be an integer, got {args[0]!r}") from None
    if task_id < 0:
        raise ValueError("task id must be non-negative")
    return task_id


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    reg = state.registry
    return (
        "Status:\n"
        f"  Caller: {state.caller}\n"
        f"  Tasks: {reg.count_tasks()} / {reg.max_tasks}"
    )


def cmd_whoami(state: AppState, args: list[str]) -> str:
    return f"You are {state.caller}."


def cmd_as(state: AppState, args: list[str]) -> str:
    """
    /as <caller>  -> act as another identity for subsequent commands
    """
    if len(args) != 1:
        return "Usage: /as <caller>"
    state.caller = args[0]
    logger.debug("Caller switched to %s", state.caller)
    return f"Now acting as {state.caller}."


def cmd_new(state: AppState, args: list[str]) -> str:
    """
    /new <deadline> <title...> [| <description...>]
    """
    usage = "Usage: /new <deadline> <title> [| description]"
    if len(args) < 2:
        return usage
    try:
        deadline = int(args[0])
    except ValueError:
        return f"Invalid input: deadline must be an integer timestamp, got {args[0]!r}."

    rest = " ".join(args[1:])
    title, sep, description = rest.partition("|")
    resp = task_api.create_task(
        state.registry,
        title=title,
        description=description.strip() if sep and description.strip() else None,
        deadline=deadline,
        caller=state.caller,
    )
    if "error" in resp:
        return f"Error {resp['error']}: task limit reached ({state.registry.max_tasks})."
    return f"Created task #{resp['value']}."


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id = _parse_task_id(args, "usage: /done <id>")
    state.registry.complete_task(task_id, state.caller)
    return f"Task #{task_id} completed."


def cmd_show(state: AppState, args: list[str]) -> str:
    task_id = _parse_task_id(args, "usage: /show <id>")
    task = state.registry.get_task(task_id)
    if task is None:
        return f"No task #{task_id}."
    lines = [
        f"Task #{task_id}: {task.title}",
        f"  Creator: {task.creator}",
        f"  Deadline: {task.deadline}",
        f"  Completed: {'yes' if task.completed else 'no'}",
    ]
    if task.description:
        lines.append(f"  Description: {task.description}")
    return "\n".join(lines)


def cmd_mine(state: AppState, args: list[str]) -> str:
    ids = state.registry.get_user_tasks(state.caller)
    if not ids:
        return f"No tasks created by {state.caller}."
    lines = [f"Tasks created by {state.caller}:"]
    for task_id in ids:
        task = state.registry.get_task(task_id)
        if task is None:
            continue
        mark = "x" if task.completed else " "
        lines.append(f"  [{mark}] #{task_id} {task.title}")
    return "\n".join(lines)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show current caller and task count.")
registry.register("whoami", cmd_whoami, help_text="Show the current caller identity.")
registry.register("as", cmd_as, help_text="Switch caller identity: /as <caller>.")
registry.register(
    "new", cmd_new, help_text="Create a task: /new <deadline> <title> [| description].",
    aliases=["add"],
)
registry.register("done", cmd_done, help_text="Complete one of your tasks: /done <id>.")
registry.register("show", cmd_show, help_text="Show task details: /show <id>.")
registry.register("mine", cmd_mine, help_text="List tasks you created.", aliases=["ls"])
