"""Command surface exposed to editor hosts."""

from __future__ import annotations

import logging
from typing import Callable

from mdlistsort.buffer import EditorHost
from mdlistsort.exceptions import CommandError
from mdlistsort.schemas import SortDirection
from mdlistsort.sorter import sort_list

logger = logging.getLogger(__name__)

SORT_ASCENDING = "sort-ascending"
SORT_DESCENDING = "sort-descending"

Disposer = Callable[[], None]
HostProvider = Callable[[], EditorHost | None]


class CommandRegistry:
    """Named zero-argument commands, each registration undone by a disposer."""

    def __init__(self) -> None:
        self._commands: dict[str, Callable[[], None]] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def names(self) -> list[str]:
        return sorted(self._commands)

    def add(self, name: str, callback: Callable[[], None]) -> Disposer:
        """Register ``callback`` under ``name``.

        Returns:
            A disposer removing the command. Calls after the first do nothing.

        Raises:
            CommandError: If ``name`` is already registered.
        """
        if name in self._commands:
            err = f"Command {name!r} is already registered"
            raise CommandError(err)
        self._commands[name] = callback
        disposed = False

        def dispose() -> None:
            nonlocal disposed
            if disposed:
                return
            disposed = True
            if self._commands.get(name) is callback:
                del self._commands[name]

        return dispose

    def dispatch(self, name: str) -> None:
        """Run the command registered under ``name``.

        Raises:
            CommandError: If no such command is registered.
        """
        try:
            callback = self._commands[name]
        except KeyError as exc:
            err = f"Unknown command {name!r}"
            raise CommandError(err) from exc
        callback()


def register_sort_commands(registry: CommandRegistry, active_host: HostProvider) -> Disposer:
    """Register ``sort-ascending`` and ``sort-descending``.

    Args:
        registry: Where to register the commands.
        active_host: Returns the focused buffer, or None when there is none.

    Returns:
        A disposer removing both commands.
    """

    def run(direction: SortDirection) -> None:
        host = active_host()
        if host is None:
            logger.debug("No active buffer for %s sort", direction.value)
            return
        sort_list(host, direction)

    disposers: list[Disposer] = []
    try:
        disposers.append(registry.add(SORT_ASCENDING, lambda: run(SortDirection.ASCENDING)))
        disposers.append(registry.add(SORT_DESCENDING, lambda: run(SortDirection.DESCENDING)))
    except CommandError:
        for dispose in disposers:
            dispose()
        raise

    def dispose_all() -> None:
        for dispose in disposers:
            dispose()

    return dispose_all
