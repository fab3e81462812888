"""Ordered action table with all-matches lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional

from wrapedit.runtime.telemetry import span

from .models import Action


@dataclass(slots=True)
class TableStats:
    """Lightweight snapshot describing table state."""

    action_count: int
    keys: tuple[str, ...]
    commands: tuple[str, ...]


class ActionTable:
    """Holds actions in registration order.

    Lookups never stop at the first hit: every matching entry is returned,
    in table order, and the caller fires all of them.
    """

    def __init__(
        self, actions: Iterable[Action] = (), *, logger_name: str | None = None
    ) -> None:
        self._actions: List[Action] = list(actions)
        self._logger_name = logger_name
        self._revision = 0

    def __iter__(self) -> Iterator[Action]:
        return iter(tuple(self._actions))

    def __len__(self) -> int:
        return len(self._actions)

    def revision(self) -> int:
        return self._revision

    def register(self, action: Action, *, position: Optional[int] = None) -> Action:
        with span(
            "actions::register",
            logger_name=self._logger_name,
            component="actions",
            metadata={"action_id": action.id},
        ):
            if position is None:
                self._actions.append(action)
            else:
                self._actions.insert(position, action)
            self._revision += 1
            return action

    def unregister(self, predicate: Callable[[Action], bool]) -> tuple[Action, ...]:
        removed = tuple(action for action in self._actions if predicate(action))
        if removed:
            self._actions = [a for a in self._actions if not predicate(a)]
            self._revision += 1
        return removed

    def match_key(self, key: str) -> tuple[Action, ...]:
        with span(
            "actions::match_key",
            logger_name=self._logger_name,
            component="actions",
            metadata={"key": key},
        ) as handle:
            matches = tuple(a for a in self._actions if a.matches_key(key))
            handle.add_metadata("matches", len(matches))
            return matches

    def match_command(self, token: str) -> tuple[Action, ...]:
        with span(
            "actions::match_command",
            logger_name=self._logger_name,
            component="actions",
            metadata={"token": token},
        ) as handle:
            matches = tuple(a for a in self._actions if a.matches_command(token))
            handle.add_metadata("matches", len(matches))
            return matches

    def stats(self) -> TableStats:
        return TableStats(
            action_count=len(self._actions),
            keys=tuple(sorted({a.key for a in self._actions if a.key})),
            commands=tuple(sorted({a.command for a in self._actions if a.command})),
        )


__all__ = ["ActionTable", "TableStats"]
