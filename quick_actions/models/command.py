"""Command records produced by the index and consumed by search."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class CommandKind(Enum):
    """Where a command came from. Used for presentation only."""

    COMMAND = "command"  # Regular menu item
    OUTLINE = "outline"  # Heading in the current document
    SCRIPT = "script"  # User script launched through the script menu


@dataclass(frozen=True)
class ActionRef:
    """Opaque handler identifier, compared by name."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ActionCommand:
    """One invocable leaf of the menu tree, annotated with its path.

    `paths` holds the ancestor group titles from the top-level menu down to,
    but excluding, the leaf itself.
    """

    kind: CommandKind
    title: str
    action: ActionRef
    paths: tuple[str, ...] = ()
    shortcut: str | None = None
    tag: int = 0
    payload: Any = field(default=None, compare=False)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def matchable_paths(self) -> tuple[str, ...]:
        """Strings the search matches against, in order.

        The top-level menu name is shared by too many commands to be useful
        and is left out.
        """
        return self.paths[1:] + (self.title,)


@dataclass(frozen=True)
class MatchedPath:
    """One path string with the character ranges the query matched."""

    string: str
    ranges: tuple[tuple[int, int], ...] = ()

    @property
    def matched_text(self) -> str:
        return "".join(self.string[start:end] for start, end in self.ranges)


@dataclass(frozen=True)
class SearchHit:
    """A command that fully consumed the query."""

    command: ActionCommand
    matches: tuple[MatchedPath, ...]
    score: int

    @property
    def matched_text(self) -> str:
        """Characters highlighted across all paths, in order."""
        return "".join(match.matched_text for match in self.matches)
