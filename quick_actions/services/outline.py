"""Document outline entries as quick action commands.

Headings of the current document are listed next to menu commands so
that jumping to a section works from the same search.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from ..models.command import ActionCommand, ActionRef, CommandKind

OUTLINE_GROUP_TITLE = "Outline"

_HEADING_PATTERN = re.compile(r"^(#{1,6})(?:[ \t]+(.*?))?(?:[ \t]+#+)?[ \t]*$")


@dataclass(frozen=True)
class OutlineItem:
    """A heading in a document."""

    title: str
    line: int  # 0-based line number
    level: int = 1

    @property
    def is_separator(self) -> bool:
        return not self.title.strip()


def parse_outline(text: str) -> list[OutlineItem]:
    """Extract Markdown ATX headings from text.

    Headings inside fenced code blocks are ignored.
    """
    items: list[OutlineItem] = []
    in_fence = False

    for line_number, line in enumerate(text.splitlines()):
        if line.lstrip().startswith(("```", "~~~")):
            in_fence = not in_fence
            continue
        if in_fence:
            continue

        match = _HEADING_PATTERN.match(line)
        if match:
            level, title = match.groups()
            items.append(OutlineItem(title=title or "", line=line_number, level=len(level)))

    return items


def outline_commands(items: Iterable[OutlineItem], action: ActionRef) -> list[ActionCommand]:
    """Turn outline items into commands. Separators are dropped."""
    return [
        ActionCommand(
            kind=CommandKind.OUTLINE,
            title=item.title,
            action=action,
            paths=(OUTLINE_GROUP_TITLE,),
            tag=item.line,
            payload=item,
        )
        for item in items
        if not item.is_separator
    ]
