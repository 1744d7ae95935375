"""Render search hits as highlighted rich text."""

from __future__ import annotations

from rich.text import Text

from ..models.command import CommandKind, SearchHit

PATH_SEPARATOR = " › "
HIGHLIGHT_STYLE = "bold underline"
CONTEXT_STYLE = "dim"


def render_hit(hit: SearchHit, highlight_style: str = HIGHLIGHT_STYLE) -> Text:
    """Render the command path with the matched characters highlighted.

    Path components that were not part of matching (the top-level menu and
    any skipped leading groups) are shown dimmed for context.
    """
    command = hit.command
    full_path = command.paths + (command.title,)
    context = full_path[: len(full_path) - len(hit.matches)]

    text = Text()
    for string in context:
        text.append(string, style=CONTEXT_STYLE)
        text.append(PATH_SEPARATOR, style=CONTEXT_STYLE)

    for n, match in enumerate(hit.matches):
        if n:
            text.append(PATH_SEPARATOR, style=CONTEXT_STYLE)
        offset = len(text)
        text.append(match.string)
        for start, end in match.ranges:
            text.stylize(highlight_style, offset + start, offset + end)

    return text


def describe_hit(hit: SearchHit) -> str:
    """Short right-aligned hint: the shortcut, or where the command comes from."""
    command = hit.command
    if command.shortcut:
        return command.shortcut
    if command.kind is CommandKind.OUTLINE:
        return f"line {command.tag + 1}"
    if command.kind is CommandKind.SCRIPT:
        return "script"
    return ""
