"""Invoke a chosen command through the host's action dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from ..models.command import ActionCommand, ActionRef


@dataclass(frozen=True)
class ActionSender:
    """Stand-in for the menu item that would normally send the action."""

    title: str
    tag: int = 0
    payload: Any = None


class ActionDispatcher(Protocol):
    """Host capability that routes an action to its handler."""

    def send_action(self, action: ActionRef, sender: ActionSender) -> bool:
        """Run the handler for action. Returns False if none was found."""
        ...


def perform(command: ActionCommand, dispatcher: ActionDispatcher) -> bool:
    """Perform the command's original menu action."""
    sender = ActionSender(title=command.title, tag=command.tag, payload=command.payload)
    return dispatcher.send_action(command.action, sender)
