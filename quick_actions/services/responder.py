"""Resolve validators and action handlers along a responder chain.

Responders are asked in order, typically the active screen first and the
app last. A responder handles an action when it defines `action_<name>`,
the same naming Textual uses for bindings.

Validation follows whichever hook the handling responder offers:
- `validate_menu_item(item)` updates the item directly (titles included)
- Textual's `check_action(action, parameters)` maps True to enabled,
  None to disabled and False to hidden
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable, Sequence
from typing import Any

from ..models.command import ActionRef
from ..models.menu import MenuItem, MenuItemValidator
from .dispatch import ActionSender

logger = logging.getLogger(__name__)


class CheckActionValidator:
    """Adapts a Textual-style `check_action` to menu item validation."""

    def __init__(self, responder: Any) -> None:
        self._responder = responder

    def validate_menu_item(self, item: MenuItem) -> None:
        if item.action is None:
            return
        parameters = () if item.payload is None else (item.payload,)
        result = self._responder.check_action(item.action.name, parameters)
        item.enabled = result is True
        item.hidden = result is False


class ResponderChain:
    """Host adapter for both menu validation and action dispatch."""

    def __init__(self, responders: Sequence[Any] | Callable[[], Sequence[Any]]) -> None:
        # A callable lets the chain follow the currently active screen
        self._responders = responders
        self._pending: set[asyncio.Task] = set()

    @property
    def responders(self) -> list[Any]:
        responders = self._responders() if callable(self._responders) else self._responders
        return list(responders)

    def target_for_action(self, action: ActionRef) -> Any | None:
        """First responder defining a handler for action."""
        for responder in self.responders:
            if callable(getattr(responder, f"action_{action.name}", None)):
                return responder
        return None

    def resolve_validator(self, item: MenuItem) -> MenuItemValidator | None:
        """Find what can validate item, or None if nothing handles it."""
        if item.target is not None:
            return item.target
        if item.action is None:
            return None

        target = self.target_for_action(item.action)
        if target is None:
            return None
        if callable(getattr(target, "validate_menu_item", None)):
            return target
        if callable(getattr(target, "check_action", None)):
            return CheckActionValidator(target)
        return None

    def send_action(self, action: ActionRef, sender: ActionSender) -> bool:
        """Call the handler for action. Payload is passed when present."""
        target = self.target_for_action(action)
        if target is None:
            logger.warning("No handler for action %r (%s)", action.name, sender.title)
            return False

        handler = getattr(target, f"action_{action.name}")
        if sender.payload is None:
            result = handler()
        else:
            result = handler(sender.payload)

        if inspect.isawaitable(result):
            self._run_awaitable(result)
        return True

    def _run_awaitable(self, awaitable: Any) -> None:
        """Schedule an async handler (e.g. Textual's App.action_quit).

        Inside the event loop it becomes a task; with no loop running it is
        run to completion before returning.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(_wait_for(awaitable))
            return

        task = loop.create_task(_wait_for(awaitable))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)


async def _wait_for(awaitable: Any) -> Any:
    return await awaitable
