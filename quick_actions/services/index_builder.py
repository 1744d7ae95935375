"""Flatten a menu tree into the list of commands quick actions can search.

Every item is validated right before it is read, so titles and enabled
states reflect the current host state. Groups are always descended into;
leaves are kept only if they are enabled, visible, handled by something,
and not on the exclusion list.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from enum import Enum

from ..models.command import ActionCommand, ActionRef, CommandKind
from ..models.menu import MenuItem, MenuItemValidator

logger = logging.getLogger(__name__)

ValidatorResolver = Callable[[MenuItem], MenuItemValidator | None]


class SkipReason(Enum):
    """Why a leaf menu item was left out of the index."""

    NO_ACTION = "no_action"  # Separator or placeholder
    EXCLUDED = "excluded"  # On the exclusion list
    UNRESOLVED_HANDLER = "unresolved_handler"  # Nothing can validate it
    DISABLED = "disabled"
    HIDDEN = "hidden"


@dataclass(frozen=True)
class SkippedItem:
    """A leaf that did not make it into the index."""

    title: str
    reason: SkipReason


class IndexBuilder:
    """Builds one immutable snapshot of searchable commands per call.

    Args:
        resolve_validator: Host capability returning the validator for an
            item, or None if nothing handles it
        excluded_actions: Actions that must never be listed (e.g. the action
            opening quick actions itself)
        script_action: Action identifying user scripts
    """

    def __init__(
        self,
        resolve_validator: ValidatorResolver,
        excluded_actions: Iterable[ActionRef] = (),
        script_action: ActionRef | None = None,
    ) -> None:
        self._resolve_validator = resolve_validator
        self._excluded_actions = frozenset(excluded_actions)
        self._script_action = script_action
        self.skipped: list[SkippedItem] = []

    def build(
        self,
        root: MenuItem,
        extra: Iterable[ActionCommand] = (),
    ) -> list[ActionCommand]:
        """Flatten the tree below root, then append extra commands.

        The root itself is not validated and its title is not part of any
        path; its direct children are the top-level menus.
        """
        self.skipped = []

        commands: list[ActionCommand] = []
        for item in root.submenu or []:
            commands.extend(self._commands(item))
        commands.extend(extra)

        logger.debug(
            "Indexed %d commands from %r (%d items skipped)",
            len(commands),
            root.title,
            len(self.skipped),
        )
        return commands

    def _commands(self, item: MenuItem) -> list[ActionCommand]:
        validator = self._resolve_validator(item)
        if validator is not None:
            validator.validate_menu_item(item)

        if item.has_submenu:
            return [
                replace(command, paths=(item.title,) + command.paths)
                for child in item.submenu
                for command in self._commands(child)
            ]

        reason = self._skip_reason(item, validator)
        if reason is not None:
            if reason is not SkipReason.NO_ACTION:
                logger.debug("Skipping menu item %r: %s", item.title, reason.value)
            self.skipped.append(SkippedItem(item.title, reason))
            return []

        kind = CommandKind.SCRIPT if item.action == self._script_action else CommandKind.COMMAND
        return [
            ActionCommand(
                kind=kind,
                title=item.title,
                action=item.action,
                shortcut=item.shortcut,
                tag=item.tag,
                payload=item.payload,
            )
        ]

    def _skip_reason(
        self, item: MenuItem, validator: MenuItemValidator | None
    ) -> SkipReason | None:
        if item.action is None:
            return SkipReason.NO_ACTION
        if item.action in self._excluded_actions:
            return SkipReason.EXCLUDED
        if validator is None:
            return SkipReason.UNRESOLVED_HANDLER
        if not item.enabled:
            return SkipReason.DISABLED
        if item.hidden:
            return SkipReason.HIDDEN
        return None


def build_index(
    root: MenuItem,
    resolve_validator: ValidatorResolver,
    excluded_actions: Iterable[ActionRef] = (),
    script_action: ActionRef | None = None,
    extra: Iterable[ActionCommand] = (),
) -> list[ActionCommand]:
    """Build a snapshot in one call."""
    builder = IndexBuilder(resolve_validator, excluded_actions, script_action)
    return builder.build(root, extra)
