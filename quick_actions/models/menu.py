"""Host-side menu tree handed to the index builder.

Menu items are mutable host objects: a validator refreshes `title`,
`enabled` and `hidden` right before the index builder reads them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from .command import ActionRef


class MenuItemValidator(Protocol):
    """Anything that can bring a menu item's state up to date."""

    def validate_menu_item(self, item: MenuItem) -> None:
        ...


@dataclass(eq=False)
class MenuItem:
    """A menu group (has a submenu) or a leaf (has an action)."""

    title: str
    action: ActionRef | None = None
    submenu: list[MenuItem] | None = None
    shortcut: str | None = None
    tag: int = 0
    payload: Any = None
    enabled: bool = True
    hidden: bool = False
    target: MenuItemValidator | None = None  # Explicit validator, skips lookup

    @property
    def has_submenu(self) -> bool:
        return self.submenu is not None

    @classmethod
    def group(cls, title: str, items: list[MenuItem]) -> MenuItem:
        return cls(title=title, submenu=list(items))

    @classmethod
    def leaf(cls, title: str, action: str, **kwargs: Any) -> MenuItem:
        return cls(title=title, action=ActionRef(action), **kwargs)

