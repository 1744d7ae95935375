"""Data models for Quick Actions."""

from .command import (
    ActionCommand,
    ActionRef,
    CommandKind,
    MatchedPath,
    SearchHit,
)
from .menu import MenuItem, MenuItemValidator
from .exceptions import (
    QuickActionsError,
    ConfigError,
    ConfigValidationError,
)

__all__ = [
    # Commands
    "ActionCommand",
    "ActionRef",
    "CommandKind",
    "MatchedPath",
    "SearchHit",
    # Menu tree
    "MenuItem",
    "MenuItemValidator",
    # Exceptions
    "QuickActionsError",
    "ConfigError",
    "ConfigValidationError",
]
