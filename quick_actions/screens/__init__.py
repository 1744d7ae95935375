"""Screens for Quick Actions."""

from quick_actions.screens.main import EditorScreen
from quick_actions.screens.quick_actions import QuickActionsScreen

__all__ = ["EditorScreen", "QuickActionsScreen"]
