"""Widgets for Quick Actions."""

from quick_actions.widgets.highlight import describe_hit, render_hit
from quick_actions.widgets.status import StatusBar

__all__ = [
    "StatusBar",
    "describe_hit",
    "render_hit",
]
