"""Services for Quick Actions."""

from quick_actions.services.abbreviation import AbbreviatedMatch, abbreviated_match
from quick_actions.services.dispatch import ActionDispatcher, ActionSender, perform
from quick_actions.services.index_builder import (
    IndexBuilder,
    SkipReason,
    SkippedItem,
    build_index,
)
from quick_actions.services.ranker import rank_command, search
from quick_actions.services.search_session import SearchSession

__all__ = [
    "AbbreviatedMatch",
    "abbreviated_match",
    "ActionDispatcher",
    "ActionSender",
    "perform",
    "IndexBuilder",
    "SkipReason",
    "SkippedItem",
    "build_index",
    "rank_command",
    "search",
    "SearchSession",
]
