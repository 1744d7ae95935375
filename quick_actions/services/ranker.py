"""Rank commands against a typed query by matching their menu paths."""

from __future__ import annotations

from collections.abc import Iterable

from ..models.command import ActionCommand, MatchedPath, SearchHit
from .abbreviation import abbreviated_match


def rank_command(command: ActionCommand, query: str) -> SearchHit | None:
    """Match query against the command's path, component by component.

    Path components the query does not touch are skipped until the first
    one matches. From then on every component is kept so the hit shows its
    full context, even where it contributed nothing. The command is a hit
    only if the whole query was consumed.
    """
    if not query:
        return None

    matches: list[MatchedPath] = []
    score = 0
    remaining = query

    for string in command.matchable_paths:
        match = abbreviated_match(string, remaining)

        if match is None and not matches:
            continue

        if match is None:
            matches.append(MatchedPath(string))
            continue

        matches.append(MatchedPath(string, match.ranges))
        score += match.score
        remaining = match.remaining

    if remaining:
        return None

    return SearchHit(command=command, matches=tuple(matches), score=score)


def search(commands: Iterable[ActionCommand], query: str) -> list[SearchHit]:
    """Rank all commands, best first.

    Equal scores keep index order, so repeated searches are deterministic.
    """
    if not query:
        return []

    hits: list[SearchHit] = []
    for command in commands:
        hit = rank_command(command, query)
        if hit is not None:
            hits.append(hit)

    hits.sort(key=lambda hit: hit.score, reverse=True)
    return hits
