"""Abbreviation matching for quick action search.

A query matches a string when its characters occur in the string in order,
ignoring case. Occurrences at word starts are preferred over mid-word ones,
so "sa" highlights the S and A of "Save As" rather than its "Sa".

Scoring (higher is better):
- Every matched character earns a base score
- Characters at a word boundary earn a bonus
- Characters extending a run of consecutive matches earn a bonus
- Longer strings lose a little, so shorter names win ties
"""

from __future__ import annotations

from dataclasses import dataclass

MATCHED_CHARACTER_SCORE = 100
BOUNDARY_BONUS = 200
CONSECUTIVE_BONUS = 150
# Length only breaks ties; it must never outweigh a matched character
MAX_LENGTH_PENALTY = MATCHED_CHARACTER_SCORE - 1


@dataclass(frozen=True)
class AbbreviatedMatch:
    """Result of matching a query against one string.

    `ranges` are (start, end) character offsets into the original string,
    one per run of consecutive matched characters. `remaining` is the part
    of the query the string could not consume.
    """

    ranges: tuple[tuple[int, int], ...]
    score: int
    remaining: str

    @property
    def is_complete(self) -> bool:
        return not self.remaining


def is_boundary(string: str, index: int) -> bool:
    """Check if the character at index starts a word or number.

    Only the character and its predecessor decide, so text appended after
    index never changes the answer.
    """
    if index == 0:
        return True

    char = string[index]
    previous = string[index - 1]

    if not char.isalnum():
        return False
    if not previous.isalnum():
        return True
    if char.isdigit() != previous.isdigit():
        return True
    return char.isupper() and previous.islower()


def abbreviated_match(string: str, query: str) -> AbbreviatedMatch | None:
    """Match as much of query as possible against string.

    Returns None if not even the first query character occurs in string.
    A partial match is still a match; its `remaining` is carried over to the
    next path component by the ranker.
    """
    if not string or not query:
        return None

    folded = [char.lower() for char in string]
    folded_query = [char.lower() for char in query]
    boundaries = [is_boundary(string, i) for i in range(len(string))]

    preferred = _scan(folded, folded_query, boundaries, prefer_boundaries=True)
    greedy = _scan(folded, folded_query, boundaries, prefer_boundaries=False)

    # Boundary preference can jump past characters a later query letter needed
    candidates = [
        (len(indices), _score(string, indices, boundaries), indices)
        for indices in (preferred, greedy)
    ]
    consumed, score, indices = max(candidates, key=lambda c: (c[0], c[1]))
    if consumed == 0:
        return None

    return AbbreviatedMatch(
        ranges=_ranges(indices),
        score=score,
        remaining=query[consumed:],
    )


def _scan(
    folded: list[str],
    folded_query: list[str],
    boundaries: list[bool],
    prefer_boundaries: bool,
) -> list[int]:
    """Walk the string left to right and collect matched indices."""
    indices: list[int] = []
    query_idx = 0
    i = 0

    while i < len(folded) and query_idx < len(folded_query):
        target = folded_query[query_idx]
        if folded[i] == target:
            if prefer_boundaries and not boundaries[i]:
                later = _next_boundary_occurrence(folded, boundaries, target, i + 1)
                if later is not None:
                    i = later
            indices.append(i)
            query_idx += 1
        i += 1

    return indices


def _next_boundary_occurrence(
    folded: list[str], boundaries: list[bool], target: str, start: int
) -> int | None:
    """First boundary from start, if it holds target."""
    for i in range(start, len(folded)):
        if boundaries[i]:
            return i if folded[i] == target else None
    return None


def _score(string: str, indices: list[int], boundaries: list[bool]) -> int:
    score = 0
    for n, index in enumerate(indices):
        score += MATCHED_CHARACTER_SCORE
        if boundaries[index]:
            score += BOUNDARY_BONUS
        if n > 0 and indices[n - 1] == index - 1:
            score += CONSECUTIVE_BONUS
    return score - min(len(string), MAX_LENGTH_PENALTY)


def _ranges(indices: list[int]) -> tuple[tuple[int, int], ...]:
    """Collapse sorted indices into (start, end) runs."""
    ranges: list[tuple[int, int]] = []
    for index in indices:
        if ranges and ranges[-1][1] == index:
            ranges[-1] = (ranges[-1][0], index + 1)
        else:
            ranges.append((index, index + 1))
    return tuple(ranges)
