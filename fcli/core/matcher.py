"""
Matcher — Fuzzy subsequence scoring

A query matches a candidate when every query character appears in the
candidate, in order. Each matched character earns 1 point, or 2 when it
sits right where the previous match left off (contiguity bonus).

    score("in", "init create taskfile")  -> 4   (i@0, n@1, both contiguous)
    score("tsk", "task")                 -> 5   (t +2, s after a gap +1, k +2)
    score("xyz", "task")                 -> None

Pure functions, no state.
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..commands.base import BaseCommand


NO_MATCH = None

CONTIGUOUS_POINTS = 2
GAP_POINTS = 1


def search_text(command: 'BaseCommand') -> str:
    """Lowercase text a command is searched by: name, aliases, description."""
    alias_text = " ".join(command.aliases)
    return f"{command.name} {alias_text} {command.description}".lower()


def score(query: str, candidate: str) -> Optional[int]:
    """
    Score query against candidate text.

    Args:
        query: User input; lowercased and stripped of all whitespace
        candidate: Text to search, already lowercase (see search_text)

    Returns:
        Score >= len(normalized query), or NO_MATCH when the query is
        blank or is not a subsequence of candidate
    """
    normalized = "".join(query.lower().split())
    if not normalized:
        return NO_MATCH

    total = 0
    cursor = 0

    for char in normalized:
        index = candidate.find(char, cursor)
        if index == -1:
            return NO_MATCH
        total += CONTIGUOUS_POINTS if index == cursor else GAP_POINTS
        cursor = index + 1

    return total
