"""
Command Resolver — Exact lookup first, fuzzy ranking second

Enables users to reach a command by:
- Name or alias (exact, case-insensitive)
- Any fuzzy subsequence of name, aliases or description

Every whitespace-separated query token must match (AND semantics).
Scores add up across tokens. Ties break on the command name, ignoring
case, so the same input always ranks the same way.

"No match" is a result, never an error.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, TYPE_CHECKING

from .matcher import NO_MATCH, score, search_text

if TYPE_CHECKING:
    from ..commands.base import BaseCommand
    from .registry import CommandRegistry


logger = logging.getLogger(__name__)


class ResolveStatus(Enum):
    """Resolution outcome."""
    FOUND = "found"
    AMBIGUOUS = "ambiguous"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ScoredCandidate:
    """A command paired with its summed score for one query."""
    command: 'BaseCommand'
    score: int


@dataclass
class ResolveResult:
    """Result of command resolution."""
    status: ResolveStatus
    command: Optional['BaseCommand'] = None
    candidates: List[ScoredCandidate] = field(default_factory=list)
    query: str = ""


def rank(query: str, commands: Sequence['BaseCommand']) -> List[ScoredCandidate]:
    """
    Rank commands against a free-text query.

    Args:
        query: User input, split on whitespace into tokens
        commands: Commands to consider

    Returns:
        Matching commands, best score first, ties by name (case-insensitive).
        Empty when the query has no tokens or nothing matches.
    """
    tokens = query.lower().split()
    if not tokens:
        return []

    ranked = []
    for command in commands:
        text = search_text(command)
        total = 0
        for token in tokens:
            token_score = score(token, text)
            if token_score is NO_MATCH:
                break
            total += token_score
        else:
            ranked.append(ScoredCandidate(command=command, score=total))

    ranked.sort(key=lambda entry: (-entry.score, entry.command.name.lower()))
    logger.debug("Ranked %r: %d candidate(s)", query, len(ranked))
    return ranked


def find_closest(query: str, commands: Sequence['BaseCommand']) -> Optional['BaseCommand']:
    """Best-ranked command for query, or None."""
    ranked = rank(query, commands)
    return ranked[0].command if ranked else None


class CommandResolver:
    """
    Resolution against a registry.

    Resolution strategies (in order):
    1. Exact match (name or alias)
    2. Fuzzy ranking (a single survivor counts as found)
    """

    def __init__(self, registry: 'CommandRegistry'):
        self.registry = registry

    def find_exact(self, name: str) -> Optional['BaseCommand']:
        return self.registry.find_exact(name)

    def rank(self, query: str) -> List[ScoredCandidate]:
        return rank(query, self.registry.all())

    def find_closest(self, query: str) -> Optional['BaseCommand']:
        return find_closest(query, self.registry.all())

    def resolve(self, query: str) -> ResolveResult:
        """
        Resolve user input to a command.

        Args:
            query: Command name, alias, or free-text search

        Returns:
            ResolveResult with status and command/candidates
        """
        query = query.strip()
        if not query:
            return ResolveResult(status=ResolveStatus.NOT_FOUND, query=query)

        # Strategy 1: Exact match
        command = self.find_exact(query)
        if command is not None:
            return ResolveResult(
                status=ResolveStatus.FOUND,
                command=command,
                query=query
            )

        # Strategy 2: Fuzzy ranking
        ranked = self.rank(query)

        if len(ranked) == 1:
            return ResolveResult(
                status=ResolveStatus.FOUND,
                command=ranked[0].command,
                candidates=ranked,
                query=query
            )
        elif len(ranked) > 1:
            return ResolveResult(
                status=ResolveStatus.AMBIGUOUS,
                candidates=ranked,
                query=query
            )

        return ResolveResult(status=ResolveStatus.NOT_FOUND, query=query)
