"""
Core — Command resolution engine

Matcher scores, registry looks up, resolver ranks, selector narrows.
None of it performs command I/O; the dispatcher in cli.py does.
"""

from .matcher import NO_MATCH, score, search_text
from .registry import CommandRegistry
from .resolver import CommandResolver, ResolveStatus, ResolveResult, ScoredCandidate, rank, find_closest
from .selector import CommandSelector, SelectionSession, SelectionStage, ConsoleChannel

__all__ = [
    'NO_MATCH', 'score', 'search_text',
    'CommandRegistry',
    'CommandResolver', 'ResolveStatus', 'ResolveResult', 'ScoredCandidate', 'rank', 'find_closest',
    'CommandSelector', 'SelectionSession', 'SelectionStage', 'ConsoleChannel',
]
