"""
f — Move faster

Command-line dispatcher: resolves what you typed to exactly one command
and runs it. Exact names and aliases win; anything else is ranked by a
fuzzy subsequence match.

Usage:
    f init
    f config set display.symbols=ascii
    f help init
    f                      # interactive search on a terminal
"""

__version__ = "0.1.5"

TOOL_NAME = "f"
TAGLINE = "Move faster"

# Core layer
from .core.matcher import NO_MATCH, score, search_text
from .core.registry import CommandRegistry
from .core.resolver import (
    CommandResolver, ResolveStatus, ResolveResult, ScoredCandidate,
    rank, find_closest,
)
from .core.selector import (
    CommandSelector, SelectionSession, SelectionStage, ConsoleChannel,
)

# Commands
from .commands.base import BaseCommand

# Errors and config
from .errors import FError, CommandError, RegistryError
from .config import Config, ConfigManager

__all__ = [
    '__version__', 'TOOL_NAME', 'TAGLINE',
    # Core
    'NO_MATCH', 'score', 'search_text',
    'CommandRegistry',
    'CommandResolver', 'ResolveStatus', 'ResolveResult', 'ScoredCandidate',
    'rank', 'find_closest',
    'CommandSelector', 'SelectionSession', 'SelectionStage', 'ConsoleChannel',
    # Commands
    'BaseCommand',
    # Errors and config
    'FError', 'CommandError', 'RegistryError',
    'Config', 'ConfigManager',
]
