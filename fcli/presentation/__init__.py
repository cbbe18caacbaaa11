"""
Presentation — How f talks to the terminal

Symbols and encoding-safe printing, plus help text rendering.
"""

from .symbols import get_symbols, safe_print, SymbolSet, UNICODE, ASCII
from .help import format_general_help, format_command_help, format_suggestion

__all__ = [
    'get_symbols', 'safe_print', 'SymbolSet', 'UNICODE', 'ASCII',
    'format_general_help', 'format_command_help', 'format_suggestion',
]
