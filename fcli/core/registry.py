"""
Command Registry — Ordered, immutable set of commands

Registration order is listing order (help, interactive picker).
Names and aliases are case-insensitive and must be unique across the
whole registry; a collision is rejected when the registry is built
instead of letting the first registration silently shadow the other.
"""

import logging
from typing import Dict, Iterable, List, Optional, TYPE_CHECKING

from ..errors import RegistryError

if TYPE_CHECKING:
    from ..commands.base import BaseCommand


logger = logging.getLogger(__name__)


class CommandRegistry:
    """
    Lookup for registered commands.

    Keeps the registration-ordered list for display and a key index
    (lowercased names and aliases) for exact lookup.
    """

    def __init__(self, commands: Iterable['BaseCommand'] = ()):
        self._commands: List['BaseCommand'] = []
        self._names: Dict[str, 'BaseCommand'] = {}
        self._aliases: Dict[str, 'BaseCommand'] = {}

        for command in commands:
            self._add(command)

        logger.debug("Registry built with %d command(s)", len(self._commands))

    def _add(self, command: 'BaseCommand') -> None:
        name = command.name.lower()
        owner = self._names.get(name) or self._aliases.get(name)
        if owner is not None:
            raise RegistryError(
                f"Command name '{command.name}' is already registered by '{owner.name}'"
            )

        aliases = {alias.lower() for alias in command.aliases} - {name}
        for alias in sorted(aliases):
            owner = self._names.get(alias) or self._aliases.get(alias)
            if owner is not None:
                raise RegistryError(
                    f"Alias '{alias}' of '{command.name}' is already registered by '{owner.name}'"
                )

        self._commands.append(command)
        self._names[name] = command
        for alias in aliases:
            self._aliases[alias] = command

    def all(self) -> List['BaseCommand']:
        """All commands, in registration order."""
        return list(self._commands)

    def find_exact(self, name: str) -> Optional['BaseCommand']:
        """
        Find a command by name or alias, ignoring case.

        Names are checked before aliases. Returns None when nothing matches.
        """
        key = name.lower()
        command = self._names.get(key) or self._aliases.get(key)
        logger.debug("Exact lookup %r -> %s", name, command.name if command else None)
        return command

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self):
        return iter(self._commands)
