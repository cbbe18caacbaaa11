"""
Commands — One module per command, registered in display order

Each command module:
1. Defines an XxxCommand class (subclass of BaseCommand)
2. Exports COMMAND_CLASS pointing at it

Add a command = add a module and list it in COMMAND_MODULES.
"""

import importlib
import logging
from typing import Any, List

from .base import BaseCommand
from ..core.registry import CommandRegistry

logger = logging.getLogger(__name__)

# Order determines help and picker listing order
COMMAND_MODULES = [
    'init_cmd',
    'config_cmd',
]


def load_commands(cli: Any) -> List[BaseCommand]:
    """
    Import every module in COMMAND_MODULES and instantiate its command.

    A module that fails to import is skipped with a warning so one broken
    command does not take the whole tool down.
    """
    commands = []
    for module_name in COMMAND_MODULES:
        try:
            module = importlib.import_module(f'.{module_name}', __package__)
        except ImportError as e:
            logger.warning("Could not load command module '%s': %s", module_name, e)
            continue
        commands.append(module.COMMAND_CLASS(cli))
    return commands


def build_registry(cli: Any) -> CommandRegistry:
    """Registry of all shipped commands, bound to cli."""
    return CommandRegistry(load_commands(cli))


__all__ = ['BaseCommand', 'COMMAND_MODULES', 'load_commands', 'build_registry']
