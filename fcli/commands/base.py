"""
BaseCommand — The contract every command implements

A command is a name, a description, optional usage text and aliases, and
a run(args) behavior. The dispatcher only ever calls run(); resolution
never looks inside it.

Commands receive the FlowCLI instance and reach shared resources through
its properties instead of building their own.
"""

from pathlib import Path
from typing import Optional, Sequence, Tuple, TYPE_CHECKING

from ..presentation.symbols import safe_print

if TYPE_CHECKING:
    from ..cli import FlowCLI
    from ..config import Config, ConfigManager
    from ..presentation.symbols import SymbolSet


class BaseCommand:
    """
    Base class for commands.

    Subclasses set the descriptor attributes and implement run().
    run() reports failure by raising CommandError with a one-line message.
    """

    name: str = ""
    description: str = ""
    usage: Optional[str] = None
    aliases: Tuple[str, ...] = ()

    def __init__(self, cli: Optional['FlowCLI'] = None):
        self._cli = cli

    def run(self, args: Sequence[str]) -> None:
        raise NotImplementedError(f"{type(self).__name__} does not implement run()")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"

    # -------------------------------------------------------------------------
    # Shared resources (convenience properties)
    # -------------------------------------------------------------------------

    @property
    def project_dir(self) -> Path:
        """Directory the command works in."""
        return self._cli.project_dir

    @property
    def config_manager(self) -> 'ConfigManager':
        return self._cli.config_manager

    @property
    def config(self) -> 'Config':
        """Effective configuration."""
        return self._cli.config

    @property
    def symbols(self) -> 'SymbolSet':
        """Symbol set for display (Unicode/ASCII)."""
        return self._cli.symbols

    def out(self, text: str = "") -> None:
        """Print to the dispatcher's stdout."""
        if self._cli is None:
            safe_print(text)
        else:
            self._cli.out(text)
