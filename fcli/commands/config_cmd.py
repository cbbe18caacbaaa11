"""
ConfigCommand — Show and change configuration

    f config                         show effective settings and file paths
    f config get display.symbols     print one effective value
    f config set log.level=debug     write to project config (.f/config.yaml)
    f config set log.level=debug --user
"""

from typing import Sequence

from .base import BaseCommand
from ..config import SETTINGS
from ..errors import CommandError


USAGE = "config [get KEY | set KEY=VALUE [--user]]"


class ConfigCommand(BaseCommand):
    """Configuration display and modification."""

    name = "config"
    description = "Show or change f configuration"
    usage = USAGE

    def run(self, args: Sequence[str]) -> None:
        args = list(args)

        if not args:
            self.show_config()
            return

        action, rest = args[0], args[1:]

        if action == "get" and len(rest) == 1:
            self.get_config(rest[0])
            return

        if action == "set" and rest:
            scope = "project"
            if "--user" in rest:
                scope = "user"
                rest = [arg for arg in rest if arg != "--user"]
            if len(rest) == 1:
                self.set_config(rest[0], scope)
                return

        raise CommandError(f"Usage: f {USAGE}")

    def show_config(self):
        """Display current configuration."""
        self.out(self.config_manager.display())

    def get_config(self, key: str):
        value = self.config_manager.get(key)
        if value is None:
            raise CommandError(f"Unknown setting: {key}. Valid: {', '.join(SETTINGS)}")
        self.out(value)

    def set_config(self, assignment: str, scope: str = "project"):
        """
        Set a configuration value.

        Args:
            assignment: KEY=VALUE (e.g., display.symbols=ascii)
            scope: "project" or "user"
        """
        if '=' not in assignment:
            raise CommandError("Use format KEY=VALUE (e.g., display.symbols=ascii)")

        key, value = assignment.split('=', 1)
        error = self.config_manager.set(key.strip(), value, scope)
        if error:
            raise CommandError(error)

        self.out(f"{self.symbols.check_pass} Set {key.strip()} = {value.strip().lower()} ({scope})")


COMMAND_CLASS = ConfigCommand
