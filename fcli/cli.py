"""
CLI — Dispatcher for the f command

Routing, in order:
  f                      interactive picker on a terminal, help otherwise
  f --version | -v       version string only
  f --help | -h          general help
  f help [command]       general or per-command help
  f <command> ... -h     per-command help instead of running
  f <command> [args...]  run it

Unknown names get a fuzzy "Did you mean" suggestion and exit 1.
Whatever a command raises is reported as one line on stderr, exit 1.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from . import __version__
from .commands import build_registry
from .commands.base import BaseCommand
from .config import ConfigManager
from .core.registry import CommandRegistry
from .core.resolver import CommandResolver
from .core.selector import CommandSelector, ConsoleChannel
from .errors import FError
from .log import configure_logging
from .presentation.help import format_command_help, format_general_help, format_suggestion
from .presentation.symbols import get_symbols, safe_print

logger = logging.getLogger(__name__)


HELP_FLAGS = ("--help", "-h")
VERSION_FLAGS = ("--version", "-v")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def _isatty(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class FlowCLI:
    """
    Command-line interface for f.

    Holds the resources commands share (project dir, config, symbols) and
    routes raw arguments to exactly one command.
    """

    def __init__(
        self,
        project_dir: Path,
        config_manager: Optional[ConfigManager] = None,
        registry: Optional[CommandRegistry] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.project_dir = Path(project_dir)
        self.config_manager = config_manager or ConfigManager(self.project_dir)
        self.config = self.config_manager.load()
        self.config_manager.flush_warnings()
        self.symbols = get_symbols(self.config.display.symbols)

        # Streams resolve lazily so redirected sys.* streams are honored
        self._stdin = stdin
        self._stdout = stdout
        self._stderr = stderr

        self.registry = registry if registry is not None else build_registry(self)
        self.resolver = CommandResolver(self.registry)

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def is_interactive(self) -> bool:
        """Both ends attached to a terminal."""
        return _isatty(self.stdin) and _isatty(self.stdout)

    # =========================================================================
    # Output
    # =========================================================================

    def out(self, text: str = ""):
        safe_print(text, file=self.stdout)

    def error(self, text: str):
        safe_print(text, file=self.stderr)

    def print_help(self):
        self.out(format_general_help(self.registry.all()))

    def print_command_help(self, command: BaseCommand):
        self.out(format_command_help(command))

    # =========================================================================
    # Routing
    # =========================================================================

    def dispatch(self, argv: Sequence[str]) -> int:
        """
        Route raw arguments and return the process exit code.

        Failures from command behavior are caught here, once.
        """
        try:
            return self._route(list(argv))
        except KeyboardInterrupt:
            self.error("Interrupted.")
            return EXIT_INTERRUPTED
        except Exception as e:
            logger.debug("Command failed", exc_info=True)
            self.error(str(e) or type(e).__name__)
            return EXIT_FAILURE

    def _route(self, args: List[str]) -> int:
        if not args:
            if not self.is_interactive():
                self.print_help()
                return EXIT_OK

            command = self.select_command()
            if command is None:
                return EXIT_OK
            return self.execute(command, [])

        if len(args) == 1 and args[0] in VERSION_FLAGS:
            self.out(__version__)
            return EXIT_OK

        if len(args) == 1 and args[0] in HELP_FLAGS:
            self.print_help()
            return EXIT_OK

        if args[0] == "help":
            if len(args) < 2 or not args[1]:
                self.print_help()
                return EXIT_OK

            target = args[1]
            command = self.resolver.find_exact(target)
            if command is None:
                return self.unknown_command(target)

            self.print_command_help(command)
            return EXIT_OK

        name, rest = args[0], args[1:]
        command = self.resolver.find_exact(name)

        if command is None:
            return self.unknown_command(name)

        if any(arg in HELP_FLAGS for arg in rest):
            self.print_command_help(command)
            return EXIT_OK

        return self.execute(command, rest)

    def unknown_command(self, name: str) -> int:
        """Report an unknown name with the closest match, if any."""
        self.error(f"Unknown command: {name}")
        suggestion = self.resolver.find_closest(name)
        if suggestion is not None:
            self.error(format_suggestion(suggestion))
        return EXIT_FAILURE

    def select_command(self) -> Optional[BaseCommand]:
        """Run the interactive picker. None means the user cancelled."""
        selector = CommandSelector(self.registry.all())
        return selector.run(ConsoleChannel(self.stdin, self.stdout))

    def execute(self, command: BaseCommand, args: Sequence[str]) -> int:
        logger.debug("Running %s with %r", command.name, list(args))
        command.run(list(args))
        return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the f CLI.

    Loads config, sets up logging, builds the registry, dispatches.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    project_dir = Path.cwd()

    # Config problems are logged by FlowCLI, once logging is set up
    config_manager = ConfigManager(project_dir)
    configure_logging(config_manager.load().log.level)

    try:
        cli = FlowCLI(project_dir, config_manager=config_manager)
    except FError as e:
        safe_print(str(e), file=sys.stderr)
        return EXIT_FAILURE

    return cli.dispatch(args)


if __name__ == '__main__':
    raise SystemExit(main())
