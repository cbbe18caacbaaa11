"""
Interactive Selector — Narrow a fuzzy search to one command

Line-based conversation, one line of input per step:

    AWAITING_QUERY      empty          -> CANCELLED
                        no matches     -> AWAITING_QUERY  ("No matching commands")
                        one match      -> DONE
                        several        -> AWAITING_SELECTION (top 5, numbered)
    AWAITING_SELECTION  empty          -> AWAITING_QUERY  (refine search)
                        1..N           -> DONE
                        anything else  -> AWAITING_SELECTION ("Invalid selection")

End of input and Ctrl+C cancel the session from any stage.

SelectionSession holds the state and CommandSelector.advance() is the
transition, so sessions can be scripted without a terminal. run() drives
the machine over a line channel that is always closed on the way out.
"""

import logging
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, TextIO, TYPE_CHECKING

from .resolver import ScoredCandidate, rank
from ..presentation.symbols import safe_print

if TYPE_CHECKING:
    from ..commands.base import BaseCommand


logger = logging.getLogger(__name__)


MAX_CHOICES = 5

QUERY_PROMPT = "Search command (Enter to cancel): "
SELECTION_PROMPT = "Select command number (Enter to refine search): "


class SelectionStage(Enum):
    """Where the session is in the conversation."""
    AWAITING_QUERY = "awaiting_query"
    AWAITING_SELECTION = "awaiting_selection"
    DONE = "done"
    CANCELLED = "cancelled"


@dataclass
class SelectionSession:
    """Working state of one interactive session."""
    stage: SelectionStage = SelectionStage.AWAITING_QUERY
    candidates: List[ScoredCandidate] = field(default_factory=list)
    selected: Optional['BaseCommand'] = None

    @property
    def cancelled(self) -> bool:
        return self.stage is SelectionStage.CANCELLED

    @property
    def finished(self) -> bool:
        return self.stage in (SelectionStage.DONE, SelectionStage.CANCELLED)

    @property
    def prompt(self) -> str:
        if self.stage is SelectionStage.AWAITING_SELECTION:
            return SELECTION_PROMPT
        return QUERY_PROMPT


class ConsoleChannel:
    """
    One input/output line channel for a selector session.

    Use as a context manager: output is flushed and the channel marked
    closed on every exit path, including KeyboardInterrupt.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.closed = True

    def __enter__(self) -> 'ConsoleChannel':
        self.closed = False
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False

    def read_line(self, prompt: str) -> Optional[str]:
        """Prompt and read one line. None means the stream was closed."""
        if self.stdin is sys.stdin and self.stdout is sys.stdout:
            try:
                return input(prompt)
            except EOFError:
                return None

        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def write(self, text: str = "") -> None:
        safe_print(text, file=self.stdout)

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        if not getattr(self.stdout, 'closed', False):
            self.stdout.flush()


class CommandSelector:
    """
    Interactive state machine over a fixed list of commands.

    Args:
        commands: Commands to choose from, in listing order
    """

    def __init__(self, commands: Sequence['BaseCommand']):
        self.commands = list(commands)
        self.session = SelectionSession()

    def intro(self) -> List[str]:
        """Lines shown once before the first prompt."""
        lines = ["Available commands:"]
        for command in self.commands:
            lines.append(f"  {command.name}  {command.description}")
        lines.extend(["", "Type to filter commands. Press Enter to cancel.", ""])
        return lines

    def advance(self, line: Optional[str]) -> List[str]:
        """
        Apply one line of user input to the session.

        Args:
            line: Raw input, or None when the input stream closed

        Returns:
            Feedback lines to show before the next prompt
        """
        session = self.session
        if session.finished:
            return []

        if line is None:
            self._cancel()
            return []

        text = line.strip()
        if session.stage is SelectionStage.AWAITING_QUERY:
            return self._on_query(text)
        return self._on_selection(text)

    def run(self, channel: ConsoleChannel) -> Optional['BaseCommand']:
        """
        Drive a full session over channel.

        Returns:
            The chosen command, or None if the user cancelled
        """
        if not self.commands:
            self._cancel()
            return None

        with channel:
            for text in self.intro():
                channel.write(text)

            while not self.session.finished:
                try:
                    line = channel.read_line(self.session.prompt)
                except KeyboardInterrupt:
                    channel.write()
                    self._cancel()
                    break
                for text in self.advance(line):
                    channel.write(text)

        return self.session.selected

    def _on_query(self, text: str) -> List[str]:
        session = self.session
        if not text:
            self._cancel()
            return []

        ranked = rank(text, self.commands)

        if not ranked:
            return ["No matching commands. Try again.", ""]

        if len(ranked) == 1:
            self._choose(ranked[0].command)
            return []

        session.candidates = ranked[:MAX_CHOICES]
        self._move(SelectionStage.AWAITING_SELECTION)

        lines = ["", "Matches:"]
        for i, entry in enumerate(session.candidates, 1):
            lines.append(f"  {i}. {entry.command.name}  {entry.command.description}")
        lines.append("")
        return lines

    def _on_selection(self, text: str) -> List[str]:
        session = self.session
        if not text:
            session.candidates = []
            self._move(SelectionStage.AWAITING_QUERY)
            return []

        if text.isdecimal():
            index = int(text)
            if 1 <= index <= len(session.candidates):
                self._choose(session.candidates[index - 1].command)
                return []

        return ["Invalid selection. Try again.", ""]

    def _choose(self, command: 'BaseCommand') -> None:
        self.session.selected = command
        self._move(SelectionStage.DONE)

    def _cancel(self) -> None:
        self.session.candidates = []
        self._move(SelectionStage.CANCELLED)

    def _move(self, stage: SelectionStage) -> None:
        logger.debug("Selector %s -> %s", self.session.stage.value, stage.value)
        self.session.stage = stage
