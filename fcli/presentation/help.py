"""
Help text for the f CLI.

Rendered from the registry so new commands show up without edits here.
"""

from typing import Sequence, TYPE_CHECKING

from .. import TOOL_NAME, TAGLINE, __version__

if TYPE_CHECKING:
    from ..commands.base import BaseCommand


def format_general_help(commands: Sequence['BaseCommand']) -> str:
    """Tool banner, usage, and one line per command."""
    lines = [
        f"{TOOL_NAME} {__version__}",
        f"{TAGLINE}",
        "",
        "Usage:",
        f"  {TOOL_NAME} <command> [options]",
        f"  {TOOL_NAME} --help",
        f"  {TOOL_NAME} --version",
        "",
        "Commands:",
    ]

    width = max((len(command.name) for command in commands), default=0)
    for command in commands:
        lines.append(f"  {command.name.ljust(width)}  {command.description}")

    lines.append("")
    lines.append(f"Run `{TOOL_NAME} <command> --help` for command details.")
    return "\n".join(lines)


def format_command_help(command: 'BaseCommand') -> str:
    """Banner, description and usage for one command."""
    lines = [
        f"{TOOL_NAME} {__version__}",
        command.name,
        "",
        command.description,
        "",
        "Usage:",
        f"  {TOOL_NAME} {command.usage or command.name}",
    ]
    if command.aliases:
        lines.append("")
        lines.append(f"Aliases: {', '.join(command.aliases)}")
    return "\n".join(lines)


def format_suggestion(command: 'BaseCommand') -> str:
    return f'Did you mean "{command.name}"?'
