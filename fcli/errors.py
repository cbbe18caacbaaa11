"""
Errors — What can go wrong, and who reports it

Only command behavior and registry construction raise. Lookup and ranking
report absence as a normal return value (None, empty list, NOT_FOUND).
"""


class FError(Exception):
    """Base class for errors raised by f."""


class CommandError(FError):
    """A command's run behavior failed. The message is shown to the user as-is."""


class RegistryError(FError):
    """Two commands claim the same name or alias."""
