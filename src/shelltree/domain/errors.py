from __future__ import annotations

"""
Domain Exception Taxonomy.

All failures raised while building or querying a tree derive from
ShellTreeError so that the orchestration layer can trap them in one place.
"""

from typing import Optional


class ShellTreeError(Exception):
    """Base class for every error raised by the shelltree domain."""


class TranscriptSyntaxError(ShellTreeError, ValueError):
    """
    A transcript line does not match the command or listing grammar.

    Attributes:
        line_number: 1-based position of the offending line (if known).
        line: Raw text of the offending line (if known).
    """

    def __init__(
            self,
            message: str,
            *,
            line_number: Optional[int] = None,
            line: Optional[str] = None,
    ) -> None:
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class UnknownCommandError(TranscriptSyntaxError):
    """A command line names a verb other than 'cd' or 'ls'."""


class EntryKindConflictError(ShellTreeError):
    """A name already attached as a file is used as a directory, or vice versa."""


class EntryAttachError(ShellTreeError):
    """An entry that already has a parent was attached a second time."""


class CapacityError(ShellTreeError, ValueError):
    """The tree occupies more space than the device capacity allows."""
