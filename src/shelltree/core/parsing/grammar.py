from __future__ import annotations

"""
Transcript Line Grammar.

Tokenizes raw transcript lines on whitespace and classifies them as either
shell commands (`$ cd <target>`, `$ ls`) or listing entries
(`dir <name>`, `<size> <name>`). Malformed lines raise TranscriptSyntaxError.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from shelltree.domain.constants import CMD_CD, CMD_LS, COMMAND_MARKER, DIR_MARKER
from shelltree.domain.errors import TranscriptSyntaxError, UnknownCommandError

_SIZE_RX = re.compile(r"\d+", re.ASCII)

# -----------------------------------------------------------------------------
# TOKEN MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Command:
    """A parsed `$ <verb> [<argument>]` line."""
    verb: str
    argument: Optional[str] = None


@dataclass(frozen=True)
class ListingEntry:
    """
    A parsed line of `ls` output.

    Attributes:
        name: Entry name.
        is_dir: True for `dir <name>` lines.
        size: File size in bytes (always 0 for directories).
    """
    name: str
    is_dir: bool
    size: int = 0

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def tokenize(line: str) -> List[str]:
    return line.split()


def is_blank(line: str) -> bool:
    return not line.strip()


def is_command_line(line: str) -> bool:
    """Check whether a line starts with the command marker token."""
    tokens = tokenize(line)
    return bool(tokens) and tokens[0] == COMMAND_MARKER


def parse_command(line: str, line_number: Optional[int] = None) -> Command:
    """
    Parse a command line.

    Args:
        line: Raw transcript line.
        line_number: Position used to annotate errors.

    Returns:
        Command: The verb and its optional argument.

    Raises:
        UnknownCommandError: The verb is neither 'cd' nor 'ls'.
        TranscriptSyntaxError: The line is not a well-formed command.
    """
    tokens = tokenize(line)
    if not tokens or tokens[0] != COMMAND_MARKER:
        raise TranscriptSyntaxError(
            f"expected a command line, got {line.strip()!r}",
            line_number=line_number, line=line,
        )
    if len(tokens) < 2:
        raise TranscriptSyntaxError(
            "command marker without a command", line_number=line_number, line=line
        )

    verb, args = tokens[1], tokens[2:]

    if verb == CMD_CD:
        if len(args) != 1:
            raise TranscriptSyntaxError(
                f"'cd' takes exactly one argument, got {len(args)}",
                line_number=line_number, line=line,
            )
        return Command(verb, args[0])

    if verb == CMD_LS:
        if args:
            raise TranscriptSyntaxError(
                "'ls' takes no arguments", line_number=line_number, line=line
            )
        return Command(verb)

    raise UnknownCommandError(
        f"unknown command: {verb}", line_number=line_number, line=line
    )


def parse_listing(line: str, line_number: Optional[int] = None) -> ListingEntry:
    """
    Parse an `ls` output line.

    Raises:
        TranscriptSyntaxError: Wrong token count or a size token that is not
            a non-negative integer.
    """
    tokens = tokenize(line)
    if len(tokens) != 2:
        raise TranscriptSyntaxError(
            f"expected '<size|dir> <name>', got {line.strip()!r}",
            line_number=line_number, line=line,
        )

    head, name = tokens
    if head == DIR_MARKER:
        return ListingEntry(name=name, is_dir=True)

    if not _SIZE_RX.fullmatch(head):
        raise TranscriptSyntaxError(
            f"invalid file size {head!r} for '{name}'",
            line_number=line_number, line=line,
        )
    return ListingEntry(name=name, is_dir=False, size=int(head))
