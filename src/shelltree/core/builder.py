from __future__ import annotations

"""
Transcript Tree Builder.

Incrementally reconstructs a filesystem tree from a forward-only stream of
transcript lines. The builder is a two-state machine:

- NAVIGATING: expects `$ cd <target>` or `$ ls` command lines.
- LISTING: consumes `ls` output until the next command line, which is put
  back into the lookahead buffer and handed to NAVIGATING.

Every insertion goes through Directory.add_dir/add_file, so aggregate sizes
are consistent after each line.
"""

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Tuple

from shelltree.core.parsing.grammar import (
    Command,
    ListingEntry,
    is_blank,
    is_command_line,
    parse_command,
    parse_listing,
)
from shelltree.core.parsing.pushback import PushbackIterator
from shelltree.domain.constants import CD_PARENT, CD_ROOT, CMD_CD, CMD_LS, ROOT_NAME
from shelltree.domain.errors import EntryKindConflictError
from shelltree.domain.tree_models import Directory, File

logger = logging.getLogger(__name__)

NumberedLine = Tuple[int, str]


class BuilderState(Enum):
    NAVIGATING = "navigating"
    LISTING = "listing"


@dataclass
class BuildStats:
    """
    Statistics collected while building a tree.

    Attributes:
        lines: Number of transcript lines read.
        commands: Number of command lines executed.
        directories: Directories created (the root excluded).
        files: Files attached.
        duplicates: Listing lines naming an entry that already existed.
    """
    lines: int = 0
    commands: int = 0
    directories: int = 0
    files: int = 0
    duplicates: int = 0

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


# -----------------------------------------------------------------------------
# STATE MACHINE
# -----------------------------------------------------------------------------

class TreeBuilder:
    """
    Drives tree construction from transcript lines.

    A builder instance can be reused; each call to `build` starts from a
    fresh root and resets the statistics.
    """

    def __init__(self) -> None:
        self.stats = BuildStats()
        self._state = BuilderState.NAVIGATING
        self._root = Directory(ROOT_NAME)
        self._stack: List[Directory] = [self._root]

    @property
    def state(self) -> BuilderState:
        return self._state

    @property
    def current(self) -> Directory:
        return self._stack[-1]

    def build(self, lines: Iterable[str]) -> Directory:
        """
        Consume every line of `lines` and return the populated root.

        Raises:
            TranscriptSyntaxError: A malformed line or an unknown command.
            EntryKindConflictError: A name is used both as file and directory.
        """
        self._reset()
        logger.info("Building filesystem tree from transcript.")

        stream: PushbackIterator[NumberedLine] = PushbackIterator(enumerate(lines, start=1))
        for item in stream:
            line_number, line = item
            self.stats.lines = max(self.stats.lines, line_number)
            if is_blank(line):
                continue

            if self._state is BuilderState.LISTING:
                if is_command_line(line):
                    stream.put_back(item)
                    self._state = BuilderState.NAVIGATING
                    continue
                self._apply_listing(parse_listing(line, line_number), line_number)
            else:
                self._apply_command(parse_command(line, line_number), line_number)

        root = self._root
        logger.info(
            f"Tree built: {self.stats.directories} directories, "
            f"{self.stats.files} files, {root.size} bytes."
        )
        logger.debug(f"Build stats: {self.stats.as_dict()}")
        return root

    def _reset(self) -> None:
        self.stats = BuildStats()
        self._state = BuilderState.NAVIGATING
        self._root = Directory(ROOT_NAME)
        self._stack = [self._root]

    # --- NAVIGATING ---

    def _apply_command(self, command: Command, line_number: int) -> None:
        self.stats.commands += 1

        if command.verb == CMD_LS:
            self._state = BuilderState.LISTING
            return

        if command.verb == CMD_CD:
            target = command.argument or ""
            if target == CD_PARENT:
                if len(self._stack) > 1:
                    self._stack.pop()
            elif target == CD_ROOT:
                del self._stack[1:]
            else:
                self._stack.append(self._enter(target, line_number))

    def _enter(self, name: str, line_number: int) -> Directory:
        """Resolve a `cd <name>` target, creating the directory when unknown."""
        cwd = self.current
        existing = cwd.get(name)
        if existing is None:
            return self._create_dir(cwd, name)
        if not isinstance(existing, Directory):
            raise EntryKindConflictError(
                f"line {line_number}: cannot cd into '{name}': it is a file in '{cwd.name}'"
            )
        return existing

    # --- LISTING ---

    def _apply_listing(self, entry: ListingEntry, line_number: int) -> None:
        cwd = self.current
        existing = cwd.get(entry.name)

        if existing is None:
            if entry.is_dir:
                self._create_dir(cwd, entry.name)
            else:
                cwd.add_file(File(entry.name, entry.size))
                self.stats.files += 1
            return

        if entry.is_dir != existing.is_dir:
            listed = "directory" if entry.is_dir else "file"
            known = "directory" if existing.is_dir else "file"
            raise EntryKindConflictError(
                f"line {line_number}: '{entry.name}' listed as a {listed} "
                f"but already known as a {known} in '{cwd.name}'"
            )

        self.stats.duplicates += 1
        if not entry.is_dir and existing.size != entry.size:
            logger.warning(
                f"line {line_number}: '{entry.name}' re-listed with size {entry.size}, "
                f"keeping the original size {existing.size}."
            )

    def _create_dir(self, parent: Directory, name: str) -> Directory:
        directory = Directory(name)
        parent.add_dir(directory)
        self.stats.directories += 1
        logger.debug(f"Created directory '{name}' under '{parent.name}'.")
        return directory


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(lines: Iterable[str]) -> Directory:
    """Build a tree from transcript lines with a throwaway builder."""
    return TreeBuilder().build(lines)
