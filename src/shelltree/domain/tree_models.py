from __future__ import annotations

"""
Filesystem Tree Data Models.

Provides the two concrete entry kinds (Directory, File) reconstructed from a
shell transcript. Ownership is strictly top-down: a directory owns its
children through its name-keyed mapping, while every child only holds a weak
reference back to its parent. Aggregate directory sizes are maintained
eagerly on every insertion, so reads are O(1).
"""

import weakref
from abc import ABC, abstractmethod
from typing import Callable, Dict, Iterator, List, Optional

from shelltree.domain.errors import EntryAttachError

DirPredicate = Callable[["Directory"], bool]

# -----------------------------------------------------------------------------
# SHARED CAPABILITIES
# -----------------------------------------------------------------------------

class Entry(ABC):
    """
    Common capability set of every node in the reconstructed tree.

    The parent link is a weak reference: it never extends the lifetime of the
    parent beyond that of the root which owns the whole structure.
    """

    def __init__(self, name: str) -> None:
        if not name:
            raise ValueError("Entry name must be a non-empty string.")
        self._name = name
        self._parent_ref: Optional[weakref.ReferenceType[Directory]] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    @abstractmethod
    def size(self) -> int:
        """Total size in bytes represented by this entry."""

    @property
    def parent(self) -> Optional[Directory]:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def is_dir(self) -> bool:
        return False

    def _attach_to(self, parent: Directory) -> None:
        """Link this entry under `parent`. Re-parenting is not supported."""
        if self._parent_ref is not None:
            raise EntryAttachError(
                f"Entry '{self._name}' is already attached to a directory."
            )
        self._parent_ref = weakref.ref(parent)

    def _detach(self) -> None:
        self._parent_ref = None


# -----------------------------------------------------------------------------
# CONCRETE ENTRIES
# -----------------------------------------------------------------------------

class File(Entry):
    """
    Leaf entry with a fixed size.

    Attributes:
        name: File name, unique among its siblings.
        size: Immutable size in bytes.
    """

    def __init__(self, name: str, size: int) -> None:
        super().__init__(name)
        if size < 0:
            raise ValueError(f"File size must be non-negative, received {size}.")
        self._size = int(size)

    @property
    def size(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"File(name={self._name!r}, size={self._size})"


class Directory(Entry):
    """
    Container entry holding a name-keyed mapping of children.

    The aggregate size always equals the sum of every file attached beneath
    the directory, recursively. Children are exposed in ascending name order.
    """

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._size = 0
        self._children: Dict[str, Entry] = {}

    @property
    def size(self) -> int:
        return self._size

    @property
    def is_dir(self) -> bool:
        return True

    # --- Mutation ---

    def add_dir(self, child: Directory) -> None:
        """Attach a subdirectory, propagating its current size to every ancestor."""
        self._add(child)

    def add_file(self, child: File) -> None:
        """Attach a file, propagating its size to every ancestor."""
        self._add(child)

    def _add(self, child: Entry) -> None:
        if child is self or (isinstance(child, Directory) and self._descends_from(child)):
            raise EntryAttachError(
                f"Directory '{child.name}' cannot be attached beneath itself."
            )
        child._attach_to(self)

        # Last write wins; the displaced entry's contribution is withdrawn
        delta = child.size
        previous = self._children.get(child.name)
        if previous is not None:
            previous._detach()
            delta -= previous.size

        self._children[child.name] = child
        self._propagate_size(delta)

    def _descends_from(self, other: Directory) -> bool:
        node = self.parent
        while node is not None:
            if node is other:
                return True
            node = node.parent
        return False

    def _propagate_size(self, delta: int) -> None:
        """Apply a size change to this directory and each ancestor exactly once."""
        node: Optional[Directory] = self
        while node is not None:
            node._size += delta
            node = node.parent

    # --- Lookup ---

    def contains(self, name: str) -> bool:
        return name in self._children

    def __contains__(self, name: object) -> bool:
        return name in self._children

    def __len__(self) -> int:
        return len(self._children)

    def get(self, name: str) -> Optional[Entry]:
        return self._children.get(name)

    def get_dir(self, name: str) -> Optional[Directory]:
        child = self._children.get(name)
        if isinstance(child, Directory):
            return child
        return None

    # --- Traversal ---

    def iter_children(self) -> Iterator[Entry]:
        """Yield direct children in ascending name order."""
        for name in sorted(self._children):
            yield self._children[name]

    def iter_dirs(self) -> Iterator[Directory]:
        for child in self.iter_children():
            if isinstance(child, Directory):
                yield child

    def walk(self) -> Iterator[Directory]:
        """
        Yield this directory and then every descendant directory in pre-order.

        Siblings are visited in ascending name order. Uses an explicit stack,
        so arbitrarily deep trees do not hit the interpreter recursion limit.
        """
        stack: List[Directory] = [self]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(list(current.iter_dirs())))

    def find_dirs_by(self, predicate: DirPredicate) -> List[Directory]:
        """Return the direct child directories satisfying `predicate`."""
        return [d for d in self.iter_dirs() if predicate(d)]

    def find_dirs_recurs_by(self, predicate: DirPredicate) -> List[Directory]:
        """
        Return every directory below this one satisfying `predicate`.

        A matching directory precedes its matching descendants; the search
        descends into every subdirectory whether or not it matched. The
        directory the search starts from is not itself a candidate.
        """
        walker = self.walk()
        next(walker)
        return [d for d in walker if predicate(d)]

    def __repr__(self) -> str:
        names = ", ".join(sorted(self._children))
        return f"Directory(name={self._name!r}, size={self._size}, children=[{names}])"
