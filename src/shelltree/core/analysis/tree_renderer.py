from __future__ import annotations

"""
Tree Renderer.

Converts a built Directory tree into an ASCII representation annotated
with entry kinds and sizes.
"""

from typing import List, Tuple

from shelltree.domain.tree_models import Directory, Entry

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root: Directory) -> List[str]:
    """Render `root` and everything below it, one line per entry."""
    lines = [_describe(root)]
    render_tree_structure(root, lines)
    return lines


def render_tree_structure(directory: Directory, lines: List[str], prefix: str = "") -> None:
    """
    Append every entry below `directory` to `lines`.

    Uses standard ASCII connectors (├──, └──). Children are emitted in name
    order, each directory followed by its own contents. Pending entries are
    kept on an explicit stack, so depth is bounded only by memory.

    Args:
        directory: Directory whose contents are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix applied to the first level.
    """
    stack: List[Tuple[Entry, str, bool]] = []
    _push_children(stack, directory, prefix)

    while stack:
        entry, entry_prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(f"{entry_prefix}{connector}{_describe(entry)}")

        if isinstance(entry, Directory):
            _push_children(stack, entry, entry_prefix + ("    " if is_last else "│   "))


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _push_children(stack: List[Tuple[Entry, str, bool]], directory: Directory, prefix: str) -> None:
    children = list(directory.iter_children())
    last = len(children) - 1
    # Reversed so the first child is popped first
    for i in range(last, -1, -1):
        stack.append((children[i], prefix, i == last))


def _describe(entry: Entry) -> str:
    kind = "dir" if entry.is_dir else "file"
    return f"{entry.name} ({kind}, size={entry.size})"
