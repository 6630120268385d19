from __future__ import annotations

"""
Space Queries.

Read-only aggregations over a built tree. The small-directory sum covers the
directories beneath the root only; the deletion query also considers the
root itself.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from shelltree.domain.constants import (
    DEFAULT_DEVICE_CAPACITY,
    DEFAULT_REQUIRED_FREE_SPACE,
    DEFAULT_SIZE_THRESHOLD,
)
from shelltree.domain.errors import CapacityError
from shelltree.domain.tree_models import Directory, DirPredicate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpacePlan:
    """
    Device usage figures behind the deletion query.

    Attributes:
        used: Space occupied by the tree.
        available: Free space left on the device.
        needed: Space that must still be freed (never negative).
    """
    used: int
    available: int
    needed: int


# -----------------------------------------------------------------------------
# TRAVERSAL
# -----------------------------------------------------------------------------

def select_dirs(root: Directory, predicate: DirPredicate) -> List[Directory]:
    """Return the root (if matching) followed by its matching descendants in pre-order."""
    matches = [root] if predicate(root) else []
    matches.extend(root.find_dirs_recurs_by(predicate))
    return matches

# -----------------------------------------------------------------------------
# SMALL DIRECTORIES
# -----------------------------------------------------------------------------

def sum_small_directories(root: Directory, threshold: int = DEFAULT_SIZE_THRESHOLD) -> int:
    """
    Sum the sizes of every directory below `root` not exceeding `threshold`.

    Nested matches are counted independently, so a file may contribute to
    the total more than once.
    """
    dirs = root.find_dirs_recurs_by(lambda d: d.size <= threshold)
    total = sum(d.size for d in dirs)
    logger.debug(f"{len(dirs)} directories at or below {threshold} bytes, total {total}.")
    return total

# -----------------------------------------------------------------------------
# DELETION CANDIDATE
# -----------------------------------------------------------------------------

def plan_space(
        root: Directory,
        capacity: int = DEFAULT_DEVICE_CAPACITY,
        required: int = DEFAULT_REQUIRED_FREE_SPACE,
) -> SpacePlan:
    """
    Compute used, available and still-needed space for the device.

    Raises:
        CapacityError: The tree is larger than the device.
    """
    used = root.size
    if used > capacity:
        raise CapacityError(f"Used space {used} exceeds device capacity {capacity}.")
    available = capacity - used
    needed = max(0, required - available)
    return SpacePlan(used=used, available=available, needed=needed)


def find_deletion_candidate(
        root: Directory,
        capacity: int = DEFAULT_DEVICE_CAPACITY,
        required: int = DEFAULT_REQUIRED_FREE_SPACE,
) -> Optional[Directory]:
    """
    Find the smallest directory whose removal frees enough space.

    Returns:
        Optional[Directory]: The candidate, or None when no directory is
        large enough (e.g. the requirement exceeds the whole device).
    """
    plan = plan_space(root, capacity, required)
    candidates = select_dirs(root, lambda d: d.size >= plan.needed)
    if not candidates:
        logger.info(f"No directory frees the {plan.needed} bytes needed.")
        return None
    return min(candidates, key=lambda d: d.size)


def smallest_deletion_size(
        root: Directory,
        capacity: int = DEFAULT_DEVICE_CAPACITY,
        required: int = DEFAULT_REQUIRED_FREE_SPACE,
) -> Optional[int]:
    """Size of the directory chosen by `find_deletion_candidate`, or None."""
    candidate = find_deletion_candidate(root, capacity, required)
    return candidate.size if candidate is not None else None
