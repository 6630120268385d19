from __future__ import annotations

"""
Analysis Result Data Models.

Defines the result object passed from the analysis engine to the interface
layer, plus the factory functions building its success and error variants.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AnalysisResult:
    """
    Outcome of a complete analysis run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        transcript_path: Normalized path of the transcript processed.
        size_threshold: Threshold used by the small-directory query.
        device_capacity: Total device capacity used by the deletion query.
        required_free_space: Free space the deletion query must reach.
        used_space: Aggregate size of the root directory.
        needed_space: Space that still has to be freed (0 when none).
        small_dirs_total: Sum of sizes of the directories under the threshold.
        deletion_candidate_size: Size of the smallest sufficient directory,
            or None when no directory frees enough space.
        deletion_candidate_name: Name of that directory (empty when None).
        tree_lines: Rendered tree, when rendering was requested.
        summary: Build statistics.
    """
    ok: bool
    error: str

    transcript_path: str
    size_threshold: int
    device_capacity: int
    required_free_space: int

    used_space: int = 0
    needed_space: int = 0
    small_dirs_total: int = 0
    deletion_candidate_size: Optional[int] = None
    deletion_candidate_name: str = ""

    tree_lines: List[str] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_deletion_candidate(self) -> bool:
        return self.deletion_candidate_size is not None

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        transcript_path: str,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> AnalysisResult:
    """
    Create a failed analysis result.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        transcript_path: The transcript that was targeted.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        AnalysisResult: An immutable error result object.
    """
    return AnalysisResult(
        ok=False,
        error=error,
        transcript_path=transcript_path,
        size_threshold=cfg.get("size_threshold", 0),
        device_capacity=cfg.get("device_capacity", 0),
        required_free_space=cfg.get("required_free_space", 0),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        transcript_path: str,
        used_space: int,
        needed_space: int,
        small_dirs_total: int,
        deletion_candidate_size: Optional[int],
        deletion_candidate_name: str = "",
        tree_lines: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> AnalysisResult:
    """
    Create a successful analysis result.

    Args:
        cfg: Final configuration used during execution.
        transcript_path: Normalized transcript path.
        used_space: Root directory size.
        needed_space: Space still to be freed.
        small_dirs_total: Small-directory query answer.
        deletion_candidate_size: Deletion query answer (None for no answer).
        deletion_candidate_name: Name of the chosen directory.
        tree_lines: Rendered tree lines.
        summary_extra: Build statistics.

    Returns:
        AnalysisResult: An immutable success result object.
    """
    return AnalysisResult(
        ok=True,
        error="",
        transcript_path=transcript_path,
        size_threshold=cfg["size_threshold"],
        device_capacity=cfg["device_capacity"],
        required_free_space=cfg["required_free_space"],
        used_space=used_space,
        needed_space=needed_space,
        small_dirs_total=small_dirs_total,
        deletion_candidate_size=deletion_candidate_size,
        deletion_candidate_name=deletion_candidate_name,
        tree_lines=tree_lines or [],
        summary=summary_extra or {},
    )
