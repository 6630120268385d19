from __future__ import annotations

"""
Core orchestration engine.

Coordinates a full analysis run:
1. Validates configuration and resolves the transcript path.
2. Streams the transcript into the tree builder (a single build).
3. Runs the small-directory and deletion-candidate queries on that tree.
4. Optionally renders the tree.
"""

import logging
import os
from typing import Any, Dict, Optional

from shelltree.core.analysis.queries import (
    find_deletion_candidate,
    plan_space,
    sum_small_directories,
)
from shelltree.core.analysis.tree_renderer import render_tree
from shelltree.core.builder import TreeBuilder
from shelltree.core.validator import validate_config
from shelltree.domain.errors import ShellTreeError
from shelltree.domain.result_models import (
    AnalysisResult,
    create_error_result,
    create_success_result,
)
from shelltree.infra.fs import normalize_path
from shelltree.infra.reader import stream_transcript

logger = logging.getLogger(__name__)


def run_analysis(config: Optional[Dict[str, Any]]) -> AnalysisResult:
    """
    Execute the full read-build-query workflow.

    Input errors never escape: malformed transcripts, unreadable files and
    capacity violations are reported through a failed AnalysisResult.

    Args:
        config: The configuration dictionary (raw or partial).

    Returns:
        AnalysisResult: Object containing status, answers and build stats.
    """
    logger.info("Analysis started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    transcript_path = normalize_path(cfg["transcript_path"], os.getcwd())
    if not os.path.isfile(transcript_path):
        msg = f"Transcript file not found: {transcript_path}"
        logger.error(msg)
        return create_error_result(msg, cfg, transcript_path)

    # -------------------------------------------------------------------------
    # 2) Tree Construction
    # -------------------------------------------------------------------------
    builder = TreeBuilder()
    try:
        root = builder.build(stream_transcript(transcript_path))
    except ShellTreeError as e:
        msg = f"Malformed transcript: {e}"
        logger.error(msg)
        return create_error_result(
            msg, cfg, transcript_path, summary_extra=builder.stats.as_dict()
        )
    except OSError as e:
        msg = f"Failed to read transcript '{transcript_path}': {e}"
        logger.error(msg)
        return create_error_result(msg, cfg, transcript_path)

    # -------------------------------------------------------------------------
    # 3) Queries
    # -------------------------------------------------------------------------
    try:
        plan = plan_space(root, cfg["device_capacity"], cfg["required_free_space"])
    except ShellTreeError as e:
        logger.error(str(e))
        return create_error_result(
            str(e), cfg, transcript_path, summary_extra=builder.stats.as_dict()
        )

    small_total = sum_small_directories(root, cfg["size_threshold"])
    candidate = find_deletion_candidate(
        root, cfg["device_capacity"], cfg["required_free_space"]
    )

    # -------------------------------------------------------------------------
    # 4) Rendering
    # -------------------------------------------------------------------------
    tree_lines = render_tree(root) if cfg["render_tree"] else []

    logger.info("Analysis finished successfully.")
    return create_success_result(
        cfg,
        transcript_path,
        used_space=plan.used,
        needed_space=plan.needed,
        small_dirs_total=small_total,
        deletion_candidate_size=candidate.size if candidate is not None else None,
        deletion_candidate_name=candidate.name if candidate is not None else "",
        tree_lines=tree_lines,
        summary_extra=builder.stats.as_dict(),
    )
