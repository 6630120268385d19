from __future__ import annotations

"""
Integration tests for the analysis engine.

Runs the full read-build-query workflow against transcript files on disk.
"""

from pathlib import Path

from shelltree.core.engine import run_analysis


def test_run_analysis_on_sample(sample_transcript_file: Path) -> None:
    result = run_analysis({"transcript_path": str(sample_transcript_file)})

    assert result.ok, result.error
    assert result.small_dirs_total == 95437
    assert result.deletion_candidate_size == 24933642
    assert result.deletion_candidate_name == "d"
    assert result.used_space == 48381165
    assert result.needed_space == 8381165
    assert result.tree_lines == []
    assert result.summary["files"] == 10


def test_run_analysis_renders_tree_on_request(sample_transcript_file: Path) -> None:
    result = run_analysis({
        "transcript_path": str(sample_transcript_file),
        "render_tree": True,
    })

    assert result.ok
    assert result.tree_lines[0] == "/ (dir, size=48381165)"


def test_run_analysis_with_custom_parameters(sample_transcript_file: Path) -> None:
    result = run_analysis({
        "transcript_path": str(sample_transcript_file),
        "size_threshold": 1000,
        "device_capacity": 50_000_000,
        "required_free_space": 60_000_000,
    })

    assert result.ok
    assert result.small_dirs_total == 584
    assert result.deletion_candidate_size is None
    assert not result.has_deletion_candidate


def test_run_analysis_missing_file(tmp_path: Path) -> None:
    result = run_analysis({"transcript_path": str(tmp_path / "nope.txt")})

    assert not result.ok
    assert "not found" in result.error


def test_run_analysis_malformed_transcript(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("$ cd /\n$ ls\nabc file\n", encoding="utf-8")

    result = run_analysis({"transcript_path": str(path)})

    assert not result.ok
    assert "line 3" in result.error
    assert result.small_dirs_total == 0


def test_run_analysis_capacity_exceeded(sample_transcript_file: Path) -> None:
    result = run_analysis({
        "transcript_path": str(sample_transcript_file),
        "device_capacity": 10,
    })

    assert not result.ok
    assert "exceeds device capacity" in result.error
