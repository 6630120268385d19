from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script through subprocess and validates argument
parsing, exit codes and stream output (stdout/stderr).
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "shelltree" / "main.py"


def run_cli(args: List[str], cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH so the package resolves
    without being installed.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_cli_happy_path(sample_transcript_file: Path) -> None:
    result = run_cli(["-i", str(sample_transcript_file)])

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    assert "small_dirs_total:        95437" in result.stdout
    assert "deletion_candidate:   24933642" in result.stdout


def test_cli_json_output(sample_transcript_file: Path) -> None:
    result = run_cli(["-i", str(sample_transcript_file), "--json"])

    assert result.returncode == 0, result.stderr
    payload = json.loads(result.stdout)
    assert payload["ok"] is True
    assert payload["small_dirs_total"] == 95437
    assert payload["deletion_candidate_size"] == 24933642
    assert payload["used_space"] == 48381165


def test_cli_print_tree(sample_transcript_file: Path) -> None:
    result = run_cli(["-i", str(sample_transcript_file), "--print-tree"])

    assert result.returncode == 0, result.stderr
    assert result.stdout.startswith("/ (dir, size=48381165)")
    assert "└── d (dir, size=24933642)" in result.stdout


def test_cli_no_candidate_prints_none(sample_transcript_file: Path) -> None:
    result = run_cli([
        "-i", str(sample_transcript_file),
        "--capacity", "50000000",
        "--required", "60000000",
    ])

    assert result.returncode == 0, result.stderr
    assert "deletion_candidate:       none" in result.stdout


def test_cli_config_file_is_layered_under_flags(
        tmp_path: Path, sample_transcript_file: Path
) -> None:
    config = tmp_path / "conf.json"
    config.write_text(
        json.dumps({"transcript_path": str(sample_transcript_file), "size_threshold": 1}),
        encoding="utf-8",
    )

    result = run_cli(["--config", str(config), "--threshold", "1000", "--dump-config"])

    assert result.returncode == 0, result.stderr
    dumped = json.loads(result.stdout)
    assert dumped["size_threshold"] == 1000
    assert dumped["transcript_path"] == str(sample_transcript_file)


def test_cli_handles_missing_input(tmp_path: Path) -> None:
    result = run_cli(["-i", str(tmp_path / "missing.txt")])

    assert result.returncode == 2
    assert "ERROR" in result.stderr


def test_cli_reports_malformed_transcript(tmp_path: Path) -> None:
    bad = tmp_path / "bad.txt"
    bad.write_text("$ cd /\n$ mkdir x\n", encoding="utf-8")

    result = run_cli(["-i", str(bad)])

    assert result.returncode == 1
    assert "unknown command: mkdir" in result.stderr
