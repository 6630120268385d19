from __future__ import annotations

"""
Integration tests for the transcript reader.
"""

import os
from pathlib import Path

from shelltree.infra.fs import normalize_path
from shelltree.infra.reader import stream_transcript


def test_stream_strips_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "t.txt"
    path.write_bytes(b"$ cd /\r\n$ ls\n10 f")

    assert list(stream_transcript(str(path))) == ["$ cd /", "$ ls", "10 f"]


def test_stream_is_lazy(tmp_path: Path) -> None:
    path = tmp_path / "t.txt"
    path.write_text("a\nb\n", encoding="utf-8")

    stream = stream_transcript(str(path))

    assert next(stream) == "a"
    assert next(stream) == "b"


def test_stream_replaces_undecodable_bytes(tmp_path: Path) -> None:
    path = tmp_path / "t.txt"
    path.write_bytes(b"10 caf\xe9\n")

    (line,) = list(stream_transcript(str(path)))

    assert line.startswith("10 caf")


def test_normalize_path_falls_back_and_expands(tmp_path: Path) -> None:
    assert normalize_path("", str(tmp_path)) == str(tmp_path)
    assert normalize_path("  ", str(tmp_path)) == str(tmp_path)
    assert normalize_path("~", "/unused") == os.path.abspath(os.path.expanduser("~"))
