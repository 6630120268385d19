from __future__ import annotations

"""
Transcript Reading Component.

Streams a transcript file line by line so that arbitrarily long shell
sessions never have to be held in memory at once.
"""

from typing import Iterator

# -----------------------------------------------------------------------------
# STREAM READING OPERATIONS
# -----------------------------------------------------------------------------

def stream_transcript(file_path: str) -> Iterator[str]:
    """
    Generate the lines of a transcript file without trailing newlines.

    Undecodable bytes are replaced rather than aborting the read; the
    grammar layer then reports the damaged line as malformed.

    Args:
        file_path: Path to the transcript file.

    Yields:
        str: Transcript lines.
    """
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            yield line.rstrip("\r\n")
