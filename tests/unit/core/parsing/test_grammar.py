from __future__ import annotations

"""
Unit tests for transcript line parsing.

Verifies:
1. Command and listing classification.
2. Fatal handling of unknown verbs and malformed lines.
3. Line numbers attached to syntax errors.
"""

import pytest

from shelltree.core.parsing.grammar import (
    Command,
    ListingEntry,
    is_blank,
    is_command_line,
    parse_command,
    parse_listing,
    tokenize,
)
from shelltree.domain.errors import TranscriptSyntaxError, UnknownCommandError


def test_tokenize_splits_on_any_whitespace() -> None:
    assert tokenize("  $\tcd   foo \n") == ["$", "cd", "foo"]
    assert tokenize("") == []


def test_line_classification() -> None:
    assert is_command_line("$ ls")
    assert not is_command_line("dir a")
    assert not is_command_line("$x ls")
    assert is_blank("   ")
    assert not is_blank("dir a")


@pytest.mark.parametrize(
    "line, expected",
    [
        ("$ cd /", Command("cd", "/")),
        ("$ cd ..", Command("cd", "..")),
        ("$ cd a.b", Command("cd", "a.b")),
        ("$ ls", Command("ls")),
    ],
)
def test_parse_command(line: str, expected: Command) -> None:
    assert parse_command(line) == expected


def test_unknown_command_is_fatal() -> None:
    with pytest.raises(UnknownCommandError) as exc:
        parse_command("$ rm -rf", line_number=7)
    assert exc.value.line_number == 7
    assert "line 7" in str(exc.value)
    assert "rm" in str(exc.value)


@pytest.mark.parametrize("line", ["$", "$ cd", "$ cd a b", "$ ls -la", "dir a"])
def test_malformed_command_lines(line: str) -> None:
    with pytest.raises(TranscriptSyntaxError):
        parse_command(line)


def test_parse_listing_dir_and_file() -> None:
    assert parse_listing("dir e") == ListingEntry(name="e", is_dir=True)
    assert parse_listing("29116 f") == ListingEntry(name="f", is_dir=False, size=29116)
    assert parse_listing("0 empty") == ListingEntry(name="empty", is_dir=False, size=0)


@pytest.mark.parametrize("line", ["-5 neg", "12a bad", "1.5 frac", "big name", "+3 plus"])
def test_invalid_size_token(line: str) -> None:
    with pytest.raises(TranscriptSyntaxError) as exc:
        parse_listing(line, line_number=3)
    assert exc.value.line == line


@pytest.mark.parametrize("line", ["123", "dir", "1 two words"])
def test_listing_wrong_token_count(line: str) -> None:
    with pytest.raises(TranscriptSyntaxError):
        parse_listing(line)


def test_syntax_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_listing("x y")
