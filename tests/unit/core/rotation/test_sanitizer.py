from __future__ import annotations

"""
Unit tests for the Filename Sanitizer.

Verifies:
1. Escaping of every unsafe character.
2. Single-pass behaviour (no double escaping).
3. Preservation of the semantic content after stripping escapes.
"""

import pytest

from tierlog.core.rotation.sanitizer import (
    ESCAPE_CHAR,
    UNSAFE_CHARS,
    escape_filename,
    unescape_filename,
)


def test_escape_quotes_in_base_name() -> None:
    """Quotes are escaped, everything else untouched."""
    assert escape_filename('my "log".txt') == 'my\\ \\"log\\".txt'


def test_escape_quotes_only_scenario() -> None:
    """Without spaces only the quotes gain an escape."""
    assert escape_filename('my"log".txt') == 'my\\"log\\".txt'


def test_empty_input_yields_empty_output() -> None:
    assert escape_filename("") == ""


def test_safe_names_are_unchanged() -> None:
    name = "server-24-10-19-12:30-info.log"
    assert escape_filename(name) == name


@pytest.mark.parametrize("ch", sorted(UNSAFE_CHARS))
def test_every_unsafe_char_is_escaped(ch: str) -> None:
    assert escape_filename(f"a{ch}b") == f"a{ESCAPE_CHAR}{ch}b"


def test_backslash_is_escaped_exactly_once() -> None:
    """An existing backslash gets one escape; the inserted one is not re-escaped."""
    assert escape_filename("a\\b") == "a\\\\b"
    assert escape_filename("\\\\") == "\\\\\\\\"


def test_no_case_change_or_truncation() -> None:
    name = "MiXeD Case ~ Name$" * 20
    escaped = escape_filename(name)
    assert unescape_filename(escaped) == name
    assert len(escaped) == len(name) + sum(1 for c in name if c in UNSAFE_CHARS)


@pytest.mark.parametrize("name", [
    "plain.log",
    "we ird*name?.log",
    "all\\ '\"*?{};<>|^&$#!`~",
    "~~~",
    "$HOME/../x",
])
def test_stripping_escapes_restores_original(name: str) -> None:
    assert unescape_filename(escape_filename(name)) == name
