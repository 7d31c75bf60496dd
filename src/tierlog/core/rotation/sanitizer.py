from __future__ import annotations

"""
Filename Sanitization Service.

Escapes shell metacharacters in log file base names so rotated names can
be handed to a shell or used as literal path components.
"""

from typing import Final, FrozenSet

# -----------------------------------------------------------------------------
# ESCAPING RULES
# -----------------------------------------------------------------------------

ESCAPE_CHAR: Final[str] = "\\"

UNSAFE_CHARS: Final[FrozenSet[str]] = frozenset(
    ["\\", " ", "'", '"', "*", "?", "{", "}", ";", "<", ">", "|", "^", "&", "$", "#", "!", "`", "~"]
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------


def escape_filename(name: str) -> str:
    """
    Prefix every unsafe character of a base name with a backslash.

    Single left-to-right pass over the input, so escapes inserted here are
    never escaped again. No other transformation is applied.

    Args:
        name: Base name (no directory component).

    Returns:
        str: The escaped name. Empty input yields an empty string.
    """
    if not name:
        return ""
    return "".join(ESCAPE_CHAR + ch if ch in UNSAFE_CHARS else ch for ch in name)


def unescape_filename(escaped: str) -> str:
    """Inverse of escape_filename: drop the escape in front of each escaped char."""
    out = []
    i = 0
    while i < len(escaped):
        ch = escaped[i]
        if ch == ESCAPE_CHAR and i + 1 < len(escaped):
            out.append(escaped[i + 1])
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)
