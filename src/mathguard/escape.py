"""Markdown escaping for math bodies.

Inside a math span every character the Markdown engine would interpret as
emphasis, code, superscript, link, or escape syntax gets a backslash in
front, so the engine emits it literally and the math renderer sees the
original notation.

Example:
    >>> from mathguard.escape import escape_markdown
    >>> escape_markdown("a*b*c [a](b)")
    'a\\\\*b\\\\*c \\\\[a](b)'
"""

from __future__ import annotations

import re

METACHARACTERS = frozenset("\\[*_`^")

_METACHAR_PATTERN = re.compile(r"([\\\[*_`^])")


def escape_markdown(text: str) -> str:
    """Backslash-escape Markdown metacharacters in a math body.

    Single pass: backslashes inserted here are never re-scanned. Running it
    twice escapes the inserted backslashes as well, so call it exactly once
    per body.

    Args:
        text: Raw, unescaped math body

    Returns:
        The body with one backslash inserted before each of ``\\ [ * _ ` ^``
    """
    return _METACHAR_PATTERN.sub(r"\\\1", text)
