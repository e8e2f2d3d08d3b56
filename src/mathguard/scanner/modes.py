"""Scanner operating modes and line kinds.

This module defines the finite state machine modes for the line scanner
and the classification a physical line receives before it is scanned.
"""

from __future__ import annotations

from enum import Enum, auto


class ScanMode(Enum):
    """Scanner operating modes.

    The scanner switches between modes based on context:
    - NORMAL: Between math blocks, scanning lines character by character
    - MULTILINE_MATH: Inside a ``$$`` block that continues across lines

    """

    NORMAL = auto()
    MULTILINE_MATH = auto()


class LineKind(Enum):
    """How a physical line is handled."""

    INDENTED_CODE = auto()  # 4-space indent, passed through
    CONTINUATION = auto()  # Inside an open $$ block
    TEXT = auto()  # Scanned for code spans and math


# Markdown's indented code block prefix
CODE_INDENT = "    "

# Trailing marker that lets a $$ block continue onto the next line
CONTINUATION_MARKER = "\\\\"

DISPLAY_DELIMITER = "$$"
INLINE_DELIMITER = "$"
