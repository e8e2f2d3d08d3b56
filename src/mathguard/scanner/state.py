"""Scan state and math span records.

ScanState is the single owner of everything that survives from one physical
line to the next: the mode, the continuation buffer for an open ``$$`` block,
and line counters used by diagnostics.

Thread Safety:
ScanState instances are single-use. Create one per document.
MathSpan is frozen and safe to share.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from mathguard.escape import escape_markdown
from mathguard.scanner.modes import DISPLAY_DELIMITER, ScanMode


@dataclass(frozen=True, slots=True)
class MathSpan:
    """A run of text recognized as math.

    Attributes:
        delimiter: "$" or "$$"
        raw_body: Content between the delimiters, unescaped
        closed: False only for an open ``$$`` block still being buffered

    """

    delimiter: str
    raw_body: str
    closed: bool = True

    def render(self) -> str:
        """Escape the body and re-wrap it in its original delimiters."""
        return f"{self.delimiter}{escape_markdown(self.raw_body)}{self.delimiter}"


@dataclass(slots=True)
class ScanState:
    """Mutable line-to-line state of one preprocessing run.

    Invariant: ``buffer`` is non-empty iff ``mode`` is MULTILINE_MATH.

    Attributes:
        mode: Current scanner mode
        buffer: Raw fragments of the open ``$$`` block (opening delimiter
            excluded)
        open_lineno: Line where the open block started (1-indexed)
        lineno: Line currently being processed (1-indexed, 0 before the first)

    """

    mode: ScanMode = ScanMode.NORMAL
    buffer: list[str] = field(default_factory=list)
    open_lineno: int = 0
    lineno: int = 0

    @property
    def in_math_block(self) -> bool:
        return self.mode is ScanMode.MULTILINE_MATH

    def next_line(self) -> int:
        """Advance the line counter and return the new line number."""
        self.lineno += 1
        return self.lineno

    def open_block(self, body: str) -> None:
        """Start a multi-line ``$$`` block on the current line.

        Args:
            body: Raw text between the opening ``$$`` and end of line
        """
        self.mode = ScanMode.MULTILINE_MATH
        self.buffer = [body]
        self.open_lineno = self.lineno

    def extend_block(self, fragment: str) -> None:
        """Append one more raw line to the open block."""
        self.buffer.append(fragment)

    def close_block(self, tail: str, joiner: str = " ") -> MathSpan:
        """Close the open block with the text preceding its closing ``$$``.

        Args:
            tail: Raw text on the closing line before ``$$``
            joiner: Separator placed between buffered fragments

        Returns:
            Closed MathSpan spanning every buffered line
        """
        body = joiner.join([*self.buffer, tail])
        self._reset()
        return MathSpan(DISPLAY_DELIMITER, body)

    def flush(self) -> list[str]:
        """Abandon an open block at end of document.

        Fragments come back raw, one per line, the first one carrying the
        opening ``$$``. Nothing is escaped and no closing delimiter is added.

        Returns:
            Output lines (each ending in a newline), empty when no block is open
        """
        if not self.in_math_block:
            return []
        first, *rest = self.buffer
        self._reset()
        return [f"{DISPLAY_DELIMITER}{first}\n", *(f"{s}\n" for s in rest)]

    def _reset(self) -> None:
        self.mode = ScanMode.NORMAL
        self.buffer = []
        self.open_lineno = 0
