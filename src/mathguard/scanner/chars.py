"""Character-level scanner for ordinary lines.

Walks a line left to right and, at each position, consumes the first
lexical unit that matches, in priority order:

1. Inline code span (copied verbatim, ``$`` included)
2. Math span closed on the same line (body escaped)
3. ``$$`` left open with a trailing ``\\\\`` (starts a multi-line block and
   ends the line)
4. A single character, where ``\\\\``, ``\\``` and ``\\$`` count as one

Each scan helper returns the consumed unit together with the new cursor
position, or None when it does not apply. Every unit is at least one
character wide, so the cursor always advances.

"""

from __future__ import annotations

import re

from mathguard.config import PreprocessConfig, get_preprocess_config
from mathguard.scanner.modes import DISPLAY_DELIMITER
from mathguard.scanner.state import MathSpan, ScanState

# Markdown engines do no escaping inside `...`, so the first closing
# backtick always ends the span.
_CODE_SPAN_PATTERN = re.compile(r"`.+?`")

# $...$ or $$...$$ closed on this line. The opener tries $$ first and falls
# back to $, so "$$a$" is a $ span with body "$a". \\ and \$ are body units
# because math renderers honor them as escapes.
_INLINE_MATH_PATTERN = re.compile(r"(\$\$?)((?:\\[\\$]|.)+?)\1")

# $$ with no closing $$ on the line, ending in the continuation marker
_OPEN_BLOCK_PATTERN = re.compile(r"\$\$(.+?\\\\)$")

_CHAR_PATTERN = re.compile(r"\\[\\`$]|.", re.DOTALL)

_ESCAPED_DOLLAR = "\\$"


def _scan_code_span(text: str, pos: int) -> tuple[str, int] | None:
    m = _CODE_SPAN_PATTERN.match(text, pos)
    if m is None:
        return None
    return m.group(), m.end()


def _scan_inline_math(text: str, pos: int) -> tuple[MathSpan, int] | None:
    """Match a math span starting at pos.

    Returns:
        (span, new_pos) for a span closed on this line, (open span, len(text))
        for a ``$$`` block continued on the next line, or None.
    """
    m = _INLINE_MATH_PATTERN.match(text, pos)
    if m is not None:
        return MathSpan(m.group(1), m.group(2)), m.end()

    m = _OPEN_BLOCK_PATTERN.match(text, pos)
    if m is not None:
        return MathSpan(DISPLAY_DELIMITER, m.group(1), closed=False), len(text)

    return None


def _scan_char(text: str, pos: int) -> tuple[str, int]:
    m = _CHAR_PATTERN.match(text, pos)
    # The pattern matches any character, so this only guards pos == len(text)
    if m is None:
        return "", len(text)
    return m.group(), m.end()


def scan_line(
    text: str,
    state: ScanState,
    config: PreprocessConfig | None = None,
) -> str:
    """Escape math in one line of ordinary Markdown.

    If the line opens a multi-line ``$$`` block, the block body moves into
    ``state`` and the rest of the physical line, including its line break, is
    dropped from the output.

    Args:
        text: Line text, with or without its trailing newline
        state: Scan state; switched to MULTILINE_MATH when a block opens
        config: Preprocessing options (defaults to the active context config)

    Returns:
        The line with math bodies escaped and ``\\$`` replaced by an entity.
    """
    # Fast path: without a dollar sign there is nothing to rewrite
    if "$" not in text:
        return text

    if config is None:
        config = get_preprocess_config()

    parts: list[str] = []
    pos = 0
    text_len = len(text)
    while pos < text_len:
        code = _scan_code_span(text, pos)
        if code is not None:
            unit, pos = code
            parts.append(unit)
            continue

        math = _scan_inline_math(text, pos)
        if math is not None:
            span, pos = math
            if not span.closed:
                state.open_block(span.raw_body)
                break
            parts.append(span.render())
            continue

        unit, pos = _scan_char(text, pos)
        parts.append(config.dollar_entity if unit == _ESCAPED_DOLLAR else unit)

    return "".join(parts)
