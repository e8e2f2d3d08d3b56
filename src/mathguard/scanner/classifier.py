"""Line classification for the math scanner.

Decides, per physical line, which scanner handles it. Classification is
pure logic; the scanning itself happens in ``chars`` and ``continuation``.
"""

from __future__ import annotations

from mathguard.config import PreprocessConfig
from mathguard.diagnostics import DiagnosticSink
from mathguard.scanner.chars import scan_line
from mathguard.scanner.continuation import scan_continued_math
from mathguard.scanner.modes import CODE_INDENT, LineKind, ScanMode
from mathguard.scanner.state import ScanState


def classify_line(line: str, state: ScanState) -> LineKind:
    """Classify a physical line given the current scan state.

    An open ``$$`` block takes precedence over indentation: indented lines
    inside display math are math, not code.
    """
    if state.mode is ScanMode.MULTILINE_MATH:
        return LineKind.CONTINUATION
    if line.startswith(CODE_INDENT):
        return LineKind.INDENTED_CODE
    return LineKind.TEXT


def scan_physical_line(
    line: str,
    state: ScanState,
    config: PreprocessConfig | None = None,
    sink: DiagnosticSink | None = None,
    source_file: str | None = None,
) -> str | None:
    """Produce the output for one physical line.

    Args:
        line: Physical line, including its newline if any
        state: Scan state, already advanced to this line's number
        config: Preprocessing options (defaults to the active context config)
        sink: Diagnostic sink for continuation warnings
        source_file: Source path reported in diagnostics

    Returns:
        Output text, or None when the line was absorbed into an open block.
    """
    kind = classify_line(line, state)
    if kind is LineKind.CONTINUATION:
        return scan_continued_math(line, state, config, sink, source_file)
    if kind is LineKind.INDENTED_CODE:
        return line
    return scan_line(line, state, config)
