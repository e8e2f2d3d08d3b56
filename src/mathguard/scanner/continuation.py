"""Continuation handling for multi-line ``$$`` blocks."""

from __future__ import annotations

from mathguard.config import PreprocessConfig, get_preprocess_config
from mathguard.diagnostics import Diagnostic, DiagnosticSink, emit
from mathguard.scanner.chars import scan_line
from mathguard.scanner.modes import CONTINUATION_MARKER, DISPLAY_DELIMITER
from mathguard.scanner.state import ScanState


def scan_continued_math(
    line: str,
    state: ScanState,
    config: PreprocessConfig | None = None,
    sink: DiagnosticSink | None = None,
    source_file: str | None = None,
) -> str | None:
    """Feed one line to the open ``$$`` block in ``state``.

    The first ``$$`` on the line closes the block: everything buffered so far
    plus the text before it becomes one escaped math body, and the text after
    it is scanned as an ordinary line (it may open another block). Without a
    ``$$`` the whole line joins the buffer.

    Args:
        line: Physical line, including its newline if any
        state: Scan state in MULTILINE_MATH mode
        config: Preprocessing options (defaults to the active context config)
        sink: Receives a Diagnostic when the line lacks the ``\\\\`` marker
        source_file: Source path reported in diagnostics

    Returns:
        Output for this line, or None while the block stays open.
    """
    if config is None:
        config = get_preprocess_config()

    math_part, found, rest = line.partition(DISPLAY_DELIMITER)
    if found:
        span = state.close_block(math_part, joiner=config.block_joiner)
        return span.render() + scan_line(rest, state, config)

    stripped = line.rstrip()
    if config.warn_unterminated and not stripped.endswith(CONTINUATION_MARKER):
        emit(
            sink,
            Diagnostic(
                lineno=state.lineno,
                open_lineno=state.open_lineno,
                line=stripped,
                source_file=source_file,
            ),
        )
    state.extend_block(stripped)
    return None
