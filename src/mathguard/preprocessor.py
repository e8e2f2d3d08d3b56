"""Math-preserving Markdown preprocessor.

Rewrites Markdown source so that ``$...$`` and ``$$...$$`` math reaches a
client-side math renderer (MathJax, KaTeX) intact after the Markdown engine
has run. Markdown metacharacters inside math are backslash-escaped; inline
code, indented code, and everything outside math pass through unchanged.

Single pass over the source, one line at a time. Lines that open or continue
a multi-line ``$$`` block produce no output until the block closes, so the
output can have fewer lines than the input.

Thread Safety:
Each run gets a fresh ScanState. Configuration is immutable and read from
a ContextVar; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from mathguard.config import PreprocessConfig, get_preprocess_config
from mathguard.diagnostics import DiagnosticSink
from mathguard.scanner import ScanState, scan_physical_line
from mathguard.utils.logger import get_logger

logger = get_logger(__name__)


def iter_lines(source: str) -> Iterator[str]:
    """Split source into physical lines, keeping each ``\\n`` terminator.

    Only ``\\n`` ends a line; the final line may lack one.

    Example:
        >>> list(iter_lines("a\\nb"))
        ['a\\n', 'b']
    """
    pos = 0
    source_len = len(source)
    while pos < source_len:
        idx = source.find("\n", pos)
        end = idx + 1 if idx != -1 else source_len
        yield source[pos:end]
        pos = end


class MathPreprocessor:
    """Drives the line scanner over a whole document.

    Usage:
        >>> MathPreprocessor("$a*b$ is *emphasis*").run()
        '$a\\\\*b$ is *emphasis*'

    Each call to lines() or run() starts from a fresh ScanState; the
    state of the latest run stays available through ``state``.

    """

    __slots__ = (
        "_source",
        "_config",
        "_sink",
        "_source_file",
        "_state",
    )

    def __init__(
        self,
        source: str,
        *,
        config: PreprocessConfig | None = None,
        sink: DiagnosticSink | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize preprocessor with source text.

        Args:
            source: Markdown source text
            config: Preprocessing options (defaults to the active context config)
            sink: Receives non-fatal diagnostics (defaults to logging them)
            source_file: Optional source file path for diagnostics
        """
        self._source = source
        self._config = config if config is not None else get_preprocess_config()
        self._sink = sink
        self._source_file = source_file
        self._state = ScanState()

    @property
    def state(self) -> ScanState:
        return self._state

    def lines(self) -> Iterator[str]:
        """Yield output fragments in document order.

        Lines absorbed into an open ``$$`` block yield nothing at their own
        position. A block still open at the end is flushed raw, without a
        closing delimiter.

        Yields:
            Output text for each resolved line, then any flushed fragments
        """
        if not self._config.preserve_math:
            if self._source:
                yield self._source
            return

        state = self._state = ScanState()
        for line in iter_lines(self._source):
            state.next_line()
            out = scan_physical_line(
                line, state, self._config, self._sink, self._source_file
            )
            if out is not None:
                yield out

        if state.in_math_block:
            logger.debug(
                "$$ block opened at line %d still open at end of document",
                state.open_lineno,
            )
        yield from state.flush()

    def run(self) -> str:
        """Preprocess the whole document.

        Returns:
            Text ready for the Markdown engine
        """
        return "".join(self.lines())


def preprocess(
    source: str,
    *,
    config: PreprocessConfig | None = None,
    sink: DiagnosticSink | None = None,
    source_file: str | None = None,
) -> str:
    """Escape Markdown syntax inside math so the engine leaves it alone.

    Args:
        source: Markdown source text
        config: Preprocessing options (defaults to the active context config)
        sink: Receives non-fatal diagnostics (defaults to logging them)
        source_file: Optional source file path for diagnostics

    Returns:
        Preprocessed Markdown text

    Example:
        >>> preprocess("$a^2$ and `$b$`")
        '$a\\\\^2$ and `$b$`'
    """
    return MathPreprocessor(
        source, config=config, sink=sink, source_file=source_file
    ).run()
