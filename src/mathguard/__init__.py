"""
mathguard: Math-preserving preprocessing for Markdown

Keeps ``$...$`` and ``$$...$$`` math intact through a Markdown-to-HTML
engine so a client-side renderer (MathJax, KaTeX) receives the original
notation. Markdown metacharacters inside math are backslash-escaped; inline
code, indented code, and text outside math pass through untouched.

Quick Start:
    >>> from mathguard import preprocess
    >>> preprocess("$a*b*c [a](b)$ and *emphasis*")
    '$a\\\\*b\\\\*c \\\\[a](b)$ and *emphasis*'

    >>> # Hand the result to any Markdown engine
    >>> from mathguard import MathMarkdown
    >>> from mathguard.renderers.mistune import create_renderer
    >>> MathMarkdown("$__a__$", renderer=create_renderer()).to_html()
    '<p>$__a__$</p>\\n'

Multi-line display math:
    A ``$$`` block may span lines when each line except the last ends with
    ``\\\\``. The block is collapsed onto one output line.

Installation:
    pip install mathguard              # Preprocessor (zero deps)
    pip install mathguard[render]      # + mistune renderer backend
"""

from dataclasses import replace

from mathguard.config import (
    PreprocessConfig,
    get_preprocess_config,
    preprocess_config_context,
    reset_preprocess_config,
    set_preprocess_config,
)
from mathguard.diagnostics import (
    Diagnostic,
    DiagnosticCollector,
    DiagnosticSink,
    log_diagnostic,
)
from mathguard.errors import (
    MathGuardError,
    RendererError,
    RendererNotConfiguredError,
    RendererUnavailableError,
)
from mathguard.escape import METACHARACTERS, escape_markdown
from mathguard.preprocessor import MathPreprocessor, iter_lines, preprocess
from mathguard.renderers.protocol import MarkdownRenderer
from mathguard.scanner import LineKind, MathSpan, ScanMode, ScanState

__version__ = "0.1.0"


class MathMarkdown:
    """Markdown document with math preservation applied.

    Preprocesses on construction; ``text`` is what the engine receives and
    ``original_text`` is the source as given.

    Usage:
        >>> md = MathMarkdown("$x^2$ is *big*", renderer=my_engine)
        >>> md.text
        '$x\\\\^2$ is *big*'
        >>> html = md.to_html()

        >>> # Opt out, leaving the source untouched
        >>> MathMarkdown("$x^2$", preserve_math=False).text
        '$x^2$'

    """

    __slots__ = ("_original_text", "_text", "_renderer")

    def __init__(
        self,
        text: str,
        *,
        renderer: MarkdownRenderer | None = None,
        preserve_math: bool | None = None,
        config: PreprocessConfig | None = None,
        sink: DiagnosticSink | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize and preprocess.

        Args:
            text: Markdown source text
            renderer: Markdown engine used by to_html()
            preserve_math: Apply math preservation. When given, overrides the
                flag in ``config``; None keeps it
            config: Preprocessing options (defaults to the active context config)
            sink: Receives non-fatal diagnostics (defaults to logging them)
            source_file: Optional source file path for diagnostics
        """
        base = config if config is not None else get_preprocess_config()
        if preserve_math is not None and base.preserve_math != preserve_math:
            base = replace(base, preserve_math=preserve_math)
        self._original_text = text
        self._renderer = renderer
        self._text = preprocess(text, config=base, sink=sink, source_file=source_file)

    @property
    def original_text(self) -> str:
        return self._original_text

    @property
    def text(self) -> str:
        return self._text

    def to_html(self) -> str:
        """Render the preprocessed text with the configured engine.

        Raises:
            RendererNotConfiguredError: No renderer was given
        """
        if self._renderer is None:
            raise RendererNotConfiguredError()
        return self._renderer(self._text)

    def __str__(self) -> str:
        return self._text


__all__ = [  # noqa: RUF022
    # Version
    "__version__",
    # Core API
    "preprocess",
    "MathPreprocessor",
    "MathMarkdown",
    "iter_lines",
    # Escaping
    "escape_markdown",
    "METACHARACTERS",
    # Scanner state
    "LineKind",
    "MathSpan",
    "ScanMode",
    "ScanState",
    # Diagnostics
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticSink",
    "log_diagnostic",
    # Configuration (ContextVar-based)
    "PreprocessConfig",
    "get_preprocess_config",
    "set_preprocess_config",
    "reset_preprocess_config",
    "preprocess_config_context",
    # Renderers
    "MarkdownRenderer",
    # Errors
    "MathGuardError",
    "RendererError",
    "RendererNotConfiguredError",
    "RendererUnavailableError",
]
