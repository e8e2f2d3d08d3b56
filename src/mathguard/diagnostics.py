"""Non-fatal diagnostics raised while preprocessing.

The preprocessor never fails on malformed math. When a line inside an open
``$$`` block does not carry the ``\\\\`` continuation marker, it reports a
Diagnostic to a caller-supplied sink and keeps going.

Usage:
    >>> from mathguard import preprocess
    >>> from mathguard.diagnostics import DiagnosticCollector
    >>> collector = DiagnosticCollector()
    >>> _ = preprocess("$$a \\\\\\\\\\nb\\n", sink=collector)
    >>> collector.diagnostics[0].lineno
    2

Thread Safety:
    Diagnostic is frozen. DiagnosticCollector is meant to be owned by a single
    preprocessing call.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from mathguard.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A warning about a possibly unterminated ``$$`` block.

    Attributes:
        lineno: Line being processed (1-indexed)
        open_lineno: Line where the ``$$`` block was opened (1-indexed)
        line: The offending line, trailing whitespace removed
        source_file: Source file path (optional, for multi-file builds)

    """

    lineno: int
    open_lineno: int
    line: str
    source_file: str | None = None

    @property
    def location(self) -> str:
        """Format the position like "file.md:12" or "12"."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}"
        return str(self.lineno)

    @property
    def message(self) -> str:
        return (
            f"{self.location}: {self.line}\n"
            f"\tAre we in the middle of multiline math? "
            f"$$ opened at line {self.open_lineno} not closed?"
        )

    def __str__(self) -> str:
        return self.message


DiagnosticSink = Callable[[Diagnostic], None]


def log_diagnostic(diagnostic: Diagnostic) -> None:
    """Default sink: report through the ``mathguard.diagnostics`` logger."""
    logger.warning("%s", diagnostic.message)


@dataclass(slots=True)
class DiagnosticCollector:
    """Sink that keeps every diagnostic it receives.

    Usage:
        >>> collector = DiagnosticCollector()
        >>> collector(Diagnostic(lineno=3, open_lineno=1, line="y^2"))
        >>> len(collector)
        1

    """

    diagnostics: list[Diagnostic] = field(default_factory=list)

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)

    def __len__(self) -> int:
        return len(self.diagnostics)

    def __bool__(self) -> bool:
        return bool(self.diagnostics)


def emit(sink: DiagnosticSink | None, diagnostic: Diagnostic) -> None:
    """Deliver a diagnostic without letting the sink fail the caller.

    Args:
        sink: Caller-supplied sink, or None for the logging sink
        diagnostic: Diagnostic to deliver
    """
    target = sink if sink is not None else log_diagnostic
    try:
        target(diagnostic)
    except Exception:
        logger.debug("Diagnostic sink %r failed", target, exc_info=True)


__all__ = [
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticSink",
    "emit",
    "log_diagnostic",
]
