"""Line-oriented state-machine scanner for math preservation.

The scanner classifies each physical line, then escapes the math it finds.
State that spans lines lives in a single ScanState owned by the caller.

Architecture:
scanner/
├── __init__.py          # Re-exports
├── modes.py             # ScanMode, LineKind enums and delimiter constants
├── state.py             # ScanState, MathSpan
├── classifier.py        # Per-line dispatch
├── chars.py             # Ordinary line scanning (code spans, inline math)
└── continuation.py      # Lines inside an open $$ block

Usage:
    >>> from mathguard.scanner import ScanState, scan_line
    >>> scan_line("$a_1$ and `$x$`", ScanState())
    '$a\\\\_1$ and `$x$`'

"""

from mathguard.scanner.chars import scan_line
from mathguard.scanner.classifier import classify_line, scan_physical_line
from mathguard.scanner.continuation import scan_continued_math
from mathguard.scanner.modes import LineKind, ScanMode
from mathguard.scanner.state import MathSpan, ScanState

__all__ = [
    "LineKind",
    "MathSpan",
    "ScanMode",
    "ScanState",
    "classify_line",
    "scan_continued_math",
    "scan_line",
    "scan_physical_line",
]
