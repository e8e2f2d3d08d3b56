"""Downstream Markdown renderers.

Provides:
- protocol: MarkdownRenderer, the seam to any Markdown engine
- mistune: optional backend (``pip install mathguard[render]``), imported on use
"""

from mathguard.renderers.protocol import MarkdownRenderer

__all__ = ["MarkdownRenderer"]
