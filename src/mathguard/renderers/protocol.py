"""Renderer protocol for the downstream Markdown engine.

mathguard does not parse Markdown. It rewrites math so that any engine which
honors backslash escapes renders it literally; the engine itself is plugged
in through this protocol.

Example:
    >>> import mistune
    >>> from mathguard import MathMarkdown
    >>> MathMarkdown("$a*b*c$", renderer=mistune.html).to_html()
    '<p>$a*b*c$</p>\\n'

"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MarkdownRenderer(Protocol):
    """Anything that turns Markdown text into HTML.

    Contract:
        - MUST treat ``\\*``, ``\\_``, ``\\```, ``\\[``, ``\\^`` and ``\\\\``
          as requests for the literal character
        - MUST pass numeric character references such as ``&#36;`` through
          as the character they denote

    """

    def __call__(self, text: str) -> str:
        """Render Markdown text to HTML."""
        ...
