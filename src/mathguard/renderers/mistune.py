"""mistune backend for MathMarkdown.

Installed with ``pip install mathguard[render]``.

Usage:
    >>> from mathguard import MathMarkdown
    >>> from mathguard.renderers.mistune import create_renderer
    >>> md = MathMarkdown("$x_1 * y_1$", renderer=create_renderer())
    >>> md.to_html()
    '<p>$x_1 * y_1$</p>\\n'

"""

from __future__ import annotations

from typing import cast

from mathguard.errors import RendererError, RendererUnavailableError
from mathguard.renderers.protocol import MarkdownRenderer
from mathguard.utils.logger import get_logger

logger = get_logger(__name__)

NAME = "mistune"


def create_renderer(
    *,
    escape: bool = False,
    plugins: list[str] | None = None,
    hard_wrap: bool = False,
) -> MarkdownRenderer:
    """Build a mistune HTML renderer.

    Args:
        escape: Escape raw HTML in the source
        plugins: mistune plugin names (e.g., ["table", "superscript"])
        hard_wrap: Turn single newlines into ``<br />``

    Returns:
        Callable rendering Markdown text to HTML

    Raises:
        RendererUnavailableError: mistune is not installed
        RendererError: mistune rejected the options
    """
    try:
        import mistune
    except ImportError as err:
        raise RendererUnavailableError(NAME, extra="render") from err

    try:
        markdown = mistune.create_markdown(
            escape=escape,
            renderer="html",
            plugins=plugins,
            hard_wrap=hard_wrap,
        )
    except Exception as err:
        raise RendererError(
            f"invalid options (plugins={plugins!r}): {err}", renderer=NAME
        ) from err

    logger.debug("Created mistune %s renderer with plugins %r", mistune.__version__, plugins)

    def render(text: str) -> str:
        return cast(str, markdown(text))

    return render
