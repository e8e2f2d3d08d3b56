"""Exception classes for mathguard.

The preprocessor itself never raises: malformed math is handled by
best-effort structural rules and reported through diagnostics. These
exceptions belong to the rendering facade that hands preprocessed text
to a Markdown engine.
"""

from __future__ import annotations


class MathGuardError(Exception):
    """Base exception for all mathguard errors."""

    pass


class RendererError(MathGuardError):
    """Error while handing preprocessed text to a Markdown renderer.

    Raised when the downstream engine is missing, misconfigured, or fails.
    """

    def __init__(self, message: str, renderer: str | None = None) -> None:
        """Initialize renderer error.

        Args:
            message: Error description
            renderer: Name of the renderer involved (optional)
        """
        self.renderer = renderer
        prefix = f"Renderer '{renderer}': " if renderer else ""
        super().__init__(f"{prefix}{message}")


class RendererNotConfiguredError(RendererError):
    """Raised when HTML output is requested without a renderer."""

    def __init__(self) -> None:
        super().__init__(
            "no Markdown renderer configured; pass renderer= to MathMarkdown"
        )


class RendererUnavailableError(RendererError):
    """Raised when an optional renderer backend is not installed."""

    def __init__(self, renderer: str, extra: str) -> None:
        """Initialize with the missing backend and the extra that provides it.

        Args:
            renderer: Backend name (e.g., "mistune")
            extra: Package extra to install (e.g., "render")
        """
        self.extra = extra
        super().__init__(
            f"not installed. Run: pip install mathguard[{extra}]",
            renderer=renderer,
        )
