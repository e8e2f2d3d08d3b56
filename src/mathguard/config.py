"""ContextVar-based preprocessing configuration for mathguard.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Callers may pass a config explicitly; otherwise the preprocessor reads the
one active in the current context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from mathguard.config import PreprocessConfig, preprocess_config_context

    with preprocess_config_context(PreprocessConfig(block_joiner="\\n")):
        text = preprocess(source)

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class PreprocessConfig:
    """Immutable preprocessing configuration.

    The defaults reproduce the behavior Markdown engines with a
    ``preserve_math`` extension have always had; change them only with an
    explicit compatibility decision.

    Attributes:
        preserve_math: Run the math-preserving pass at all. When False the
            source is handed through untouched.
        block_joiner: Separator used when a closed multi-line ``$$`` block is
            collapsed onto one output line.
        dollar_entity: Replacement for an escaped dollar (``\\$``) found
            outside math, so it can never be read as a delimiter again.
        warn_unterminated: Emit a diagnostic for continuation lines that lack
            the trailing ``\\\\`` marker.

    """

    preserve_math: bool = True
    block_joiner: str = " "
    dollar_entity: str = "&#36;"
    warn_unterminated: bool = True

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "PreprocessConfig":
        """Create PreprocessConfig from a mapping.

        Unknown keys are ignored so configs can be lifted straight out of a
        larger settings file.

        Example:
            >>> PreprocessConfig.from_dict({"block_joiner": "\\n", "toc": True})
            PreprocessConfig(preserve_math=True, block_joiner='\\n', ...)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: PreprocessConfig = PreprocessConfig()

_preprocess_config: ContextVar[PreprocessConfig] = ContextVar(
    "preprocess_config",
    default=_DEFAULT_CONFIG,
)


def get_preprocess_config() -> PreprocessConfig:
    """Get the preprocessing configuration active in this context."""
    return _preprocess_config.get()


def set_preprocess_config(config: PreprocessConfig) -> None:
    """Set preprocessing configuration for the current context.

    Args:
        config: PreprocessConfig instance to use for this context.

    """
    _preprocess_config.set(config)


def reset_preprocess_config() -> None:
    """Reset to the module-level default configuration."""
    _preprocess_config.set(_DEFAULT_CONFIG)


@contextmanager
def preprocess_config_context(config: PreprocessConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with preprocess_config_context(PreprocessConfig(preserve_math=False)):
        ...     get_preprocess_config().preserve_math
        False

    """
    previous = _preprocess_config.get()
    _preprocess_config.set(config)
    try:
        yield
    finally:
        _preprocess_config.set(previous)


__all__ = [
    "PreprocessConfig",
    "get_preprocess_config",
    "set_preprocess_config",
    "reset_preprocess_config",
    "preprocess_config_context",
]
