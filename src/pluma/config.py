"""ContextVar-based configuration for Pluma.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The lexer reads its default buffer size from here and the HTML generator
reads its escaping and attribute formatting options.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from pluma.config import PlumaConfig, config_context

    with config_context(PlumaConfig(attribute_separator="")):
        html = render(node)

    # Or set it explicitly
    set_config(PlumaConfig(buffer_size=512))
    try:
        tokens = list(Lexer(stream).tokenize())
    finally:
        reset_config()

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

DEFAULT_BUFFER_SIZE = 4096


@dataclass(frozen=True, slots=True)
class PlumaConfig:
    """Immutable Pluma configuration.

    Note: source_file is intentionally excluded. It is per-stream state and
    stays on the Lexer instance.

    Attributes:
        buffer_size: Size in bytes of each lexer's read buffer
        escape_html: HTML-escape word text and attribute values
        attribute_separator: String placed between rendered attributes.
            Use "" for the historical run-together form (``id="a"class="b"``).

    """

    buffer_size: int = DEFAULT_BUFFER_SIZE
    escape_html: bool = True
    attribute_separator: str = " "

    def __post_init__(self) -> None:
        if self.buffer_size < 1:
            raise ValueError(f"buffer_size must be positive, got {self.buffer_size}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "PlumaConfig":
        """Create PlumaConfig from dictionary.

        Only includes keys that are valid PlumaConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = PlumaConfig.from_dict({
            ...     "buffer_size": 1024,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.buffer_size
            1024

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: PlumaConfig = PlumaConfig()

_config: ContextVar[PlumaConfig] = ContextVar(
    "pluma_config",
    default=_DEFAULT_CONFIG,
)


def get_config() -> PlumaConfig:
    """Get current configuration (thread-local)."""
    return _config.get()


def set_config(config: PlumaConfig) -> None:
    """Set configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _config.set(config)


def reset_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _config.set(_DEFAULT_CONFIG)


@contextmanager
def config_context(config: PlumaConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Example:
        >>> with config_context(PlumaConfig(escape_html=False)):
        ...     get_config().escape_html
        False
        >>> get_config().escape_html
        True

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _config.get()
    _config.set(config)
    try:
        yield
    finally:
        _config.set(previous)


__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "PlumaConfig",
    "config_context",
    "get_config",
    "reset_config",
    "set_config",
]
