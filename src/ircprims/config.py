"""ContextVar-based configuration for ircprims.

Rules are pure functions of their input; the only thing configuration
changes is what gets logged and how much of a rejected input is shown in
error messages.

Thread Safety:
    ContextVars are thread-local by design. Each thread (and each asyncio
    task) sees its own configuration, so no locks are needed.

Usage:
    from ircprims.config import PrimitiveConfig, config_context

    with config_context(PrimitiveConfig(trace=True)):
        letter(b"abc")  # logged at DEBUG under "ircprims.combinators"

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PrimitiveConfig:
    """Immutable primitive-layer configuration.

    Attributes:
        trace: Log every rule application at DEBUG level
        preview_limit: Maximum number of input bytes rendered in log lines
            and error messages

    """

    trace: bool = False
    preview_limit: int = 16

    def __post_init__(self) -> None:
        if self.preview_limit < 0:
            raise ValueError(f"preview_limit must be >= 0, got {self.preview_limit}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "PrimitiveConfig":
        """Create PrimitiveConfig from a dictionary.

        Unknown keys are silently ignored, so a larger application config
        can be passed through as-is.

        Example:
            >>> PrimitiveConfig.from_dict({"trace": True, "server": "irc"}).trace
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: PrimitiveConfig = PrimitiveConfig()

_primitive_config: ContextVar[PrimitiveConfig] = ContextVar(
    "primitive_config",
    default=_DEFAULT_CONFIG,
)


def get_config() -> PrimitiveConfig:
    """Get the configuration active in the current context."""
    return _primitive_config.get()


def set_config(config: PrimitiveConfig) -> None:
    """Set configuration for the current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _primitive_config.set(config)


def reset_config() -> None:
    """Reset the current context to the default configuration."""
    _primitive_config.set(_DEFAULT_CONFIG)


@contextmanager
def config_context(config: PrimitiveConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous configuration even if the body raises.
    """
    token = _primitive_config.set(config)
    try:
        yield
    finally:
        _primitive_config.reset(token)


__all__ = [
    "PrimitiveConfig",
    "config_context",
    "get_config",
    "reset_config",
    "set_config",
]
