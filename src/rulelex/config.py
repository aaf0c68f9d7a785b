"""ContextVar-based engine configuration for rulelex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The engine reads the active config once per pass.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and pipelines in different threads never see each
    other's settings.

Usage:
    from rulelex.config import EngineConfig, engine_config_context

    with engine_config_context(EngineConfig(trace_replacements=True)):
        tokens = process_rules(rules, str_to_tokens(text))

    # Or pass it to the high-level helper
    tokens = lex(text, rules, config=EngineConfig(strict_contracts=True))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Immutable engine configuration.

    Attributes:
        trace_replacements: Log every decided window and its replacement
            at DEBUG level on the ``rulelex.engine`` logger
        strict_contracts: Check that every item a rule returns is a Token

    """

    trace_replacements: bool = False
    strict_contracts: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "EngineConfig":
        """Create EngineConfig from dictionary.

        Only includes keys that are valid EngineConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = EngineConfig.from_dict({
            ...     "strict_contracts": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_contracts
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: EngineConfig = EngineConfig()

_engine_config: ContextVar[EngineConfig] = ContextVar(
    "engine_config",
    default=_DEFAULT_CONFIG,
)


def get_engine_config() -> EngineConfig:
    """Get current engine configuration (thread-local)."""
    return _engine_config.get()


def set_engine_config(config: EngineConfig) -> None:
    """Set engine configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _engine_config.set(config)


def reset_engine_config() -> None:
    """Reset to the default configuration."""
    _engine_config.set(_DEFAULT_CONFIG)


@contextmanager
def engine_config_context(config: EngineConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with engine_config_context(EngineConfig(strict_contracts=True)):
        ...     tokens = process_rule(my_rule, tokens)
        >>> # Automatically reset to previous config

    """
    previous = _engine_config.get()
    _engine_config.set(config)
    try:
        yield
    finally:
        _engine_config.set(previous)


__all__ = [
    "EngineConfig",
    "get_engine_config",
    "set_engine_config",
    "reset_engine_config",
    "engine_config_context",
]
