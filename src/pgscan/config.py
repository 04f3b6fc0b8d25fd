"""ContextVar-based scan configuration for pgscan.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Scanners read the active config once, at construction; explicit scanner
arguments take precedence over it.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from pgscan.config import ScanConfig, scan_config_context
    from pgscan.allocator import ArenaAllocator

    arena = ArenaAllocator("initdb")
    with scan_config_context(ScanConfig(allocator=arena, source_name="postgres.bki")):
        tokens = tokenize(bki_source)

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pgscan.allocator import Allocator


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        allocator: Allocation boundary for buffers and payloads
            (None means the shared HeapAllocator)
        source_name: Name of the input, used in error messages
        trace_tokens: Log every produced token at DEBUG level

    """

    allocator: Allocator | None = None
    source_name: str | None = None
    trace_tokens: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({"trace_tokens": True, "color": "red"})
            >>> config.trace_tokens
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to the default configuration singleton."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Properly restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(source_name="postgres.bki")):
        ...     get_scan_config().source_name
        'postgres.bki'

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
]
