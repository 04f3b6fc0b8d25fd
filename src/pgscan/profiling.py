"""pgscan ScanAccumulator — opt-in profiling for scans.

This module provides accumulated metrics while scanning:
- Number of scans started
- Tokens produced (EOF excluded)
- Errors (fatal bootstrap errors and recorded standby messages)
- Source length

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from pgscan import tokenize, ScanLanguage
    from pgscan.profiling import profiled_scan

    with profiled_scan() as metrics:
        tokens = tokenize("ANY 2 (a, b, c)", ScanLanguage.STANDBY)

    print(metrics.summary())
    # {"total_ms": 0.1, "scans": 1, "tokens": 9, "errors": 0, "source_length": 15}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics during scanning.

    Attributes:
        start_time: Profiling start timestamp.
        scans: Number of scanners created.
        tokens: Number of non-EOF tokens produced.
        errors: Number of errors raised or recorded.
        source_length: Total length of all scanned sources.

    """

    start_time: float = field(default_factory=perf_counter)
    scans: int = 0
    tokens: int = 0
    errors: int = 0
    source_length: int = 0

    def record_scan(self, source_length: int) -> None:
        self.scans += 1
        self.source_length += source_length

    def record_token(self) -> None:
        self.tokens += 1

    def record_error(self) -> None:
        self.errors += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "scans": self.scans,
            "tokens": self.tokens,
            "errors": self.errors,
            "source_length": self.source_length,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block. Scanners
    pick up the accumulator when they are created.

    Yields:
        ScanAccumulator populated by scanners created inside the block.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
