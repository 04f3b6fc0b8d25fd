"""Exception classes for pgscan.

Provides standardized exceptions for error handling throughout pgscan.
Only the bootstrap scanner raises on malformed input; the standby scanner
reports problems inline as JUNK tokens instead.
"""

from __future__ import annotations


class ScanError(Exception):
    """Base exception for all pgscan errors.

    Subclass this for specific error categories.
    """

    pass


class BootstrapSyntaxError(ScanError):
    """Illegal character in bootstrap input.

    Raised when the bootstrap scanner meets a character no rule accepts.
    The scan is abandoned; there is no recovery.
    """

    def __init__(
        self,
        lineno: int,
        char: str,
        source_name: str | None = None,
    ) -> None:
        """Initialize syntax error with its location.

        Args:
            lineno: Line number where the character was found (1-indexed)
            char: The offending character
            source_name: Name of the input (optional, e.g. "postgres.bki")
        """
        self.lineno = lineno
        self.char = char
        self.source_name = source_name

        prefix = f"{source_name}: " if source_name else ""
        super().__init__(f'{prefix}syntax error at line {lineno}: unexpected character "{char}"')


class AllocationError(ScanError):
    """Error at the allocation boundary.

    Raised when a released buffer is written to, or when an arena that has
    been closed is asked for more memory.
    """

    pass


class ScannerClosedError(ScanError):
    """Raised when a token is requested from a scanner after teardown."""

    def __init__(self, scanner_name: str) -> None:
        self.scanner_name = scanner_name
        super().__init__(f"{scanner_name} scanner is closed")
