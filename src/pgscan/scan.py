"""Entry points: begin_scan, next_token, end_scan.

A handle returned by begin_scan() is the scanner itself; it owns every
resource of the scan until end_scan() releases them.

Usage:
    >>> from pgscan.scan import ScanLanguage, begin_scan, end_scan, next_token
    >>> handle = begin_scan("s1, @", ScanLanguage.STANDBY)
    >>> try:
    ...     token = next_token(handle)
    ...     while token.type.name != "EOF":
    ...         if token.type.name == "JUNK":
    ...             handle.record_error("syntax error")
    ...         token = next_token(handle)
    ... finally:
    ...     message = end_scan(handle)
    >>> message
    'syntax error at or near "@"'

"""

from __future__ import annotations

from enum import Enum

from pgscan.allocator import Allocator
from pgscan.lexer.bootstrap import BootstrapScanner
from pgscan.lexer.core import Scanner
from pgscan.lexer.standby import StandbyScanner
from pgscan.tokens import Token


class ScanLanguage(Enum):
    """Languages with a scanner."""

    BOOTSTRAP = "bootstrap"
    STANDBY = "standby"


_SCANNERS: dict[ScanLanguage, type[Scanner]] = {
    ScanLanguage.BOOTSTRAP: BootstrapScanner,
    ScanLanguage.STANDBY: StandbyScanner,
}


def begin_scan(
    source: str,
    language: ScanLanguage | str = ScanLanguage.BOOTSTRAP,
    *,
    allocator: Allocator | None = None,
    source_name: str | None = None,
) -> Scanner:
    """Create a scanner handle over source.

    Args:
        source: Complete input text
        language: Which language to scan (enum member or its value)
        allocator: Allocation boundary for the scan
        source_name: Optional input name for error messages

    Returns:
        A BootstrapScanner or StandbyScanner

    Raises:
        ValueError: If language is not a known language name
    """
    scanner_cls = _SCANNERS[ScanLanguage(language)]
    return scanner_cls(source, allocator=allocator, source_name=source_name)


def next_token(handle: Scanner) -> Token:
    """Return the next token from handle.

    Raises:
        BootstrapSyntaxError: On an illegal character in bootstrap input
        ScannerClosedError: If the handle has been ended
    """
    return handle.next_token()


def end_scan(handle: Scanner) -> str | None:
    """Release everything owned by handle.

    Safe after a fatal error and safe to repeat.

    Returns:
        The first error message recorded during the scan, if any
    """
    handle.close()
    return handle.error_message


def tokenize(
    source: str,
    language: ScanLanguage | str = ScanLanguage.BOOTSTRAP,
    *,
    allocator: Allocator | None = None,
    source_name: str | None = None,
) -> list[Token]:
    """Scan source completely.

    The scanner is released before returning, including when a bootstrap
    syntax error propagates.

    Returns:
        All tokens, ending with EOF
    """
    scanner = begin_scan(source, language, allocator=allocator, source_name=source_name)
    try:
        return list(scanner.tokenize())
    finally:
        end_scan(scanner)


__all__ = [
    "ScanLanguage",
    "begin_scan",
    "end_scan",
    "next_token",
    "tokenize",
]
