"""Shared scanner machinery.

Scanner owns one ScanContext and implements the pull interface common to
both languages: next_token(), tokenize(), close() and context-manager
teardown. Subclasses supply _scan(), which matches exactly one token.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

from pgscan.allocator import DEFAULT_ALLOCATOR, Allocator
from pgscan.config import get_scan_config
from pgscan.errors import ScannerClosedError
from pgscan.lexer.context import ScanContext
from pgscan.lexer.modes import LexerMode
from pgscan.profiling import ScanAccumulator, get_scan_accumulator
from pgscan.tokens import Token
from pgscan.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner:
    """Base class for pull scanners.

    Usage:
            >>> from pgscan.lexer import StandbyScanner
            >>> with StandbyScanner("FIRST 2 (a, b)") as scanner:
            ...     for token in scanner.tokenize():
            ...         print(token)
        Token(FIRST, None, 0)
        Token(NUM, '2', 6)
        Token(LPAREN, None, 8)
        Token(NAME, 'a', 9)
        Token(COMMA, None, 10)
        Token(NAME, 'b', 12)
        Token(RPAREN, None, 13)
        Token(EOF, None, 14)

    """

    # Set by subclasses
    language: str = ""
    eof_type: Enum
    tracks_lines: bool = False

    __slots__ = ("_ctx", "_profile", "_trace")

    def __init__(
        self,
        source: str,
        *,
        allocator: Allocator | None = None,
        source_name: str | None = None,
    ) -> None:
        """Initialize scanner over source text.

        Args:
            source: Complete input text
            allocator: Allocation boundary (defaults to the active ScanConfig's,
                then to the shared HeapAllocator)
            source_name: Optional input name for error messages
        """
        config = get_scan_config()
        self._ctx = ScanContext(
            source,
            allocator or config.allocator or DEFAULT_ALLOCATOR,
            source_name if source_name is not None else config.source_name,
        )
        self._trace = config.trace_tokens
        self._profile: ScanAccumulator | None = get_scan_accumulator()
        if self._profile is not None:
            self._profile.record_scan(len(source))
        logger.debug("Starting %s scan of %d chars", self.language, len(source))

    def _scan(self) -> Token:
        """Match one token at the cursor. Implemented by subclasses."""
        raise NotImplementedError

    def next_token(self) -> Token:
        """Return the next token; EOF once the input is exhausted.

        Raises:
            ScannerClosedError: If called after close()
        """
        if self._ctx.closed:
            raise ScannerClosedError(self.language)
        token = self._scan()
        if token.type is not self.eof_type and self._profile is not None:
            self._profile.record_token()
        if self._trace:
            logger.debug("%s token %r", self.language, token)
        return token

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the remaining input into a token stream.

        Yields:
            Token objects one at a time, ending with exactly one EOF token
        """
        while True:
            token = self.next_token()
            yield token
            if token.type is self.eof_type:
                return

    def close(self) -> None:
        """Release the scan context. Safe to call more than once."""
        ctx = self._ctx
        if ctx.closed:
            return
        ctx.release()
        logger.debug(
            "Finished %s scan at offset %d/%d", self.language, ctx.pos, ctx.source_len
        )

    def __enter__(self) -> Scanner:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # =========================================================================
    # State accessors
    # =========================================================================

    @property
    def context(self) -> ScanContext:
        return self._ctx

    @property
    def mode(self) -> LexerMode:
        return self._ctx.mode

    @property
    def error_message(self) -> str | None:
        """First error recorded during this scan, if any."""
        return self._ctx.error_message

    @property
    def closed(self) -> bool:
        return self._ctx.closed

    # =========================================================================
    # Token construction
    # =========================================================================

    def _make_token(self, token_type: Enum, value: str | None, start_pos: int) -> Token:
        """Create a Token spanning start_pos to the cursor.

        Also records the matched text as the lexeme used in diagnostics.
        """
        ctx = self._ctx
        ctx.last_text = ctx.source[start_pos : ctx.pos]
        return Token(
            type=token_type,
            value=value,
            offset=start_pos,
            end_offset=ctx.pos,
            lineno=ctx.lineno if self.tracks_lines else None,
        )

    def _make_eof(self) -> Token:
        """Create the end-of-input token at the cursor."""
        ctx = self._ctx
        ctx.last_text = ""
        return Token(
            type=self.eof_type,
            value=None,
            offset=ctx.pos,
            end_offset=ctx.pos,
            lineno=ctx.lineno if self.tracks_lines else None,
        )

    def _clone(self, text: str) -> str:
        """Copy a payload through the allocation boundary."""
        return self._ctx.allocator.clone(text)
