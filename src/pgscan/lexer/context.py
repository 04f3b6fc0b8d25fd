"""Per-scan mutable state.

A ScanContext holds everything a scanner mutates while it runs: cursor,
line counter, lexical mode, the quoted-identifier accumulator and the
first recorded error. Nothing here is shared between scans, which is what
makes scanners reentrant.

Thread Safety:
A ScanContext belongs to exactly one scanner and is driven by one thread.
The source string is borrowed read-only.

"""

from __future__ import annotations

from pgscan.allocator import Allocator
from pgscan.buffer import TextBuffer
from pgscan.lexer.modes import LexerMode


class ScanContext:
    """Mutable state of one scan.

    Invariants:
        - line_count never decreases and grows by one per newline consumed
        - accumulator is None unless mode is QUOTED_IDENTIFIER

    Attributes:
        source: Input text (borrowed, never modified)
        pos: Cursor position in source
        line_count: Newlines consumed so far
        mode: Current lexical mode
        accumulator: Buffer for the quoted identifier being read
        error_message: First error recorded during this scan
        last_text: Text of the most recently matched lexeme ("" at end of input)
        allocator: Allocation boundary that owns this context, its buffers
            and payloads
        source_name: Optional input name for error messages
        closed: Set once the context has been released

    """

    __slots__ = (
        "accumulator",
        "allocator",
        "closed",
        "error_message",
        "last_text",
        "line_count",
        "mode",
        "pos",
        "source",
        "source_len",
        "source_name",
    )

    def __init__(
        self,
        source: str,
        allocator: Allocator,
        source_name: str | None = None,
    ) -> None:
        self.source = source
        self.source_len = len(source)
        self.pos = 0
        self.line_count = 0
        self.mode = LexerMode.NORMAL
        self.accumulator: TextBuffer | None = None
        self.error_message: str | None = None
        self.last_text = ""
        self.allocator = allocator
        self.source_name = source_name
        self.closed = False
        allocator.acquire_context(self)

    @property
    def lineno(self) -> int:
        """Current line number (1-indexed)."""
        return self.line_count + 1

    def enter_quoted(self) -> TextBuffer:
        """Switch to QUOTED_IDENTIFIER mode with a fresh accumulator."""
        buffer = self.allocator.allocate()
        self.accumulator = buffer
        self.mode = LexerMode.QUOTED_IDENTIFIER
        return buffer

    def leave_quoted(self) -> None:
        """Return to NORMAL mode, releasing the accumulator."""
        if self.accumulator is not None:
            self.allocator.release(self.accumulator)
            self.accumulator = None
        self.mode = LexerMode.NORMAL

    def record_error(self, message: str) -> bool:
        """Record message unless an earlier error is already stored.

        Formats the message against last_text:
        '<message> at or near "<text>"', or '<message> at end of input'.

        Returns:
            True if the message was stored, False if dropped.
        """
        if self.error_message is not None:
            return False
        if self.last_text:
            self.error_message = f'{message} at or near "{self.last_text}"'
        else:
            self.error_message = f"{message} at end of input"
        return True

    def release(self) -> None:
        """Release everything the context owns, then the context itself.

        Idempotent.
        """
        if self.closed:
            return
        self.leave_quoted()
        self.closed = True
        self.allocator.release_context(self)
