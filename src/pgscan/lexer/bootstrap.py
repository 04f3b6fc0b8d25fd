"""Scanner for the bootstrap catalog-definition language.

The bootstrap language is read once, during catalog initialization, from
machine-generated input such as:

    # comment lines start with a hash
    create pg_proc 1255 bootstrap rowtype_oid 81
     (
     oid = oid ,
     proname = name
     )
    insert ( 1242 boolin 11 10 12 1 0 0 0 f f f t f i s 1 0 16 '2275' _null_ )
    close pg_proc

There is a single lexical mode. Any character no rule accepts aborts the
scan with BootstrapSyntaxError; there is no recovery.
"""

from __future__ import annotations

from typing import NoReturn

from pgscan.errors import BootstrapSyntaxError
from pgscan.lexer.charsets import BOOTSTRAP_ID_CHARS, BOOTSTRAP_WHITESPACE
from pgscan.lexer.core import Scanner
from pgscan.tokens import (
    BOOTSTRAP_KEYWORDS,
    BOOTSTRAP_NULL_LITERAL,
    BOOTSTRAP_PUNCTUATION,
    BootstrapTokenType,
    Token,
)
from pgscan.utils.logger import get_logger

logger = get_logger(__name__)


class BootstrapScanner(Scanner):
    """Single-mode scanner for bootstrap input.

    Identifiers and keywords share one pattern; the longest run of
    identifier characters is matched first and then looked up, so
    "openx" is an ID while "open" is the OPEN keyword.

    Usage:
            >>> scanner = BootstrapScanner("open pg_class\\n")
            >>> scanner.next_token()
        Token(OPEN, 'open', 1:0)
            >>> scanner.next_token()
        Token(ID, 'pg_class', 1:5)
            >>> scanner.next_token()
        Token(EOF, None, 2:14)

    """

    language = "bootstrap"
    eof_type = BootstrapTokenType.EOF
    tracks_lines = True

    __slots__ = ()

    @property
    def lineno(self) -> int:
        """Current line number (1-indexed)."""
        return self._ctx.lineno

    @property
    def line_count(self) -> int:
        """Number of newlines consumed so far."""
        return self._ctx.line_count

    def _scan(self) -> Token:
        ctx = self._ctx
        source = ctx.source
        source_len = ctx.source_len

        while ctx.pos < source_len:
            start = ctx.pos
            char = source[start]

            if char == "\n":
                ctx.pos += 1
                ctx.line_count += 1
                continue

            if char in BOOTSTRAP_WHITESPACE:
                ctx.pos += 1
                continue

            # Comment: '#' in the first column discards the rest of the line
            if char == "#" and (start == 0 or source[start - 1] == "\n"):
                line_end = source.find("\n", start)
                ctx.pos = line_end if line_end != -1 else source_len
                continue

            if char in BOOTSTRAP_ID_CHARS:
                return self._scan_word(start)

            if char == "'":
                return self._scan_quoted_string(start)

            punct = BOOTSTRAP_PUNCTUATION.get(char)
            if punct is not None:
                ctx.pos += 1
                return self._make_token(punct, None, start)

            self._fail(char)

        return self._make_eof()

    def _scan_word(self, start: int) -> Token:
        """Scan an identifier run and classify it as keyword, _null_ or ID."""
        ctx = self._ctx
        source = ctx.source
        end = start + 1
        while end < ctx.source_len and source[end] in BOOTSTRAP_ID_CHARS:
            end += 1
        text = source[start:end]
        ctx.pos = end

        if text == BOOTSTRAP_NULL_LITERAL:
            return self._make_token(BootstrapTokenType.NULLVAL, None, start)

        keyword = BOOTSTRAP_KEYWORDS.get(text)
        if keyword is not None:
            # Keyword payloads are the fixed spelling; not cloned
            return self._make_token(keyword, text, start)

        return self._make_token(BootstrapTokenType.ID, self._clone(text), start)

    def _scan_quoted_string(self, start: int) -> Token:
        """Scan a single-quoted string; '' inside stands for one quote.

        Longest match: when no closing quote follows, the string ends at the
        first quote of the last doubled pair, if any. Otherwise no rule
        matches the opening quote and it is reported as an illegal character.
        """
        ctx = self._ctx
        source = ctx.source
        pos = start + 1
        fallback = -1
        while True:
            close = source.find("'", pos)
            if close == -1:
                if fallback == -1:
                    self._fail("'")
                close = fallback
                break
            if close + 1 < ctx.source_len and source[close + 1] == "'":
                fallback = close
                pos = close + 2
                continue
            break

        body = source[start + 1 : close]
        ctx.pos = close + 1
        token = self._make_token(
            BootstrapTokenType.ID, self._clone(body.replace("''", "'")), start
        )
        ctx.line_count += body.count("\n")
        return token

    def _fail(self, char: str) -> NoReturn:
        """Abort the scan on an illegal character."""
        ctx = self._ctx
        if self._profile is not None:
            self._profile.record_error()
        logger.debug(
            "Illegal character %r at line %d (offset %d)", char, ctx.lineno, ctx.pos
        )
        raise BootstrapSyntaxError(ctx.lineno, char, ctx.source_name)
