"""Scanner for standby-name lists.

Standby-name lists configure which standbys take part in synchronous
replication and how many must confirm a commit:

    FIRST 2 (s1, "Standby ""B"" two", s3)
    ANY 1 (*)
    s1, s2

The input is user-authored configuration, so malformed input never raises:
unknown characters and unterminated quoted identifiers come back as JUNK
tokens, and the first error message of the operation is kept on the
scanner for the caller to report.

Lexical modes:
- NORMAL: keywords, names, numbers, punctuation
- QUOTED_IDENTIFIER: body of a double-quoted name, entered on '"'
"""

from __future__ import annotations

from pgscan.lexer.charsets import (
    DIGITS,
    STANDBY_WHITESPACE,
    ascii_fold,
    is_standby_ident_cont,
    is_standby_ident_start,
)
from pgscan.lexer.core import Scanner
from pgscan.tokens import (
    STANDBY_KEYWORDS,
    STANDBY_PUNCTUATION,
    StandbyTokenType,
    Token,
)
from pgscan.utils.logger import get_logger

logger = get_logger(__name__)

# Payload of the wildcard standby name
WILDCARD_NAME = "*"

UNTERMINATED_QUOTED_IDENTIFIER = "unterminated quoted identifier"


def quote_identifier(name: str) -> str:
    """Render name as a double-quoted identifier.

    Embedded double quotes are doubled, so scanning the result yields a
    NAME token whose payload is name.

    Example:
        >>> quote_identifier('a"b')
        '"a""b"'

    """
    return '"' + name.replace('"', '""') + '"'


class StandbyScanner(Scanner):
    """Two-mode scanner for standby-name lists.

    Keywords ANY and FIRST match in any letter case. Line numbers are not
    tracked; diagnostics quote the offending text instead.

    Usage:
            >>> scanner = StandbyScanner('any 1 ("x')
            >>> [t.type.name for t in scanner.tokenize()]
            ['ANY', 'NUM', 'LPAREN', 'JUNK', 'EOF']
            >>> scanner.error_message
            'unterminated quoted identifier at end of input'

    """

    language = "standby"
    eof_type = StandbyTokenType.EOF
    tracks_lines = False

    __slots__ = ()

    def record_error(self, message: str) -> bool:
        """Record an error against the most recently matched text.

        Only the first error of the operation is kept; later calls are
        no-ops. A consuming grammar calls this for its own syntax errors.

        Args:
            message: Error description, e.g. "syntax error"

        Returns:
            True if the message was stored.
        """
        stored = self._ctx.record_error(message)
        if stored:
            if self._profile is not None:
                self._profile.record_error()
            logger.debug("Recorded standby scan error: %s", self._ctx.error_message)
        return stored

    def _scan(self) -> Token:
        """Match one token starting in NORMAL mode.

        A quoted identifier is consumed within the call that opens it, so
        the scanner is back in NORMAL mode whenever _scan() returns.
        """
        ctx = self._ctx
        source = ctx.source
        source_len = ctx.source_len

        while ctx.pos < source_len:
            start = ctx.pos
            char = source[start]

            if char in STANDBY_WHITESPACE:
                ctx.pos += 1
                continue

            if char == '"':
                ctx.pos += 1
                ctx.last_text = char
                ctx.enter_quoted()
                logger.debug("Entering quoted identifier at offset %d", start)
                return self._scan_quoted_identifier(start)

            if is_standby_ident_start(char):
                end = start + 1
                while end < source_len and is_standby_ident_cont(source[end]):
                    end += 1
                ctx.pos = end
                text = source[start:end]
                keyword = STANDBY_KEYWORDS.get(ascii_fold(text))
                if keyword is not None:
                    return self._make_token(keyword, None, start)
                return self._make_token(StandbyTokenType.NAME, self._clone(text), start)

            if char in DIGITS:
                end = start + 1
                while end < source_len and source[end] in DIGITS:
                    end += 1
                ctx.pos = end
                return self._make_token(
                    StandbyTokenType.NUM, self._clone(source[start:end]), start
                )

            ctx.pos += 1

            if char == "*":
                return self._make_token(StandbyTokenType.NAME, WILDCARD_NAME, start)

            punct = STANDBY_PUNCTUATION.get(char)
            if punct is not None:
                return self._make_token(punct, None, start)

            return self._make_token(StandbyTokenType.JUNK, None, start)

        return self._make_eof()

    def _scan_quoted_identifier(self, start: int) -> Token:
        """Consume the body of a quoted identifier up to its closing quote.

        Args:
            start: Offset where the token begins (the opening quote)
        """
        ctx = self._ctx
        source = ctx.source
        source_len = ctx.source_len
        buffer = ctx.accumulator
        assert buffer is not None

        while ctx.pos < source_len:
            quote = source.find('"', ctx.pos)
            if quote == -1:
                ctx.last_text = source[ctx.pos :]
                buffer.append(ctx.last_text)
                ctx.pos = source_len
                break
            if quote > ctx.pos:
                ctx.last_text = source[ctx.pos : quote]
                buffer.append(ctx.last_text)
            if quote + 1 < source_len and source[quote + 1] == '"':
                ctx.last_text = '""'
                buffer.append('"')
                ctx.pos = quote + 2
                continue

            ctx.pos = quote + 1
            name = self._clone(buffer.build())
            ctx.leave_quoted()
            logger.debug("Leaving quoted identifier at offset %d", ctx.pos)
            token = self._make_token(StandbyTokenType.NAME, name, start)
            ctx.last_text = '"'
            return token

        # End of input inside the quotes
        ctx.last_text = ""
        self.record_error(UNTERMINATED_QUOTED_IDENTIFIER)
        ctx.leave_quoted()
        return Token(
            type=StandbyTokenType.JUNK,
            value=None,
            offset=start,
            end_offset=ctx.pos,
        )
