"""Reentrant scanners for the bootstrap and standby-name languages.

Architecture:
lexer/
├── __init__.py          # Re-exports scanners, LexerMode, ScanContext
├── core.py              # Scanner base (pull interface, teardown, token construction)
├── context.py           # ScanContext: all per-scan mutable state
├── modes.py             # LexerMode enum
├── charsets.py          # Character classes and ASCII folding
├── bootstrap.py         # BootstrapScanner (single mode, fatal errors)
└── standby.py           # StandbyScanner (normal + quoted identifier, JUNK errors)

Usage:
    >>> from pgscan.lexer import BootstrapScanner
    >>> with BootstrapScanner("insert ( 1 'it''s' _null_ )") as scanner:
    ...     for token in scanner.tokenize():
    ...         print(token)
Token(INSERT_TUPLE, 'insert', 1:0)
Token(LPAREN, None, 1:7)
Token(ID, '1', 1:9)
Token(ID, "it's", 1:11)
Token(NULLVAL, None, 1:19)
Token(RPAREN, None, 1:26)
Token(EOF, None, 1:27)

"""

from pgscan.lexer.bootstrap import BootstrapScanner
from pgscan.lexer.context import ScanContext
from pgscan.lexer.core import Scanner
from pgscan.lexer.modes import LexerMode
from pgscan.lexer.standby import StandbyScanner, quote_identifier

__all__ = [
    "BootstrapScanner",
    "LexerMode",
    "ScanContext",
    "Scanner",
    "StandbyScanner",
    "quote_identifier",
]
