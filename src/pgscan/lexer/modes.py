"""Lexer operating modes.

Only the standby-name scanner switches modes; the bootstrap scanner stays
in NORMAL for its whole life.
"""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.

    - NORMAL: Between tokens, all ordinary rules active
    - QUOTED_IDENTIFIER: Inside a double-quoted identifier; only the
      doubled-quote, non-quote run and closing-quote rules apply

    """

    NORMAL = auto()
    QUOTED_IDENTIFIER = auto()
