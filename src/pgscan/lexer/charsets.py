"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from pgscan.lexer.charsets import BOOTSTRAP_ID_CHARS

    if char in BOOTSTRAP_ID_CHARS:  # O(1) lookup
        ...
"""

ASCII_LETTERS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
DIGITS: frozenset[str] = frozenset("0123456789")

# Bootstrap: identifiers are runs of letters, digits, hyphen, underscore
BOOTSTRAP_ID_CHARS: frozenset[str] = ASCII_LETTERS | DIGITS | frozenset("-_")

# Bootstrap: skipped without a token (newline is handled separately)
BOOTSTRAP_WHITESPACE: frozenset[str] = frozenset(" \t\r")

# Standby: skipped without a token, no line tracking
STANDBY_WHITESPACE: frozenset[str] = frozenset(" \t\n\f\v")

# Standby identifier start; code points >= 0x80 also qualify
STANDBY_IDENT_START: frozenset[str] = ASCII_LETTERS | frozenset("_")

# Standby identifier continuation; code points >= 0x80 also qualify
STANDBY_IDENT_CONT: frozenset[str] = STANDBY_IDENT_START | DIGITS | frozenset("$")

# ASCII-only case folding; leaves non-ASCII letters untouched
ASCII_FOLD = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def is_standby_ident_start(char: str) -> bool:
    """Check if char may begin a bare standby name."""
    return char in STANDBY_IDENT_START or ord(char) >= 0x80


def is_standby_ident_cont(char: str) -> bool:
    """Check if char may continue a bare standby name."""
    return char in STANDBY_IDENT_CONT or ord(char) >= 0x80


def ascii_fold(text: str) -> str:
    """Lowercase ASCII letters only.

    Unlike str.lower(), never maps a non-ASCII character onto an ASCII
    keyword spelling.

    """
    return text.translate(ASCII_FOLD)
