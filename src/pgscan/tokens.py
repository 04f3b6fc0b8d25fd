"""Token and token type definitions for the pgscan scanners.

Each scanner produces Token objects drawn from its own closed enumeration:
BootstrapTokenType for the bootstrap language, StandbyTokenType for
standby-name lists. Both enumerations end with EOF, the end-of-input
signal returned once the source is exhausted.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
Token types are enums (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class BootstrapTokenType(Enum):
    """Token types produced by the bootstrap scanner."""

    # Commands
    OPEN = auto()  # open
    XCLOSE = auto()  # close
    XCREATE = auto()  # create
    INSERT_TUPLE = auto()  # insert
    XDECLARE = auto()  # declare
    XBUILD = auto()  # build

    # Relation options
    OBJ_ID = auto()  # OID
    XBOOTSTRAP = auto()  # bootstrap
    XSHARED_RELATION = auto()  # shared_relation
    XROWTYPE_OID = auto()  # rowtype_oid

    # Index declarations
    INDICES = auto()  # indices
    UNIQUE = auto()  # unique
    INDEX = auto()  # index
    ON = auto()  # on
    USING = auto()  # using
    XTOAST = auto()  # toast

    # Column constraints
    XFORCE = auto()  # FORCE
    XNOT = auto()  # NOT
    XNULL = auto()  # NULL

    # Values
    NULLVAL = auto()  # _null_
    ID = auto()  # identifier or 'quoted string'

    # Punctuation
    COMMA = auto()  # ,
    EQUALS = auto()  # =
    LPAREN = auto()  # (
    RPAREN = auto()  # )

    EOF = auto()


class StandbyTokenType(Enum):
    """Token types produced by the standby-name scanner.

    Punctuation members carry their source character as value and are
    passed to the grammar as raw single-character tokens.

    """

    ANY = "ANY"
    FIRST = "FIRST"
    NAME = "NAME"
    NUM = "NUM"
    JUNK = "JUNK"

    COMMA = ","
    LPAREN = "("
    RPAREN = ")"

    EOF = "EOF"

    @property
    def char(self) -> str | None:
        """Source character of a raw punctuation token, else None."""
        return self.value if len(self.value) == 1 else None


# Bootstrap keywords are case-sensitive: spelling -> token type
BOOTSTRAP_KEYWORDS: dict[str, BootstrapTokenType] = {
    "open": BootstrapTokenType.OPEN,
    "close": BootstrapTokenType.XCLOSE,
    "create": BootstrapTokenType.XCREATE,
    "OID": BootstrapTokenType.OBJ_ID,
    "bootstrap": BootstrapTokenType.XBOOTSTRAP,
    "shared_relation": BootstrapTokenType.XSHARED_RELATION,
    "rowtype_oid": BootstrapTokenType.XROWTYPE_OID,
    "insert": BootstrapTokenType.INSERT_TUPLE,
    "declare": BootstrapTokenType.XDECLARE,
    "build": BootstrapTokenType.XBUILD,
    "indices": BootstrapTokenType.INDICES,
    "unique": BootstrapTokenType.UNIQUE,
    "index": BootstrapTokenType.INDEX,
    "on": BootstrapTokenType.ON,
    "using": BootstrapTokenType.USING,
    "toast": BootstrapTokenType.XTOAST,
    "FORCE": BootstrapTokenType.XFORCE,
    "NOT": BootstrapTokenType.XNOT,
    "NULL": BootstrapTokenType.XNULL,
}

# Reserved null-value literal (no payload, never an identifier)
BOOTSTRAP_NULL_LITERAL = "_null_"

BOOTSTRAP_PUNCTUATION: dict[str, BootstrapTokenType] = {
    ",": BootstrapTokenType.COMMA,
    "=": BootstrapTokenType.EQUALS,
    "(": BootstrapTokenType.LPAREN,
    ")": BootstrapTokenType.RPAREN,
}

# Standby keywords, stored ASCII-lowercased: folded spelling -> token type
STANDBY_KEYWORDS: dict[str, StandbyTokenType] = {
    "any": StandbyTokenType.ANY,
    "first": StandbyTokenType.FIRST,
}

STANDBY_PUNCTUATION: dict[str, StandbyTokenType] = {
    ",": StandbyTokenType.COMMA,
    "(": StandbyTokenType.LPAREN,
    ")": StandbyTokenType.RPAREN,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by a scanner.

    Attributes:
        type: Token type (BootstrapTokenType or StandbyTokenType)
        value: None, a constant keyword spelling, or a decoded string
            cloned through the scan's allocator
        offset: Absolute start position in source
        end_offset: Absolute end position in source
        lineno: Line of the token start (1-indexed); None for scanners
            that do not track lines

    """

    type: BootstrapTokenType | StandbyTokenType
    value: str | None
    offset: int
    end_offset: int
    lineno: int | None = None

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if val is not None and len(val) > 20:
            val = val[:17] + "..."
        where = f"{self.lineno}:{self.offset}" if self.lineno is not None else str(self.offset)
        return f"Token({self.type.name}, {val!r}, {where})"
