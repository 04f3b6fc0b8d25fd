"""
pgscan — Reentrant scanners for embedded database mini-languages

Two independent tokenizers:

- the bootstrap catalog-definition language read during initdb-style
  catalog initialization (single mode, fatal on illegal input), and
- the standby-name language of synchronous replication settings
  (quoted-identifier mode, case-insensitive ANY/FIRST, JUNK on bad input).

Every scan owns its own state, so any number of scans may run at once on
separate threads. Memory goes through a pluggable Allocator.

Quick Start:
    >>> from pgscan import ScanLanguage, tokenize
    >>> [t.type.name for t in tokenize("close pg_class")]
    ['XCLOSE', 'ID', 'EOF']
    >>> [t.value for t in tokenize('FIRST 2 (s1, "s""2")', ScanLanguage.STANDBY)][3:6]
    ['s1', None, 's"2']

    >>> # Pull interface
    >>> from pgscan import begin_scan, next_token, end_scan
    >>> handle = begin_scan("ANY 1 (*)", ScanLanguage.STANDBY)
    >>> next_token(handle)
    Token(ANY, None, 0)
    >>> end_scan(handle)

Installation:
    pip install pgscan              # zero runtime dependencies
"""

from pgscan.allocator import Allocator, ArenaAllocator, HeapAllocator
from pgscan.buffer import TextBuffer
from pgscan.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from pgscan.errors import (
    AllocationError,
    BootstrapSyntaxError,
    ScanError,
    ScannerClosedError,
)
from pgscan.lexer import (
    BootstrapScanner,
    LexerMode,
    ScanContext,
    Scanner,
    StandbyScanner,
    quote_identifier,
)
from pgscan.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from pgscan.scan import ScanLanguage, begin_scan, end_scan, next_token, tokenize
from pgscan.tokens import BootstrapTokenType, StandbyTokenType, Token

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "ScanLanguage",
    "begin_scan",
    "next_token",
    "end_scan",
    "tokenize",
    # Scanners
    "Scanner",
    "BootstrapScanner",
    "StandbyScanner",
    "ScanContext",
    "LexerMode",
    "quote_identifier",
    # Tokens
    "Token",
    "BootstrapTokenType",
    "StandbyTokenType",
    # Allocation boundary
    "Allocator",
    "ArenaAllocator",
    "HeapAllocator",
    "TextBuffer",
    # Configuration (ContextVar-based)
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Profiling
    "ScanAccumulator",
    "profiled_scan",
    "get_scan_accumulator",
    # Errors
    "ScanError",
    "BootstrapSyntaxError",
    "AllocationError",
    "ScannerClosedError",
]
