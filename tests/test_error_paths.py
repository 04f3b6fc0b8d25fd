"""Error-path tests.

Exercises exception construction and formatting, and the distinct
failure policies of the two scanners.
"""

import pytest

from pgscan import (
    AllocationError,
    BootstrapSyntaxError,
    ScanError,
    ScanLanguage,
    ScannerClosedError,
    tokenize,
)
from pgscan.tokens import StandbyTokenType

# =========================================================================
# Exception construction and formatting
# =========================================================================


class TestBootstrapSyntaxErrorFormatting:
    def test_message(self) -> None:
        err = BootstrapSyntaxError(7, "@")
        assert str(err) == 'syntax error at line 7: unexpected character "@"'
        assert err.lineno == 7
        assert err.char == "@"
        assert err.source_name is None

    def test_with_source_name(self) -> None:
        err = BootstrapSyntaxError(1, "!", source_name="postgres.bki")
        assert str(err) == 'postgres.bki: syntax error at line 1: unexpected character "!"'

    def test_is_scan_error(self) -> None:
        assert isinstance(BootstrapSyntaxError(1, "x"), ScanError)


class TestOtherErrors:
    def test_scanner_closed_message(self) -> None:
        err = ScannerClosedError("standby")
        assert str(err) == "standby scanner is closed"
        assert err.scanner_name == "standby"
        assert isinstance(err, ScanError)

    def test_allocation_error_hierarchy(self) -> None:
        assert issubclass(AllocationError, ScanError)


# =========================================================================
# Failure policies
# =========================================================================


class TestFailurePolicies:
    @pytest.mark.parametrize("char", ["@", "!", "%", ";", "[", '"', "\x00", "é"])
    def test_bootstrap_rejects(self, char: str) -> None:
        with pytest.raises(BootstrapSyntaxError) as exc_info:
            tokenize(f"open {char}")
        assert exc_info.value.char == char

    @pytest.mark.parametrize("char", ["@", "!", "%", ";", "[", "'", "\x00", "=", "\r"])
    def test_standby_degrades_to_junk(self, char: str) -> None:
        tokens = tokenize(f"s1 {char}", ScanLanguage.STANDBY)
        assert [t.type for t in tokens] == [
            StandbyTokenType.NAME,
            StandbyTokenType.JUNK,
            StandbyTokenType.EOF,
        ]
