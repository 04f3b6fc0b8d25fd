"""Tests for the public entry points: begin_scan, next_token, end_scan, tokenize."""

from __future__ import annotations

import importlib

import pytest

import pgscan
from pgscan import (
    BootstrapScanner,
    BootstrapSyntaxError,
    ScanLanguage,
    ScannerClosedError,
    StandbyScanner,
    begin_scan,
    end_scan,
    next_token,
    tokenize,
)
from pgscan.tokens import BootstrapTokenType, StandbyTokenType


class TestBeginScan:
    def test_default_language_is_bootstrap(self) -> None:
        handle = begin_scan("open t")
        assert isinstance(handle, BootstrapScanner)
        end_scan(handle)

    def test_standby_language(self) -> None:
        handle = begin_scan("a", ScanLanguage.STANDBY)
        assert isinstance(handle, StandbyScanner)
        end_scan(handle)

    def test_language_by_name(self) -> None:
        handle = begin_scan("a", "standby")
        assert isinstance(handle, StandbyScanner)
        end_scan(handle)

    def test_unknown_language(self) -> None:
        with pytest.raises(ValueError):
            begin_scan("a", "sql")


class TestPullInterface:
    def test_next_token_until_eof(self) -> None:
        handle = begin_scan("build indices")
        kinds = []
        try:
            while True:
                token = next_token(handle)
                kinds.append(token.type)
                if token.type is BootstrapTokenType.EOF:
                    break
        finally:
            end_scan(handle)
        assert kinds == [BootstrapTokenType.XBUILD, BootstrapTokenType.INDICES, BootstrapTokenType.EOF]

    def test_end_scan_returns_recorded_message(self) -> None:
        handle = begin_scan('ANY 1 ("s1', ScanLanguage.STANDBY)
        while next_token(handle).type is not StandbyTokenType.EOF:
            pass
        assert end_scan(handle) == "unterminated quoted identifier at end of input"

    def test_end_scan_returns_none_without_error(self) -> None:
        handle = begin_scan("s1, s2", ScanLanguage.STANDBY)
        assert end_scan(handle) is None

    def test_end_scan_after_fatal_error(self) -> None:
        handle = begin_scan("open ?")
        next_token(handle)
        with pytest.raises(BootstrapSyntaxError):
            next_token(handle)
        assert end_scan(handle) is None
        assert handle.closed

    def test_next_token_after_end_scan(self) -> None:
        handle = begin_scan("a", ScanLanguage.STANDBY)
        end_scan(handle)
        with pytest.raises(ScannerClosedError):
            next_token(handle)

    def test_end_scan_twice(self) -> None:
        handle = begin_scan("a")
        end_scan(handle)
        end_scan(handle)


class TestTokenize:
    def test_includes_eof(self) -> None:
        tokens = tokenize("declare unique index")
        assert [t.type for t in tokens] == [
            BootstrapTokenType.XDECLARE,
            BootstrapTokenType.UNIQUE,
            BootstrapTokenType.INDEX,
            BootstrapTokenType.EOF,
        ]

    def test_propagates_bootstrap_error(self) -> None:
        with pytest.raises(BootstrapSyntaxError):
            tokenize("declare %")

    def test_token_repr(self) -> None:
        assert repr(tokenize("toast")[0]) == "Token(XTOAST, 'toast', 1:0)"
        assert repr(tokenize("3", "standby")[0]) == "Token(NUM, '3', 0)"

    def test_long_value_repr_truncated(self) -> None:
        token = tokenize("a" * 30)[0]
        assert "..." in repr(token)

    def test_tokens_are_immutable(self) -> None:
        token = tokenize("a")[0]
        with pytest.raises(AttributeError):
            token.value = "b"  # type: ignore[misc]


class TestPackage:
    def test_version(self) -> None:
        assert pgscan.__version__ == "0.1.0"

    def test_all_exports_resolve(self) -> None:
        for name in pgscan.__all__:
            assert hasattr(pgscan, name), name

    @pytest.mark.parametrize(
        "module",
        [
            "pgscan.allocator",
            "pgscan.buffer",
            "pgscan.config",
            "pgscan.lexer.bootstrap",
            "pgscan.lexer.context",
            "pgscan.lexer.core",
            "pgscan.lexer.standby",
            "pgscan.profiling",
            "pgscan.scan",
        ],
    )
    def test_modules_import(self, module: str) -> None:
        assert importlib.import_module(module).__doc__

    def test_standby_docstring_examples_scan_cleanly(self) -> None:
        standby = importlib.import_module("pgscan.lexer.standby")
        examples = [
            line.strip()
            for line in standby.__doc__.splitlines()
            if line.startswith("    ") and not line.strip().startswith("-")
        ]
        assert examples
        for example in examples:
            types = [t.type for t in tokenize(example, ScanLanguage.STANDBY)]
            assert StandbyTokenType.JUNK not in types, example
