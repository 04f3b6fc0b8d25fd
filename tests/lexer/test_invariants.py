"""Property-based tests for scanner invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from pgscan import (
    ArenaAllocator,
    BootstrapScanner,
    BootstrapSyntaxError,
    LexerMode,
    ScanLanguage,
    StandbyScanner,
    quote_identifier,
    tokenize,
)
from pgscan.tokens import BootstrapTokenType, StandbyTokenType

# Characters the bootstrap scanner always accepts ('#' and quotes excluded)
BOOTSTRAP_SAFE = "abcOIDNUL_-019 \t\r\n,=()"


class TestStandbyInvariants:
    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_always_ends_with_single_eof(self, source: str) -> None:
        """Standby scanning never raises and ends with exactly one EOF."""
        tokens = tokenize(source, ScanLanguage.STANDBY)

        assert tokens[-1].type == StandbyTokenType.EOF
        assert sum(1 for t in tokens if t.type == StandbyTokenType.EOF) == 1

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_accumulator_only_in_quoted_mode(self, source: str) -> None:
        scanner = StandbyScanner(source)
        for _ in scanner.tokenize():
            assert scanner.mode is LexerMode.NORMAL
            assert scanner.context.accumulator is None

    @given(st.text(alphabet='ab "\n*,()@', max_size=100))
    @settings(max_examples=100)
    def test_spans_are_ordered(self, source: str) -> None:
        tokens = tokenize(source, ScanLanguage.STANDBY)
        previous_end = 0
        for token in tokens:
            assert previous_end <= token.offset <= token.end_offset <= len(source)
            previous_end = token.end_offset

    @given(st.text(max_size=100))
    @settings(max_examples=200)
    def test_quote_round_trip(self, name: str) -> None:
        """Re-scanning a quoted rendering of any payload yields that payload."""
        tokens = tokenize(quote_identifier(name), ScanLanguage.STANDBY)

        assert [t.type for t in tokens] == [StandbyTokenType.NAME, StandbyTokenType.EOF]
        assert tokens[0].value == name

    @given(st.text(alphabet='a"', max_size=50))
    @settings(max_examples=100)
    def test_at_most_one_error_message(self, source: str) -> None:
        scanner = StandbyScanner(source)
        junk = 0
        for token in scanner.tokenize():
            if token.type == StandbyTokenType.JUNK:
                junk += 1
        if junk:
            assert scanner.error_message == "unterminated quoted identifier at end of input"
        else:
            assert scanner.error_message is None

    @given(st.text(max_size=200))
    @settings(max_examples=50)
    def test_arena_fully_released(self, source: str) -> None:
        with ArenaAllocator() as arena:
            tokenize(source, ScanLanguage.STANDBY, allocator=arena)
            assert arena.live_buffers == 0
            assert arena.live_contexts == 0


class TestBootstrapInvariants:
    @given(st.text(alphabet=BOOTSTRAP_SAFE, max_size=300))
    @settings(max_examples=200)
    def test_safe_alphabet_never_raises(self, source: str) -> None:
        tokens = tokenize(source)

        assert tokens[-1].type == BootstrapTokenType.EOF
        assert sum(1 for t in tokens if t.type == BootstrapTokenType.EOF) == 1

    @given(st.text(alphabet=BOOTSTRAP_SAFE + "#'", max_size=200))
    @settings(max_examples=200)
    def test_line_count_monotonic_and_exact(self, source: str) -> None:
        """line_count never decreases and equals newlines consumed at EOF."""
        scanner = BootstrapScanner(source)
        seen = 0
        try:
            for token in scanner.tokenize():
                assert scanner.line_count >= seen
                seen = scanner.line_count
                if token.type == BootstrapTokenType.EOF:
                    assert scanner.line_count == source.count("\n")
        except BootstrapSyntaxError as err:
            consumed = source[: scanner.context.pos].count("\n")
            assert err.lineno == consumed + 1
        finally:
            scanner.close()

    @given(st.text(alphabet=BOOTSTRAP_SAFE, max_size=200))
    @settings(max_examples=100)
    def test_token_lines_non_decreasing(self, source: str) -> None:
        lines = [t.lineno for t in tokenize(source)]
        assert lines == sorted(lines)
        assert all(line is not None and line >= 1 for line in lines)
