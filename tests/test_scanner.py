"""Tests for the brace scanner."""

from __future__ import annotations

import pytest

from codechunk.parsing.scanner import ScanState, find_block_end


class TestFindBlockEnd:
    """Test find_block_end."""

    def test_simple_block(self) -> None:
        source = "f() { return 1; } tail"

        assert find_block_end(source, 0) == source.index("}")

    def test_nested_blocks(self) -> None:
        source = "a { b { c } d } e }"

        assert find_block_end(source, 0) == source.index(" e") - 1

    def test_starts_at_offset(self) -> None:
        source = "x { } y { z }"

        assert find_block_end(source, source.index("y")) == len(source) - 1

    def test_no_block_returns_none(self) -> None:
        assert find_block_end("const f = () => 1;", 0) is None

    def test_unclosed_block_returns_none(self) -> None:
        assert find_block_end("function f() {\n  if (x) {\n", 0) is None

    def test_closing_brace_before_opening_ignored(self) -> None:
        source = "} f() { }"

        assert find_block_end(source, 0) == len(source) - 1

    @pytest.mark.parametrize(
        "body",
        [
            '"}"',
            "'}'",
            "`}`",
            '"{"',
            '"\\"}"',
            "'\\'}'",
            '"\\\\"',
        ],
    )
    def test_braces_in_strings_ignored(self, body: str) -> None:
        source = "{ x = " + body + "; }"

        assert find_block_end(source, 0) == len(source) - 1

    def test_unterminated_string_consumes_rest(self) -> None:
        assert find_block_end('{ x = "oops }', 0) is None

    def test_quote_before_block_opens_string(self) -> None:
        """String state is tracked from the start position, not from the first brace."""
        source = 'f(a = "{") { }'

        assert find_block_end(source, 0) == len(source) - 1


def test_states() -> None:
    assert {state.name for state in ScanState} == {"CODE", "IN_STRING", "ESCAPED"}
