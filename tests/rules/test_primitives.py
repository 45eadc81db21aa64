"""Example-based tests for the seven IRC grammar primitives.

Each rule is checked on empty input, on input it fully consumes, and on
input with trailing bytes. Property-based coverage lives in
test_invariants.py.
"""

import pytest

from ircprims import (
    ErrorKind,
    Failure,
    Match,
    crlf,
    letter,
    nonwhite,
    number,
    one_char,
    space,
    special,
)

# =========================================================================
# space
# =========================================================================


class TestSpace:
    """Greedy run of SPACE bytes."""

    def test_empty(self) -> None:
        assert space(b"") == Failure(b"", ErrorKind.GREEDY_RUN_EMPTY)

    def test_characters(self) -> None:
        assert space(b"abcd") == Failure(b"abcd", ErrorKind.GREEDY_RUN_EMPTY)

    def test_spaces_only(self) -> None:
        assert space(b"    ") == (b"", b"    ")

    def test_spaces_and_chars(self) -> None:
        result = space(b"    abcd")
        assert bytes(result.consumed) == b"    "
        assert bytes(result.remainder) == b"abcd"

    def test_single_space(self) -> None:
        assert space(b" x") == (b"x", b" ")

    def test_stops_at_tab(self) -> None:
        """Only 0x20 counts; other whitespace ends the run."""
        assert space(b"  \t ") == (b"\t ", b"  ")

    def test_leading_tab_fails(self) -> None:
        assert not space(b"\t")


# =========================================================================
# crlf
# =========================================================================


class TestCrlf:
    """Fixed two-byte line terminator."""

    def test_empty(self) -> None:
        assert crlf(b"") == Failure(b"", ErrorKind.LITERAL_SEQUENCE_MISMATCH)

    def test_alone(self) -> None:
        assert crlf(b"\r\n") == (b"", b"\r\n")

    def test_with_chars(self) -> None:
        result = crlf(b"\r\nabcd")
        assert bytes(result.consumed) == b"\r\n"
        assert bytes(result.remainder) == b"abcd"

    @pytest.mark.parametrize("data", [b"\r", b"\n", b"\n\r", b"\r\r\n", b"a\r\n", b" \r\n"])
    def test_rejects(self, data: bytes) -> None:
        result = crlf(data)
        assert result.kind is ErrorKind.LITERAL_SEQUENCE_MISMATCH
        assert bytes(result.rejected_input) == data

    def test_consumes_only_one_terminator(self) -> None:
        assert crlf(b"\r\n\r\n") == (b"\r\n", b"\r\n")


# =========================================================================
# one_char
# =========================================================================


class TestOneChar:
    """Unconditional single-byte consumer."""

    def test_empty(self) -> None:
        assert one_char(b"") == Failure(b"", ErrorKind.SINGLE_CHARACTER_MISMATCH)

    def test_alone(self) -> None:
        assert one_char(b"a") == (b"", b"a")

    def test_with_chars(self) -> None:
        assert one_char(b"ab1-") == (b"b1-", b"a")

    @pytest.mark.parametrize("byte", [0x00, 0x0A, 0x0D, 0x20, 0x7F, 0xFF])
    def test_accepts_any_byte(self, byte: int) -> None:
        data = bytes([byte, 0x41])
        assert one_char(data) == (b"A", bytes([byte]))


# =========================================================================
# letter
# =========================================================================


class TestLetter:
    """ASCII alphabetic byte."""

    def test_empty(self) -> None:
        assert letter(b"") == Failure(b"", ErrorKind.SINGLE_CHARACTER_MISMATCH)

    def test_alone(self) -> None:
        assert letter(b"a") == (b"", b"a")

    def test_with_num(self) -> None:
        result = letter(b"ab1-")
        assert bytes(result.consumed) == b"a"
        assert bytes(result.remainder) == b"b1-"
        assert letter(b"1") == Failure(b"1", ErrorKind.SINGLE_CHARACTER_MISMATCH)

    @pytest.mark.parametrize("data", [b"a", b"z", b"A", b"Z", b"m"])
    def test_bounds(self, data: bytes) -> None:
        assert letter(data)

    @pytest.mark.parametrize("data", [b"@", b"[", b"`", b"{", b"\xc3\xa9", b"_"])
    def test_neighbours_rejected(self, data: bytes) -> None:
        """Bytes adjacent to the letter ranges and non-ASCII bytes fail."""
        assert not letter(data)


# =========================================================================
# number
# =========================================================================


class TestNumber:
    """ASCII decimal digit."""

    def test_empty(self) -> None:
        assert number(b"") == Failure(b"", ErrorKind.SINGLE_CHARACTER_MISMATCH)

    def test_alone(self) -> None:
        assert number(b"1") == (b"", b"1")

    def test_with_char(self) -> None:
        assert number(b"12a-") == (b"2a-", b"1")
        assert number(b"a") == Failure(b"a", ErrorKind.SINGLE_CHARACTER_MISMATCH)

    @pytest.mark.parametrize("data", [b"/", b":", b"\xd9\xa3"])
    def test_neighbours_rejected(self, data: bytes) -> None:
        assert not number(data)


# =========================================================================
# special
# =========================================================================


class TestSpecial:
    """One of the eight nickname special bytes."""

    def test_empty(self) -> None:
        assert special(b"") == Failure(b"", ErrorKind.SINGLE_CHARACTER_MISMATCH)

    def test_alone(self) -> None:
        assert special(b"-") == (b"", b"-")

    def test_with_char(self) -> None:
        result = special(b"[2a-")
        assert bytes(result.consumed) == b"["
        assert bytes(result.remainder) == b"2a-"
        assert special(b"a") == Failure(b"a", ErrorKind.SINGLE_CHARACTER_MISMATCH)

    @pytest.mark.parametrize("char", list(b"-[]\\`^{}"))
    def test_each_special(self, char: int) -> None:
        assert special(bytes([char])) == (b"", bytes([char]))

    @pytest.mark.parametrize("data", [b"_", b"|", b"~", b"(", b")", b"*"])
    def test_lookalikes_rejected(self, data: bytes) -> None:
        assert not special(data)


# =========================================================================
# nonwhite
# =========================================================================


class TestNonwhite:
    """Any byte except SPACE, NUL, CR and LF."""

    def test_empty(self) -> None:
        assert nonwhite(b"") == Failure(b"", ErrorKind.SINGLE_CHARACTER_MISMATCH)

    def test_alone(self) -> None:
        assert nonwhite(b"a") == (b"", b"a")

    def test_with_char(self) -> None:
        assert nonwhite(b"\t2a-") == (b"2a-", b"\t")
        assert nonwhite(b" ") == Failure(b" ", ErrorKind.SINGLE_CHARACTER_MISMATCH)

    @pytest.mark.parametrize("data", [b" ", b"\x00", b"\r", b"\n"])
    def test_white_rejected(self, data: bytes) -> None:
        result = nonwhite(data + b"x")
        assert result.kind is ErrorKind.SINGLE_CHARACTER_MISMATCH
        assert bytes(result.rejected_input) == data + b"x"

    def test_high_byte_accepted(self) -> None:
        """Bytes are classified one at a time; UTF-8 lead bytes are nonwhite."""
        assert nonwhite("é".encode()) == (b"\xa9", b"\xc3")


# =========================================================================
# Result shape
# =========================================================================


class TestResultShape:
    """Matches unpack as (remainder, consumed); failures are falsy."""

    def test_match_unpacks(self) -> None:
        remainder, consumed = letter(b"ab")
        assert bytes(remainder) == b"b"
        assert bytes(consumed) == b"a"

    def test_match_type(self) -> None:
        assert isinstance(number(b"7"), Match)

    def test_failure_is_falsy(self) -> None:
        assert not number(b"x")
        assert isinstance(number(b"x"), Failure)

    def test_alternation_with_or(self) -> None:
        result = letter(b"-x") or number(b"-x") or special(b"-x")
        assert bytes(result.consumed) == b"-"

    def test_rule_names(self) -> None:
        names = [r.__name__ for r in (space, crlf, one_char, letter, number, special, nonwhite)]
        assert names == ["space", "crlf", "one_char", "letter", "number", "special", "nonwhite"]

    def test_rules_have_docstrings(self) -> None:
        for rule in (space, crlf, one_char, letter, number, special, nonwhite):
            assert rule.__doc__
