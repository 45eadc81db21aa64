"""Lexical primitives of the IRC message grammar.

Each rule maps a byte view to ``Match(remainder, consumed)`` or
``Failure(input, kind)``:

=========== ==================================================== ==========================
Rule        Grammar (RFC 1459, section 2.3.1)                    Failure kind
=========== ==================================================== ==========================
space       ``<SPACE> ::= ' ' { ' ' }``                          GREEDY_RUN_EMPTY
crlf        ``<crlf> ::= CR LF``                                 LITERAL_SEQUENCE_MISMATCH
one_char    any single byte                                      SINGLE_CHARACTER_MISMATCH
letter      ``'a' ... 'z' | 'A' ... 'Z'``                        SINGLE_CHARACTER_MISMATCH
number      ``'0' ... '9'``                                      SINGLE_CHARACTER_MISMATCH
special     ``'-' | '[' | ']' | '\\' | '`' | '^' | '{' | '}'``   SINGLE_CHARACTER_MISMATCH
nonwhite    any byte except SPACE, NUL, CR and LF                SINGLE_CHARACTER_MISMATCH
=========== ==================================================== ==========================

Larger productions are built by the caller. A nickname, for instance, is a
letter followed by any number of letters, digits or specials:

    >>> from ircprims.rules import letter, number, special
    >>> rest = letter(b"guest42 :hi").remainder
    >>> while result := letter(rest) or number(rest) or special(rest):
    ...     rest = result.remainder
    >>> bytes(rest)
    b' :hi'

"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from ircprims import charsets
from ircprims.combinators import satisfy, tag, take_while1
from ircprims.errors import UnknownRuleError
from ircprims.result import Rule

space = take_while1(
    charsets.is_space,
    name="space",
    doc="One or more SPACE (0x20) bytes, as many as are present.",
)

crlf = tag(
    charsets.CRLF,
    name="crlf",
    doc="The two-byte line terminator CR LF, in that order.",
)

one_char = satisfy(
    charsets.is_any,
    name="one_char",
    doc="Any single byte. Fails only on empty input.",
)

letter = satisfy(
    charsets.is_letter,
    name="letter",
    doc="One ASCII letter.",
)

number = satisfy(
    charsets.is_digit,
    name="number",
    doc="One ASCII decimal digit.",
)

special = satisfy(
    charsets.is_special,
    name="special",
    doc="One of the eight nickname specials: - [ ] \\ ` ^ { }",
)

nonwhite = satisfy(
    charsets.is_nonwhite,
    name="nonwhite",
    doc="One byte other than SPACE, NUL, CR or LF.",
)

RULES: Mapping[str, Rule] = MappingProxyType(
    {
        rule.__name__: rule
        for rule in (space, crlf, one_char, letter, number, special, nonwhite)
    }
)


def get_rule(name: str) -> Rule:
    """Look up a primitive by name.

    Raises:
        UnknownRuleError: If no primitive has that name.
    """
    try:
        return RULES[name]
    except KeyError:
        raise UnknownRuleError(name, list(RULES)) from None


__all__ = [
    "RULES",
    "crlf",
    "get_rule",
    "letter",
    "nonwhite",
    "number",
    "one_char",
    "space",
    "special",
]
