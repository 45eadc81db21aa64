"""Byte classes of the IRC message grammar (RFC 1459, section 2.3.1).

All sets are frozensets of byte values (ints) for:
- O(1) membership testing on ``view[0]``
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Multi-byte encodings are never decoded; a byte >= 0x80 is only ever
``nonwhite``.

Usage:
    from ircprims.charsets import SPECIALS

    if view[0] in SPECIALS:  # O(1) lookup
        ...
"""

import string

SPACE: int = 0x20
NUL: int = 0x00
CR: int = 0x0D
LF: int = 0x0A

# <crlf> ::= CR LF
CRLF: bytes = bytes((CR, LF))

# <letter> ::= 'a' ... 'z' | 'A' ... 'Z'
LETTERS: frozenset[int] = frozenset(string.ascii_letters.encode("ascii"))

# <number> ::= '0' ... '9'
DIGITS: frozenset[int] = frozenset(string.digits.encode("ascii"))

# <special> ::= '-' | '[' | ']' | '\' | '`' | '^' | '{' | '}'
SPECIALS: frozenset[int] = frozenset(b"-[]\\`^{}")

# Bytes excluded from <nonwhite>
WHITE: frozenset[int] = frozenset((SPACE, NUL, CR, LF))


def is_any(byte: int) -> bool:
    return True


def is_space(byte: int) -> bool:
    return byte == SPACE


def is_letter(byte: int) -> bool:
    return byte in LETTERS


def is_digit(byte: int) -> bool:
    return byte in DIGITS


def is_special(byte: int) -> bool:
    return byte in SPECIALS


def is_nonwhite(byte: int) -> bool:
    """Any 8-bit code except SPACE, NUL, CR and LF."""
    return byte not in WHITE
