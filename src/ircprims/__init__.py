"""
ircprims — Lexical primitives for the IRC message grammar

Stateless, zero-copy recognizers for the smallest units of an IRC message:
SPACE runs, the CRLF terminator, and the LETTER, NUMBER, SPECIAL and
NONWHITE byte classes. Each rule takes a byte view and returns either
``Match(remainder, consumed)`` or ``Failure(rejected_input, kind)``; the
caller composes them into nicknames, channels, commands and messages.

Quick Start:
    >>> from ircprims import letter, space, crlf
    >>> result = letter(b"ab1-")
    >>> bytes(result.consumed), bytes(result.remainder)
    (b'a', b'b1-')

    >>> space(b"abcd").kind
    <ErrorKind.GREEDY_RUN_EMPTY: 2>

    >>> # Raise instead of branching
    >>> from ircprims import expect
    >>> bytes(expect(crlf, b"\\r\\nNEXT").remainder)
    b'NEXT'

Installation:
    pip install ircprims            # zero runtime dependencies
    pip install ircprims[test]      # + pytest and hypothesis
"""

from ircprims.combinators import satisfy, tag, take_while1
from ircprims.config import (
    PrimitiveConfig,
    config_context,
    get_config,
    reset_config,
    set_config,
)
from ircprims.errors import IrcPrimsError, RuleMismatchError, UnknownRuleError
from ircprims.result import ErrorKind, Failure, Match, Result, Rule
from ircprims.rules import (
    RULES,
    crlf,
    get_rule,
    letter,
    nonwhite,
    number,
    one_char,
    space,
    special,
)
from ircprims.view import ByteLike, ByteView, as_view, view_offset

__version__ = "0.1.0"


def apply(rule: Rule, data: ByteLike) -> Result:
    """Apply ``rule`` to ``data`` after wrapping it in a byte view.

    Args:
        rule: Any primitive or combinator-built rule
        data: bytes, bytearray or memoryview

    Returns:
        The rule's ``Match`` or ``Failure``

    Raises:
        TypeError: If ``data`` is not bytes-like
    """
    return rule(as_view(data))


def expect(rule: Rule, data: ByteLike) -> Match:
    """Apply ``rule`` and return its ``Match``, raising on failure.

    Useful where a rejection means the whole message is malformed and
    there is no alternative to try.

    Raises:
        RuleMismatchError: If the rule rejected the input. The error keeps
            the ``Failure`` for inspection.

    Example:
        >>> expect(number, b"x")
        Traceback (most recent call last):
            ...
        ircprims.errors.RuleMismatchError: Rule 'number': single_character_mismatch at b'x'
    """
    return apply(rule, data).unwrap(getattr(rule, "__name__", None))


__all__ = [
    # Views
    "ByteLike",
    "ByteView",
    "as_view",
    "view_offset",
    # Results
    "ErrorKind",
    "Failure",
    "Match",
    "Result",
    "Rule",
    # Primitives
    "RULES",
    "crlf",
    "get_rule",
    "letter",
    "nonwhite",
    "number",
    "one_char",
    "space",
    "special",
    # Combinators
    "satisfy",
    "tag",
    "take_while1",
    # Entry points
    "apply",
    "expect",
    # Configuration
    "PrimitiveConfig",
    "config_context",
    "get_config",
    "reset_config",
    "set_config",
    # Errors
    "IrcPrimsError",
    "RuleMismatchError",
    "UnknownRuleError",
    "__version__",
]
