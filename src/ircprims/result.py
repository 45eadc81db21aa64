"""Rule results: Match, Failure and the closed ErrorKind taxonomy.

A rule returns exactly one of two values:

- ``Match(remainder, consumed)`` when it recognized a non-empty prefix.
  ``bytes(consumed) + bytes(remainder)`` always equals the input.
- ``Failure(rejected_input, kind)`` otherwise. ``rejected_input`` is the
  input exactly as received, so a caller can try another rule on it.

Matches are truthy and failures are falsy, which keeps alternation short:

    >>> from ircprims import letter, number
    >>> result = letter(b"1a") or number(b"1a")
    >>> bytes(result.consumed)
    b'1'

Thread Safety:
    Both result types are immutable. They hold views, not copies, so they
    are only as stable as the buffer underneath.

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import NamedTuple, NoReturn, TypeAlias

from ircprims.errors import RuleMismatchError
from ircprims.view import ByteLike, ByteView


class ErrorKind(Enum):
    """Why a rule rejected its input."""

    # Next byte failed a one-byte classifier, or there was no next byte
    SINGLE_CHARACTER_MISMATCH = auto()
    # A greedy run matched zero bytes
    GREEDY_RUN_EMPTY = auto()
    # A fixed literal was not found verbatim (including a short input)
    LITERAL_SEQUENCE_MISMATCH = auto()


class Match(NamedTuple):
    """Successful application: what is left, and what was eaten."""

    remainder: ByteView
    consumed: ByteView

    def unwrap(self, rule_name: str | None = None) -> Match:
        return self


@dataclass(frozen=True, slots=True)
class Failure:
    """Rejected application carrying the untouched input.

    Attributes:
        rejected_input: The view the rule was given, never advanced
        kind: Classification of the rejection

    """

    rejected_input: ByteView
    kind: ErrorKind

    def __bool__(self) -> bool:
        return False

    def unwrap(self, rule_name: str | None = None) -> NoReturn:
        """Raise ``RuleMismatchError`` for this failure."""
        raise RuleMismatchError(self, rule_name)


Result: TypeAlias = Match | Failure

Rule: TypeAlias = Callable[[ByteLike], Result]


__all__ = ["ErrorKind", "Failure", "Match", "Result", "Rule"]
