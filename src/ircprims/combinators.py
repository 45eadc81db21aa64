"""Generic rule builders.

Three factories cover every primitive in the IRC grammar:

- ``satisfy(predicate)``: consume one byte for which ``predicate`` holds
- ``take_while1(predicate)``: consume the longest non-empty run of such bytes
- ``tag(literal)``: consume an exact byte sequence

None of them know anything about IRC; ``ircprims.rules`` supplies the
predicates and literals. Every built rule accepts any bytes-like input,
returns views over that input, and never raises for non-matching data.

Tracing:
    When ``PrimitiveConfig.trace`` is set, each application is logged at
    DEBUG on the ``ircprims.combinators`` logger. With tracing off the only
    cost is one ContextVar read per call.

"""

from __future__ import annotations

from collections.abc import Callable

from ircprims.config import get_config
from ircprims.result import ErrorKind, Failure, Match, Result, Rule
from ircprims.utils.logger import get_logger
from ircprims.utils.text import preview
from ircprims.view import ByteLike, ByteView, as_view

logger = get_logger(__name__)

BytePredicate = Callable[[int], bool]


def _trace(rule_name: str, view: ByteView, result: Result) -> None:
    config = get_config()
    if not config.trace:
        return
    shown = preview(view, config.preview_limit)
    if result:
        logger.debug("%s matched %d byte(s) at %s", rule_name, len(result.consumed), shown)
    else:
        logger.debug("%s failed (%s) at %s", rule_name, result.kind.name, shown)


def _named(rule: Rule, name: str, doc: str | None) -> Rule:
    rule.__name__ = rule.__qualname__ = name
    if doc is not None:
        rule.__doc__ = doc
    return rule


def satisfy(predicate: BytePredicate, name: str | None = None, doc: str | None = None) -> Rule:
    """Build a rule consuming exactly one byte that satisfies ``predicate``.

    Fails with ``SINGLE_CHARACTER_MISMATCH`` on empty input or when the
    first byte is rejected. Never looks past the first byte.

    Args:
        predicate: Called with the first byte as an int
        name: Rule name for logs and errors (defaults to the predicate's)
        doc: Docstring for the built rule

    Example:
        >>> vowel = satisfy(lambda b: b in b"aeiou", name="vowel")
        >>> bytes(vowel(b"abc").consumed)
        b'a'
    """
    rule_name = name or getattr(predicate, "__name__", "satisfy")

    def rule(data: ByteLike) -> Result:
        view = as_view(data)
        if view and predicate(view[0]):
            result: Result = Match(view[1:], view[:1])
        else:
            result = Failure(view, ErrorKind.SINGLE_CHARACTER_MISMATCH)
        _trace(rule_name, view, result)
        return result

    return _named(rule, rule_name, doc)


def take_while1(
    predicate: BytePredicate, name: str | None = None, doc: str | None = None
) -> Rule:
    """Build a greedy rule consuming the longest non-empty run of bytes
    satisfying ``predicate``.

    Fails with ``GREEDY_RUN_EMPTY`` when the run would be empty. The
    remainder never starts with a byte satisfying ``predicate``.
    """
    rule_name = name or getattr(predicate, "__name__", "take_while1")

    def rule(data: ByteLike) -> Result:
        view = as_view(data)
        end = 0
        size = len(view)
        while end < size and predicate(view[end]):
            end += 1
        if end:
            result: Result = Match(view[end:], view[:end])
        else:
            result = Failure(view, ErrorKind.GREEDY_RUN_EMPTY)
        _trace(rule_name, view, result)
        return result

    return _named(rule, rule_name, doc)


def tag(literal: ByteLike, name: str | None = None, doc: str | None = None) -> Rule:
    """Build a rule matching ``literal`` verbatim at the start of the input.

    Fails with ``LITERAL_SEQUENCE_MISMATCH`` on any mismatch, including an
    input shorter than the literal.

    Raises:
        TypeError: If ``literal`` is not bytes-like.
        ValueError: If ``literal`` is empty; such a rule would match
            without consuming anything.
    """
    expected = bytes(as_view(literal))
    if not expected:
        raise ValueError("tag() needs a non-empty literal")
    width = len(expected)
    rule_name = name or f"tag({expected!r})"

    def rule(data: ByteLike) -> Result:
        view = as_view(data)
        if view[:width] == expected:
            result: Result = Match(view[width:], view[:width])
        else:
            result = Failure(view, ErrorKind.LITERAL_SEQUENCE_MISMATCH)
        _trace(rule_name, view, result)
        return result

    return _named(rule, rule_name, doc)


__all__ = ["BytePredicate", "satisfy", "tag", "take_while1"]
