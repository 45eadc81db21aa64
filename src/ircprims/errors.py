"""Exception classes for ircprims.

Rule outcomes are values (see ``ircprims.result``), so nothing here is
raised by a rule itself. These exceptions cover the opt-in raising helpers
and misuse of the public API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ircprims.config import get_config
from ircprims.utils.text import preview

if TYPE_CHECKING:
    from ircprims.result import ErrorKind, Failure


class IrcPrimsError(Exception):
    """Base exception for all ircprims errors.
    
    Subclass this for specific error categories.
    """

    pass


class RuleMismatchError(IrcPrimsError):
    """A rule rejected its input where a match was required.
    
    Raised by ``ircprims.expect()`` and ``Failure.unwrap()``. The original
    ``Failure`` is kept so callers can still inspect the untouched input.
    """

    def __init__(self, failure: Failure, rule_name: str | None = None) -> None:
        """Initialize from the failure a rule returned.
        
        Args:
            failure: The failure value returned by the rule
            rule_name: Name of the rejecting rule (optional)
        """
        self.failure = failure
        self.rule_name = rule_name

        prefix = f"Rule '{rule_name}': " if rule_name else ""
        shown = preview(failure.rejected_input, get_config().preview_limit)
        super().__init__(f"{prefix}{failure.kind.name.lower()} at {shown}")

    @property
    def kind(self) -> ErrorKind:
        """The ``ErrorKind`` of the wrapped failure."""
        return self.failure.kind


class UnknownRuleError(IrcPrimsError, KeyError):
    """Lookup of a rule name that is not registered."""

    def __init__(self, name: str, known: list[str] | None = None) -> None:
        """Initialize unknown rule error.
        
        Args:
            name: The requested rule name
            known: Registered names, listed in the message when given
        """
        self.name = name
        message = f"Unknown rule '{name}'"
        if known:
            message += f" (known: {', '.join(sorted(known))})"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])
