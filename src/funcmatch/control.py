"""Matchers for Option, Try and Either subjects.

Inner-matcher arguments take a matcher or a plain value (compared with
equal_to). Leaving them out matches any contained value:

>>> from hamcrest import assert_that, greater_than
>>> from funcmatch.testing import Right, Some
>>> assert_that(Some(42), is_defined(greater_than(40)))
>>> assert_that(Right("ok"), is_right())
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from funcmatch._control import (
    DefinedOption,
    EmptyOption,
    FailedTry,
    FailedTryWith,
    LeftEither,
    RightEither,
    SuccessfulTry,
)
from funcmatch._matcher import MatcherError, inner_matcher

if TYPE_CHECKING:
    from hamcrest.core.matcher import Matcher

    from funcmatch._types import Either, Option, Try


def is_defined[T](matcher: Matcher[T] | T | None = None) -> Matcher[Option[T]]:
    """Matches an Option that holds a value (accepted by ``matcher``, if given).

    To match an Option holding ``None`` pass ``hamcrest.none()``.
    """
    return DefinedOption(inner_matcher(matcher))


def is_empty() -> Matcher[Option[Any]]:
    """Matches an Option that holds no value."""
    return EmptyOption()


def is_success[T](matcher: Matcher[T] | T | None = None) -> Matcher[Try[T]]:
    """Matches a successful Try (whose value is accepted by ``matcher``, if given)."""
    return SuccessfulTry(inner_matcher(matcher))


def is_failure() -> Matcher[Try[Any]]:
    """Matches a failed Try."""
    return FailedTry()


def has_failed_with(error_kind: type[BaseException]) -> Matcher[Try[Any]]:
    """Matches a Try that failed with a cause of exactly type ``error_kind``.

    Subclasses of ``error_kind`` do not match.

    Raises:
        MatcherError: If ``error_kind`` is not an exception class.
    """
    if not (isinstance(error_kind, type) and issubclass(error_kind, BaseException)):
        msg = f"has_failed_with expects an exception class, got {error_kind!r}"
        raise MatcherError(msg)
    return FailedTryWith(error_kind)


def is_right[R](matcher: Matcher[R] | R | None = None) -> Matcher[Either[Any, R]]:
    """Matches an Either holding a Right value (accepted by ``matcher``, if given)."""
    return RightEither(inner_matcher(matcher))


def is_left[L](matcher: Matcher[L] | L | None = None) -> Matcher[Either[L, Any]]:
    """Matches an Either holding a Left value (accepted by ``matcher``, if given)."""
    return LeftEither(inner_matcher(matcher))


__all__ = [
    "has_failed_with",
    "is_defined",
    "is_empty",
    "is_failure",
    "is_left",
    "is_right",
    "is_success",
]
