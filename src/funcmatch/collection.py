"""Matchers for Traversable collections.

>>> from hamcrest import assert_that, less_than
>>> from funcmatch.testing import Seq
>>> assert_that(Seq.of(3, 1, 2), contains_in_any_order([1, 2]))
>>> assert_that(Seq.of(1, 2, 3), all_match(less_than(5)))
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from hamcrest import equal_to
from hamcrest.core.helpers.wrap_matcher import wrap_matcher
from hamcrest.core.matcher import Matcher

from funcmatch._collection import (
    AllMatch,
    ContainsAny,
    ContainsInAnyOrder,
    EmptyCollection,
    HasSize,
    SizeMatches,
)
from funcmatch._matcher import MatcherError

if TYPE_CHECKING:
    from funcmatch._types import Traversable


def is_empty() -> Matcher[Traversable[Any]]:
    """Matches a collection with no elements."""
    return EmptyCollection()


def has_size(size: int | Matcher[int]) -> Matcher[Traversable[Any]]:
    """Matches a collection of definite size.

    ``size`` is either the exact expected size or a matcher over the size,
    e.g. ``has_size(less_than(3))``. Collections without a definite size
    never match.

    Raises:
        MatcherError: If ``size`` is a bool, or neither an int nor a matcher. A negative
            size is accepted and never matches.
    """
    if isinstance(size, Matcher):
        return SizeMatches(size)
    if isinstance(size, bool) or not isinstance(size, int):
        msg = f"has_size expects an int or a matcher, got {size!r}"
        raise MatcherError(msg)
    return HasSize(size)


def contains_any[E](matcher: Matcher[E] | E) -> Matcher[Traversable[E]]:
    """Matches a collection with at least one element accepted by ``matcher``."""
    return ContainsAny(wrap_matcher(matcher))


def contains_element[E](element: E) -> Matcher[Traversable[E]]:
    """Matches a collection containing ``element``.

    Same as ``contains_any(equal_to(element))``.
    """
    return ContainsAny(equal_to(element))


def contains_in_any_order[E](items: Iterable[E]) -> Matcher[Traversable[E]]:
    """Matches a collection holding all of ``items``, in any order.

    The subject may hold extra elements. ``items`` is copied at construction.

    Raises:
        MatcherError: If ``items`` is not iterable (a str counts as not iterable).
    """
    if isinstance(items, str) or not isinstance(items, Iterable):
        msg = f"contains_in_any_order expects an iterable of items, got {items!r}"
        raise MatcherError(msg)
    return ContainsInAnyOrder(tuple(items))


def all_match[E](matcher: Matcher[E] | E) -> Matcher[Traversable[E]]:
    """Matches a collection whose every element is accepted by ``matcher``.

    An empty collection always matches.
    """
    return AllMatch(wrap_matcher(matcher))


__all__ = [
    "all_match",
    "contains_any",
    "contains_element",
    "contains_in_any_order",
    "has_size",
    "is_empty",
]
