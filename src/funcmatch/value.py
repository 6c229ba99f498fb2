"""Matchers for any Value type.

>>> from hamcrest import assert_that
>>> from funcmatch.testing import Seq
>>> assert_that(Seq.empty(), is_empty())
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from funcmatch._value import EmptyValue

if TYPE_CHECKING:
    from hamcrest.core.matcher import Matcher

    from funcmatch._types import Value


def is_empty() -> Matcher[Value]:
    """Matches any empty Value: an undefined Option, an empty collection, ..."""
    return EmptyValue()


__all__ = ["is_empty"]
