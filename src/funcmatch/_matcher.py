"""SubjectMatcher — type-safe base for every funcmatch matcher.

Builds on PyHamcrest's three-operation contract (matches, describe_to,
describe_mismatch) and adds a subject check:
- Each matcher declares the capability protocol its subject must satisfy
- A subject that does not satisfy it (None included) never matches
- Mismatch text for such a subject is PyHamcrest's generic "was <subject>"

Matchers are frozen dataclasses. Evaluating one twice on the same subject
gives the same verdict and the same text.
"""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from hamcrest import anything
from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.helpers.wrap_matcher import wrap_matcher

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hamcrest.core.description import Description
    from hamcrest.core.matcher import Matcher


class MatcherError(Exception):
    """Invalid matcher construction parameters."""


class SubjectMatcher[S](BaseMatcher[S], metaclass=ABCMeta):
    """Base class for matchers over a capability protocol.

    Subclasses set ``subject_type`` and implement ``matches_subject`` and
    ``describe_to``. Overriding ``describe_subject_mismatch`` replaces the
    generic mismatch text for well-typed subjects.
    """

    subject_type: ClassVar[type] = object

    def _matches(self, item: Any) -> bool:
        if not isinstance(item, self.subject_type):
            return False
        return self.matches_subject(item)

    @abstractmethod
    def matches_subject(self, subject: S) -> bool: ...

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        if isinstance(item, self.subject_type):
            self.describe_subject_mismatch(item, mismatch_description)
        else:
            BaseMatcher.describe_mismatch(self, item, mismatch_description)

    def describe_subject_mismatch(self, subject: S, mismatch_description: Description) -> None:
        BaseMatcher.describe_mismatch(self, subject, mismatch_description)


def inner_matcher[T](matcher: Matcher[T] | T | None) -> Matcher[T]:
    """Normalize an inner-matcher argument.

    None means "any value"; a plain value is wrapped in equal_to().
    """
    if matcher is None:
        return anything()
    return wrap_matcher(matcher)


def render_item(item: Any) -> str:
    """Render a list element bare: strings in Python syntax, others via str()."""
    if isinstance(item, str):
        return repr(item)
    return str(item)


def append_items(description: Description, items: Iterable[Any]) -> Description:
    """Append items as ``[a,b,c]``: bracketed, comma-separated, no spaces."""
    return description.append_text("[" + ",".join(render_item(i) for i in items) + "]")


def append_cause(description: Description, cause: BaseException) -> Description:
    """Append an exception as ``<repr(cause)>``.

    str() of an exception is only its message (often empty), so the repr is
    used to keep the exception type visible.
    """
    return description.append_text(f"<{cause!r}>")
