"""Matchers over Traversable collections.

Subjects may be ordered or unordered, finite or lazy. A subject without a
definite size never has size() called on it: size matchers do not match it
and their mismatch text says so instead of forcing evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from funcmatch._matcher import SubjectMatcher, append_items
from funcmatch._types import Traversable

if TYPE_CHECKING:
    from hamcrest.core.description import Description
    from hamcrest.core.matcher import Matcher


@dataclass(frozen=True, slots=True, repr=False)
class EmptyCollection(SubjectMatcher[Traversable[Any]]):
    """Matches a collection with no elements."""

    subject_type: ClassVar[type] = Traversable

    def matches_subject(self, subject: Traversable[Any]) -> bool:
        return subject.is_empty()

    def describe_to(self, description: Description) -> None:
        description.append_text("Collection should be empty")

    def describe_subject_mismatch(
        self, subject: Traversable[Any], mismatch_description: Description
    ) -> None:
        mismatch_description.append_text("Collection was expected to be empty but ")
        _append_size(subject, mismatch_description)


@dataclass(frozen=True, slots=True, repr=False)
class HasSize(SubjectMatcher[Traversable[Any]]):
    """Matches a collection of definite size equal to ``size``."""

    size: int
    subject_type: ClassVar[type] = Traversable

    def matches_subject(self, subject: Traversable[Any]) -> bool:
        return subject.has_definite_size() and subject.size() == self.size

    def describe_to(self, description: Description) -> None:
        description.append_text("Collection should have size ").append_description_of(self.size)

    def describe_subject_mismatch(
        self, subject: Traversable[Any], mismatch_description: Description
    ) -> None:
        mismatch_description.append_text("Collection should have size ")
        mismatch_description.append_description_of(self.size).append_text(" but actually ")
        _append_size(subject, mismatch_description)


@dataclass(frozen=True, slots=True, repr=False)
class SizeMatches(SubjectMatcher[Traversable[Any]]):
    """Matches a collection of definite size accepted by ``matcher``."""

    matcher: Matcher[int]
    subject_type: ClassVar[type] = Traversable

    def matches_subject(self, subject: Traversable[Any]) -> bool:
        return subject.has_definite_size() and self.matcher.matches(subject.size())

    def describe_to(self, description: Description) -> None:
        description.append_text("Collection size should match ").append_description_of(
            self.matcher
        )

    def describe_subject_mismatch(
        self, subject: Traversable[Any], mismatch_description: Description
    ) -> None:
        mismatch_description.append_text("Collection size does not match ")
        mismatch_description.append_description_of(self.matcher)
        if not subject.has_definite_size():
            mismatch_description.append_text(", size is not definite")
            return
        mismatch_description.append_text(", size was ").append_description_of(subject.size())


@dataclass(frozen=True, slots=True, repr=False)
class ContainsAny[E](SubjectMatcher[Traversable[E]]):
    """Matches a collection with at least one element accepted by ``matcher``."""

    matcher: Matcher[E]
    subject_type: ClassVar[type] = Traversable

    def matches_subject(self, subject: Traversable[E]) -> bool:
        return subject.find(self.matcher.matches).is_defined()

    def describe_to(self, description: Description) -> None:
        description.append_text("Collection should contain a value matching ")
        description.append_description_of(self.matcher)

    def describe_subject_mismatch(
        self, subject: Traversable[E], mismatch_description: Description
    ) -> None:
        mismatch_description.append_text("Collection expected to contain a value matching '")
        mismatch_description.append_description_of(self.matcher).append_text("' but found ")
        mismatch_description.append_description_of(subject)


@dataclass(frozen=True, slots=True, repr=False)
class ContainsInAnyOrder[E](SubjectMatcher[Traversable[E]]):
    """Matches a collection holding every one of ``items``.

    Order is irrelevant on both sides and extra subject elements are allowed.
    """

    items: tuple[E, ...]
    subject_type: ClassVar[type] = Traversable

    def matches_subject(self, subject: Traversable[E]) -> bool:
        return subject.contains_all(self.items)

    def describe_to(self, description: Description) -> None:
        description.append_text("Collection should contain: ").append_list(
            "[", ",", "]", self.items
        )

    def describe_subject_mismatch(
        self, subject: Traversable[E], mismatch_description: Description
    ) -> None:
        missing = [item for item in self.items if not subject.contains(item)]
        mismatch_description.append_text("Collection is missing elements: ")
        append_items(mismatch_description, missing)


@dataclass(frozen=True, slots=True, repr=False)
class AllMatch[E](SubjectMatcher[Traversable[E]]):
    """Matches a collection whose every element is accepted by ``matcher``.

    An empty collection matches (vacuous truth).
    """

    matcher: Matcher[E]
    subject_type: ClassVar[type] = Traversable

    def matches_subject(self, subject: Traversable[E]) -> bool:
        return subject.for_all(self.matcher.matches)

    def describe_to(self, description: Description) -> None:
        description.append_text("All elements should match ").append_description_of(self.matcher)

    def describe_subject_mismatch(
        self, subject: Traversable[E], mismatch_description: Description
    ) -> None:
        mismatch_description.append_text("All elements should match '")
        mismatch_description.append_description_of(self.matcher)
        mismatch_description.append_text("' but found non-matching elements: ")
        append_items(mismatch_description, subject.filter_not(self.matcher.matches))


def _append_size(subject: Traversable[Any], description: Description) -> None:
    if subject.has_definite_size():
        description.append_text("has size ").append_description_of(subject.size())
    else:
        description.append_text("has no definite size")
