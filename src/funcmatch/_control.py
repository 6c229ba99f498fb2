"""Matchers over control types: Option, Try and Either.

Parameterized matchers delegate to their inner matcher both for the verdict
and for mismatch text; the inner text is kept verbatim inside the outer
framing. The unparameterized factories are the parameterized ones applied
to anything().

Extraction (get, get_left, get_cause) only happens on a branch where the
matching side is already known to be active.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from funcmatch._matcher import SubjectMatcher, append_cause
from funcmatch._types import Either, Option, Try

if TYPE_CHECKING:
    from hamcrest.core.description import Description
    from hamcrest.core.matcher import Matcher


# ─── Option ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True, repr=False)
class DefinedOption[T](SubjectMatcher[Option[T]]):
    """Matches an Option holding a value accepted by ``matcher``."""

    matcher: Matcher[T]
    subject_type: ClassVar[type] = Option

    def matches_subject(self, subject: Option[T]) -> bool:
        return subject.map(self.matcher.matches).get_or_else(False)

    def describe_to(self, description: Description) -> None:
        description.append_text("Option that contains value matching ").append_description_of(
            self.matcher
        )

    def describe_subject_mismatch(
        self, subject: Option[T], mismatch_description: Description
    ) -> None:
        if not subject.is_defined():
            mismatch_description.append_text("No value was defined")
        else:
            self.matcher.describe_mismatch(subject.get(), mismatch_description)


@dataclass(frozen=True, slots=True, repr=False)
class EmptyOption(SubjectMatcher[Option[Any]]):
    """Matches an Option holding no value."""

    subject_type: ClassVar[type] = Option

    def matches_subject(self, subject: Option[Any]) -> bool:
        return not subject.is_defined()

    def describe_to(self, description: Description) -> None:
        description.append_text("Optional value should not be defined")

    def describe_subject_mismatch(
        self, subject: Option[Any], mismatch_description: Description
    ) -> None:
        mismatch_description.append_text("Expected empty Option but found ").append_description_of(
            subject.get()
        )


# ─── Try ─────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True, repr=False)
class SuccessfulTry[T](SubjectMatcher[Try[T]]):
    """Matches a successful Try whose value is accepted by ``matcher``."""

    matcher: Matcher[T]
    subject_type: ClassVar[type] = Try

    def matches_subject(self, subject: Try[T]) -> bool:
        return subject.map(self.matcher.matches).get_or_else(False)

    def describe_to(self, description: Description) -> None:
        description.append_text(
            "Successful Try should contain value that matches: "
        ).append_description_of(self.matcher)

    def describe_subject_mismatch(
        self, subject: Try[T], mismatch_description: Description
    ) -> None:
        if subject.is_failure():
            mismatch_description.append_text("Expected success but got ")
            append_cause(mismatch_description, subject.get_cause())
            return
        mismatch_description.append_text("Expected successful Try value matching '")
        mismatch_description.append_description_of(self.matcher).append_text("' but ")
        self.matcher.describe_mismatch(subject.get(), mismatch_description)


@dataclass(frozen=True, slots=True, repr=False)
class FailedTry(SubjectMatcher[Try[Any]]):
    """Matches a Try that holds a failure, whatever its cause."""

    subject_type: ClassVar[type] = Try

    def matches_subject(self, subject: Try[Any]) -> bool:
        return subject.is_failure()

    def describe_to(self, description: Description) -> None:
        description.append_text("unsuccessful Try")

    def describe_subject_mismatch(
        self, subject: Try[Any], mismatch_description: Description
    ) -> None:
        mismatch_description.append_text(
            "Try should not have succeeded, but was "
        ).append_description_of(subject)


@dataclass(frozen=True, slots=True, repr=False)
class FailedTryWith(SubjectMatcher[Try[Any]]):
    """Matches a failed Try whose cause is exactly of type ``error_kind``.

    The comparison is on the exact type: a cause whose type is a subclass of
    ``error_kind`` does not match.
    """

    error_kind: type[BaseException]
    subject_type: ClassVar[type] = Try

    def matches_subject(self, subject: Try[Any]) -> bool:
        if not subject.is_failure():
            return False
        return type(subject.get_cause()) is self.error_kind

    def describe_to(self, description: Description) -> None:
        description.append_text("Try should have failed with ").append_text(
            _qualified_name(self.error_kind)
        )

    def describe_subject_mismatch(
        self, subject: Try[Any], mismatch_description: Description
    ) -> None:
        if subject.is_failure():
            mismatch_description.append_text("Failure type is ")
            mismatch_description.append_text(type(subject.get_cause()).__name__)
            mismatch_description.append_text(" but expected ").append_text(self.error_kind.__name__)
        else:
            mismatch_description.append_text(
                "Expected failure, but found successful Try with value: "
            ).append_description_of(subject.get())


def _qualified_name(kind: type) -> str:
    if kind.__module__ == "builtins":
        return kind.__qualname__
    return f"{kind.__module__}.{kind.__qualname__}"


# ─── Either ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True, repr=False)
class RightEither[R](SubjectMatcher[Either[Any, R]]):
    """Matches an Either holding a Right value accepted by ``matcher``."""

    matcher: Matcher[R]
    subject_type: ClassVar[type] = Either

    def matches_subject(self, subject: Either[Any, R]) -> bool:
        return subject.map(self.matcher.matches).get_or_else(False)

    def describe_to(self, description: Description) -> None:
        description.append_text(
            "»Either« should contain a »Right« value matching: "
        ).append_description_of(self.matcher)

    def describe_subject_mismatch(
        self, subject: Either[Any, R], mismatch_description: Description
    ) -> None:
        if subject.is_right():
            mismatch_description.append_text("Expected matching »Right« value, but got: ")
            self.matcher.describe_mismatch(subject.get(), mismatch_description)
        else:
            mismatch_description.append_text(
                "Expected matching »Right« value, but got »Left«: "
            ).append_description_of(subject.get_left())


@dataclass(frozen=True, slots=True, repr=False)
class LeftEither[L](SubjectMatcher[Either[L, Any]]):
    """Matches an Either holding a Left value accepted by ``matcher``."""

    matcher: Matcher[L]
    subject_type: ClassVar[type] = Either

    def matches_subject(self, subject: Either[L, Any]) -> bool:
        return subject.is_left() and self.matcher.matches(subject.get_left())

    def describe_to(self, description: Description) -> None:
        description.append_text(
            "»Either« should contain a »Left« value matching: "
        ).append_description_of(self.matcher)

    def describe_subject_mismatch(
        self, subject: Either[L, Any], mismatch_description: Description
    ) -> None:
        if subject.is_left():
            mismatch_description.append_text("Expected matching »Left« value, but got: ")
            self.matcher.describe_mismatch(subject.get_left(), mismatch_description)
        else:
            mismatch_description.append_text(
                "Expected matching »Left« value, but got »Right«: "
            ).append_description_of(subject.get())
