"""Matchers over any Value (anything exposing is_empty())."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from funcmatch._matcher import SubjectMatcher
from funcmatch._types import Value

if TYPE_CHECKING:
    from hamcrest.core.description import Description


@dataclass(frozen=True, slots=True, repr=False)
class EmptyValue(SubjectMatcher[Value]):
    """Matches a Value that reports itself empty.

    Works for options, tries, eithers and collections alike. Mismatch text is
    the generic "was <subject>".
    """

    subject_type: ClassVar[type] = Value

    def matches_subject(self, subject: Value) -> bool:
        return subject.is_empty()

    def describe_to(self, description: Description) -> None:
        description.append_text("Value should be empty")
