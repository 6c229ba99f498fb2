"""Tests for the SubjectMatcher base and its rendering helpers."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest
from hamcrest import anything, equal_to, less_than
from hamcrest.core.string_description import StringDescription

from funcmatch import AllMatch, DefinedOption, Option, SubjectMatcher, Traversable, Try
from funcmatch._matcher import append_cause, append_items, inner_matcher, render_item
from funcmatch.collection import all_match, has_size
from funcmatch.control import is_defined
from funcmatch.testing import NOTHING, Failure, Seq, Some, Stream, Success


class TestInnerMatcher:
    def test_none_means_anything(self) -> None:
        assert str(StringDescription().append_description_of(inner_matcher(None))) == (
            str(StringDescription().append_description_of(anything()))
        )

    def test_matcher_passes_through(self) -> None:
        m = less_than(3)
        assert inner_matcher(m) is m

    def test_plain_value_is_wrapped(self) -> None:
        m = inner_matcher(3)
        assert m.matches(3) is True
        assert m.matches(4) is False


class TestRendering:
    @pytest.mark.parametrize(
        ("item", "expected"),
        [(4, "4"), (False, "False"), ("b", "'b'"), (None, "None"), ((1, 2), "(1, 2)")],
    )
    def test_render_item(self, item: object, expected: str) -> None:
        assert render_item(item) == expected

    def test_append_items(self) -> None:
        assert str(append_items(StringDescription(), [4, 5, 6])) == "[4,5,6]"
        assert str(append_items(StringDescription(), [])) == "[]"

    def test_append_cause_keeps_type(self) -> None:
        assert str(append_cause(StringDescription(), ValueError("bad"))) == "<ValueError('bad')>"


class TestImmutability:
    def test_matchers_are_frozen(self) -> None:
        matcher = has_size(3)
        with pytest.raises(FrozenInstanceError):
            matcher.size = 4  # type: ignore[misc]

    def test_equal_parameters_give_equal_matchers(self) -> None:
        assert has_size(3) == has_size(3)
        assert has_size(3) != has_size(4)

    def test_matchers_hold_their_inner_matcher(self) -> None:
        inner = equal_to(1)
        assert isinstance(all_match(inner), AllMatch)
        assert all_match(inner).matcher is inner
        assert isinstance(is_defined(inner), DefinedOption)
        assert is_defined(inner).matcher is inner

    def test_matching_does_not_change_subject(self) -> None:
        subject = Seq.of(1, 2, 3)
        before = repr(subject)
        all_match(less_than(2)).describe_mismatch(subject, StringDescription())
        assert repr(subject) == before


class TestProtocols:
    @pytest.mark.parametrize("subject", [Some(1), NOTHING])
    def test_options(self, subject: object) -> None:
        assert isinstance(subject, Option)
        assert not isinstance(subject, Try)

    @pytest.mark.parametrize("subject", [Success(1), Failure(ValueError())])
    def test_tries(self, subject: object) -> None:
        assert isinstance(subject, Try)
        assert not isinstance(subject, Option)

    @pytest.mark.parametrize("subject", [Seq.of(1), Stream.of(1)])
    def test_traversables(self, subject: object) -> None:
        assert isinstance(subject, Traversable)

    def test_plain_list_is_not_traversable(self) -> None:
        assert not isinstance([1], Traversable)


class TestCustomSubjectMatcher:
    def test_subclass_gets_type_safety(self) -> None:
        class AllPositive(SubjectMatcher[Traversable[int]]):
            subject_type = Traversable

            def matches_subject(self, subject: Traversable[int]) -> bool:
                return subject.for_all(lambda n: n > 0)

            def describe_to(self, description) -> None:
                description.append_text("all positive")

        matcher = AllPositive()
        assert matcher.matches(Seq.of(1, 2)) is True
        assert matcher.matches(Seq.of(-1)) is False
        assert matcher.matches("not a collection") is False
        description = StringDescription()
        matcher.describe_mismatch(Seq.of(-1), description)
        assert str(description) == "was <Seq(-1)>"

    def test_matches_subject_is_required(self) -> None:
        class Incomplete(SubjectMatcher[Traversable[int]]):
            subject_type = Traversable

            def describe_to(self, description) -> None:
                description.append_text("incomplete")

        with pytest.raises(TypeError):
            Incomplete()
