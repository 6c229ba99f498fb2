"""Reference subject types for funcmatch.

Small immutable implementations of the capability protocols, for use in
tests, examples and doctests. They are NOT a functional-types library:
any third-party Option/Try/Either/collection type can be matched as long
as it implements the protocols in funcmatch._types.

>>> from hamcrest import assert_that
>>> from funcmatch.control import has_failed_with
>>> assert_that(attempt(lambda: 1 / 0), has_failed_with(ZeroDivisionError))
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator


# ─── Option ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True, repr=False)
class Some[T]:
    """A defined Option."""

    value: T

    def is_empty(self) -> bool:
        return False

    def is_defined(self) -> bool:
        return True

    def get(self) -> T:
        return self.value

    def map(self, fn: Callable[[T], Any], /) -> Some[Any]:
        return Some(fn(self.value))

    def get_or_else(self, default: Any, /) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True, slots=True, repr=False)
class Nothing:
    """The undefined Option. Use the NOTHING singleton."""

    def is_empty(self) -> bool:
        return True

    def is_defined(self) -> bool:
        return False

    def get(self) -> Any:
        msg = "get() on Nothing"
        raise LookupError(msg)

    def map(self, fn: Callable[[Any], Any], /) -> Nothing:
        return self

    def get_or_else(self, default: Any, /) -> Any:
        return default

    def __repr__(self) -> str:
        return "Nothing"


NOTHING: Final = Nothing()


def option[T](value: T | None) -> Some[T] | Nothing:
    """Wrap ``value`` in Some, or return NOTHING for None."""
    return NOTHING if value is None else Some(value)


# ─── Try ─────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True, repr=False)
class Success[T]:
    """A Try holding a computed value."""

    value: T

    def is_empty(self) -> bool:
        return False

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def get(self) -> T:
        return self.value

    def get_cause(self) -> BaseException:
        msg = "get_cause() on Success"
        raise LookupError(msg)

    def map(self, fn: Callable[[T], Any], /) -> Success[Any] | Failure:
        return attempt(lambda: fn(self.value))

    def get_or_else(self, default: Any, /) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True, slots=True, repr=False)
class Failure:
    """A Try holding the exception that stopped a computation."""

    cause: BaseException

    def is_empty(self) -> bool:
        return True

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def get(self) -> Any:
        raise self.cause

    def get_cause(self) -> BaseException:
        return self.cause

    def map(self, fn: Callable[[Any], Any], /) -> Failure:
        return self

    def get_or_else(self, default: Any, /) -> Any:
        return default

    def __repr__(self) -> str:
        return f"Failure({self.cause!r})"


def attempt[T](fn: Callable[[], T]) -> Success[T] | Failure:
    """Run ``fn``; return Success with its result or Failure with what it raised."""
    try:
        return Success(fn())
    except Exception as e:  # noqa: BLE001
        return Failure(e)


# ─── Either ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True, repr=False)
class Left[L]:
    """The left alternative of an Either."""

    value: L

    def is_empty(self) -> bool:
        return True

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False

    def get(self) -> Any:
        msg = "get() on Left"
        raise LookupError(msg)

    def get_left(self) -> L:
        return self.value

    def map(self, fn: Callable[[Any], Any], /) -> Left[L]:
        return self

    def get_or_else(self, default: Any, /) -> Any:
        return default

    def __repr__(self) -> str:
        return f"Left({self.value!r})"


@dataclass(frozen=True, slots=True, repr=False)
class Right[R]:
    """The right alternative of an Either."""

    value: R

    def is_empty(self) -> bool:
        return False

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True

    def get(self) -> R:
        return self.value

    def get_left(self) -> Any:
        msg = "get_left() on Right"
        raise LookupError(msg)

    def map(self, fn: Callable[[R], Any], /) -> Right[Any]:
        return Right(fn(self.value))

    def get_or_else(self, default: Any, /) -> R:
        return self.value

    def __repr__(self) -> str:
        return f"Right({self.value!r})"


# ─── Collections ─────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True, repr=False)
class Seq[E]:
    """A finite, ordered, immutable sequence."""

    items: tuple[E, ...] = ()

    @classmethod
    def of(cls, *items: E) -> Seq[E]:
        return cls(items)

    @classmethod
    def empty(cls) -> Seq[Any]:
        return cls()

    def __iter__(self) -> Iterator[E]:
        return iter(self.items)

    def is_empty(self) -> bool:
        return not self.items

    def size(self) -> int:
        return len(self.items)

    def has_definite_size(self) -> bool:
        return True

    def contains(self, element: Any, /) -> bool:
        return element in self.items

    def contains_all(self, elements: Iterable[Any], /) -> bool:
        return all(e in self.items for e in elements)

    def find(self, predicate: Callable[[E], bool], /) -> Some[E] | Nothing:
        for item in self.items:
            if predicate(item):
                return Some(item)
        return NOTHING

    def for_all(self, predicate: Callable[[E], bool], /) -> bool:
        return all(predicate(item) for item in self.items)

    def filter_not(self, predicate: Callable[[E], bool], /) -> Seq[E]:
        return Seq(tuple(item for item in self.items if not predicate(item)))

    def __repr__(self) -> str:
        return f"Seq({', '.join(repr(i) for i in self.items)})"


@dataclass(frozen=True, slots=True, repr=False)
class Stream[E]:
    """A lazy, possibly unbounded sequence.

    Elements come from ``source``, called afresh for every traversal. A
    stream never reports a definite size; size() on an unbounded stream
    does not terminate.
    """

    source: Callable[[], Iterator[E]]

    @classmethod
    def of(cls, *items: E) -> Stream[E]:
        return cls(lambda: iter(items))

    @classmethod
    def iterate(cls, seed: E, fn: Callable[[E], E]) -> Stream[E]:
        """The unbounded stream ``seed, fn(seed), fn(fn(seed)), ...``."""

        def generate() -> Iterator[E]:
            return itertools.accumulate(
                itertools.repeat(None), lambda acc, _: fn(acc), initial=seed
            )

        return cls(generate)

    def __iter__(self) -> Iterator[E]:
        return self.source()

    def is_empty(self) -> bool:
        return next(iter(self), _END) is _END

    def size(self) -> int:
        return sum(1 for _ in self)

    def has_definite_size(self) -> bool:
        return False

    def contains(self, element: Any, /) -> bool:
        return any(item == element for item in self)

    def contains_all(self, elements: Iterable[Any], /) -> bool:
        return all(self.contains(e) for e in elements)

    def find(self, predicate: Callable[[E], bool], /) -> Some[E] | Nothing:
        for item in self:
            if predicate(item):
                return Some(item)
        return NOTHING

    def for_all(self, predicate: Callable[[E], bool], /) -> bool:
        return all(predicate(item) for item in self)

    def filter_not(self, predicate: Callable[[E], bool], /) -> Stream[E]:
        source = self.source
        return Stream(lambda: (item for item in source() if not predicate(item)))

    def __repr__(self) -> str:
        head = next(iter(self), _END)
        if head is _END:
            return "Stream()"
        return f"Stream({head!r}, ?)"


_END: Final = object()
