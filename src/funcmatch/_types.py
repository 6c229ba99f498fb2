"""Capability protocols required of matcher subjects.

Matchers never depend on a concrete functional-types library. They consume
only the capabilities below, so any Option/Try/Either/collection type that
implements them can be matched:

- Value is the root capability (emptiness)
- Traversable adds size, membership and quantification over elements
- Option, Try and Either add discriminant queries and extraction of the
  value on the active side

All protocols are runtime-checkable: a matcher uses isinstance() against
its subject protocol to decide whether a subject is well-typed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

E = TypeVar("E", covariant=True)
T = TypeVar("T", covariant=True)
L = TypeVar("L", covariant=True)
R = TypeVar("R", covariant=True)


@runtime_checkable
class Value(Protocol):
    """Anything that can report whether it holds nothing."""

    def is_empty(self) -> bool: ...


@runtime_checkable
class Option(Value, Protocol[T]):
    """A container holding zero or one value.

    get() is only valid when is_defined() is True.
    """

    def is_defined(self) -> bool: ...

    def get(self) -> T: ...

    def map(self, fn: Callable[[Any], Any], /) -> Option[Any]: ...

    def get_or_else(self, default: Any, /) -> Any: ...


@runtime_checkable
class Traversable(Value, Protocol[E]):
    """An ordered or unordered container of elements.

    A traversable may be lazy and unbounded. has_definite_size() must be
    checked before size(), which is only guaranteed to terminate for
    containers with a definite size.
    """

    def __iter__(self) -> Iterator[E]: ...

    def size(self) -> int: ...

    def has_definite_size(self) -> bool: ...

    def contains(self, element: Any, /) -> bool: ...

    def contains_all(self, elements: Iterable[Any], /) -> bool: ...

    def find(self, predicate: Callable[[Any], bool], /) -> Option[E]: ...

    def for_all(self, predicate: Callable[[Any], bool], /) -> bool: ...

    def filter_not(self, predicate: Callable[[Any], bool], /) -> Iterable[E]: ...


@runtime_checkable
class Try(Value, Protocol[T]):
    """Either a computed value (success) or a captured exception (failure).

    get() is only valid on success, get_cause() only on failure.
    """

    def is_success(self) -> bool: ...

    def is_failure(self) -> bool: ...

    def get(self) -> T: ...

    def get_cause(self) -> BaseException: ...

    def map(self, fn: Callable[[Any], Any], /) -> Try[Any]: ...

    def get_or_else(self, default: Any, /) -> Any: ...


@runtime_checkable
class Either(Value, Protocol[L, R]):
    """Exactly one of two tagged alternatives, biased towards Right.

    get() returns the right value and is only valid when is_right() is True;
    get_left() is only valid when is_left() is True. map() transforms the
    right value and leaves a Left untouched.
    """

    def is_left(self) -> bool: ...

    def is_right(self) -> bool: ...

    def get(self) -> R: ...

    def get_left(self) -> L: ...

    def map(self, fn: Callable[[Any], Any], /) -> Either[Any, Any]: ...

    def get_or_else(self, default: Any, /) -> Any: ...
