"""Maybe type: Present[T] | Absent for values that may be missing.

A Maybe never holds None. ``of`` turns None into Absent, and ``map`` does the
same with a mapped function's result, so a chain of lookups stops at the first
missing step without any ``if x is None`` checks.

Every method is also available as a free function that takes the container
last. Leaving the container out returns a function awaiting it:

Example:
    ```python
    from monad_maniac import maybe

    str(maybe.of(10).map(lambda x: x * 2))    # 'Present(20)'
    str(maybe.of(None).map(lambda x: x * 2))  # 'Absent()'

    double_all = maybe.map(lambda x: x * 2)
    double_all(maybe.of(4))                   # Present(value=8)
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypedDict, TypeIs, overload

import msgspec

from monad_maniac._helpers import MISSING, case_branch, curry1, strict_equals
from monad_maniac.errors import NullValueError

if TYPE_CHECKING:
    from monad_maniac.either import Left, Right

__all__ = [
    'Absent',
    'AbsentType',
    'Maybe',
    'MaybeCases',
    'Present',
    'apply',
    'case_of',
    'chain',
    'equals',
    'equals_value',
    'filter',
    'get_or_else',
    'is_just',
    'is_nothing',
    'join',
    'lift',
    'map',
    'of',
    'to_either',
    'to_string',
]


class MaybeCases[T, U](TypedDict):
    """Matcher accepted by ``case_of``: one callable per variant."""

    Just: Callable[[T], U]
    Nothing: Callable[[], U]


class Present[T](msgspec.Struct, frozen=True, gc=False):
    """Present variant of Maybe holding a non-None value of type T.

    Prefer ``maybe.of`` over constructing Present directly: ``of`` maps None
    to Absent, while ``Present(None)`` is rejected.

    Examples:
        >>> Present(5).map(lambda x: x * 2)
        Present(value=10)
        >>> str(Present('foo'))
        'Present(foo)'

    Raises:
        NullValueError: If constructed with None.
    """

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise NullValueError('Present')

    def map[U](self, f: Callable[[T], U | None]) -> Present[U] | AbsentType:
        """Apply ``f`` to the value, collapsing a None result to Absent.

        Args:
            f: Function to apply to the contained value.

        Returns:
            Present(f(value)), or Absent if f returned None.
        """
        return of(f(self.value))

    def chain[U](self, f: Callable[[T], U]) -> U:
        """Apply ``f`` to the value and return its result unwrapped."""
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Present[T] | AbsentType:
        """Keep the value only if ``predicate`` holds for it.

        Args:
            predicate: Function whose result is tested for truthiness, so any
                falsy result (False, 0, '', None) drops the value.

        Returns:
            self if predicate(value) is truthy, else Absent.
        """
        if predicate(self.value):
            return self
        return Absent

    def get_or_else[U](self, default: U) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def is_just(self) -> TypeIs[Present[T]]:
        """Return True since this is Present."""
        return True

    def is_nothing(self) -> TypeIs[AbsentType]:
        """Return False since this is Present."""
        return False

    def case_of[U](self, matcher: MaybeCases[T, U]) -> U:
        """Eliminate the Maybe by calling the matcher's ``Just`` branch.

        Args:
            matcher: Mapping with ``Just`` and ``Nothing`` callables.

        Returns:
            matcher['Just'](value).

        Raises:
            MatchError: If the matcher has no ``Just`` branch.
        """
        return case_branch(matcher, 'Just', 'Present')(self.value)

    def apply[U](self, maybe_fn: Present[Callable[[T], U | None]] | AbsentType) -> Present[U] | AbsentType:
        """Apply a wrapped function to the wrapped value.

        Args:
            maybe_fn: A Maybe holding a single-argument function.

        Returns:
            of(fn(value)) if maybe_fn is Present, else Absent.
        """
        if isinstance(maybe_fn, Present):
            return of(maybe_fn.value(self.value))
        return Absent

    def join(self) -> Present[Any] | AbsentType:
        """Unwrap one level of nesting.

        Returns:
            The inner Maybe if the value is a Maybe, otherwise Absent.
        """
        if isinstance(self.value, Present | AbsentType):
            return self.value
        return Absent

    def equals_value(self, value: object) -> bool:
        """Return True if ``value`` is strictly equal to the contained value."""
        return strict_equals(self.value, value)

    def equals(self, other: object) -> bool:
        """Return True if ``other`` is a Present holding a strictly equal value."""
        return isinstance(other, Present) and strict_equals(self.value, other.value)

    def to_either[L](self, left_default: L) -> Right[T]:  # noqa: ARG002
        """Convert to Either, returning Right(value)."""
        from monad_maniac.either import Right

        return Right(self.value)

    def __str__(self) -> str:
        return f'Present({self.value!s})'


class AbsentType(msgspec.Struct, frozen=True, gc=False):
    """Absent variant of Maybe representing a missing value.

    Operations on Absent skip their function argument and return Absent or
    the supplied default. Use the ``Absent`` constant rather than
    instantiating directly; all instances compare equal.

    Examples:
        >>> Absent.map(lambda x: x * 2) is Absent
        True
        >>> Absent.get_or_else(0)
        0
    """

    def map[T, U](self, _f: Callable[[T], U]) -> AbsentType:
        """Return self since there is no value to map."""
        return self

    def chain[T, U](self, _f: Callable[[T], U]) -> AbsentType:
        """Return self: chaining on Absent yields the Absent instance itself."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> AbsentType:
        """Return self since there is no value to filter."""
        return self

    def get_or_else[U](self, default: U) -> U:
        """Return the default since this is Absent."""
        return default

    def is_just(self) -> TypeIs[Present[object]]:
        """Return False since this is Absent."""
        return False

    def is_nothing(self) -> TypeIs[AbsentType]:
        """Return True since this is Absent."""
        return True

    def case_of[T, U](self, matcher: MaybeCases[T, U]) -> U:
        """Eliminate the Maybe by calling the matcher's ``Nothing`` branch.

        Raises:
            MatchError: If the matcher has no ``Nothing`` branch.
        """
        return case_branch(matcher, 'Nothing', 'Absent')()

    def apply[T, U](self, _maybe_fn: Present[Callable[[T], U]] | AbsentType) -> AbsentType:
        """Return self since there is no value to apply to."""
        return self

    def join(self) -> AbsentType:
        """Return self since there is nothing to unwrap."""
        return self

    def equals_value(self, value: object) -> bool:
        """Return True if ``value`` is None."""
        return value is None

    def equals(self, other: object) -> bool:
        """Return True if ``other`` is also Absent."""
        return isinstance(other, AbsentType)

    def to_either[L](self, left_default: L) -> Left[L]:
        """Convert to Either, returning Left(left_default)."""
        from monad_maniac.either import Left

        return Left(left_default)

    def __str__(self) -> str:
        return 'Absent()'


Absent: AbsentType = AbsentType()
"""Singleton instance representing a missing value."""


type Maybe[T] = Present[T] | AbsentType


def of[T](value: T | None) -> Maybe[T]:
    """Wrap a possibly-None value.

    Args:
        value: Any value. None becomes Absent.

    Returns:
        Present(value) if value is not None, otherwise Absent.
    """
    if value is None:
        return Absent
    return Present(value)


def lift[T, U](f: Callable[[T], U | None], value: T | None) -> Maybe[U]:
    """Run a None-returning function in Maybe, i.e. ``of(value).map(f)``."""
    return of(value).map(f)


def is_just(m: Maybe[Any]) -> bool:
    """Return True if ``m`` is Present."""
    return m.is_just()


def is_nothing(m: Maybe[Any]) -> bool:
    """Return True if ``m`` is Absent."""
    return m.is_nothing()


def join(m: Maybe[Any]) -> Maybe[Any]:
    """Unwrap one level of a nested Maybe, see ``Present.join``."""
    return m.join()


def to_string(m: Maybe[Any]) -> str:
    """Render ``m`` as ``Present(value)`` or ``Absent()``."""
    return str(m)


@overload
def map[T, U](f: Callable[[T], U | None], m: Maybe[T], /) -> Maybe[U]: ...
@overload
def map[T, U](f: Callable[[T], U | None], /) -> Callable[[Maybe[T]], Maybe[U]]: ...
def map(f, m=MISSING, /):
    """Map ``f`` over ``m``; curried when ``m`` is omitted.

    Example:
        ```python
        maybe.map(lambda s: s + 'bar', maybe.of('foo'))  # Present(value='foobar')
        maybe.map(lambda s: s + 'bar')(maybe.of('foo'))  # Present(value='foobar')
        ```
    """
    return curry1(lambda mb: mb.map(f), m)


@overload
def chain[T, U](f: Callable[[T], U], m: Maybe[T], /) -> U | AbsentType: ...
@overload
def chain[T, U](f: Callable[[T], U], /) -> Callable[[Maybe[T]], U | AbsentType]: ...
def chain(f, m=MISSING, /):
    """Chain ``f`` over ``m``; curried when ``m`` is omitted."""
    return curry1(lambda mb: mb.chain(f), m)


@overload
def filter[T](predicate: Callable[[T], bool], m: Maybe[T], /) -> Maybe[T]: ...
@overload
def filter[T](predicate: Callable[[T], bool], /) -> Callable[[Maybe[T]], Maybe[T]]: ...
def filter(predicate, m=MISSING, /):
    """Filter ``m`` by ``predicate``; curried when ``m`` is omitted."""
    return curry1(lambda mb: mb.filter(predicate), m)


@overload
def get_or_else[T, U](default: U, m: Maybe[T], /) -> T | U: ...
@overload
def get_or_else[T, U](default: U, /) -> Callable[[Maybe[T]], T | U]: ...
def get_or_else(default, m=MISSING, /):
    """Unwrap ``m`` with a default; curried when ``m`` is omitted."""
    return curry1(lambda mb: mb.get_or_else(default), m)


@overload
def apply[T, U](maybe_fn: Maybe[Callable[[T], U | None]], m: Maybe[T], /) -> Maybe[U]: ...
@overload
def apply[T, U](maybe_fn: Maybe[Callable[[T], U | None]], /) -> Callable[[Maybe[T]], Maybe[U]]: ...
def apply(maybe_fn, m=MISSING, /):
    """Apply a wrapped function to ``m``; curried when ``m`` is omitted."""
    return curry1(lambda mb: mb.apply(maybe_fn), m)


@overload
def case_of[T, U](matcher: MaybeCases[T, U], m: Maybe[T], /) -> U: ...
@overload
def case_of[T, U](matcher: MaybeCases[T, U], /) -> Callable[[Maybe[T]], U]: ...
def case_of(matcher, m=MISSING, /):
    return curry1(lambda mb: mb.case_of(matcher), m)


@overload
def equals_value(value: object, m: Maybe[Any], /) -> bool: ...
@overload
def equals_value(value: object, /) -> Callable[[Maybe[Any]], bool]: ...
def equals_value(value, m=MISSING, /):
    return curry1(lambda mb: mb.equals_value(value), m)


@overload
def equals(other: Maybe[Any], m: Maybe[Any], /) -> bool: ...
@overload
def equals(other: Maybe[Any], /) -> Callable[[Maybe[Any]], bool]: ...
def equals(other, m=MISSING, /):
    return curry1(lambda mb: mb.equals(other), m)


@overload
def to_either[L, T](left_default: L, m: Maybe[T], /) -> Left[L] | Right[T]: ...
@overload
def to_either[L, T](left_default: L, /) -> Callable[[Maybe[T]], Left[L] | Right[T]]: ...
def to_either(left_default, m=MISSING, /):
    """Convert ``m`` to Either; curried when ``m`` is omitted."""
    return curry1(lambda mb: mb.to_either(left_default), m)
