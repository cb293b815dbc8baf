"""Either type: Left[L] | Right[R] for one of two outcomes.

By convention Left carries a failure and Right a success. ``map`` and
``chain`` only touch the Right side, so a Left short-circuits the rest of a
pipeline until it is recovered with ``or_else``, ``get_or_else`` or
``case_of``.

Example:
    ```python
    from monad_maniac import either

    either.right(150).map(lambda x: x * 2).get()     # 300
    either.left('err').map(lambda x: x * 2).get()    # 'err'

    result = either.attempt(int, 'not a number')
    result.is_left()                                 # True
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypedDict, TypeIs, overload

import msgspec

from monad_maniac._config import get_config
from monad_maniac._helpers import MISSING, case_branch, curry1
from monad_maniac._logging import log_captured

if TYPE_CHECKING:
    from monad_maniac.maybe import Maybe

__all__ = [
    'Either',
    'EitherCases',
    'Left',
    'Right',
    'attempt',
    'attempt_async',
    'case_of',
    'chain',
    'filter',
    'from_nullable',
    'get',
    'get_or_else',
    'is_left',
    'is_right',
    'left',
    'map',
    'of',
    'or_else',
    'right',
    'to_maybe',
    'to_string',
]


class EitherCases[L, R, U](TypedDict):
    """Matcher accepted by ``case_of``: one callable per side."""

    Left: Callable[[L], U]
    Right: Callable[[R], U]


class Right[R](msgspec.Struct, frozen=True, gc=False):
    """Right variant of Either, conventionally the successful outcome.

    Examples:
        >>> Right(150).map(lambda x: x * 2)
        Right(value=300)
        >>> str(Right(150))
        'Right(150)'
    """

    value: R

    def map[U](self, f: Callable[[R], U]) -> Right[U]:
        """Apply ``f`` to the Right value.

        Args:
            f: Function to apply to the value.

        Returns:
            Right containing f(value).
        """
        return Right(f(self.value))

    def or_else[U](self, _f: Callable[[Any], U]) -> R:
        """Return the bare Right value, ignoring the recovery function."""
        return self.value

    def chain[U](self, f: Callable[[R], U]) -> U:
        """Apply ``f`` to the Right value and return its result unwrapped."""
        return f(self.value)

    def filter(self, predicate: Callable[[R], bool]) -> Right[R] | Left[R]:
        """Demote the value to Left when ``predicate`` does not hold.

        Args:
            predicate: Function whose result is tested for truthiness, so any
                falsy result (False, 0, '', None) demotes the value to Left.

        Returns:
            self if predicate(value) is truthy, else Left(value).
        """
        if predicate(self.value):
            return self
        return Left(self.value)

    def get_or_else[U](self, default: U) -> R:  # noqa: ARG002
        """Return the Right value, ignoring the default."""
        return self.value

    def get(self) -> R:
        """Return the raw Right value."""
        return self.value

    def is_left(self) -> TypeIs[Left[object]]:
        """Return False since this is Right."""
        return False

    def is_right(self) -> TypeIs[Right[R]]:
        """Return True since this is Right."""
        return True

    def case_of[U](self, matcher: EitherCases[Any, R, U]) -> U:
        """Eliminate the Either by calling the matcher's ``Right`` branch.

        Raises:
            MatchError: If the matcher has no ``Right`` branch.
        """
        return case_branch(matcher, 'Right', 'Right')(self.value)

    def to_maybe(self) -> Maybe[R]:
        """Convert to Maybe via ``maybe.of``, so a None value becomes Absent."""
        from monad_maniac.maybe import of

        return of(self.value)

    def __str__(self) -> str:
        return f'Right({self.value!s})'


class Left[L](msgspec.Struct, frozen=True, gc=False):
    """Left variant of Either, conventionally the failed outcome.

    A Left passes through ``map``, ``chain`` and ``filter`` untouched; the
    functions given to them are never called.

    Examples:
        >>> Left('Server error').map(lambda x: x * 2)
        Left(value='Server error')
        >>> Left('Server error').or_else(len)
        12
    """

    value: L

    def map[R, U](self, _f: Callable[[R], U]) -> Left[L]:
        """Return self unchanged since this is Left."""
        return self

    def or_else[U](self, f: Callable[[L], U]) -> U:
        """Apply the recovery function to the Left value.

        Args:
            f: Function taking the Left value.

        Returns:
            f(value), unwrapped.
        """
        return f(self.value)

    def chain[R, U](self, _f: Callable[[R], U]) -> Left[L]:
        """Return self: the Left container with its value preserved."""
        return self

    def filter[R](self, _predicate: Callable[[R], bool]) -> Left[L]:
        """Return self unchanged since this is Left."""
        return self

    def get_or_else[U](self, default: U) -> U:
        """Return the default since this is Left."""
        return default

    def get(self) -> L:
        """Return the raw Left value."""
        return self.value

    def is_left(self) -> TypeIs[Left[L]]:
        """Return True since this is Left."""
        return True

    def is_right(self) -> TypeIs[Right[object]]:
        """Return False since this is Left."""
        return False

    def case_of[U](self, matcher: EitherCases[L, Any, U]) -> U:
        """Eliminate the Either by calling the matcher's ``Left`` branch.

        Raises:
            MatchError: If the matcher has no ``Left`` branch.
        """
        return case_branch(matcher, 'Left', 'Left')(self.value)

    def to_maybe(self) -> Maybe[Any]:
        """Convert to Maybe, always Absent for Left."""
        from monad_maniac.maybe import Absent

        return Absent

    def __str__(self) -> str:
        return f'Left({self.value!s})'


type Either[L, R] = Left[L] | Right[R]


def right[R](value: R) -> Right[R]:
    """Wrap ``value`` in Right."""
    return Right(value)


def left[L](value: L) -> Left[L]:
    """Wrap ``value`` in Left."""
    return Left(value)


def of[R](value: R) -> Right[R]:
    """Alias for ``right``."""
    return Right(value)


def from_nullable[R](value: R | None) -> Either[None, R]:
    """Return Left(None) for None, otherwise Right(value)."""
    if value is None:
        return Left(value)
    return Right(value)


def _capture[R](
    f: Callable[..., R],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    catch: tuple[type[BaseException], ...] | None = None,
) -> Either[BaseException, R]:
    """Call f, returning Right(result) or Left(exception) for the catch types.

    ``catch`` defaults to the configured types; anything else propagates.
    """
    if catch is None:
        catch = get_config().catch
    try:
        result = f(*args, **kwargs)
    except catch as e:
        log_captured(f, e)
        return Left(e)
    return Right(result)


async def _capture_async[R](
    f: Callable[..., Awaitable[R]],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    catch: tuple[type[BaseException], ...] | None = None,
) -> Either[BaseException, R]:
    if catch is None:
        catch = get_config().catch
    try:
        result = await f(*args, **kwargs)
    except catch as e:
        log_captured(f, e)
        return Left(e)
    return Right(result)


def attempt[**P, R](f: Callable[P, R], /, *args: P.args, **kwargs: P.kwargs) -> Either[BaseException, R]:
    """Call ``f`` and capture a raised exception as Left.

    Exception types outside the configured ``catch`` tuple (see
    ``monad_maniac.init``) propagate unchanged.

    Args:
        f: The function to call.
        *args: Positional arguments for f.
        **kwargs: Keyword arguments for f.

    Returns:
        Right(f(*args, **kwargs)) on success, Left(exception) otherwise.

    Example:
        ```python
        attempt(int, '42')     # Right(value=42)
        attempt(int, 'forty')  # Left(value=ValueError(...))
        ```
    """
    return _capture(f, args, kwargs)


async def attempt_async[**P, R](
    f: Callable[P, Awaitable[R]], /, *args: P.args, **kwargs: P.kwargs
) -> Either[BaseException, R]:
    """Await ``f`` and capture a raised exception as Left.

    The awaitable is awaited exactly once; its completion decides the side.

    Args:
        f: An async function (or any callable returning an awaitable).
        *args: Positional arguments for f.
        **kwargs: Keyword arguments for f.

    Returns:
        Right(result) if the awaitable completes, Left(exception) if it fails.
    """
    return await _capture_async(f, args, kwargs)


def get(e: Either[Any, Any]) -> Any:
    """Return the raw value of either side."""
    return e.get()


def is_left(e: Either[Any, Any]) -> bool:
    return e.is_left()


def is_right(e: Either[Any, Any]) -> bool:
    return e.is_right()


def to_string(e: Either[Any, Any]) -> str:
    """Render ``e`` as ``Left(value)`` or ``Right(value)``."""
    return str(e)


def to_maybe[R](e: Either[Any, R]) -> Maybe[R]:
    return e.to_maybe()


@overload
def map[L, R, U](f: Callable[[R], U], e: Either[L, R], /) -> Either[L, U]: ...
@overload
def map[L, R, U](f: Callable[[R], U], /) -> Callable[[Either[L, R]], Either[L, U]]: ...
def map(f, e=MISSING, /):
    """Map ``f`` over the Right side of ``e``; curried when ``e`` is omitted.

    Example:
        ```python
        either.map(double, either.right(150)).get()  # 300
        either.map(double)(either.left('err')).get()  # 'err'
        ```
    """
    return curry1(lambda ei: ei.map(f), e)


@overload
def or_else[L, R, U](f: Callable[[L], U], e: Either[L, R], /) -> U | R: ...
@overload
def or_else[L, R, U](f: Callable[[L], U], /) -> Callable[[Either[L, R]], U | R]: ...
def or_else(f, e=MISSING, /):
    """Recover from Left with ``f``; curried when ``e`` is omitted."""
    return curry1(lambda ei: ei.or_else(f), e)


@overload
def chain[L, R, U](f: Callable[[R], U], e: Either[L, R], /) -> U | Left[L]: ...
@overload
def chain[L, R, U](f: Callable[[R], U], /) -> Callable[[Either[L, R]], U | Left[L]]: ...
def chain(f, e=MISSING, /):
    """Chain ``f`` over ``e``; curried when ``e`` is omitted."""
    return curry1(lambda ei: ei.chain(f), e)


@overload
def filter[L, R](predicate: Callable[[R], bool], e: Either[L, R], /) -> Either[L | R, R]: ...
@overload
def filter[L, R](predicate: Callable[[R], bool], /) -> Callable[[Either[L, R]], Either[L | R, R]]: ...
def filter(predicate, e=MISSING, /):
    return curry1(lambda ei: ei.filter(predicate), e)


@overload
def get_or_else[R, U](default: U, e: Either[Any, R], /) -> R | U: ...
@overload
def get_or_else[R, U](default: U, /) -> Callable[[Either[Any, R]], R | U]: ...
def get_or_else(default, e=MISSING, /):
    """Unwrap Right with a default for Left; curried when ``e`` is omitted."""
    return curry1(lambda ei: ei.get_or_else(default), e)


@overload
def case_of[L, R, U](matcher: EitherCases[L, R, U], e: Either[L, R], /) -> U: ...
@overload
def case_of[L, R, U](matcher: EitherCases[L, R, U], /) -> Callable[[Either[L, R]], U]: ...
def case_of(matcher, e=MISSING, /):
    return curry1(lambda ei: ei.case_of(matcher), e)
