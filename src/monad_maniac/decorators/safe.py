"""@safe and @safe_async: decorator forms of either.attempt / attempt_async."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from monad_maniac.either import Left, Right, _capture, _capture_async

__all__ = ['safe', 'safe_async']


@overload
def safe[**P, T](func: Callable[P, T]) -> Callable[P, Right[T] | Left[Exception]]: ...
@overload
def safe[**P, T, E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Right[T] | Left[E]]]: ...
def safe(func=None, *, exceptions=None):
    """Make a function return Right(result), or Left(exception) when it raises.

    Each call behaves like ``either.attempt(func, *args, **kwargs)``, except
    that ``exceptions`` can narrow the captured types. Without it the
    types configured with ``init(catch=...)`` apply at call time.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 2)  # Right(value=5.0)
        divide(10, 0)  # Left(value=ZeroDivisionError('division by zero'))

        @safe(exceptions=(KeyError,))
        def lookup(key: str) -> int: ...
        ```
    """

    @wrapt.decorator
    def wrapper(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        return _capture(wrapped, args, kwargs, exceptions)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Right[T] | Left[Exception]]]: ...
@overload
def safe_async[**P, T, E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Right[T] | Left[E]]]]: ...
def safe_async(func=None, *, exceptions=None):
    """Async counterpart of ``safe``, awaiting the function exactly once."""

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any]], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> Any:
        return await _capture_async(wrapped, args, kwargs, exceptions)

    if func is not None:
        return wrapper(func)
    return wrapper
