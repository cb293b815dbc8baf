"""AsyncEither type for composing Either-producing awaitables.

AsyncEither wraps an Awaitable[Either[L, R]] and offers the Either
operations as lazily composed steps. Nothing runs until the AsyncEither is
awaited.

Example:
    ```python
    async def fetch_user(id: int) -> dict:
        ...

    # Chain async operations
    name = await (
        AsyncEither.attempt(fetch_user, 1)
        .amap(lambda user: user['name'])
        .aget_or_else('anonymous')
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import TYPE_CHECKING, Any

from monad_maniac.either import Either, Left, Right, attempt_async

if TYPE_CHECKING:
    from monad_maniac.maybe import Maybe

__all__ = ['AsyncEither']


class AsyncEither[L, R]:
    """Async-aware Either wrapper for composing async operations.

    Every transformation returns a new AsyncEither, so a pipeline is built up
    front and executed in one ``await``.

    Note:
        AsyncEither is single-shot when wrapping a coroutine object.
        Coroutines can only be awaited once; awaiting the same AsyncEither
        multiple times will raise RuntimeError. Build a fresh one per await.

    Attributes:
        _awaitable: The underlying awaitable that produces an Either.

    Example:
        ```python
        async def main():
            result = await AsyncEither.from_right(5).amap(lambda x: x * 2)
            assert result == Right(10)

        asyncio.run(main())
        ```
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[Either[L, R]]) -> None:
        """Create an AsyncEither from an awaitable.

        Args:
            awaitable: An awaitable that produces an Either[L, R].
        """
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Either[L, R]]:
        """Support await syntax to get the underlying Either."""
        return self._awaitable.__await__()

    @classmethod
    def from_right(cls, value: R) -> AsyncEither[L, R]:
        """Create an AsyncEither resolving to Right(value)."""

        async def _right() -> Either[L, R]:
            return Right(value)

        return cls(_right())

    @classmethod
    def from_left(cls, value: L) -> AsyncEither[L, R]:
        """Create an AsyncEither resolving to Left(value)."""

        async def _left() -> Either[L, R]:
            return Left(value)

        return cls(_left())

    @classmethod
    def from_either(cls, either: Either[L, R]) -> AsyncEither[L, R]:
        """Create an AsyncEither from an existing Either.

        Args:
            either: A Left or Right value.

        Returns:
            AsyncEither resolving to the given Either.
        """

        async def _either() -> Either[L, R]:
            return either

        return cls(_either())

    @classmethod
    def attempt[**P](
        cls, f: Callable[P, Awaitable[R]], /, *args: P.args, **kwargs: P.kwargs
    ) -> AsyncEither[BaseException, R]:
        """Defer ``either.attempt_async(f, *args, **kwargs)``.

        Args:
            f: An async function to call when the AsyncEither is awaited.
            *args: Positional arguments for f.
            **kwargs: Keyword arguments for f.

        Returns:
            AsyncEither resolving to Right(result) or Left(exception).
        """
        return cls(attempt_async(f, *args, **kwargs))  # type: ignore[return-value]

    def amap[U](self, f: Callable[[R], U]) -> AsyncEither[L, U]:
        """Apply a sync function to the Right value.

        If the underlying Either is Right, applies f to the value.
        If Left, returns the Left unchanged.

        Args:
            f: Sync function to apply to the Right value.

        Returns:
            New AsyncEither with the transformed value.
        """

        async def _mapped() -> Either[L, U]:
            return (await self._awaitable).map(f)

        return AsyncEither(_mapped())

    def amap_async[U](self, f: Callable[[R], Awaitable[U]]) -> AsyncEither[L, U]:
        """Apply an async function to the Right value.

        Args:
            f: Async function to apply to the Right value.

        Returns:
            New AsyncEither with the transformed value.

        Example:
            ```python
            async def double(x: int) -> int:
                return x * 2

            async def example():
                result = await AsyncEither.from_right(5).amap_async(double)
                assert result == Right(10)
            ```
        """

        async def _mapped() -> Either[L, U]:
            result = await self._awaitable
            if isinstance(result, Right):
                return Right(await f(result.value))
            return result

        return AsyncEither(_mapped())

    def achain[U](self, f: Callable[[R], Either[L, U]]) -> AsyncEither[L, U]:
        """Chain with a sync function that returns an Either.

        If Right, calls f(value) and resolves to its result.
        If Left, resolves to the Left unchanged.

        Args:
            f: Sync function that takes R and returns Either[L, U].

        Returns:
            New AsyncEither with the chained result.
        """

        async def _chained() -> Either[L, U]:
            return (await self._awaitable).chain(f)

        return AsyncEither(_chained())

    def aor_else[U](self, f: Callable[[L], U]) -> AsyncEither[L, R | U]:
        """Recover from Left, resolving to Right(f(value)).

        Args:
            f: Function taking the Left value and returning a replacement.

        Returns:
            New AsyncEither that is always Right once awaited.
        """

        async def _recovered() -> Either[L, R | U]:
            return Right((await self._awaitable).or_else(f))

        return AsyncEither(_recovered())

    def afilter(self, predicate: Callable[[R], bool]) -> AsyncEither[L | R, R]:
        """Demote the Right value to Left when ``predicate`` does not hold."""

        async def _filtered() -> Either[L | R, R]:
            return (await self._awaitable).filter(predicate)

        return AsyncEither(_filtered())

    def aget_or_else[U](self, default: U) -> Coroutine[Any, Any, R | U]:
        """Await and unwrap the Right value, or return ``default`` for Left."""

        async def _unwrap() -> R | U:
            return (await self._awaitable).get_or_else(default)

        return _unwrap()

    def ato_maybe(self) -> Coroutine[Any, Any, Maybe[R]]:
        """Await and convert to Maybe (Right -> maybe.of(value), Left -> Absent)."""

        async def _to_maybe() -> Maybe[R]:
            return (await self._awaitable).to_maybe()

        return _to_maybe()

    def __repr__(self) -> str:
        return f'AsyncEither({self._awaitable!r})'
