"""Effect type: a deferred computation that only runs when asked to.

An Effect wraps a zero-argument callable. ``map`` composes further steps
without running anything; ``run`` and ``chain`` are the points where the
computation actually executes. Nothing is cached, so every run calls the
wrapped function again.

Example:
    ```python
    from monad_maniac import Effect

    square = Effect.from_(lambda: 4).map(lambda x: x * x)
    square.run()            # 16
    Effect.of(222).run()    # 222
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import overload

from monad_maniac._helpers import MISSING, curry1

__all__ = ['Effect', 'chain', 'from_', 'map', 'of', 'run']


class Effect[T]:
    """Deferred computation producing a value of type T.

    Attributes:
        _effect: The zero-argument callable run by ``run``.
    """

    __slots__ = ('_effect',)

    def __init__(self, effect: Callable[[], T]) -> None:
        """Create an Effect from a zero-argument callable.

        Args:
            effect: The computation to defer.
        """
        object.__setattr__(self, '_effect', effect)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable')

    @classmethod
    def of(cls, value: T) -> Effect[T]:
        """Create an Effect that returns ``value`` when run."""
        return cls(lambda: value)

    @classmethod
    def from_(cls, fn: Callable[[], T]) -> Effect[T]:
        """Create an Effect that calls ``fn`` when run."""
        return cls(fn)

    def map[U](self, f: Callable[[T], U]) -> Effect[U]:
        """Compose ``f`` after this effect without running either.

        Args:
            f: Function applied to the effect's result.

        Returns:
            New Effect that runs this effect, then applies f.

        Example:
            ```python
            calls = []
            io = Effect.from_(lambda: calls.append('run') or 4).map(lambda x: x + 1)
            calls          # []
            io.run()       # 5
            calls          # ['run']
            ```
        """
        effect = self._effect
        return Effect(lambda: f(effect()))

    def chain[U](self, f: Callable[[T], U]) -> U:
        """Run the effect now and return ``f`` applied to its result."""
        return f(self._effect())

    def run(self) -> T:
        """Run the wrapped callable and return its result."""
        return self._effect()

    def __repr__(self) -> str:
        return f'Effect({self._effect!r})'


def of[T](value: T) -> Effect[T]:
    """Create an Effect that returns ``value`` when run."""
    return Effect.of(value)


def from_[T](fn: Callable[[], T]) -> Effect[T]:
    """Create an Effect that calls ``fn`` when run."""
    return Effect.from_(fn)


def run[T](io: Effect[T]) -> T:
    """Run ``io`` and return its result."""
    return io.run()


@overload
def map[T, U](f: Callable[[T], U], io: Effect[T], /) -> Effect[U]: ...
@overload
def map[T, U](f: Callable[[T], U], /) -> Callable[[Effect[T]], Effect[U]]: ...
def map(f, io=MISSING, /):
    """Compose ``f`` after ``io``; curried when ``io`` is omitted."""
    return curry1(lambda e: e.map(f), io)


@overload
def chain[T, U](f: Callable[[T], U], io: Effect[T], /) -> U: ...
@overload
def chain[T, U](f: Callable[[T], U], /) -> Callable[[Effect[T]], U]: ...
def chain(f, io=MISSING, /):
    """Run ``io`` and apply ``f``; curried when ``io`` is omitted."""
    return curry1(lambda e: e.chain(f), io)
