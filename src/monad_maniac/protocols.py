"""Structural interfaces shared by the containers.

Uses PEP 695 type parameter syntax (Python 3.12+) for automatic variance inference.
The protocols are ``runtime_checkable`` so ``isinstance`` can tell which
capabilities a value offers:

- Functor: ``map`` (Maybe, Either, Effect)
- Chain: ``chain`` (Maybe, Either, Effect)
- Applicative: ``apply`` (Maybe)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

__all__ = ['Applicative', 'Chain', 'Functor']


@runtime_checkable
class Functor[T](Protocol):
    """A container whose contents can be transformed with ``map``."""

    def map[U](self, f: Callable[[T], U]) -> Functor[U]: ...


@runtime_checkable
class Chain[T](Protocol):
    """A container that can hand its contents to ``f`` and return the result."""

    def chain[U](self, f: Callable[[T], U]) -> Any: ...


@runtime_checkable
class Applicative[T](Protocol):
    """A container that can apply a wrapped function to its wrapped value."""

    def apply[U](self, wrapped_fn: Any) -> Applicative[U]: ...
