"""Shared helpers: partial application, strict equality and case lookup."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Final

from monad_maniac.errors import MatchError

__all__ = ['MISSING', 'case_branch', 'curry1', 'strict_equals']


class _Missing:
    """Sentinel marker for an argument that was not supplied."""

    __slots__ = ()

    def __repr__(self) -> str:
        return '<missing>'


MISSING: Final = _Missing()

_SCALARS = (str, bytes, int, float, complex)


def curry1[C, U](op: Callable[[C], U], container: C | _Missing = MISSING) -> U | Callable[[C], U]:
    """Apply ``op`` to ``container``, or hand back ``op`` when it was omitted.

    This is the partial-application step behind every free function that
    takes its container last, e.g. ``maybe.map(f, m)`` and ``maybe.map(f)(m)``.

    Args:
        op: Single-argument operation over a container.
        container: The container, or MISSING to defer the call.

    Returns:
        ``op(container)`` if a container was supplied, otherwise ``op``.
    """
    if container is MISSING:
        return op
    return op(container)  # type: ignore[arg-type]


def strict_equals(a: object, b: object) -> bool:
    """Compare two values by scalar value or by identity, never deeply.

    Strings, bytes and numbers compare by value; a bool only equals a bool.
    Any other object is equal only to itself.
    """
    if isinstance(a, _SCALARS) and isinstance(b, _SCALARS):
        if isinstance(a, bool) != isinstance(b, bool):
            return False
        return a == b
    return a is b


def case_branch(matcher: Mapping[str, Callable[..., Any]], branch: str, variant: str) -> Callable[..., Any]:
    """Look up one branch of a ``case_of`` matcher.

    Raises:
        MatchError: If the matcher has no entry for ``branch``.
    """
    try:
        return matcher[branch]
    except KeyError:
        raise MatchError(branch, variant) from None
