"""Error types raised at the edges of the containers.

Container operations report failure as values (Absent, Left). The exceptions
here cover misuse: building a Present around None, or a ``case_of`` matcher
that has no branch for the variant being eliminated.
"""

from __future__ import annotations

__all__ = [
    'MatchError',
    'MonadError',
    'NullValueError',
]


class MonadError(Exception):
    """Base class for monad-maniac errors."""


class NullValueError(MonadError, ValueError):
    """A Present was constructed around None."""

    def __init__(self, variant: str = 'Present') -> None:
        self.variant = variant
        super().__init__(f'{variant} cannot hold None, use maybe.of() to get Absent instead')


class MatchError(MonadError, LookupError):
    """A case_of matcher is missing the branch for the container's variant."""

    def __init__(self, branch: str, variant: str) -> None:
        self.branch = branch
        self.variant = variant
        super().__init__(f"case_of matcher has no '{branch}' branch for {variant}")
