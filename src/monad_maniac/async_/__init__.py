"""Async utilities: AsyncEither and the async attempt helper.

Examples:
    >>> from monad_maniac.async_ import AsyncEither, attempt_async
    >>>
    >>> async def fetch(id: int) -> dict:
    ...     return {"id": id}
    >>>
    >>> async def main():
    ...     result = await attempt_async(fetch, 1)
    ...     ident = await AsyncEither.attempt(fetch, 1).amap(lambda d: d["id"])
"""

from monad_maniac.async_.either import AsyncEither
from monad_maniac.either import attempt_async

__all__ = ['AsyncEither', 'attempt_async']
