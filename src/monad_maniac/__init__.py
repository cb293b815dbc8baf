"""monad-maniac: Maybe, Either and Effect containers for Python 3.13+.

Flat imports (preferred):
    from monad_maniac import Present, Absent, Left, Right, Effect
    from monad_maniac import maybe, either, effect

Submodule imports (for organization):
    from monad_maniac.maybe import of, lift, Maybe
    from monad_maniac.either import attempt, from_nullable, Either
    from monad_maniac.effect import Effect
    from monad_maniac.decorators import safe, safe_async
    from monad_maniac.async_ import AsyncEither

Example:
    ```python
    from monad_maniac import either, maybe

    str(maybe.of(10).map(lambda x: x * 2))            # 'Present(20)'
    either.right(0).filter(lambda x: x != 0).get()    # 0, now a Left
    ```
"""

# Modules used as namespaces: maybe.of(...), either.left(...), effect.from_(...)
from monad_maniac import effect, either, maybe

# Config and logging
from monad_maniac._config import MonadConfig, get_config, init
from monad_maniac._logging import configure_logging, get_logger

# Async
from monad_maniac.async_ import AsyncEither

# Decorators
from monad_maniac.decorators import safe, safe_async
from monad_maniac.effect import Effect
from monad_maniac.either import Either, EitherCases, Left, Right, attempt, attempt_async

# Errors
from monad_maniac.errors import MatchError, MonadError, NullValueError
from monad_maniac.maybe import Absent, AbsentType, Maybe, MaybeCases, Present, lift

# Protocols
from monad_maniac.protocols import Applicative, Chain, Functor

__all__ = [
    # Maybe
    'Absent',
    'AbsentType',
    # Protocols
    'Applicative',
    # Async
    'AsyncEither',
    'Chain',
    # Effect
    'Effect',
    # Either
    'Either',
    'EitherCases',
    'Functor',
    'Left',
    # Errors
    'MatchError',
    'Maybe',
    'MaybeCases',
    'MonadConfig',
    'MonadError',
    'NullValueError',
    'Present',
    'Right',
    'attempt',
    'attempt_async',
    # Config and logging
    'configure_logging',
    'effect',
    'either',
    'get_config',
    'get_logger',
    'init',
    'lift',
    'maybe',
    # Decorators
    'safe',
    'safe_async',
]
