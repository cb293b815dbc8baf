"""Library configuration: MonadConfig, init() and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from monad_maniac._logging import configure_logging

__all__ = [
    'MonadConfig',
    'get_config',
    'init',
    'reset',
]

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class MonadConfig:
    """Configuration for monad-maniac.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Emit JSON logs if True, colored console output otherwise.
        catch: Exception types that attempt()/@safe capture as Left by default.
    """

    log_level: str | None = None
    json_output: bool = True
    catch: tuple[type[BaseException], ...] = (Exception,)


# Global configuration (set by init())
_config: MonadConfig | None = None


def _detect_log_level() -> str | None:
    """Read MONAD_MANIAC_LOG_LEVEL, ignoring unknown levels."""
    env_level = os.environ.get('MONAD_MANIAC_LOG_LEVEL', '').upper()
    if not env_level:
        return None
    if env_level not in _LOG_LEVELS:
        logging.warning("Unknown MONAD_MANIAC_LOG_LEVEL value '%s', logging stays off", env_level)
        return None
    return env_level


def _detect_json_output() -> bool:
    """Read MONAD_MANIAC_LOG_FORMAT ("json" or "console")."""
    env_format = os.environ.get('MONAD_MANIAC_LOG_FORMAT', '').lower()
    if env_format == 'console':
        return False
    if env_format and env_format != 'json':
        logging.warning("Unknown MONAD_MANIAC_LOG_FORMAT value '%s', defaulting to json", env_format)
    return True


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
    catch: tuple[type[BaseException], ...] | None = None,
) -> MonadConfig:
    """Initialize monad-maniac with the given configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            MONAD_MANIAC_LOG_LEVEL if None; silent if that is unset too.
        json_output: JSON or console logs. Read from MONAD_MANIAC_LOG_FORMAT if None.
        catch: Exception types captured by attempt()/@safe. Defaults to (Exception,).

    Returns:
        The MonadConfig that was set.

    Example:
        ```python
        import monad_maniac

        monad_maniac.init(log_level='DEBUG', json_output=False)
        monad_maniac.init(catch=(ValueError, KeyError))
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    resolved_json = json_output if json_output is not None else _detect_json_output()

    _config = MonadConfig(
        log_level=resolved_level,
        json_output=resolved_json,
        catch=catch if catch is not None else (Exception,),
    )

    # Configure logging if level specified
    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> MonadConfig:
    """Get the current configuration.

    Falls back to a config built from the environment when init() has not
    been called, without configuring logging.
    """
    if _config is None:
        return MonadConfig(log_level=_detect_log_level(), json_output=_detect_json_output())
    return _config


def reset() -> None:
    """Forget the configuration set by init()."""
    global _config  # noqa: PLW0603
    _config = None
