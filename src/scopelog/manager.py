"""
Process-wide default logger.

The root logger is created with a default Config on first access and can
be replaced wholesale, e.g. between test cases. The module-level leveled
calls and scope factories delegate to whichever root logger is current.
"""

import logging
import threading
from pathlib import Path
from typing import ContextManager, Optional, Union

from .logger import Logger, Message
from .scopes import Scope
from .settings import ScopelogSettings, build_handlers, load_settings

logger = logging.getLogger(__name__)

_root_logger: Optional[Logger] = None
_root_lock = threading.Lock()


def get_logger() -> Logger:
    """Return the root logger, creating a default one on first use."""
    global _root_logger
    if _root_logger is None:
        with _root_lock:
            if _root_logger is None:
                _root_logger = Logger()
    return _root_logger


def set_logger(new_logger: Optional[Logger]) -> Optional[Logger]:
    """Install ``new_logger`` as the root logger and return the previous one.

    Passing None drops the root logger; the next access creates a default.
    """
    global _root_logger
    with _root_lock:
        previous = _root_logger
        _root_logger = new_logger
    return previous


def reset_logger() -> Logger:
    """Replace the root logger with a fresh default one."""
    fresh = Logger()
    set_logger(fresh)
    return fresh


def configure(
    settings: Optional[ScopelogSettings] = None,
    path: Optional[Union[str, Path]] = None,
) -> Logger:
    """Build a logger from settings and install it as the root logger.

    Args:
        settings: A ScopelogSettings instance. Loaded from ``path`` and the
            environment when omitted.
        path: Optional TOML settings file.
    """
    if settings is None:
        settings = load_settings(path)
    configured = Logger(settings.to_config(), build_handlers(settings))
    set_logger(configured)
    logger.debug(
        f"Configured root logger (level={configured.config.log_level.name}, "
        f"handlers={len(configured.handlers)})"
    )
    return configured


def error(message: Message, *args, file: Optional[str] = None) -> None:
    get_logger().error(message, *args, file=file, stacklevel=2)


def warning(message: Message, *args, file: Optional[str] = None) -> None:
    get_logger().warning(message, *args, file=file, stacklevel=2)


def info(message: Message, *args, file: Optional[str] = None) -> None:
    get_logger().info(message, *args, file=file, stacklevel=2)


def debug(message: Message, *args, file: Optional[str] = None) -> None:
    get_logger().debug(message, *args, file=file, stacklevel=2)


def trace(message: Message, *args, file: Optional[str] = None) -> None:
    get_logger().trace(message, *args, file=file, stacklevel=2)


def function(
    function: Optional[str] = None,
    file: Optional[str] = None,
    line: Optional[int] = None,
    column: Optional[int] = None,
) -> ContextManager[Optional[Scope]]:
    """Open a root-logger scope for the calling function."""
    return get_logger().function(function, file, line, column, stacklevel=2)


def scope(
    name: str,
    function: Optional[str] = None,
    file: Optional[str] = None,
    line: Optional[int] = None,
    column: Optional[int] = None,
) -> ContextManager[Optional[Scope]]:
    """Open a root-logger scope labelled ``name``."""
    return get_logger().scope(name, function, file, line, column, stacklevel=2)
