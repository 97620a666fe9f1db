"""
scopelog

Scope-tracking logger: leveled log lines indented by call-scope nesting,
filtered by severity and source module, and written to pluggable
handlers.

Modules:
- levels: ordered severity levels
- config: threshold, indentation and module filters
- context / stack: per-thread and per-task scope depth
- logger: filtering, indentation and fan-out to handlers
- scopes: entry/exit guards for traced blocks
- handlers: console, stream, system log and file outputs
- manager: the process-wide root logger and module-level calls
- settings: TOML/environment settings for startup configuration
- decorators: @traced
"""

from .config import Config, module_of
from .context import ExecutionContext, current_context
from .decorators import traced
from .exceptions import ConfigurationError, ScopelogError, SinkUnavailableError
from .handlers import (
    ConsoleHandler,
    FileHandler,
    Handler,
    StreamHandler,
    SystemLogHandler,
    open_file_handler,
)
from .levels import LogLevel
from .logger import Logger
from .manager import (
    configure,
    debug,
    error,
    function,
    get_logger,
    info,
    reset_logger,
    scope,
    set_logger,
    trace,
    warning,
)
from .scopes import Scope, ScopeDetails
from .settings import ScopelogSettings, build_handlers, load_settings, save_settings
from .stack import ScopeStack, ScopeStackRegistry

__version__ = "0.1.0"

__all__ = [
    # Core
    "Config",
    "LogLevel",
    "Logger",
    "Scope",
    "ScopeDetails",
    "ScopeStack",
    "ScopeStackRegistry",
    "ExecutionContext",
    "current_context",
    "module_of",
    # Handlers
    "Handler",
    "ConsoleHandler",
    "StreamHandler",
    "SystemLogHandler",
    "FileHandler",
    "open_file_handler",
    # Root logger
    "get_logger",
    "set_logger",
    "reset_logger",
    "configure",
    "error",
    "warning",
    "info",
    "debug",
    "trace",
    "function",
    "scope",
    "traced",
    # Settings
    "ScopelogSettings",
    "load_settings",
    "save_settings",
    "build_handlers",
    # Exceptions
    "ScopelogError",
    "ConfigurationError",
    "SinkUnavailableError",
]
