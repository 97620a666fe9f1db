"""
Logger orchestrates the logging.

Filtering is delegated to Config, indentation depth to a per-context
ScopeStack, and output to handlers, of which there can be several.
"""

import contextlib
import logging
from typing import Callable, ContextManager, List, Optional, Sequence, Union

from . import callsite
from .config import Config
from .context import ExecutionContext, current_context
from .handlers import ConsoleHandler, Handler
from .levels import LogLevel
from .scopes import Scope
from .stack import ScopeStack, ScopeStackRegistry

logger = logging.getLogger(__name__)

Message = Union[str, Callable[[], str]]


class Logger:
    """Leveled, scope-indented logger.

    Usage::

        log = Logger(Config(log_level="debug"), handlers=[ConsoleHandler()])
        with log.function():
            log.debug("loaded %d items", count)
            log.trace(lambda: expensive_dump(state))
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        handlers: Optional[Sequence[Handler]] = None,
    ):
        self.config = config if config is not None else Config()
        self.handlers: List[Handler] = (
            list(handlers) if handlers is not None else [ConsoleHandler()]
        )
        self._scopestacks = ScopeStackRegistry()

    # ------------------------------------------------------------------
    # Scope depth
    # ------------------------------------------------------------------

    def scopestack(self, context: Optional[ExecutionContext] = None) -> ScopeStack:
        """Scope stack of ``context`` (default: the caller's), created on first use."""
        if context is None:
            context = current_context()
        return self._scopestacks.stack_for(context)

    def indentation(self, context: Optional[ExecutionContext] = None) -> str:
        if context is None:
            context = current_context()
        stack = self._scopestacks.get(context)
        depth = stack.depth if stack is not None else 0
        return self.config.indentation_character * (
            self.config.indentation_per_scope * depth
        )

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def log(self, line: str, context: Optional[ExecutionContext] = None) -> None:
        """Indent ``line`` and write it to every handler, in order, unconditionally."""
        text = self.indentation(context) + line
        for handler in tuple(self.handlers):
            try:
                handler.write(text)
            except Exception:
                logger.exception(f"Handler {handler!r} failed to write a log line")

    def checked_log(
        self,
        message: Message,
        file: str,
        level: Union[LogLevel, int],
        args: tuple = (),
    ) -> None:
        """Log ``message`` if ``level`` and ``file`` pass the filters.

        A callable ``message`` is only called, and ``args`` only applied,
        after the filters pass.
        """
        if not self.config.should_log(level, file):
            return
        try:
            text = message() if callable(message) else message
            if args:
                text = text % args
        except Exception:
            logger.exception(f"Failed to build log message from {file}")
            return
        self.log(str(text))

    def error(self, message: Message, *args, file: Optional[str] = None, stacklevel: int = 1) -> None:
        self.checked_log(message, file or callsite.caller_file(stacklevel), LogLevel.ERROR, args)

    def warning(self, message: Message, *args, file: Optional[str] = None, stacklevel: int = 1) -> None:
        self.checked_log(message, file or callsite.caller_file(stacklevel), LogLevel.WARNING, args)

    def info(self, message: Message, *args, file: Optional[str] = None, stacklevel: int = 1) -> None:
        self.checked_log(message, file or callsite.caller_file(stacklevel), LogLevel.INFO, args)

    def debug(self, message: Message, *args, file: Optional[str] = None, stacklevel: int = 1) -> None:
        self.checked_log(message, file or callsite.caller_file(stacklevel), LogLevel.DEBUG, args)

    def trace(self, message: Message, *args, file: Optional[str] = None, stacklevel: int = 1) -> None:
        self.checked_log(message, file or callsite.caller_file(stacklevel), LogLevel.TRACE, args)

    # ------------------------------------------------------------------
    # Scopes
    # ------------------------------------------------------------------

    def scope_enter(self, scope: Scope) -> None:
        file = scope.details.file
        # Entry line is written at the pre-push depth
        if self.config.should_log(LogLevel.TRACE, file):
            self.log(self.config.scope_in_symbol + scope.details.render(), scope.context)
        if self.config.should_indent(file):
            self.scopestack(scope.context).push()

    def scope_exit(self, scope: Scope) -> None:
        file = scope.details.file
        if self.config.should_indent(file):
            self.scopestack(scope.context).pop()
        if self.config.should_log(LogLevel.TRACE, file):
            self.log(self.config.scope_out_symbol + scope.details.render(), scope.context)

    def function(
        self,
        function: Optional[str] = None,
        file: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        stacklevel: int = 1,
    ) -> ContextManager[Optional[Scope]]:
        """Open a scope for the calling function."""
        return self._open_scope("", function, file, line, column, stacklevel + 1)

    def scope(
        self,
        name: str,
        function: Optional[str] = None,
        file: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        stacklevel: int = 1,
    ) -> ContextManager[Optional[Scope]]:
        """Open a scope labelled ``name``."""
        return self._open_scope(name, function, file, line, column, stacklevel + 1)

    def _open_scope(self, name, function, file, line, column, stacklevel):
        if None in (function, file, line, column):
            site = callsite.capture(stacklevel)
            function = function if function is not None else site.function
            file = file if file is not None else site.file
            line = line if line is not None else site.line
            column = column if column is not None else site.column
        # Skip the entry/exit bookkeeping entirely for modules that do not indent
        if not self.config.should_indent(file):
            return contextlib.nullcontext()
        return Scope(self, function=function, file=file, line=line, column=column, name=name)

    def __repr__(self) -> str:
        return f"Logger(config={self.config!r}, handlers={self.handlers!r})"
