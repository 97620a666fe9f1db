"""
Scope guards.

A Scope marks a traced block: creating it logs the entry line and deepens
indentation for its execution context; closing it restores the depth and
logs the exit line. Use it as a context manager so the exit side fires
exactly once on every exit path::

    with logger.function():
        logger.debug("indented one level")
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .config import module_of
from .context import ExecutionContext, current_context

if TYPE_CHECKING:
    from .logger import Logger


@dataclass(frozen=True)
class ScopeDetails:
    """Call-site metadata of a scope, captured once at entry."""

    module: str
    name: str
    context_id: str
    is_main: bool
    function: str
    file: str
    line: int
    column: int

    def render(self) -> str:
        context_id = "main" if self.is_main else self.context_id
        return f"[{context_id}] {self.module}:{self.line} {self.function} {self.name}"


class Scope:
    """Entry/exit guard for a traced block.

    Entry happens in the constructor. The exit side runs only through a
    ``with`` block or an explicit ``close()``; a scope that is never closed
    leaves its context one level deeper for good, since there is no
    finalizer fallback.
    """

    def __init__(
        self,
        logger: "Logger",
        function: str,
        file: str,
        line: int,
        column: int = 0,
        name: str = "",
        context: Optional[ExecutionContext] = None,
    ):
        self.logger = logger
        self.context = context if context is not None else current_context()
        self.details = ScopeDetails(
            module=module_of(file),
            name=name,
            context_id=self.context.label,
            is_main=self.context.is_main,
            function=function,
            file=file,
            line=line,
            column=column,
        )
        self._closed = False
        logger.scope_enter(self)

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Leave the scope. Calls after the first are ignored."""
        if self._closed:
            return
        self._closed = True
        self.logger.scope_exit(self)

    def __enter__(self) -> "Scope":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<Scope {self.details.render()} ({state})>"
