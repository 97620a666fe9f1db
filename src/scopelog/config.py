"""
Logger configuration.

Holds the severity threshold, indentation settings and module filters.
Pure decision logic: no I/O and no locking. Mutate it during setup,
before concurrent logging begins.
"""

import os
from typing import Iterable, Optional, Set, Union

from .constants import (
    DEFAULT_INDENTATION_CHARACTER,
    DEFAULT_INDENTATION_PER_SCOPE,
    DEFAULT_SCOPE_IN_SYMBOL,
    DEFAULT_SCOPE_OUT_SYMBOL,
)
from .levels import LogLevel


def module_of(file: str) -> str:
    """Module identifier for a source file: its last path component.

    Same-named files in different directories map to the same module.
    """
    return os.path.basename(file)


class Config:
    """Configuration for a Logger."""

    def __init__(
        self,
        log_level: Union[LogLevel, int, str] = LogLevel.TRACE,
        indentation_per_scope: int = DEFAULT_INDENTATION_PER_SCOPE,
        indentation_character: str = DEFAULT_INDENTATION_CHARACTER,
        scope_in_symbol: str = DEFAULT_SCOPE_IN_SYMBOL,
        scope_out_symbol: str = DEFAULT_SCOPE_OUT_SYMBOL,
        include_modules: Optional[Iterable[str]] = None,
        exclude_modules: Optional[Iterable[str]] = None,
    ):
        self.log_level = log_level
        self.indentation_per_scope = indentation_per_scope
        self.indentation_character = indentation_character
        self.scope_in_symbol = scope_in_symbol
        self.scope_out_symbol = scope_out_symbol
        self.include_modules: Optional[Set[str]] = (
            set(include_modules) if include_modules is not None else None
        )
        self.exclude_modules: Optional[Set[str]] = (
            set(exclude_modules) if exclude_modules is not None else None
        )

    @property
    def log_level(self) -> LogLevel:
        return self._log_level

    @log_level.setter
    def log_level(self, value: Union[LogLevel, int, str]) -> None:
        self._log_level = LogLevel.parse(value)

    def include(self, module: str) -> None:
        """Allow logging from ``module``; once any module is included, only included modules log."""
        if self.include_modules is None:
            self.include_modules = set()
        self.include_modules.add(module)

    def exclude(self, module: str) -> None:
        """Suppress all logging from ``module``."""
        if self.exclude_modules is None:
            self.exclude_modules = set()
        self.exclude_modules.add(module)

    def should_log_module(self, module: str) -> bool:
        """Module filter: include check, then exclude check.

        ``module`` may be a bare module identifier or a source file path.
        """
        module = module_of(module)
        should = True
        if self.include_modules is not None:
            should = module in self.include_modules
        if self.exclude_modules is not None:
            should = should and module not in self.exclude_modules
        return should

    def should_indent(self, module: str) -> bool:
        # Indentation follows the module filter only; level plays no part.
        return self.should_log_module(module)

    def should_log(self, level: Union[LogLevel, int], module: str) -> bool:
        """True if a message at ``level`` from ``module`` should be emitted."""
        if level > self.log_level:
            return False
        return self.should_log_module(module)

    def __repr__(self) -> str:
        return (
            f"Config(log_level={self.log_level.name}, "
            f"indentation_per_scope={self.indentation_per_scope}, "
            f"include_modules={self.include_modules}, "
            f"exclude_modules={self.exclude_modules})"
        )
