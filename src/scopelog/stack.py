"""
Per-context scope depth.

Currently a ScopeStack stores only the depth of the scope stack, which is
all indentation needs.
"""

import logging
import threading
import weakref
from typing import Dict, Hashable, Optional

from .context import ExecutionContext

logger = logging.getLogger(__name__)


class ScopeStack:
    """Nesting depth of one execution context.

    Push and pop are not validated; keeping them balanced is the caller's
    job. An unbalanced pop shows up as wrong indentation, never an error.
    """

    def __init__(self):
        self._depth = 0

    @property
    def depth(self) -> int:
        return self._depth

    def push(self) -> None:
        self._depth += 1

    def pop(self) -> None:
        self._depth -= 1

    def __repr__(self) -> str:
        return f"ScopeStack(depth={self._depth})"


class ScopeStackRegistry:
    """Map from execution context to its ScopeStack.

    Stacks are created lazily on first lookup. Creation is guarded by a
    lock so concurrent first use from several contexts leaves the map
    consistent. An entry is dropped when its owning thread or task object
    is garbage collected.
    """

    def __init__(self):
        self._stacks: Dict[Hashable, ScopeStack] = {}
        # Reentrant: a finalizer may fire during garbage collection while
        # this thread already holds the lock.
        self._lock = threading.RLock()

    def get(self, context: ExecutionContext) -> Optional[ScopeStack]:
        """Return the stack for ``context`` without creating one."""
        return self._stacks.get(context.key)

    def stack_for(self, context: ExecutionContext) -> ScopeStack:
        """Return the stack for ``context``, creating and registering it if absent."""
        stack = self._stacks.get(context.key)
        if stack is not None:
            return stack

        with self._lock:
            stack = self._stacks.get(context.key)
            if stack is not None:
                return stack
            stack = ScopeStack()
            self._stacks[context.key] = stack
            if context.owner is not None:
                weakref.finalize(
                    context.owner, _discard_entry, weakref.ref(self), context.key
                )

        logger.debug(f"Created scope stack for context {context.label}")
        return stack

    def discard(self, key: Hashable) -> None:
        """Forget the stack stored under ``key``."""
        with self._lock:
            self._stacks.pop(key, None)

    def __len__(self) -> int:
        return len(self._stacks)


def _discard_entry(registry_ref: "weakref.ref[ScopeStackRegistry]", key: Hashable) -> None:
    registry = registry_ref()
    if registry is not None:
        registry.discard(key)
