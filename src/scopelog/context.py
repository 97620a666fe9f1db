"""
Execution context identity.

An execution context is the independent thread of control that owns a
scope depth: the running asyncio task if there is one, otherwise the
current OS thread.
"""

import asyncio
import threading
from dataclasses import dataclass, field
from typing import Any, Hashable, Optional

from .constants import MAIN_CONTEXT_LABEL


@dataclass(frozen=True)
class ExecutionContext:
    """Identity of a thread or task.

    ``key`` is unique among live contexts. ``owner`` is the thread or task
    object itself; the scope stack registry watches it to discard state
    when the context goes away.
    """

    key: Hashable
    label: str
    is_main: bool
    owner: Any = field(compare=False, repr=False, default=None)


def _current_task() -> Optional["asyncio.Task"]:
    try:
        return asyncio.current_task()
    except RuntimeError:
        # No running event loop in this thread
        return None


def current_context() -> ExecutionContext:
    """Resolve the execution context of the caller."""
    task = _current_task()
    if task is not None:
        return ExecutionContext(
            key=("task", id(task)),
            label=task.get_name(),
            is_main=False,
            owner=task,
        )

    thread = threading.current_thread()
    is_main = thread is threading.main_thread()
    if is_main:
        label = MAIN_CONTEXT_LABEL
    else:
        label = str(thread.native_id if thread.native_id is not None else thread.ident)
    return ExecutionContext(
        key=("thread", id(thread)),
        label=label,
        is_main=is_main,
        owner=thread,
    )
