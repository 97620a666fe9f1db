"""
Decorators for automatic scope tracing.
"""

import inspect
from functools import wraps
from typing import Callable, Optional

from .logger import Logger
from .manager import get_logger


def traced(func: Optional[Callable] = None, *, logger: Optional[Logger] = None, name: str = ""):
    """Run every call of the decorated function inside a function scope.

    Works bare (``@traced``) or with options (``@traced(name="load")``).
    Without ``logger`` the root logger current at call time is used.
    Coroutine functions are traced while they run, so the scope belongs
    to the task awaiting them.
    """
    def decorator(func):
        code = func.__code__
        function_name = func.__qualname__

        def open_scope():
            target = logger if logger is not None else get_logger()
            return target.scope(
                name,
                function=function_name,
                file=code.co_filename,
                line=code.co_firstlineno,
                column=0,
            )

        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                with open_scope():
                    return await func(*args, **kwargs)
            return async_wrapper

        @wraps(func)
        def wrapper(*args, **kwargs):
            with open_scope():
                return func(*args, **kwargs)
        return wrapper

    if func is not None:
        return decorator(func)
    return decorator
