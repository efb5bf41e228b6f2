"""@safe and @safe_async decorators for capturing exceptions as Err."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from klaw_fp._internal.capture import should_capture
from klaw_fp.types.result import Err, Ok, Trace

__all__ = ['safe', 'safe_async']


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def safe[**P, T, E: BaseException](
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Err[E]]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[Exception], ...] | None = None,
) -> Any:
    """Decorator that captures exceptions and returns Err.

    Wraps a function so that it returns Ok(value) on success and
    Err(exception, trace) if a recoverable exception is raised. Defects
    always propagate, even when listed in ``exceptions``.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to capture. Defaults to (Exception,).
            Anything else propagates.

    Returns:
        A wrapped function that returns Result[T, E] instead of T.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Ok(value=5.0)
        divide(10, 0)
        # Err(error=ZeroDivisionError('division by zero'), trace=Trace(<1 frames>))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[Any] | Err[Any]:
        try:
            return Ok(wrapped(*args, **kwargs))
        except catch as e:
            if not should_capture(e, 'safe'):
                raise
            return Err(e, Trace.of(e))

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Ok[T] | Err[Exception]]]: ...


@overload
def safe_async[**P, T, E: BaseException](
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Ok[T] | Err[E]]]]: ...


def safe_async(
    func: Callable[..., Awaitable[Any]] | None = None,
    *,
    exceptions: tuple[type[Exception], ...] | None = None,
) -> Any:
    """Async decorator that captures exceptions and returns Err.

    Same policy as ``safe``; cancellation is never captured.

    Example:
        ```python
        @safe_async
        async def fetch(url: str) -> str:
            # may raise
            return await http_get(url)
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[Any] | Err[Any]:
        try:
            return Ok(await wrapped(*args, **kwargs))
        except catch as e:
            if not should_capture(e, 'safe_async'):
                raise
            return Err(e, Trace.of(e))

    if func is not None:
        return wrapper(func)
    return wrapper
