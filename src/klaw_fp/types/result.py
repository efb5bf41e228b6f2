"""Result type: Ok[T] | Err[E] for explicit error handling.

An Err carries the error value and a ``Trace``: the traceback captured where
the failure was turned into data. Traces are diagnostic only and never take
part in equality or hashing.
"""

from __future__ import annotations

import traceback as _traceback
from collections.abc import Awaitable, Callable, Iterable
from types import TracebackType
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs, overload

import msgspec

from klaw_fp._internal.capture import should_capture
from klaw_fp.errors import ErrorConformanceError, ResultError

if TYPE_CHECKING:
    from klaw_fp.types.either import Left, Right
    from klaw_fp.types.option import NothingType, Some

__all__ = [
    'Err',
    'Ok',
    'Result',
    'Trace',
    'collect',
    'err',
    'ok',
    'result_from',
    'result_from_async',
    'result_from_awaitable',
]


class Trace:
    """Traceback captured alongside an Err.

    All traces compare equal to each other and share one hash, so two Errs
    holding the same error are equal whatever their traces. An empty Trace is
    falsy.
    """

    __slots__ = ('traceback',)

    def __init__(self, traceback: TracebackType | None = None) -> None:
        self.traceback = traceback

    @classmethod
    def of(cls, exc: BaseException) -> Trace:
        """Capture the traceback attached to ``exc``."""
        return cls(exc.__traceback__)

    def format(self) -> str:
        """Render the traceback frames as text, or '' for an empty trace."""
        if self.traceback is None:
            return ''
        return ''.join(_traceback.format_tb(self.traceback))

    def __bool__(self) -> bool:
        return self.traceback is not None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Trace):
            return True
        return NotImplemented

    def __hash__(self) -> int:
        return 0

    def __repr__(self) -> str:
        if self.traceback is None:
            return 'Trace()'
        return f'Trace(<{len(_traceback.extract_tb(self.traceback))} frames>)'


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def expect(self, _message: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def get_or_else(self, _fallback: Callable[[Any], T]) -> T:
        """Return the contained Ok value without calling the fallback."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[Any], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def flat_map[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as and_then or bind.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def fold[R](self, on_ok: Callable[[T], R], _on_err: Callable[[Any, Trace], R]) -> R:
        """Collapse to a single value by calling ``on_ok`` with the value."""
        return on_ok(self.value)

    def or_else[F](self, _f: Callable[[Any, Trace], Ok[T] | Err[F]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def to_option(self) -> Some[T]:
        """Convert to Option, returning Some(value)."""
        from klaw_fp.types.option import Some

        return Some(self.value)

    def to_either(self) -> Right[T]:
        """Convert to Either, returning Right(value)."""
        from klaw_fp.types.either import Right

        return Right(self.value)


class Err[E](msgspec.Struct, frozen=True):
    """Error variant of Result containing an error of type E.

    Attributes:
        error: The error value.
        trace: Where the failure was captured. Empty unless one was given.

    Examples:
        >>> err = Err('something went wrong')
        >>> err.is_err()
        True
        >>> err.get_or_else(lambda e: len(e))
        20
    """

    error: E
    trace: Trace = msgspec.field(default_factory=Trace)

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise the original error.

        An exception error is re-raised as itself, with the captured traceback
        restored so the failure site stays visible.

        Raises:
            E: The contained error, when it is an exception.
            ResultError: When the error is not an exception.
        """
        if isinstance(self.error, BaseException):
            if self.trace.traceback is not None:
                raise self.error.with_traceback(self.trace.traceback)
            raise self.error
        raise ResultError('Called unwrap on Err', source=self.error, trace=self.trace)

    def expect(self, message: str) -> NoReturn:
        """Raise a ResultError describing ``message``, the error and its trace.

        Raises:
            ResultError: Always, chained from the error when it is an exception.
        """
        error = ResultError(message, source=self.error, trace=self.trace)
        if isinstance(self.error, BaseException):
            raise error from self.error
        raise error

    def get_or_else[T](self, fallback: Callable[[E], T]) -> T:
        """Compute a fallback from the error since this is Err."""
        return fallback(self.error)

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error, keeping the trace.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error), self.trace)

    def flat_map[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def fold[R](self, _on_ok: Callable[[Any], R], on_err: Callable[[E, Trace], R]) -> R:
        """Collapse to a single value by calling ``on_err`` with error and trace."""
        return on_err(self.error, self.trace)

    def or_else[T, F](self, f: Callable[[E, Trace], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Apply a recovery function to the error and trace.

        Args:
            f: Function that takes the error and trace and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error, self.trace)

    def to_option(self) -> NothingType:
        """Convert to Option, returning Nothing. The error is discarded."""
        from klaw_fp.types.option import Nothing

        return Nothing

    def to_either(self) -> Left[E]:
        """Convert to Either, returning Left(error)."""
        from klaw_fp.types.either import Left

        return Left(self.error)


type Result[T, E = Exception] = Ok[T] | Err[E]


def ok[T](value: T) -> Ok[T]:
    """Create a successful Result."""
    return Ok(value)


def err[E](error: E, trace: Trace | TracebackType | None = None) -> Err[E]:
    """Create a failed Result.

    Args:
        error: The error value.
        trace: A Trace, a raw traceback, or None for an empty trace.
    """
    if isinstance(trace, Trace):
        return Err(error, trace)
    return Err(error, Trace(trace))


def _capture_err[E](
    exc: Exception,
    on_error: Callable[[Exception], E] | None,
    error_type: type[BaseException] | tuple[type[BaseException], ...] | None,
) -> Err[Any]:
    trace = Trace.of(exc)
    if on_error is not None:
        return Err(on_error(exc), trace)
    if error_type is not None and not isinstance(exc, error_type):
        raise ErrorConformanceError(exc, error_type) from exc
    return Err(exc, trace)


@overload
def result_from[T](f: Callable[[], T]) -> Result[T, Exception]: ...


@overload
def result_from[T, E](f: Callable[[], T], on_error: Callable[[Exception], E]) -> Result[T, E]: ...


@overload
def result_from[T, E: BaseException](f: Callable[[], T], *, error_type: type[E]) -> Result[T, E]: ...


def result_from(
    f: Callable[[], Any],
    on_error: Callable[[Exception], Any] | None = None,
    *,
    error_type: type[BaseException] | tuple[type[BaseException], ...] | None = None,
) -> Result[Any, Any]:
    """Run ``f`` and classify the outcome as a Result.

    Success gives ``Ok(f())``. A recoverable exception gives an Err carrying
    the exception's traceback:

    - with ``on_error``, the payload is ``on_error(exc)``;
    - without it, the payload is the exception itself, which must be an
      instance of ``error_type`` when one is declared.

    Defects (see ``klaw_fp.errors.is_defect``) always propagate.

    Args:
        f: Zero-argument producer.
        on_error: Coerces the captured exception into the error type.
        error_type: Declared error type(s) for the uncoerced payload.

    Returns:
        Ok(value) or Err(error, trace).

    Raises:
        ErrorConformanceError: The exception does not match ``error_type``.

    Example:
        ```python
        result_from(lambda: int('42'))
        # Ok(value=42)
        result_from(lambda: int('x'), lambda exc: str(exc))
        # Err(error="invalid literal for int() with base 10: 'x'", trace=Trace(<1 frames>))
        ```
    """
    try:
        return Ok(f())
    except Exception as exc:
        if not should_capture(exc, 'result_from'):
            raise
        return _capture_err(exc, on_error, error_type)


async def result_from_async(
    f: Callable[[], Awaitable[Any]],
    on_error: Callable[[Exception], Any] | None = None,
    *,
    error_type: type[BaseException] | tuple[type[BaseException], ...] | None = None,
) -> Result[Any, Any]:
    """Await ``f()`` and classify the outcome like ``result_from``.

    Cancellation is never captured.
    """
    try:
        return Ok(await f())
    except Exception as exc:
        if not should_capture(exc, 'result_from_async'):
            raise
        return _capture_err(exc, on_error, error_type)


async def result_from_awaitable[T](awaitable: Awaitable[T]) -> Result[T, Exception]:
    """Await an existing awaitable (task, future, coroutine) into a Result.

    Example:
        ```python
        task = asyncio.create_task(fetch())
        result = await result_from_awaitable(task)
        ```
    """
    try:
        return Ok(await awaitable)
    except Exception as exc:
        if not should_capture(exc, 'result_from_awaitable'):
            raise
        return Err(exc, Trace.of(exc))


def collect[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Err('fail'), Ok(3)])
        Err(error='fail', trace=Trace())
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)
