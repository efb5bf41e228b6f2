"""Lazy: a value computed on first access and memoized."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from klaw_fp._internal.capture import should_capture
from klaw_fp._internal.sync import OnceCell
from klaw_fp.types.either import Either, Left, Right
from klaw_fp.types.option import Nothing, Option, Some
from klaw_fp.types.result import Err, Ok, Result, Trace

__all__ = ['Lazy']


class Lazy[T]:
    """A lazily computed, memoized value.

    The producer runs on the first read of ``value`` and its result is cached;
    later reads return the cache without calling the producer again. If the
    producer raises, nothing is cached and the next read retries.

    Derived instances (``map``, ``flat_map``, ``inspect``) are new unevaluated
    Lazy values whose producer reads this one, so evaluating a derived value
    also evaluates and memoizes its source.

    Thread-safe: concurrent first reads run the producer once.

    Examples:
        >>> def expensive():
        ...     print('Computing...')
        ...     return 42
        >>> lazy = Lazy(expensive)
        >>> lazy.value
        Computing...
        42
        >>> lazy.value
        42
    """

    __slots__ = ('_cell', '_init')

    def __init__(self, init: Callable[[], T]) -> None:
        """Create a Lazy value.

        Args:
            init: Zero-argument producer, called on first access.
        """
        self._cell: OnceCell[T] = OnceCell()
        self._init = init

    @property
    def value(self) -> T:
        """The produced value, computing it on first access."""
        return self._cell.get_or_init(self._init)

    def is_evaluated(self) -> bool:
        """Return True once the producer has completed successfully."""
        return self._cell.is_set()

    def map[U](self, f: Callable[[T], U]) -> Lazy[U]:
        """Return a Lazy producing ``f(self.value)``."""
        return Lazy(lambda: f(self.value))

    def flat_map[U](self, f: Callable[[T], Lazy[U]]) -> Lazy[U]:
        """Return a Lazy producing ``f(self.value).value``."""
        return Lazy(lambda: f(self.value).value)

    def inspect(self, f: Callable[[T], Any]) -> Lazy[T]:
        """Return a Lazy that calls ``f`` with the value when it is evaluated.

        Building the new Lazy evaluates nothing; ``f`` runs once, when the
        returned instance is first read.
        """

        def _inspected() -> T:
            v = self.value
            f(v)
            return v

        return Lazy(_inspected)

    def to_result(self) -> Result[T, Exception]:
        """Evaluate into a Result: Ok(value), or Err(exception, trace).

        Defects propagate.
        """
        try:
            return Ok(self.value)
        except Exception as exc:
            if not should_capture(exc, 'Lazy.to_result'):
                raise
            return Err(exc, Trace.of(exc))

    def to_option(self) -> Option[T]:
        """Evaluate into an Option: Some(value), or Nothing on failure.

        Defects propagate.
        """
        try:
            return Some(self.value)
        except Exception as exc:
            if not should_capture(exc, 'Lazy.to_option'):
                raise
            return Nothing

    def to_either(self) -> Either[Exception, T]:
        """Evaluate into an Either: Right(value), or Left(exception).

        Defects propagate.
        """
        try:
            return Right(self.value)
        except Exception as exc:
            if not should_capture(exc, 'Lazy.to_either'):
                raise
            return Left(exc)

    def __repr__(self) -> str:
        if self._cell.is_set():
            return f'Lazy({self.value!r})'
        return 'Lazy(<unevaluated>)'
