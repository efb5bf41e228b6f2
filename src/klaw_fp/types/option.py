"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from klaw_fp._internal.capture import should_capture
from klaw_fp.errors import IllegalStateError

if TYPE_CHECKING:
    from klaw_fp.types.either import Left, Right
    from klaw_fp.types.result import Err, Ok

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'nothing',
    'option_from',
    'option_from_async',
    'some',
]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. The value may itself be None:
    ``Some(None)`` is present, not Nothing.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained Some value."""
        return self.value

    def expect(self, _message: str) -> T:
        """Return the contained Some value, ignoring the message."""
        return self.value

    def get_or_else(self, _fallback: Callable[[], T]) -> T:
        """Return the contained Some value without calling the fallback."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def flat_map[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Also known as and_then or bind.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return self if the predicate is satisfied, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def fold[R](self, on_some: Callable[[T], R], _on_none: Callable[[], R]) -> R:
        """Collapse to a single value by calling ``on_some`` with the value."""
        return on_some(self.value)

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def inspect(self, f: Callable[[T], Any]) -> Some[T]:
        """Call ``f`` with the value for its side effect and return self."""
        f(self.value)
        return self

    def contains(self, x: object) -> bool:
        """Return True if the contained value equals ``x``."""
        return self.value == x

    def to_result[E](self, _err: Callable[[], E]) -> Ok[T]:
        """Convert to Result, returning Ok(value). The error factory is not called."""
        from klaw_fp.types.result import Ok

        return Ok(self.value)

    def to_either[L](self, _left: Callable[[], L]) -> Right[T]:
        """Convert to Either, returning Right(value). The left factory is not called."""
        from klaw_fp.types.either import Right

        return Right(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    Use the ``Nothing`` constant instead of instantiating directly. All
    NothingType instances are equal, whatever option type they stand for.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.get_or_else(lambda: 0)
        0
    """

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Nothing has no value.

        Raises:
            IllegalStateError: Always.
        """
        raise IllegalStateError('Called unwrap on Nothing')

    def expect(self, message: str) -> NoReturn:
        """Raise with a caller-supplied message.

        Raises:
            IllegalStateError: Always, with ``message``.
        """
        raise IllegalStateError(message)

    def get_or_else[T](self, fallback: Callable[[], T]) -> T:
        """Compute and return a fallback value since this is Nothing."""
        return fallback()

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def flat_map[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def fold[T, R](self, _on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:
        """Collapse to a single value by calling ``on_none``."""
        return on_none()

    def or_else[T](self, f: Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
        """Return the Option produced by the recovery function."""
        return f()

    def inspect[T](self, _f: Callable[[T], Any]) -> NothingType:
        """Return Nothing without calling ``f``."""
        return self

    def contains(self, _x: object) -> bool:
        """Return False since Nothing contains no value."""
        return False

    def to_result[E](self, err: Callable[[], E]) -> Err[E]:
        """Convert to Result, returning Err(err()).

        Args:
            err: Factory for the error value, called only here.
        """
        from klaw_fp.types.result import Err

        return Err(err())

    def to_either[L](self, left: Callable[[], L]) -> Left[L]:
        """Convert to Either, returning Left(left()).

        Args:
            left: Factory for the Left value, called only here.
        """
        from klaw_fp.types.either import Left

        return Left(left())


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def some[T](value: T) -> Option[T]:
    """Create an Option holding ``value``."""
    return Some(value)


def nothing() -> NothingType:
    """Return the empty Option."""
    return Nothing


def option_from[T](f: Callable[[], T]) -> Option[T]:
    """Run ``f`` and wrap its result in Some.

    Recoverable exceptions raised by ``f`` become Nothing. Defects (see
    ``klaw_fp.errors.is_defect``) are re-raised.

    Examples:
        >>> option_from(lambda: int('42'))
        Some(value=42)
        >>> option_from(lambda: int('x'))
        NothingType()
    """
    try:
        return Some(f())
    except Exception as exc:
        if not should_capture(exc, 'option_from'):
            raise
        return Nothing


async def option_from_async[T](f: Callable[[], Awaitable[T]]) -> Option[T]:
    """Await ``f()`` and wrap its result in Some.

    Same classification as ``option_from``. Cancellation is never captured.
    """
    try:
        return Some(await f())
    except Exception as exc:
        if not should_capture(exc, 'option_from_async'):
            raise
        return Nothing
