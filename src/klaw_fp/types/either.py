"""Either type: Left[L] | Right[R] for values that take one of two shapes.

Unlike Result, Either carries no success/failure meaning. Left and Right are
positional; what each side stands for is up to the caller. Combinators without
a suffix (``map``, ``flat_map``, ``get_or_else``...) act on the Right side, the
``*_left`` forms act on the Left side.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from klaw_fp.errors import IllegalStateError

if TYPE_CHECKING:
    from klaw_fp.types.option import NothingType, Some
    from klaw_fp.types.result import Err, Ok

__all__ = ['Either', 'Left', 'Right', 'left', 'right']


class Left[L](msgspec.Struct, frozen=True, gc=False):
    """Left variant of Either containing a value of type L.

    Examples:
        >>> Left('x').is_left()
        True
        >>> Left('x').swap()
        Right(value='x')
    """

    value: L

    def is_left(self) -> TypeIs[Left[L]]:
        """Return True if the either is Left."""
        return True

    def is_right(self) -> TypeIs[Right[object]]:
        """Return False since this is Left."""
        return False

    def left_or_none(self) -> L:
        """Return the Left value."""
        return self.value

    def right_or_none(self) -> None:
        """Return None since this is Left."""
        return None

    def unwrap(self) -> NoReturn:
        """Raise since there is no Right value.

        Raises:
            IllegalStateError: Always.
        """
        raise IllegalStateError(f'Called unwrap on Left({self.value!r})')

    def unwrap_left(self) -> L:
        """Return the Left value."""
        return self.value

    def map[R, U](self, _f: Callable[[R], U]) -> Left[L]:
        """Return self unchanged since there is no Right value."""
        return self

    def map_left[U](self, f: Callable[[L], U]) -> Left[U]:
        """Apply a function to the Left value."""
        return Left(f(self.value))

    def flat_map[R, U](self, _f: Callable[[R], Left[L] | Right[U]]) -> Left[L]:
        """Return self unchanged since there is no Right value."""
        return self

    def flat_map_left[U, R](self, f: Callable[[L], Left[U] | Right[R]]) -> Left[U] | Right[R]:
        """Chain a computation on the Left value."""
        return f(self.value)

    def fold[T](self, on_left: Callable[[L], T], _on_right: Callable[[Any], T]) -> T:
        """Collapse to a single value by calling ``on_left``."""
        return on_left(self.value)

    def get_or_else[R](self, fallback: Callable[[], R]) -> R:
        """Compute the Right-side fallback since this is Left."""
        return fallback()

    def get_or_else_left(self, _fallback: Callable[[], L]) -> L:
        """Return the Left value without calling the fallback."""
        return self.value

    def or_else[R](self, fallback: Callable[[], Right[R]]) -> Right[R]:
        """Return the Right produced by ``fallback``."""
        return fallback()

    def or_else_left(self, _fallback: Callable[[], Left[L]]) -> Left[L]:
        """Return self since this is already Left."""
        return self

    def contains(self, _x: object) -> bool:
        """Return False since there is no Right value."""
        return False

    def contains_left(self, x: object) -> bool:
        """Return True if the Left value equals ``x``."""
        return self.value == x

    def inspect(self, _f: Callable[[Any], Any]) -> Left[L]:
        """Return self without calling ``f``."""
        return self

    def inspect_left(self, f: Callable[[L], Any]) -> Left[L]:
        """Call ``f`` with the Left value for its side effect and return self."""
        f(self.value)
        return self

    def swap(self) -> Right[L]:
        """Move the value to the Right side."""
        return Right(self.value)

    def to_result[E](self, map_err: Callable[[L], E]) -> Err[E]:
        """Convert to Result, returning Err(map_err(value)).

        Args:
            map_err: Turns the Left value into the error, called only here.
        """
        from klaw_fp.types.result import Err

        return Err(map_err(self.value))

    def to_option(self) -> NothingType:
        """Convert to Option, returning Nothing."""
        from klaw_fp.types.option import Nothing

        return Nothing


class Right[R](msgspec.Struct, frozen=True, gc=False):
    """Right variant of Either containing a value of type R.

    Examples:
        >>> Right(2).map(lambda x: x * 2)
        Right(value=4)
    """

    value: R

    def is_left(self) -> TypeIs[Left[object]]:
        """Return False since this is Right."""
        return False

    def is_right(self) -> TypeIs[Right[R]]:
        """Return True if the either is Right."""
        return True

    def left_or_none(self) -> None:
        """Return None since this is Right."""
        return None

    def right_or_none(self) -> R:
        """Return the Right value."""
        return self.value

    def unwrap(self) -> R:
        """Return the Right value."""
        return self.value

    def unwrap_left(self) -> NoReturn:
        """Raise since there is no Left value.

        Raises:
            IllegalStateError: Always.
        """
        raise IllegalStateError(f'Called unwrap_left on Right({self.value!r})')

    def map[U](self, f: Callable[[R], U]) -> Right[U]:
        """Apply a function to the Right value."""
        return Right(f(self.value))

    def map_left[L, U](self, _f: Callable[[L], U]) -> Right[R]:
        """Return self unchanged since there is no Left value."""
        return self

    def flat_map[L, U](self, f: Callable[[R], Left[L] | Right[U]]) -> Left[L] | Right[U]:
        """Chain a computation on the Right value."""
        return f(self.value)

    def flat_map_left[L, U](self, _f: Callable[[L], Left[U] | Right[R]]) -> Right[R]:
        """Return self unchanged since there is no Left value."""
        return self

    def fold[T](self, _on_left: Callable[[Any], T], on_right: Callable[[R], T]) -> T:
        """Collapse to a single value by calling ``on_right``."""
        return on_right(self.value)

    def get_or_else(self, _fallback: Callable[[], R]) -> R:
        """Return the Right value without calling the fallback."""
        return self.value

    def get_or_else_left[L](self, fallback: Callable[[], L]) -> L:
        """Compute the Left-side fallback since this is Right."""
        return fallback()

    def or_else(self, _fallback: Callable[[], Right[R]]) -> Right[R]:
        """Return self since this is already Right."""
        return self

    def or_else_left[L](self, fallback: Callable[[], Left[L]]) -> Left[L]:
        """Return the Left produced by ``fallback``."""
        return fallback()

    def contains(self, x: object) -> bool:
        """Return True if the Right value equals ``x``."""
        return self.value == x

    def contains_left(self, _x: object) -> bool:
        """Return False since there is no Left value."""
        return False

    def inspect(self, f: Callable[[R], Any]) -> Right[R]:
        """Call ``f`` with the Right value for its side effect and return self."""
        f(self.value)
        return self

    def inspect_left(self, _f: Callable[[Any], Any]) -> Right[R]:
        """Return self without calling ``f``."""
        return self

    def swap(self) -> Left[R]:
        """Move the value to the Left side."""
        return Left(self.value)

    def to_result[E](self, _map_err: Callable[[Any], E]) -> Ok[R]:
        """Convert to Result, returning Ok(value). ``map_err`` is not called."""
        from klaw_fp.types.result import Ok

        return Ok(self.value)

    def to_option(self) -> Some[R]:
        """Convert to Option, returning Some(value)."""
        from klaw_fp.types.option import Some

        return Some(self.value)


type Either[L, R] = Left[L] | Right[R]


def left[L](value: L) -> Left[L]:
    """Create an Either on the Left side."""
    return Left(value)


def right[R](value: R) -> Right[R]:
    """Create an Either on the Right side."""
    return Right(value)
