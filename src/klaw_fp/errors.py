"""Fault taxonomy: defects vs. recoverable failures.

Absence and typed failure are data (``Nothing``, ``Err``, ``Left``). Faults are
raised only for misuse of a container or for programming defects, and the two
are kept apart by type:

- ``Defect`` marks a non-recoverable programming error. Capturing constructors
  (``option_from``, ``result_from``, ``@safe``, ``Lazy.to_*``) re-raise any
  exception classified as a defect instead of turning it into data.
- Every other ``Exception`` is recoverable and may be captured.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from klaw_fp.types.result import Trace

__all__ = [
    'DEFAULT_DEFECTS',
    'Defect',
    'ErrorConformanceError',
    'IllegalStateError',
    'ResultError',
    'is_defect',
]


class Defect(Exception):
    """Marker base for programming defects.

    Subclass it directly, or mix it into a builtin exception, to make a fault
    propagate through every capturing constructor:

        class CorruptIndex(Defect, LookupError): ...
    """


class IllegalStateError(Defect, RuntimeError):
    """A container was used against its own invariant.

    Raised by ``unwrap`` on ``Nothing``, ``unwrap``/``unwrap_left`` on the wrong
    ``Either`` side, and similar accessors.
    """


class ResultError(IllegalStateError):
    """Raised by ``Err.expect`` and by ``Err.unwrap`` on a non-exception error.

    Attributes:
        message: The caller-supplied diagnostic message.
        source: The error value held by the ``Err``.
        trace: The trace captured with the ``Err``, if any.
    """

    def __init__(self, message: str, *, source: Any = None, trace: Trace | None = None) -> None:
        self.message = message
        self.source = source
        self.trace = trace
        super().__init__(message)

    def __str__(self) -> str:
        parts = [f'ResultError: {self.message}']
        if self.source is not None:
            parts.append(f'Source: {self.source!r}')
        if self.trace:
            parts.append(f'Trace:\n{self.trace.format()}')
        return '\n'.join(parts)


class ErrorConformanceError(Defect, TypeError):
    """A captured exception does not conform to the declared error type.

    Raised at the capture site when ``result_from`` was given ``error_type``
    but no ``on_error`` coercion and the producer raised something else.
    """

    def __init__(self, error: BaseException, expected: type[BaseException] | tuple[type[BaseException], ...]) -> None:
        self.error = error
        self.expected = expected
        names = (
            ', '.join(t.__name__ for t in expected) if isinstance(expected, tuple) else expected.__name__
        )
        super().__init__(f'Captured {type(error).__name__} is not an instance of {names}; pass on_error to coerce it')


DEFAULT_DEFECTS: tuple[type[BaseException], ...] = (
    Defect,
    AssertionError,
    NotImplementedError,
    MemoryError,
    RecursionError,
)


def is_defect(exc: BaseException) -> bool:
    """Return True if ``exc`` must propagate rather than be captured."""
    from klaw_fp._config import get_config

    return isinstance(exc, get_config().defects)
