"""aiologic integration for thread-safe one-time initialization.

aiologic provides synchronization primitives that work across asyncio,
threading, and multiprocessing contexts.
"""

from __future__ import annotations

from collections.abc import Callable

import aiologic

__all__ = ['OnceCell']


class OnceCell[T]:
    """A cell that is written exactly once, by the first successful initializer.

    Thread-safe using aiologic.Lock with double-checked initialization. If the
    initializer raises, the cell stays empty and the next caller retries.

    Examples:
        >>> cell: OnceCell[int] = OnceCell()
        >>> cell.is_set()
        False
        >>> cell.get_or_init(lambda: 42)
        42
        >>> cell.get_or_init(lambda: 100)  # already set, init not called
        42
    """

    __slots__ = ('_is_set', '_lock', '_value')

    def __init__(self) -> None:
        self._lock = aiologic.Lock()
        self._value: T | None = None
        self._is_set = False

    def get_or_init(self, init: Callable[[], T]) -> T:
        """Get the value, or initialize it with the given function.

        Thread-safe: only one thread will call init() successfully.

        Args:
            init: Function to call to initialize the value.

        Returns:
            The stored or newly initialized value.
        """
        if self._is_set:
            return self._value  # type: ignore[return-value]

        with self._lock:
            if not self._is_set:
                self._value = init()
                self._is_set = True
            return self._value  # type: ignore[return-value]

    def is_set(self) -> bool:
        """Check if the value has been set."""
        return self._is_set
