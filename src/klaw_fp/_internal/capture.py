"""Classification of exceptions raised at capture sites."""

from __future__ import annotations

from klaw_fp._logging import get_logger
from klaw_fp.errors import is_defect

__all__ = ['should_capture']

_logger = get_logger('klaw_fp.capture')


def should_capture(exc: BaseException, source: str) -> bool:
    """Decide whether ``exc`` becomes data or propagates.

    Args:
        exc: The exception raised by a producer.
        source: Name of the capture site, for the log entry.

    Returns:
        False if ``exc`` is a defect and must be re-raised, True otherwise.
    """
    if is_defect(exc):
        _logger.debug('defect_propagated', source=source, error_type=type(exc).__name__)
        return False
    _logger.debug('fault_captured', source=source, error_type=type(exc).__name__)
    return True
