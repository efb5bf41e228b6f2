"""Library configuration: FpConfig, initialization, and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_fp._logging import configure_logging
from klaw_fp.errors import DEFAULT_DEFECTS

__all__ = [
    'FpConfig',
    'get_config',
    'init',
    'reset',
]


@dataclass(frozen=True)
class FpConfig:
    """Configuration for klaw-fp.

    Attributes:
        defects: Exception types that capturing constructors always re-raise.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON logs if True, colored console output otherwise.
    """

    defects: tuple[type[BaseException], ...] = DEFAULT_DEFECTS
    log_level: str | None = None
    json_logs: bool = True


# Installed configuration (set by init() or built from env on first use)
_config: FpConfig | None = None


def _detect_log_level() -> str | None:
    """Read KLAW_FP_LOG_LEVEL; empty or unset means silent."""
    level = os.environ.get('KLAW_FP_LOG_LEVEL', '').strip().upper()
    return level or None


def _detect_json_logs() -> bool:
    """Read KLAW_FP_LOG_FORMAT ("json" or "console"), defaulting to JSON."""
    fmt = os.environ.get('KLAW_FP_LOG_FORMAT', '').lower()
    if fmt == 'console':
        return False
    if fmt and fmt != 'json':
        logging.warning("Unknown KLAW_FP_LOG_FORMAT value '%s', defaulting to json", fmt)
    return True


def init(
    *,
    defects: tuple[type[BaseException], ...] | None = None,
    extra_defects: tuple[type[BaseException], ...] = (),
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> FpConfig:
    """Install the klaw-fp configuration.

    Args:
        defects: Replaces the default defect types. None keeps the defaults.
        extra_defects: Types added on top of ``defects``.
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            KLAW_FP_LOG_LEVEL if None; None after that = silent.
        json_logs: JSON vs. console output. Read from KLAW_FP_LOG_FORMAT if None.

    Returns:
        The FpConfig that was installed.

    Example:
        ```python
        from klaw_fp import init

        class InvariantBroken(Exception): ...

        init(extra_defects=(InvariantBroken,), log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    base = DEFAULT_DEFECTS if defects is None else tuple(defects)
    resolved_defects = base + tuple(t for t in extra_defects if t not in base)

    resolved_level = log_level if log_level is not None else _detect_log_level()
    resolved_json = json_logs if json_logs is not None else _detect_json_logs()

    _config = FpConfig(
        defects=resolved_defects,
        log_level=resolved_level,
        json_logs=resolved_json,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> FpConfig:
    """Get the current configuration, initializing from the environment if needed.

    Returns:
        The installed FpConfig.
    """
    if _config is None:
        return init()
    return _config


def reset() -> None:
    """Drop the installed configuration; the next get_config() re-detects it."""
    global _config  # noqa: PLW0603
    _config = None
